"""Response envelope shared by every JSON endpoint except /health."""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Successful response: {success: true, message, data}."""

    success: Literal[True] = True
    message: str = Field(default="", description="Human-readable outcome.")
    data: T | None = Field(default=None, description="Endpoint payload.")


class ErrorEnvelope(BaseModel):
    """Failed response: {success: false, message}."""

    success: Literal[False] = False
    message: str = Field(..., description="Why the request failed.")
