"""
HTTP client for the AcadTrack API.

Every call returns an ApiSuccess or ApiFailure instead of raising, so callers
only branch on result.success. Responses shaped as {success, data, message} are
unwrapped; any other 2xx body is returned as data unchanged.
"""

import logging
from typing import Any, Literal

import httpx
from pydantic import BaseModel

from acadtrack.client.config import ClientSettings, get_client_settings
from acadtrack.client.session import SessionStore

logger = logging.getLogger(__name__)

CONNECTION_ERROR_MESSAGE = "Connection error. Please try again later."


class ApiSuccess(BaseModel):
    """A 2xx response, with the envelope (if any) removed."""

    success: Literal[True] = True
    data: Any = None
    message: str | None = None
    status: int | None = None


class ApiFailure(BaseModel):
    """A network error or non-2xx response."""

    success: Literal[False] = False
    error: str
    status: int | None = None


ApiResult = ApiSuccess | ApiFailure


def _parse_body(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


def _message(body: Any) -> str | None:
    """The envelope's message as text; lists of strings are joined, other shapes dropped."""
    if not isinstance(body, dict):
        return None
    message = body.get("message")
    if isinstance(message, str):
        return message or None
    if isinstance(message, list) and message and all(isinstance(m, str) for m in message):
        return "; ".join(message)
    return None


def normalize_response(resp: httpx.Response) -> ApiResult:
    """Turn an HTTP response into an ApiResult. Never raises for odd body shapes."""
    body = _parse_body(resp)
    if not resp.is_success:
        return ApiFailure(
            error=_message(body) or f"HTTP Error: {resp.status_code}",
            status=resp.status_code,
        )
    if isinstance(body, dict) and "success" in body:
        if body["success"] is False:
            return ApiFailure(
                error=_message(body) or "Request failed",
                status=resp.status_code,
            )
        if "data" in body:
            return ApiSuccess(
                data=body["data"],
                message=_message(body),
                status=resp.status_code,
            )
    return ApiSuccess(data=body, status=resp.status_code)


class ApiClient:
    """
    Async wrapper around the REST API.

    The bearer token is read from the session store on each request, so a
    login or logout through AuthContext takes effect immediately. Requests have
    no timeout and are never retried.
    """

    def __init__(
        self,
        session: SessionStore | None = None,
        settings: ClientSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        base_url: str | None = None,
    ) -> None:
        settings = settings or get_client_settings()
        self.session = session or SessionStore(settings.SESSION_FILE)
        self.api_prefix = settings.API_PREFIX
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.API_URL,
            transport=transport,
            timeout=None,
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        endpoint: str,
        json: dict[str, Any] | None = None,
    ) -> ApiResult:
        headers = {"Accept": "application/json"}
        token = self.session.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        try:
            resp = await self._client.request(
                method,
                f"{self.api_prefix}{endpoint}",
                json=json,
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.info(
                "API request failed to complete",
                extra={"method": method, "endpoint": endpoint, "error": str(e)[:200]},
            )
            return ApiFailure(error=CONNECTION_ERROR_MESSAGE, status=None)
        result = normalize_response(resp)
        if not result.success:
            logger.debug(
                "API request returned an error",
                extra={"method": method, "endpoint": endpoint, "status": resp.status_code},
            )
        return result

    # Auth

    async def register(
        self,
        firstname: str,
        lastname: str,
        email: str,
        password: str,
        admin_code: str = "",
    ) -> ApiResult:
        return await self._request(
            "POST",
            "/auth/register",
            json={
                "firstname": firstname,
                "lastname": lastname,
                "email": email,
                "password": password,
                "adminCode": admin_code,
            },
        )

    async def login(self, email: str, password: str) -> ApiResult:
        """POST credentials. On success data is {token, user}; pass it to AuthContext.login."""
        return await self._request(
            "POST",
            "/auth/login",
            json={"email": email, "password": password},
        )

    async def get_all_users(self) -> ApiResult:
        return await self._request("GET", "/auth/users/all")

    async def get_profile(self) -> ApiResult:
        return await self._request("GET", "/auth/profile")

    def logout(self) -> ApiResult:
        """Client-side only: forget the persisted session."""
        self.session.clear()
        return ApiSuccess(message="Logged out successfully")

    # Activities

    async def list_activities(self) -> ApiResult:
        return await self._request("GET", "/activities")

    async def get_activity(self, activity_id: int) -> ApiResult:
        return await self._request("GET", f"/activities/{activity_id}")

    async def create_activity(self, activity: dict[str, Any]) -> ApiResult:
        return await self._request("POST", "/activities", json=activity)

    async def update_activity(self, activity_id: int, changes: dict[str, Any]) -> ApiResult:
        return await self._request("PUT", f"/activities/{activity_id}", json=changes)

    async def delete_activity(self, activity_id: int) -> ApiResult:
        return await self._request("DELETE", f"/activities/{activity_id}")

    # Session helpers

    def is_authenticated(self) -> bool:
        return self.session.get_token() is not None

    def current_user(self) -> dict[str, Any] | None:
        return self.session.get_user()

    def is_admin(self) -> bool:
        user = self.current_user()
        return bool(user) and user.get("role") == "admin"
