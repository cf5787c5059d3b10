"""Service-layer errors. Each carries the HTTP status the API reports for it."""


class ServiceError(Exception):
    """Base class for expected failures raised by the stores."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationFailedError(ServiceError):
    """Missing or malformed input."""

    status_code = 400


class ConflictError(ServiceError):
    """A unique value (e.g. email) is already taken."""

    status_code = 400


class UnauthorizedError(ServiceError):
    """Bad credentials."""

    status_code = 401


class ForbiddenError(ServiceError):
    """Authenticated, but the role does not allow the operation."""

    status_code = 403


class NotFoundError(ServiceError):
    """Referenced record does not exist."""

    status_code = 404
