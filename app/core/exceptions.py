"""Application error taxonomy. Each error maps to one HTTP status."""

from typing import Any

from app.core.messages import message as lookup_message


class AppError(Exception):
    """Base error surfaced to the client as {"error": code, "message": text}."""

    status_code: int = 500
    default_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        code: str | None = None,
        message: str | None = None,
        details: Any = None,
    ) -> None:
        self.code = code or self.default_code
        self.message = message or lookup_message(self.code)
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.code, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(AppError):
    status_code = 400
    default_code = "VALIDATION_FAILED"


class AuthenticationError(AppError):
    status_code = 401
    default_code = "NOT_AUTHENTICATED"


class AuthorizationError(AppError):
    status_code = 403
    default_code = "ACCESS_DENIED"


class NotFoundError(AppError):
    status_code = 404
    default_code = "NOT_FOUND"


class ConflictError(AppError):
    status_code = 409
    default_code = "CONFLICT"


class InternalError(AppError):
    status_code = 500
    default_code = "INTERNAL_ERROR"
