"""Application error taxonomy. Each error carries its HTTP status and a user-facing message."""

from typing import Any


class AppError(Exception):
    """Base class for errors translated into the error envelope."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationFailed(AppError):
    """One or more fields failed validation. details["errors"] lists every violation."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, errors: list[dict[str, str]], message: str | None = None) -> None:
        self.errors = errors
        super().__init__(message, details={"errors": errors})


class DuplicateKey(AppError):
    status_code = 400
    default_message = "Duplicate key"

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"{field} already exists")


class InvalidIdentifier(AppError):
    status_code = 400
    default_message = "Invalid id"

    def __init__(self, value: str, field: str = "id") -> None:
        self.value = value
        super().__init__(f"Invalid {field}: {value}")


class NotFound(AppError):
    status_code = 404
    default_message = "Resource not found"


class AuthError(AppError):
    """Base for 401 failures; the response carries WWW-Authenticate: Bearer."""

    status_code = 401
    default_message = "Not authorized"


class NoCredential(AuthError):
    default_message = "Not authorized to access this route. No token provided."


class InvalidCredential(AuthError):
    default_message = "Not authorized to access this route. Invalid token."


class ExpiredToken(AuthError):
    default_message = "Token has expired. Please log in again."


class RegistrationDisabled(AppError):
    status_code = 403
    default_message = "Registration is currently disabled"


class PayloadTooLarge(AppError):
    status_code = 400

    def __init__(self, max_bytes: int) -> None:
        self.max_bytes = max_bytes
        super().__init__(f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB")


class BadRequest(AppError):
    status_code = 400
    default_message = "Bad request"


class RateLimited(AppError):
    status_code = 429
    default_message = "Too many requests from this IP, please try again later."


class MediaHostNotConfigured(AppError):
    status_code = 500
    default_message = "Image upload service is not configured"


class MediaHostError(AppError):
    """The media host rejected the upload or could not be reached."""

    status_code = 502
    default_message = "Failed to upload image"


def validation_errors(errors: Any) -> list[dict[str, str]]:
    """Flatten pydantic error dicts into [{field, message}] using the body-relative path."""
    result: list[dict[str, str]] = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        result.append({"field": ".".join(loc) or "body", "message": err.get("msg", "Invalid value")})
    return result
