"""Application error taxonomy. Each error carries the HTTP status and the machine-readable code sent to clients."""


class AppError(Exception):
    """Base for expected failures surfaced to clients as {"error": code}."""

    status_code: int = 500
    code: str = "server_error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.code
        super().__init__(self.message)


class MissingFieldsError(AppError):
    status_code = 400
    code = "missing_fields"


class InvalidRequestError(AppError):
    status_code = 400
    code = "invalid_request"


class InvalidPlanError(AppError):
    status_code = 400
    code = "invalid_plan"


class InvalidRatingError(AppError):
    status_code = 400
    code = "invalid_rating"


class InvalidCredentialsError(AppError):
    """Login failed. Never says whether the email or the password was wrong."""

    status_code = 401
    code = "invalid_credentials"


class UnauthorizedError(AppError):
    """No session cookie, or the token does not resolve to a live session."""

    status_code = 401
    code = "unauthorized"


class ForbiddenError(AppError):
    """Valid session but the account lacks the required role."""

    status_code = 403
    code = "forbidden"


class NotFoundError(AppError):
    status_code = 404
    code = "not_found"


class ConflictError(AppError):
    """Uniqueness violation reported by the database."""

    status_code = 409
    code = "conflict"


class EmailExistsError(ConflictError):
    code = "email_exists"


class PhoneExistsError(ConflictError):
    code = "phone_exists"


class ServerError(AppError):
    """Internal inconsistency (e.g. a live session pointing at a deleted account)."""

    status_code = 500
    code = "server_error"
