"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """
    Registration form. Field names match the site's HTML form (FIO, email, pass).

    All fields are optional here so that blanks are reported as missing_fields
    by the service rather than as a validation error.
    """

    model_config = ConfigDict(populate_by_name=True)

    full_name: str | None = Field(default=None, alias="FIO", max_length=255)
    email: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, alias="pass")


class LoginRequest(BaseModel):
    """Credentials for login; login is the account email."""

    model_config = ConfigDict(populate_by_name=True)

    login: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, alias="pass")


class OkResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., description="Machine-readable error code, e.g. missing_fields")
