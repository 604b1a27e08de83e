"""Request/response schemas for account profiles and admin account management."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProfilePatch(BaseModel):
    """
    Partial profile update for the logged-in account (PUT /me).

    Only fields present in the request body are applied; see model_fields_set.
    Empty strings clear phone, city and plan.
    """

    model_config = ConfigDict(extra="ignore")

    full_name: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=32)
    city: str | None = Field(default=None, max_length=255)
    plan: str | None = Field(default=None, max_length=32)


class AdminAccountPatch(ProfilePatch):
    """Partial update of any account by an admin. Role is deliberately not editable here."""

    email: str | None = Field(default=None, max_length=255)


class AccountProfile(BaseModel):
    """Account as returned to clients (no credential fields)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    email: str
    phone: str | None = None
    city: str | None = None
    plan: str | None = None
    role: str
    created_at: datetime | None = None


class MeResponse(BaseModel):
    user: AccountProfile


class UsersListResponse(BaseModel):
    """Response for GET /admin/users (admin only)."""

    users: list[AccountProfile]
