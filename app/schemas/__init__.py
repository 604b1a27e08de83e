"""Pydantic request/response schemas."""

from app.schemas.accounts import (
    AccountProfile,
    AdminAccountPatch,
    MeResponse,
    ProfilePatch,
    UsersListResponse,
)
from app.schemas.auth import ErrorResponse, LoginRequest, OkResponse, RegisterRequest
from app.schemas.callbacks import CallbackCreate, CallbackItem, CallbacksListResponse
from app.schemas.health import HealthResponse
from app.schemas.reviews import ReviewCreate, ReviewItem, ReviewsListResponse

__all__ = [
    "AccountProfile",
    "AdminAccountPatch",
    "CallbackCreate",
    "CallbackItem",
    "CallbacksListResponse",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "MeResponse",
    "OkResponse",
    "ProfilePatch",
    "RegisterRequest",
    "ReviewCreate",
    "ReviewItem",
    "ReviewsListResponse",
    "UsersListResponse",
]
