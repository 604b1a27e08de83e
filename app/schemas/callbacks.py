"""Request/response schemas for callback requests."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CallbackCreate(BaseModel):
    name: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=32)


class CallbackItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    phone: str
    created_at: datetime | None = None


class CallbacksListResponse(BaseModel):
    """Response for GET /admin/callbacks (admin only)."""

    callbacks: list[CallbackItem]
