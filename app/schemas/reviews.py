"""Request/response schemas for the reviews board."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReviewCreate(BaseModel):
    """Review form submission. Required fields are checked by the service so blanks map to missing_fields."""

    name: str | None = Field(default=None, max_length=255)
    position: str | None = Field(default=None, max_length=255)
    company: str | None = Field(default=None, max_length=255)
    message: str | None = Field(default=None, max_length=5000)
    # Forms post the rating as a string ("5"); the service converts and range-checks it.
    rating: int | str | None = None


class ReviewItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    position: str | None = None
    company: str | None = None
    message: str
    rating: int
    created_at: datetime | None = None


class ReviewsListResponse(BaseModel):
    reviews: list[ReviewItem]
