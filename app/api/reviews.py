"""Public reviews board: submit and list reviews."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import DbSession, get_optional_account_id
from app.schemas.auth import OkResponse
from app.schemas.reviews import ReviewCreate, ReviewItem, ReviewsListResponse
from app.services.reviews import create_review, list_reviews

router = APIRouter()


@router.post("", response_model=OkResponse)
def post_review(
    body: ReviewCreate,
    db: DbSession,
    account_id: Annotated[int | None, Depends(get_optional_account_id)],
) -> OkResponse:
    """Submit a review. Logged-in visitors have it linked to their account."""
    create_review(db, body, author_id=account_id)
    return OkResponse()


@router.get("", response_model=ReviewsListResponse)
def get_reviews(db: DbSession) -> ReviewsListResponse:
    return ReviewsListResponse(
        reviews=[ReviewItem.model_validate(r) for r in list_reviews(db)]
    )
