"""Reviews board: public submission and listing, admin deletion."""

import logging

from sqlalchemy.orm import Session

from app.core.errors import InvalidRatingError, MissingFieldsError, NotFoundError
from app.models import Review
from app.schemas.reviews import ReviewCreate

logger = logging.getLogger(__name__)

RATING_MIN = 1
RATING_MAX = 5


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_rating(raw: int | str | None) -> int:
    """Accept 1..5 as int or numeric string. Raises InvalidRatingError."""
    if isinstance(raw, bool):
        raise InvalidRatingError()
    try:
        rating = int(raw)
    except (TypeError, ValueError):
        raise InvalidRatingError()
    if not RATING_MIN <= rating <= RATING_MAX:
        raise InvalidRatingError()
    return rating


def create_review(db: Session, body: ReviewCreate, author_id: int | None = None) -> Review:
    """Persist a review. author_id links it to the logged-in account, if any."""
    name = _clean(body.name)
    message = _clean(body.message)
    if name is None or message is None or body.rating in (None, ""):
        raise MissingFieldsError()
    review = Review(
        name=name,
        position=_clean(body.position),
        company=_clean(body.company),
        message=message,
        rating=parse_rating(body.rating),
        user_id=author_id,
    )
    db.add(review)
    db.commit()
    db.refresh(review)
    return review


def list_reviews(db: Session) -> list[Review]:
    """All reviews, newest first."""
    return db.query(Review).order_by(Review.created_at.desc(), Review.id.desc()).all()


def delete_review(db: Session, review_id: int) -> None:
    """Delete one review. Raises NotFoundError."""
    review = db.get(Review, review_id)
    if review is None:
        raise NotFoundError(f"Review {review_id} not found")
    db.delete(review)
    db.commit()
    logger.info("Review deleted: review_id=%s", review_id)
