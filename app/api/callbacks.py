"""Callback request form (public). Listing is in the admin panel."""

from fastapi import APIRouter

from app.api.deps import DbSession
from app.schemas.auth import OkResponse
from app.schemas.callbacks import CallbackCreate
from app.services.callbacks import create_callback

router = APIRouter()


@router.post("", response_model=OkResponse)
def post_callback(body: CallbackCreate, db: DbSession) -> OkResponse:
    """Record a request to be called back."""
    create_callback(db, body)
    return OkResponse()
