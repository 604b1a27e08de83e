"""Profile of the logged-in account."""

from fastapi import APIRouter

from app.api.deps import CurrentAccountId, DbSession
from app.core.errors import UnauthorizedError
from app.schemas.accounts import AccountProfile, MeResponse, ProfilePatch
from app.schemas.auth import OkResponse
from app.services.accounts import get_account, update_profile

router = APIRouter()


@router.get("", response_model=MeResponse)
def get_me(account_id: CurrentAccountId, db: DbSession) -> MeResponse:
    """Return the current account's profile and role."""
    user = get_account(db, account_id)
    if user is None:
        raise UnauthorizedError("Account no longer exists")
    return MeResponse(user=AccountProfile.model_validate(user))


@router.put("", response_model=OkResponse)
def put_me(body: ProfilePatch, account_id: CurrentAccountId, db: DbSession) -> OkResponse:
    """Update only the profile fields present in the body."""
    user = get_account(db, account_id)
    if user is None:
        raise UnauthorizedError("Account no longer exists")
    update_profile(db, user, body)
    return OkResponse()
