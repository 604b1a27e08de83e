"""Admin panel endpoints. The router-level require_admin dependency gates every route here."""

from fastapi import APIRouter, Depends

from app.api.deps import DbSession, require_admin
from app.schemas.accounts import AccountProfile, AdminAccountPatch, UsersListResponse
from app.schemas.auth import OkResponse
from app.schemas.callbacks import CallbackItem, CallbacksListResponse
from app.services.accounts import admin_update_account, list_accounts
from app.services.callbacks import list_callbacks
from app.services.reviews import delete_review

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/users", response_model=UsersListResponse)
def list_users(db: DbSession) -> UsersListResponse:
    """List all accounts, ordered by id."""
    return UsersListResponse(
        users=[AccountProfile.model_validate(u) for u in list_accounts(db)]
    )


@router.put("/users/{user_id}", response_model=OkResponse)
def update_user(user_id: int, body: AdminAccountPatch, db: DbSession) -> OkResponse:
    """Partially update an account's profile, plan or email."""
    admin_update_account(db, user_id, body)
    return OkResponse()


@router.delete("/reviews/{review_id}", response_model=OkResponse)
def remove_review(review_id: int, db: DbSession) -> OkResponse:
    delete_review(db, review_id)
    return OkResponse()


@router.get("/callbacks", response_model=CallbacksListResponse)
def get_callbacks(db: DbSession) -> CallbacksListResponse:
    """All callback requests, newest first."""
    return CallbacksListResponse(
        callbacks=[CallbackItem.model_validate(c) for c in list_callbacks(db)]
    )
