"""Auth dependencies: session store access, the session gate and the admin role gate."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.errors import ForbiddenError, ServerError, UnauthorizedError
from app.models import User
from app.services.accounts import get_account
from app.services.sessions import SessionStore


def get_session_store(request: Request) -> SessionStore:
    """Dependency: the application's session store (created with the app in app.main)."""
    return request.app.state.session_store


def get_session_token(request: Request) -> str | None:
    """Raw session token from the session cookie, if any."""
    return request.cookies.get(settings.SESSION_COOKIE_NAME) or None


def get_optional_account_id(
    token: Annotated[str | None, Depends(get_session_token)],
    sessions: Annotated[SessionStore, Depends(get_session_store)],
) -> int | None:
    """Soft variant of get_current_account_id: None instead of 401."""
    return sessions.resolve(token)


def get_current_account_id(
    token: Annotated[str | None, Depends(get_session_token)],
    sessions: Annotated[SessionStore, Depends(get_session_store)],
) -> int:
    """Dependency: require a live session and return its account id. Raises 401 otherwise."""
    if token is None:
        raise UnauthorizedError("No session cookie")
    account_id = sessions.resolve(token)
    if account_id is None:
        raise UnauthorizedError("Unknown or ended session")
    return account_id


def require_admin(
    account_id: Annotated[int, Depends(get_current_account_id)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """
    Dependency: require a live session whose account has role 'admin'.

    401 without a session, 403 for non-admins, 500 if the session points at an
    account that no longer exists.
    """
    user = get_account(db, account_id)
    if user is None:
        raise ServerError(f"Session references missing account {account_id}")
    if not user.is_admin:
        raise ForbiddenError("Admin access required")
    return user


CurrentAccountId = Annotated[int, Depends(get_current_account_id)]
DbSession = Annotated[Session, Depends(get_db)]
Sessions = Annotated[SessionStore, Depends(get_session_store)]
