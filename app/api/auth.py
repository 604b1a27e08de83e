"""Register, login and logout endpoints. The session token travels in an HTTP-only cookie."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.api.deps import DbSession, Sessions, get_session_token
from app.core.config import settings
from app.schemas.auth import LoginRequest, OkResponse, RegisterRequest
from app.services import auth as auth_service

router = APIRouter()


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
        path="/",
    )


@router.post("/register", response_model=OkResponse)
def register(
    body: RegisterRequest,
    response: Response,
    db: DbSession,
    sessions: Sessions,
) -> OkResponse:
    """Create an account (role 'user') and log it in."""
    token = auth_service.register(
        db,
        sessions,
        full_name=body.full_name,
        email=body.email,
        password=body.password,
    )
    _set_session_cookie(response, token)
    return OkResponse()


@router.post("/login", response_model=OkResponse)
def login(
    body: LoginRequest,
    response: Response,
    db: DbSession,
    sessions: Sessions,
) -> OkResponse:
    """Authenticate with email and password; sets a new session cookie."""
    token = auth_service.login(db, sessions, login=body.login, password=body.password)
    _set_session_cookie(response, token)
    return OkResponse()


@router.post("/logout", response_model=OkResponse)
def logout(
    response: Response,
    sessions: Sessions,
    token: Annotated[str | None, Depends(get_session_token)],
) -> OkResponse:
    """End the current session (if any) and clear the cookie. Always succeeds."""
    auth_service.logout(sessions, token)
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return OkResponse()
