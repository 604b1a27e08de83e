"""Registration, login and logout flows over the account directory and the session store."""

import logging

from sqlalchemy.orm import Session

from app.core.errors import InvalidCredentialsError, InvalidRequestError, MissingFieldsError
from app.core.security import password_too_long
from app.services.accounts import check_credentials, create_account, normalize_email
from app.services.sessions import SessionStore

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def register(
    db: Session,
    sessions: SessionStore,
    full_name: str | None,
    email: str | None,
    password: str | None,
) -> str:
    """
    Create a user account and log it in; returns the new session token.

    Raises MissingFieldsError if any field is blank, InvalidRequestError if the
    password is over 72 UTF-8 bytes, EmailExistsError if the (case-insensitive)
    email is taken.
    """
    if _is_blank(full_name) or _is_blank(email) or not password:
        raise MissingFieldsError()
    if password_too_long(password):
        raise InvalidRequestError("Password too long")
    user = create_account(db, full_name=full_name, email=email, password=password)
    token = sessions.create(user.id)
    logger.info("Account registered: account_id=%s", user.id)
    return token


def login(db: Session, sessions: SessionStore, login: str | None, password: str | None) -> str:
    """
    Verify credentials and open a new session; returns its token.

    Unknown email and wrong password both raise InvalidCredentialsError.
    """
    if _is_blank(login) or not password:
        raise MissingFieldsError()
    user = check_credentials(db, normalize_email(login), password)
    if user is None:
        logger.info("Login failed")
        raise InvalidCredentialsError()
    token = sessions.create(user.id)
    logger.info("Login succeeded: account_id=%s", user.id)
    return token


def logout(sessions: SessionStore, token: str | None) -> None:
    """End the session if it exists. Always succeeds."""
    sessions.destroy(token)
