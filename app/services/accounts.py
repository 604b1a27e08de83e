"""Account directory: create, look up and update accounts. Uniqueness is enforced by the database."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import (
    ConflictError,
    EmailExistsError,
    InvalidPlanError,
    InvalidRequestError,
    MissingFieldsError,
    NotFoundError,
    PhoneExistsError,
)
from app.core.security import (
    EMAIL_MAX_LEN,
    generate_salt,
    hash_password,
    password_too_long,
    verify_password,
)
from app.models import ROLE_USER, User
from app.schemas.accounts import AdminAccountPatch, ProfilePatch

logger = logging.getLogger(__name__)

ALLOWED_PLANS = frozenset({"basic", "standard", "premium"})
# Sent by the pricing form to mean "no plan selected".
NO_PLAN = "none"


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookup: stripped and lower-cased."""
    return email.strip().lower()


def normalize_plan(plan: str | None) -> str | None:
    """Return the stored plan value; '' and 'none' clear it. Raises InvalidPlanError otherwise."""
    value = (plan or "").strip().lower()
    if value in ("", NO_PLAN):
        return None
    if value not in ALLOWED_PLANS:
        raise InvalidPlanError(f"Unknown plan: {value}")
    return value


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


# Constraint or qualified column names as they appear in driver errors:
# SQLite "UNIQUE constraint failed: users.email", PostgreSQL constraint names.
_EMAIL_CONSTRAINTS = ("users.email", "ix_users_email")
_PHONE_CONSTRAINTS = ("users.phone", "users_phone_key")


def _conflict_from_integrity_error(exc: IntegrityError) -> ConflictError | None:
    """
    Map a unique-constraint failure to the conflicting field.

    Uses psycopg2's diag.constraint_name when present, otherwise the first line of
    the driver message. The PostgreSQL DETAIL line echoes the offending value and
    is never inspected.
    """
    diag = getattr(exc.orig, "diag", None)
    constraint = getattr(diag, "constraint_name", None)
    first_line = (str(exc.orig).splitlines() or [""])[0]
    detail = (constraint or first_line).lower()
    if any(name in detail for name in _EMAIL_CONSTRAINTS):
        return EmailExistsError()
    if any(name in detail for name in _PHONE_CONSTRAINTS):
        return PhoneExistsError()
    return None


def _commit(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        conflict = _conflict_from_integrity_error(e)
        if conflict is None:
            raise
        raise conflict from e


def create_account(
    db: Session,
    full_name: str,
    email: str,
    password: str,
    role: str = ROLE_USER,
) -> User:
    """
    Insert a new account with a fresh salt and derived hash.

    The unique index on email is the only duplicate check, so two concurrent
    registrations for the same address cannot both succeed. Raises EmailExistsError.
    """
    email = normalize_email(email)
    full_name = full_name.strip()
    if not full_name or not email or not password:
        raise MissingFieldsError()
    if len(email) > EMAIL_MAX_LEN:
        raise InvalidRequestError("Email too long")
    if password_too_long(password):
        raise InvalidRequestError("Password too long")
    salt = generate_salt()
    user = User(
        full_name=full_name,
        email=email,
        password_salt=salt,
        password_hash=hash_password(password, salt),
        role=role,
    )
    db.add(user)
    _commit(db)
    db.refresh(user)
    return user


def get_account(db: Session, account_id: int) -> User | None:
    return db.get(User, account_id)


def get_account_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def list_accounts(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()


def check_credentials(db: Session, email: str, password: str) -> User | None:
    """Return the account if password re-derives its stored hash under its stored salt."""
    user = get_account_by_email(db, email)
    if user is None:
        return None
    if not verify_password(password, bytes(user.password_salt), bytes(user.password_hash)):
        return None
    return user


def set_password(db: Session, user: User, password: str) -> None:
    """Replace the credential; salt and hash are always written as a pair."""
    if password_too_long(password):
        raise InvalidRequestError("Password too long")
    salt = generate_salt()
    user.password_salt = salt
    user.password_hash = hash_password(password, salt)
    _commit(db)


def _apply_profile_patch(user: User, patch: ProfilePatch) -> None:
    fields = patch.model_fields_set
    if "full_name" in fields:
        full_name = _blank_to_none(patch.full_name)
        if full_name is None:
            raise MissingFieldsError("full_name cannot be blank")
        user.full_name = full_name
    if "phone" in fields:
        user.phone = _blank_to_none(patch.phone)
    if "city" in fields:
        user.city = _blank_to_none(patch.city)
    if "plan" in fields:
        user.plan = normalize_plan(patch.plan)


def update_profile(db: Session, user: User, patch: ProfilePatch) -> User:
    """Apply a partial profile update. Raises MissingFieldsError, InvalidPlanError, PhoneExistsError."""
    try:
        _apply_profile_patch(user, patch)
    except (MissingFieldsError, InvalidPlanError):
        db.rollback()
        raise
    _commit(db)
    db.refresh(user)
    return user


def admin_update_account(db: Session, account_id: int, patch: AdminAccountPatch) -> User:
    """
    Apply an admin's partial update to any account, including its email.

    Raises NotFoundError, MissingFieldsError, InvalidPlanError, EmailExistsError, PhoneExistsError.
    """
    user = get_account(db, account_id)
    if user is None:
        raise NotFoundError(f"Account {account_id} not found")
    try:
        _apply_profile_patch(user, patch)
        if "email" in patch.model_fields_set:
            email = normalize_email(patch.email or "")
            if not email:
                raise MissingFieldsError("email cannot be blank")
            user.email = email
    except (MissingFieldsError, InvalidPlanError):
        db.rollback()
        raise
    _commit(db)
    db.refresh(user)
    logger.info(
        "Admin updated account: account_id=%s fields=%s",
        account_id,
        sorted(patch.model_fields_set),
    )
    return user
