"""Provision the bootstrap admin account from settings."""

import logging
from typing import TYPE_CHECKING, Literal

from sqlalchemy.orm import Session

from app.models import ROLE_ADMIN
from app.services.accounts import create_account, get_account_by_email, set_password

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

SeedOutcome = Literal["disabled", "created", "reset"]


def seed_admin(db: Session, settings: "Settings") -> SeedOutcome:
    """
    Ensure ADMIN_EMAIL exists with role 'admin' and password ADMIN_PASSWORD.

    Missing account: created as admin. Existing account: role forced to admin and
    its credential replaced (new salt and hash). Does nothing unless
    ADMIN_SEED_ENABLED is set. Idempotent apart from the salt rotation.
    """
    if not settings.ADMIN_SEED_ENABLED:
        logger.info("Admin provisioning is disabled (ADMIN_SEED_ENABLED=false); skipping.")
        return "disabled"

    email = settings.ADMIN_EMAIL
    password = settings.ADMIN_PASSWORD.get_secret_value()
    user = get_account_by_email(db, email)
    if user is None:
        user = create_account(
            db,
            full_name=settings.ADMIN_FULL_NAME,
            email=email,
            password=password,
            role=ROLE_ADMIN,
        )
        logger.warning("Admin provisioning: created admin account_id=%s email=%s", user.id, email)
        return "created"

    previous_role = user.role
    user.role = ROLE_ADMIN
    set_password(db, user, password)
    logger.warning(
        "Admin provisioning: reset credential for account_id=%s email=%s (role %s -> %s)",
        user.id,
        email,
        previous_role,
        ROLE_ADMIN,
    )
    return "reset"
