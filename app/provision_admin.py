"""
CLI entrypoint for admin provisioning. Uses ADMIN_SEED_ENABLED, ADMIN_EMAIL,
ADMIN_PASSWORD and ADMIN_FULL_NAME from the environment or .env:

  ADMIN_SEED_ENABLED=true ADMIN_PASSWORD=... python -m app.provision_admin

Creates the admin account, or promotes it and resets its password if it exists.
"""

import logging
import sys

from dotenv import load_dotenv

from app.core.config import get_settings
from app.core.database import SessionLocal, init_db
from app.services.admin_seed import seed_admin

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Run admin provisioning once."""
    load_dotenv()
    settings = get_settings()
    if settings.DB_AUTO_CREATE:
        init_db()
    db = SessionLocal()
    try:
        outcome = seed_admin(db, settings)
        logger.info("Admin provisioning completed: outcome=%s", outcome)
        return 0
    except Exception as e:
        logger.exception("Admin provisioning failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
