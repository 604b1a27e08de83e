"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.callback import Callback
from app.models.review import Review
from app.models.user import ROLE_ADMIN, ROLE_USER, User

__all__ = ["Base", "Callback", "Review", "ROLE_ADMIN", "ROLE_USER", "User"]
