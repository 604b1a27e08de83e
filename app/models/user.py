"""ORM model for registered accounts (auth, profile and role)."""

from sqlalchemy import Column, DateTime, Integer, LargeBinary, String, func

from app.models.base import Base

ROLE_USER = "user"
ROLE_ADMIN = "admin"


class User(Base):
    """
    Registered account.

    email is stored lower-cased, so the unique index enforces case-insensitive uniqueness.
    password_hash is always written together with the password_salt that produced it.
    role: 'admin' or 'user'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(LargeBinary(64), nullable=False)
    password_salt = Column(LargeBinary(32), nullable=False)
    phone = Column(String(32), nullable=True, unique=True)
    city = Column(String(255), nullable=True)
    plan = Column(String(32), nullable=True)
    role = Column(String(32), nullable=False, default=ROLE_USER, server_default=ROLE_USER)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
