"""ORM model for callback requests from the contact form."""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.models.base import Base


class Callback(Base):
    __tablename__ = "callbacks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    phone = Column(String(32), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
