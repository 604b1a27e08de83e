"""Callback requests from the contact form."""

from sqlalchemy.orm import Session

from app.core.errors import MissingFieldsError
from app.models import Callback
from app.schemas.callbacks import CallbackCreate


def create_callback(db: Session, body: CallbackCreate) -> Callback:
    name = (body.name or "").strip()
    phone = (body.phone or "").strip()
    if not name or not phone:
        raise MissingFieldsError()
    callback = Callback(name=name, phone=phone)
    db.add(callback)
    db.commit()
    db.refresh(callback)
    return callback


def list_callbacks(db: Session) -> list[Callback]:
    """All callback requests, newest first."""
    return db.query(Callback).order_by(Callback.created_at.desc(), Callback.id.desc()).all()
