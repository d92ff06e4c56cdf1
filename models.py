"""Shared SQLAlchemy models."""

from datetime import datetime, timezone

from extensions import db


def _utcnow():
    return datetime.now(timezone.utc)


class StorageSlot(db.Model):
    """One named value of the persistent key-value store."""

    __tablename__ = "storage_slots"

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(150), unique=True, nullable=False)
    value = db.Column(db.Text, nullable=False)
    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<StorageSlot {self.key}>"
