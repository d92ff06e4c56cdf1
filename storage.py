"""
Key-value backends for the record store.

Every backend stores plain strings under string keys:
- MemoryStore : dict in process memory (tests, scripts).
- DatabaseStore : rows of the ``storage_slots`` table, one commit per write.
- BrowserSessionStore : the signed Flask session cookie, i.e. scoped per browser.
"""

from typing import Dict, Optional

from flask import session

from extensions import db
from models import StorageSlot


class KeyValueStore:
    """Minimal get/set/delete contract used by ``RecordStore``."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class DatabaseStore(KeyValueStore):
    """Needs an active application context."""

    def get(self, key: str) -> Optional[str]:
        slot = StorageSlot.query.filter_by(key=key).first()
        return slot.value if slot is not None else None

    def set(self, key: str, value: str) -> None:
        slot = StorageSlot.query.filter_by(key=key).first()
        if slot is None:
            slot = StorageSlot(key=key, value=value)
            db.session.add(slot)
        else:
            slot.value = value
        db.session.commit()

    def delete(self, key: str) -> None:
        StorageSlot.query.filter_by(key=key).delete()
        db.session.commit()


class BrowserSessionStore(KeyValueStore):
    """Needs an active request context."""

    def get(self, key: str) -> Optional[str]:
        return session.get(key)

    def set(self, key: str, value: str) -> None:
        session[key] = value

    def delete(self, key: str) -> None:
        session.pop(key, None)
