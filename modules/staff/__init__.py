"""Staff applications module package."""

from flask import Blueprint, current_app, g

from storage import BrowserSessionStore, DatabaseStore

from .store import RecordStore

bp = Blueprint("staff", __name__)


def get_store() -> RecordStore:
    """Per-request record store: collections in the database, pointer in the browser session."""
    store = g.get("record_store")
    if store is None:
        store = RecordStore(
            DatabaseStore(),
            admin_usernames=current_app.config["ADMIN_USERNAMES"],
            session_store=BrowserSessionStore(),
            namespace=current_app.config["STORAGE_NAMESPACE"],
        )
        g.record_store = store
    return store


from . import routes  # noqa: E402  pylint: disable=wrong-import-position

__all__ = ["bp", "get_store", "routes", "RecordStore"]
