# tests/conftest.py
import os
import sys
import pytest

# so that `from app import create_app` works when running from the repo root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app
from extensions import db
from modules.staff.store import RecordStore
from storage import MemoryStore

ADMINS = {"admin", "owner", "headadmin"}
SUBMITTED_AT = "2024-05-01 12:00:00"


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SECRET_KEY": "test-secret",
        "ADMIN_USERNAMES": frozenset(ADMINS),
        "STORAGE_NAMESPACE": "funfire",
    })
    with app.app_context():
        db.create_all()
    # no context is held open: each request must load its own user
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admins():
    return frozenset(ADMINS)


@pytest.fixture()
def submitted_at():
    return SUBMITTED_AT


@pytest.fixture()
def kv():
    return MemoryStore()


@pytest.fixture()
def store(kv, admins, submitted_at):
    return RecordStore(kv, admin_usernames=admins, clock=lambda: submitted_at)


@pytest.fixture()
def application_fields():
    return {"why": "fun", "experience": "none", "age": "20", "mc_username": "SteveMC"}
