"""
Record store for users, staff applications and the session pointer.

Layout inside the key-value namespace:
- ``users`` : JSON list of user records
- ``applications`` : JSON list of application records
- ``currentUser`` : plain username string, absent when logged out

Every mutation is a whole-collection read-modify-write. Nothing here guards
against two writers interleaving on the same backend.
"""

import json
import logging
from datetime import datetime
from typing import Callable, Iterable, List, Mapping, Optional, Union

from storage import KeyValueStore

from .errors import (
    AlreadyExists,
    DuplicateApplication,
    InvalidCredentials,
    MissingField,
    NotAuthenticated,
    NotPending,
    OutOfRange,
)
from .records import (
    APPLICATION_FIELDS,
    Application,
    ApplicationStatus,
    Session,
    User,
)

logger = logging.getLogger(__name__)

USERS_SLOT = "users"
APPLICATIONS_SLOT = "applications"
CURRENT_USER_SLOT = "currentUser"

DECISIONS = (ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED)


def _default_clock() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


class RecordStore:
    def __init__(
        self,
        store: KeyValueStore,
        admin_usernames: Iterable[str] = (),
        session_store: Optional[KeyValueStore] = None,
        namespace: str = "",
        clock: Optional[Callable[[], str]] = None,
    ) -> None:
        self._store = store
        self._session_store = session_store if session_store is not None else store
        self._admins = frozenset(name.lower() for name in admin_usernames)
        self._namespace = namespace
        self._clock = clock or _default_clock

    def _key(self, slot: str) -> str:
        return f"{self._namespace}_{slot}" if self._namespace else slot

    def _load_list(self, slot: str) -> list:
        raw = self._store.get(self._key(slot))
        if not raw:
            return []
        try:
            items = json.loads(raw)
        except ValueError:
            logger.warning("Slot %s holds invalid JSON, treating it as empty", self._key(slot))
            return []
        if not isinstance(items, list):
            logger.warning("Slot %s does not hold a list, treating it as empty", self._key(slot))
            return []
        records = []
        for item in items:
            if isinstance(item, dict):
                records.append(item)
            else:
                logger.warning("Skipping malformed record %r in slot %s", item, self._key(slot))
        return records

    def _save_list(self, slot: str, items: list) -> None:
        self._store.set(self._key(slot), json.dumps(items))

    # ---------- collections ----------
    def load_users(self) -> List[User]:
        return [User.from_dict(item) for item in self._load_list(USERS_SLOT)]

    def save_users(self, users: Iterable[User]) -> None:
        self._save_list(USERS_SLOT, [u.to_dict() for u in users])

    def load_applications(self) -> List[Application]:
        return [Application.from_dict(item) for item in self._load_list(APPLICATIONS_SLOT)]

    def save_applications(self, applications: Iterable[Application]) -> None:
        self._save_list(APPLICATIONS_SLOT, [a.to_dict() for a in applications])

    # ---------- session pointer ----------
    def current_user(self) -> Optional[str]:
        return self._session_store.get(self._key(CURRENT_USER_SLOT)) or None

    def set_current_user(self, username: str) -> None:
        self._session_store.set(self._key(CURRENT_USER_SLOT), username)

    def clear_current_user(self) -> None:
        self._session_store.delete(self._key(CURRENT_USER_SLOT))

    def is_admin_username(self, username: Optional[str]) -> bool:
        return bool(username) and username.lower() in self._admins

    def is_admin(self) -> bool:
        return self.is_admin_username(self.current_user())

    # ---------- lookups ----------
    def find_user(self, username: str) -> Optional[User]:
        """Case-insensitive lookup by username."""
        wanted = username.lower()
        for user in self.load_users():
            if user.username.lower() == wanted:
                return user
        return None

    def application_for(self, username: str) -> Optional[Application]:
        for application in self.load_applications():
            if application.username == username:
                return application
        return None

    def current_session(self) -> Optional[Session]:
        """Rebuild a ``Session`` from the pointer; None if it names no stored user."""
        username = self.current_user()
        if not username:
            return None
        user = self.find_user(username)
        if user is None:
            return None
        return Session(user=user, is_admin=self.is_admin_username(user.username))

    # ---------- domain operations ----------
    def register(self, username: str, email: str, password: str) -> User:
        for field, value in (("username", username), ("email", email), ("password", password)):
            if not value:
                raise MissingField(field)

        users = self.load_users()
        if any(u.username.lower() == username.lower() for u in users):
            logger.debug("Registration refused, %s already exists", username)
            raise AlreadyExists()

        user = User(username=username, email=email, password=password)
        users.append(user)
        self.save_users(users)
        logger.info("Registered user %s", username)
        return user

    def authenticate(self, username: str, password: str) -> Session:
        wanted = (username or "").lower()
        for user in self.load_users():
            if user.username.lower() == wanted and user.password == password:
                self.set_current_user(user.username)
                logger.info("User %s logged in", user.username)
                return Session(user=user, is_admin=self.is_admin_username(user.username))
        logger.debug("Failed login for %s", username)
        raise InvalidCredentials()

    def logout(self) -> None:
        self.clear_current_user()

    def submit_application(
        self,
        current_user: Union[Session, str, None],
        fields: Mapping[str, str],
    ) -> Application:
        username = current_user.username if isinstance(current_user, Session) else current_user
        if not username:
            raise NotAuthenticated()

        for field in APPLICATION_FIELDS:
            if not fields.get(field):
                raise MissingField(field)

        applications = self.load_applications()
        # exact match: the session always carries the stored-case username
        if any(a.username == username for a in applications):
            logger.debug("Duplicate application from %s", username)
            raise DuplicateApplication()

        application = Application(
            username=username,
            why=fields["why"],
            experience=fields["experience"],
            age=str(fields["age"]),
            mc_username=fields["mc_username"],
            submitted_at=self._clock(),
        )
        applications.append(application)
        self.save_applications(applications)
        logger.info("Application submitted by %s", username)
        return application

    # ---------- admin mutations ----------
    @staticmethod
    def _check_index(applications: list, index: int) -> None:
        if not 0 <= index < len(applications):
            raise OutOfRange(index)

    def set_application_status(self, index: int, status: Union[ApplicationStatus, str]) -> Application:
        status = ApplicationStatus(status)
        if status not in DECISIONS:
            raise ValueError(f"Cannot set application status to {status.value!r}")

        applications = self.load_applications()
        self._check_index(applications, index)
        application = applications[index]
        if not application.is_pending:
            raise NotPending()

        application.status = status
        self.save_applications(applications)
        logger.info("Application #%d (%s) marked %s", index, application.username, status.value)
        return application

    def accept_application(self, index: int) -> Application:
        return self.set_application_status(index, ApplicationStatus.ACCEPTED)

    def reject_application(self, index: int) -> Application:
        return self.set_application_status(index, ApplicationStatus.REJECTED)

    def delete_application(self, index: int) -> Application:
        applications = self.load_applications()
        self._check_index(applications, index)
        removed = applications.pop(index)
        self.save_applications(applications)
        logger.info("Application #%d (%s) deleted", index, removed.username)
        return removed
