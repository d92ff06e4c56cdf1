"""Records kept in the ``users`` and ``applications`` slots."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

logger = logging.getLogger(__name__)


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


# Fields the applicant fills in; all of them are required.
APPLICATION_FIELDS = ("why", "experience", "age", "mc_username")


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


@dataclass
class User:
    username: str
    email: str
    password: str

    def to_dict(self) -> Dict[str, Any]:
        return {"username": self.username, "email": self.email, "password": self.password}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            username=_text(data, "username"),
            email=_text(data, "email"),
            password=_text(data, "password"),
        )


@dataclass
class Application:
    """
    A staff application. Stored with the camelCase keys the site has always
    used (``mcUsername``, ``submittedAt``).
    """

    username: str
    why: str
    experience: str
    age: str
    mc_username: str
    submitted_at: str
    status: ApplicationStatus = ApplicationStatus.PENDING

    @property
    def is_pending(self) -> bool:
        return self.status == ApplicationStatus.PENDING

    def to_dict(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "why": self.why,
            "experience": self.experience,
            "age": self.age,
            "mcUsername": self.mc_username,
            "status": self.status.value,
            "submittedAt": self.submitted_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Application":
        raw_status = data.get("status") or ApplicationStatus.PENDING.value
        try:
            status = ApplicationStatus(raw_status)
        except ValueError:
            logger.warning("Unknown status %r on application of %r, reading it as pending", raw_status, data.get("username"))
            status = ApplicationStatus.PENDING
        return cls(
            username=_text(data, "username"),
            why=_text(data, "why"),
            experience=_text(data, "experience"),
            age=_text(data, "age"),
            mc_username=_text(data, "mcUsername"),
            submitted_at=_text(data, "submittedAt"),
            status=status,
        )


@dataclass(frozen=True)
class Session:
    """Result of a successful login, handed back to the caller."""

    user: User
    is_admin: bool = False

    @property
    def username(self) -> str:
        return self.user.username
