from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from werkzeug.security import check_password_hash

from ..core.enums import Role
from .model import Identity


class CredentialVerifier(Protocol):
    """Maps (username, secret) to an identity, or ``None`` when rejected."""

    def verify(self, username: str, secret: str) -> Optional[Identity]:
        raise NotImplementedError


class StaticCredentialVerifier(CredentialVerifier):
    """Fixed credential table of the college deployment.

    Class teachers share one username; the class they teach is the digit
    suffix of the password (``class7`` -> class ``7``). Not suitable for a
    real deployment.
    """

    ADMIN = ("kps963", "2963")
    STAFF = ("dustaff", "duidc")
    CLASS_TEACHER_USERNAME = "classteacher"
    CLASS_TEACHER_PREFIX = "class"

    def verify(self, username: str, secret: str) -> Optional[Identity]:
        if (username, secret) == self.ADMIN:
            return Identity(role=Role.ADMIN)

        if username == self.CLASS_TEACHER_USERNAME and secret.startswith(self.CLASS_TEACHER_PREFIX):
            class_number = secret[len(self.CLASS_TEACHER_PREFIX):]
            if class_number.isdigit():
                return Identity(role=Role.CLASS_TEACHER, class_number=class_number)
            return None

        if (username, secret) == self.STAFF:
            return Identity(role=Role.STAFF)

        return None


@dataclass(frozen=True)
class Account:
    username: str
    password_hash: str
    role: Role
    class_number: Optional[str] = None


class HashedCredentialVerifier(CredentialVerifier):
    """Accounts from configuration, passwords stored as werkzeug hashes."""

    def __init__(self, accounts: Iterable[Account]):
        self._accounts = {a.username: a for a in accounts}

    @classmethod
    def from_config(cls, entries: Iterable[dict]) -> "HashedCredentialVerifier":
        accounts = []
        for e in entries:
            role = Role(e["role"])
            class_number = str(e["class_number"]) if e.get("class_number") not in (None, "") else None
            if role == Role.CLASS_TEACHER and class_number is None:
                raise ValueError(f"class teacher account {e['username']!r} needs a class_number")
            if role != Role.CLASS_TEACHER and class_number is not None:
                raise ValueError(f"only class teacher accounts take a class_number ({e['username']!r})")

            accounts.append(
                Account(
                    username=str(e["username"]),
                    password_hash=str(e["password_hash"]),
                    role=role,
                    class_number=class_number,
                )
            )
        return cls(accounts)

    def verify(self, username: str, secret: str) -> Optional[Identity]:
        account = self._accounts.get(username)
        if not account:
            return None

        try:
            ok = check_password_hash(account.password_hash, secret)
        except (TypeError, ValueError):
            # placeholder hashes like 'CHANGE_ME'
            ok = False

        if not ok:
            return None
        return Identity(role=account.role, class_number=account.class_number)
