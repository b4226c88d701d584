from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles used for access checks."""

    ADMIN = "admin"
    CLASS_TEACHER = "class-teacher"
    STAFF = "staff"


class PersistenceLifetime(str, Enum):
    """How long the collection keys survive in the store."""

    SESSION = "session"
    DURABLE = "durable"
