from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Identity:
    """Result of a successful credential check: role plus read scope."""

    role: Role
    class_number: Optional[str] = None


@dataclass(frozen=True)
class Session:
    """The active authenticated identity.

    ``class_number`` is only set for class teachers and scopes which ledger
    records they can see.
    """

    username: str
    role: Role
    class_number: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"username": self.username, "role": self.role.value}
        if self.class_number is not None:
            data["classNumber"] = self.class_number
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Session":
        return cls(
            username=str(data["username"]),
            role=Role(data["role"]),
            class_number=data.get("classNumber"),
        )
