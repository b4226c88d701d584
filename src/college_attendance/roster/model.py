from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def make_student_id(class_name: str, roll_no: str) -> str:
    return f"{class_name}-{roll_no}"


def roll_sort_key(roll_no: str) -> tuple:
    """Numeric ordering for roll numbers; non-numeric ones sort last."""
    try:
        return (0, int(roll_no), "")
    except (TypeError, ValueError):
        return (1, 0, str(roll_no))


@dataclass(frozen=True)
class Student:
    """Domain entity: one roster entry."""

    id: str
    roll_no: str
    ad_number: str
    name: str
    class_name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "rollNo": self.roll_no,
            "adNumber": self.ad_number,
            "name": self.name,
            "className": self.class_name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Student":
        return cls(
            id=str(data.get("id", "")),
            roll_no=str(data.get("rollNo", "")),
            ad_number=str(data.get("adNumber", "")),
            name=str(data.get("name", "")),
            class_name=str(data.get("className", "")),
        )


@dataclass(frozen=True)
class RowError:
    line_no: int
    message: str
    raw: str

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line_no, "message": self.message, "raw": self.raw}


@dataclass(frozen=True)
class RosterParseResult:
    students: tuple[Student, ...]
    errors: tuple[RowError, ...]

    @property
    def ok(self) -> bool:
        return not self.errors
