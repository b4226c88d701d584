from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..roster.model import Student


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: absentees of one class for one period.

    ``absentees`` is a snapshot of the students at save time; later roster
    changes never reach it.
    """

    id: int
    date: str
    class_name: str
    subject: str
    period: str
    absentees: tuple[Student, ...]
    timestamp: str

    @property
    def absent_count(self) -> int:
        return len(self.absentees)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "className": self.class_name,
            "subject": self.subject,
            "period": self.period,
            "absentees": [s.to_dict() for s in self.absentees],
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AttendanceRecord":
        return cls(
            id=int(data["id"]),
            date=str(data.get("date", "")),
            class_name=str(data.get("className", "")),
            subject=str(data.get("subject", "")),
            period=str(data.get("period", "")),
            absentees=tuple(Student.from_dict(s) for s in data.get("absentees") or []),
            timestamp=str(data.get("timestamp", "")),
        )
