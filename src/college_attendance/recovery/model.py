from __future__ import annotations

from dataclasses import dataclass

from ..attendance.model import AttendanceRecord
from ..roster.model import Student


def recovery_key(record_id: int, student_id: str) -> str:
    return f"{record_id}-{student_id}"


@dataclass(frozen=True)
class AbsenteeStatus:
    student: Student
    recovered: bool


@dataclass(frozen=True)
class RecordRecovery:
    record: AttendanceRecord
    absentees: tuple[AbsenteeStatus, ...]


@dataclass(frozen=True)
class DayGroup:
    """Records of one class sharing the exact same date string."""

    date: str
    records: tuple[RecordRecovery, ...]
