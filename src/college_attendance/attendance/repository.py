from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceLedger(Protocol):
    """Append-only list of attendance records, kept in save order."""

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def append(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError
