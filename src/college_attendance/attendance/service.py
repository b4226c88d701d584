from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Iterable, Optional

from ..common.datetime_utils import date_sort_key, now_local
from ..common.ids import MillisecondIdSource
from ..common.validators import is_blank
from ..core.constants import PERIODS
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..roster.service import RosterService
from .model import AttendanceRecord
from .repository import AttendanceLedger
from .sheet import AttendanceSheet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavedAttendance:
    record: AttendanceRecord
    present_count: int


class AttendanceService:
    """Use case: staff record per-period absentees; admin reviews the ledger."""

    def __init__(
        self,
        ledger: AttendanceLedger,
        roster: RosterService,
        *,
        ids: Optional[MillisecondIdSource] = None,
    ):
        self._ledger = ledger
        self._roster = roster
        self._ids = ids or MillisecondIdSource()

    def open_sheet(self, class_name: str) -> AttendanceSheet:
        return AttendanceSheet(class_name, self._roster.students_for_class(class_name))

    def save_attendance(
        self,
        *,
        current_role: Role,
        class_name: str,
        subject: str,
        period: str,
        absent_ids: Iterable[str],
        now: datetime | None = None,
    ) -> SavedAttendance:
        if current_role != Role.STAFF:
            raise AuthorizationError("Only staff can record attendance.")
        if is_blank(class_name) or is_blank(subject) or is_blank(period):
            raise ValidationError("Please select class, subject, and period.")

        period = str(period).strip()
        if period not in PERIODS:
            raise ValidationError(f"Period must be between {PERIODS[0]} and {PERIODS[-1]}.")

        now = now or now_local()
        sheet = self.open_sheet(class_name.strip())
        sheet.mark_absent(absent_ids)
        # the record owns copies, not the roster entries
        absentees = tuple(replace(s) for s in sheet.absentees())

        record = AttendanceRecord(
            id=self._ids.next_id(),
            date=now.date().isoformat(),
            class_name=sheet.class_name,
            subject=subject.strip(),
            period=period,
            absentees=absentees,
            timestamp=now.isoformat(),
        )
        self._ledger.append(record)

        present_count = len(sheet.students) - len(absentees)
        logger.info(
            "attendance saved for class %s, %s period %s: %d absent, %d present",
            record.class_name, record.subject, record.period, len(absentees), present_count,
        )
        return SavedAttendance(record=record, present_count=present_count)

    def list_records(self) -> list[AttendanceRecord]:
        return list(self._ledger.list_all())

    def records_for_class(self, class_name: str) -> list[AttendanceRecord]:
        return [r for r in self._ledger.list_all() if r.class_name == class_name]

    def get_record(self, record_id: int) -> Optional[AttendanceRecord]:
        return self._ledger.get_by_id(int(record_id))

    def admin_view(self) -> list[AttendanceRecord]:
        """All records, newest date first (stable within a date)."""
        return sorted(self._ledger.list_all(), key=lambda r: date_sort_key(r.date), reverse=True)

    def export_rows(self) -> list[dict]:
        return [
            {
                "date": r.date,
                "class_name": r.class_name,
                "subject": r.subject,
                "period": r.period,
                "absent_count": r.absent_count,
                "absentees": "; ".join(f"{s.roll_no} {s.name}" for s in r.absentees),
                "timestamp": r.timestamp,
            }
            for r in self.admin_view()
        ]
