from __future__ import annotations

import logging

from ..attendance.service import AttendanceService
from ..common.datetime_utils import date_sort_key
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..users.model import Session
from .model import AbsenteeStatus, DayGroup, RecordRecovery, recovery_key
from .repository import RecoveryFlagRepository

logger = logging.getLogger(__name__)


class RecoveryService:
    """Use case: class teachers acknowledge that absentees made up a period."""

    def __init__(self, flags: RecoveryFlagRepository, attendance: AttendanceService):
        self._flags = flags
        self._attendance = attendance

    def is_recovered(self, record_id: int, student_id: str) -> bool:
        return self._flags.get_all().get(recovery_key(record_id, student_id), False)

    def toggle(self, *, session: Session, record_id: int, student_id: str) -> bool:
        """Flip the recovered flag and return its new value."""
        if session.role != Role.CLASS_TEACHER:
            raise AuthorizationError("Only class teachers can mark recovery.")

        record = self._attendance.get_record(record_id)
        if not record:
            raise ValidationError("Attendance record not found.")
        if record.class_name != session.class_number:
            raise AuthorizationError("This record belongs to another class.")
        if not any(s.id == student_id for s in record.absentees):
            raise ValidationError("Student was not absent in this record.")

        key = recovery_key(record.id, student_id)
        new_value = not self._flags.get_all().get(key, False)
        self._flags.set_flag(key, new_value)
        logger.info("recovery %s set to %s by %s", key, new_value, session.username)
        return new_value

    def class_teacher_view(self, class_number: str) -> list[DayGroup]:
        flags = self._flags.get_all()
        grouped: dict[str, list[RecordRecovery]] = {}
        for record in self._attendance.records_for_class(class_number):
            statuses = tuple(
                AbsenteeStatus(student=s, recovered=flags.get(recovery_key(record.id, s.id), False))
                for s in record.absentees
            )
            grouped.setdefault(record.date, []).append(RecordRecovery(record=record, absentees=statuses))

        days = [DayGroup(date=d, records=tuple(rs)) for d, rs in grouped.items()]
        days.sort(key=lambda g: date_sort_key(g.date), reverse=True)
        return days
