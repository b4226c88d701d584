from __future__ import annotations

from datetime import datetime

import pytest

from college_attendance.core.enums import Role
from college_attendance.core.exceptions import AuthorizationError, ValidationError
from college_attendance.recovery.model import recovery_key
from college_attendance.users.model import Session

TEACHER_5 = Session(username="classteacher", role=Role.CLASS_TEACHER, class_number="5")


@pytest.fixture
def record(container, fixed_now):
    container.roster_service.import_roster(current_role=Role.ADMIN, class_name="5", text="1,A01,Alice\n2,A02,Bob")
    return container.attendance_service.save_attendance(
        current_role=Role.STAFF, class_name="5", subject="Math", period="2", absent_ids=["5-1"], now=fixed_now
    ).record


def test_toggle_is_self_inverse(container, record):
    svc = container.recovery_service

    assert svc.is_recovered(record.id, "5-1") is False
    assert svc.toggle(session=TEACHER_5, record_id=record.id, student_id="5-1") is True
    assert container.recovery_repo.get_all() == {recovery_key(record.id, "5-1"): True}
    assert svc.toggle(session=TEACHER_5, record_id=record.id, student_id="5-1") is False
    assert svc.is_recovered(record.id, "5-1") is False


def test_other_class_teacher_cannot_toggle(container, record):
    teacher_6 = Session(username="classteacher", role=Role.CLASS_TEACHER, class_number="6")

    with pytest.raises(AuthorizationError):
        container.recovery_service.toggle(session=teacher_6, record_id=record.id, student_id="5-1")


def test_staff_cannot_toggle(container, record):
    staff = Session(username="dustaff", role=Role.STAFF)

    with pytest.raises(AuthorizationError):
        container.recovery_service.toggle(session=staff, record_id=record.id, student_id="5-1")


def test_toggle_needs_an_absentee_of_the_record(container, record):
    with pytest.raises(ValidationError):
        container.recovery_service.toggle(session=TEACHER_5, record_id=record.id, student_id="5-2")
    with pytest.raises(ValidationError):
        container.recovery_service.toggle(session=TEACHER_5, record_id=12345, student_id="5-1")

    assert container.recovery_repo.get_all() == {}


def test_class_teacher_view_groups_by_date(container, record):
    attendance = container.attendance_service
    for day, subject in [(12, "Physics"), (10, "English"), (12, "Chemistry")]:
        attendance.save_attendance(
            current_role=Role.STAFF,
            class_name="5",
            subject=subject,
            period="1",
            absent_ids=["5-2"],
            now=datetime(2025, 3, day, 11, 0),
        )
    container.roster_service.import_roster(current_role=Role.ADMIN, class_name="6", text="1,C01,Maya")
    attendance.save_attendance(
        current_role=Role.STAFF, class_name="6", subject="Art", period="1", absent_ids=["6-1"], now=datetime(2025, 3, 20, 8)
    )
    container.recovery_service.toggle(session=TEACHER_5, record_id=record.id, student_id="5-1")

    days = container.recovery_service.class_teacher_view("5")

    assert [d.date for d in days] == ["2025-03-12", "2025-03-10"]
    assert [rr.record.subject for rr in days[0].records] == ["Physics", "Chemistry"]
    assert [rr.record.subject for rr in days[1].records] == ["Math", "English"]
    math = days[1].records[0]
    assert [(a.student.name, a.recovered) for a in math.absentees] == [("Alice", True)]
    assert [(a.student.name, a.recovered) for a in days[1].records[1].absentees] == [("Bob", False)]


def test_class_teacher_view_empty_for_class_without_records(container):
    assert container.recovery_service.class_teacher_view("9") == []
