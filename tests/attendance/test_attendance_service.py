from __future__ import annotations

from datetime import datetime

import pytest

from college_attendance.core.enums import Role
from college_attendance.core.exceptions import AuthorizationError, ValidationError

ROSTER = "1,A01,Alice\n2,A02,Bob\n3,A03,Chitra"


@pytest.fixture
def svc(container):
    container.roster_service.import_roster(current_role=Role.ADMIN, class_name="5", text=ROSTER)
    return container.attendance_service


def test_save_records_absentees_and_counts(svc, fixed_now):
    saved = svc.save_attendance(
        current_role=Role.STAFF, class_name="5", subject="Math", period="2", absent_ids=["5-1"], now=fixed_now
    )

    r = saved.record
    assert r.date == "2025-03-10"
    assert r.timestamp == "2025-03-10T09:15:00"
    assert (r.class_name, r.subject, r.period) == ("5", "Math", "2")
    assert [s.roll_no for s in r.absentees] == ["1"]
    assert saved.present_count == 2
    assert svc.list_records() == [r]


def test_absentees_plus_present_equals_roster(svc, fixed_now):
    saved = svc.save_attendance(
        current_role=Role.STAFF,
        class_name="5",
        subject="Math",
        period="1",
        absent_ids=["5-2", "5-3", "6-1", "nobody"],
        now=fixed_now,
    )

    assert saved.record.absent_count + saved.present_count == 3
    assert {s.class_name for s in saved.record.absentees} == {"5"}


def test_snapshot_survives_roster_replace(container, svc, fixed_now):
    saved = svc.save_attendance(
        current_role=Role.STAFF, class_name="5", subject="Math", period="3", absent_ids=["5-1"], now=fixed_now
    )
    container.roster_service.import_roster(current_role=Role.ADMIN, class_name="5", text="1,Z99,Renamed")

    stored = svc.get_record(saved.record.id)
    assert stored.absentees[0].name == "Alice"
    assert stored.absentees[0].ad_number == "A01"


def test_duplicates_are_allowed(svc, fixed_now):
    for _ in range(2):
        svc.save_attendance(current_role=Role.STAFF, class_name="5", subject="Math", period="2", absent_ids=[], now=fixed_now)

    records = svc.list_records()
    assert len(records) == 2
    assert records[0].id != records[1].id


@pytest.mark.parametrize(
    "class_name,subject,period",
    [("", "Math", "1"), ("5", "", "1"), ("5", "Math", ""), ("5", "Math", "9"), ("5", "Math", "0")],
)
def test_save_validates_selection(svc, class_name, subject, period):
    with pytest.raises(ValidationError):
        svc.save_attendance(current_role=Role.STAFF, class_name=class_name, subject=subject, period=period, absent_ids=[])

    assert svc.list_records() == []


def test_only_staff_saves(svc):
    with pytest.raises(AuthorizationError):
        svc.save_attendance(current_role=Role.ADMIN, class_name="5", subject="Math", period="1", absent_ids=[])


def test_admin_view_newest_date_first(svc):
    for day, subject in [(3, "A"), (5, "B"), (3, "C"), (4, "D")]:
        svc.save_attendance(
            current_role=Role.STAFF,
            class_name="5",
            subject=subject,
            period="1",
            absent_ids=[],
            now=datetime(2025, 3, day, 10, 0),
        )

    assert [r.subject for r in svc.admin_view()] == ["B", "D", "A", "C"]
    assert [row["subject"] for row in svc.export_rows()] == ["B", "D", "A", "C"]
