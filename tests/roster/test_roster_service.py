from __future__ import annotations

import pytest

from college_attendance.core.enums import Role
from college_attendance.core.exceptions import AuthorizationError, ValidationError
from college_attendance.roster.kv_roster_repository import KeyValueRosterRepository
from college_attendance.roster.service import RosterService
from college_attendance.storage.store import InMemoryKeyValueStore


def make_service() -> RosterService:
    return RosterService(KeyValueRosterRepository(InMemoryKeyValueStore()))


def test_import_replaces_only_target_class():
    svc = make_service()
    svc.import_roster(current_role=Role.ADMIN, class_name="4", text="1,B01,Zara\n2,B02,Yusuf")
    svc.import_roster(current_role=Role.ADMIN, class_name="5", text="1,A01,Alice\n2,A02,Bob\n3,A03,Chitra")

    result = svc.import_roster(current_role=Role.ADMIN, class_name="5", text="9,A09,Ira")

    assert result.applied
    assert [s.name for s in svc.students_for_class("5")] == ["Ira"]
    assert [s.name for s in svc.students_for_class("4")] == ["Zara", "Yusuf"]


def test_import_with_bad_rows_writes_nothing():
    svc = make_service()
    svc.import_roster(current_role=Role.ADMIN, class_name="5", text="1,A01,Alice")

    result = svc.import_roster(current_role=Role.ADMIN, class_name="5", text="2,A02,Bob\nbad-row")

    assert not result.applied
    assert len(result.errors) == 1
    assert [s.name for s in svc.students_for_class("5")] == ["Alice"]


def test_import_requires_class():
    with pytest.raises(ValidationError):
        make_service().import_roster(current_role=Role.ADMIN, class_name="  ", text="1,A01,Alice")


def test_import_requires_admin():
    with pytest.raises(AuthorizationError):
        make_service().import_roster(current_role=Role.STAFF, class_name="5", text="1,A01,Alice")


def test_clear_is_idempotent():
    svc = make_service()
    svc.import_roster(current_role=Role.ADMIN, class_name="5", text="1,A01,Alice")
    svc.import_roster(current_role=Role.ADMIN, class_name="6", text="1,C01,Maya")

    assert svc.clear_roster(current_role=Role.ADMIN, class_name="5") == 1
    once = svc.list_students()
    assert svc.clear_roster(current_role=Role.ADMIN, class_name="5") == 0

    assert svc.list_students() == once
    assert [s.class_name for s in once] == ["6"]


def test_clear_requires_class():
    with pytest.raises(ValidationError):
        make_service().clear_roster(current_role=Role.ADMIN, class_name="")


def test_list_sorted_by_class_then_numeric_roll():
    svc = make_service()
    svc.import_roster(current_role=Role.ADMIN, class_name="5", text="10,A10,Jay\n2,A02,Bob\n1,A01,Alice")
    svc.import_roster(current_role=Role.ADMIN, class_name="10", text="3,X03,Kim")

    assert [(s.class_name, s.roll_no) for s in svc.list_students()] == [
        ("10", "3"),
        ("5", "1"),
        ("5", "2"),
        ("5", "10"),
    ]
    assert svc.count_by_class() == {"5": 3, "10": 1}
