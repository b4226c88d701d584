from __future__ import annotations

import io

from college_attendance import create_app
from college_attendance.core.constants import STUDENTS_KEY
from college_attendance.storage.store import save_json


def login(client, username, password):
    return client.post("/api/login", json={"username": username, "password": password})


def test_end_to_end_roster_attendance_recovery(app, container):
    admin = app.test_client()
    staff = app.test_client()
    teacher = app.test_client()

    assert login(admin, "kps963", "2963").get_json()["role"] == "admin"
    resp = admin.post(
        "/api/admin/students/import",
        data={"class_name": "5", "file": (io.BytesIO(b"1,A01,Alice\n2,A02,Bob"), "class5.csv")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 200
    students = admin.get("/api/admin/students").get_json()["students"]
    assert [s["rollNo"] for s in students] == ["1", "2"]

    assert admin.post("/api/admin/subjects", json={"class_name": "5", "subject_name": "Math"}).status_code == 201

    login(staff, "dustaff", "duidc")
    classes = staff.get("/api/staff/classes").get_json()
    assert classes["classes"] == [{"className": "5", "subjects": ["Math"]}]
    sheet = staff.get("/api/staff/classes/5/sheet").get_json()["students"]
    assert all(row["present"] for row in sheet)
    alice_id = sheet[0]["id"]

    resp = staff.post(
        "/api/staff/attendance",
        json={"class_name": "5", "subject": "Math", "period": "2", "absent_ids": [alice_id]},
    )
    assert resp.status_code == 201
    record = resp.get_json()["record"]
    assert [s["rollNo"] for s in record["absentees"]] == ["1"]
    assert resp.get_json()["message"] == "Recorded 1 absent and 1 present students."

    login(teacher, "classteacher", "class5")
    resp = teacher.post("/api/class-teacher/recovery", json={"record_id": record["id"], "student_id": alice_id})
    assert resp.get_json()["recovered"] is True
    assert container.recovery_repo.get_all() == {f"{record['id']}-{alice_id}": True}

    days = teacher.get("/api/class-teacher/attendance").get_json()["days"]
    assert days[0]["records"][0]["absentees"][0]["recovered"] is True


def test_login_failure_creates_no_session(client):
    resp = login(client, "kps963", "nope")

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False
    assert client.get("/api/me").status_code == 401


def test_logout_clears_session(client):
    login(client, "classteacher", "class7")
    assert client.get("/api/me").get_json()["user"] == {
        "username": "classteacher",
        "role": "class-teacher",
        "classNumber": "7",
    }

    client.post("/api/logout")
    assert client.get("/api/me").status_code == 401


def test_role_guard(client):
    login(client, "dustaff", "duidc")

    assert client.get("/api/admin/students").status_code == 403
    assert client.get("/api/class-teacher/attendance").status_code == 403


def test_validation_messages(client):
    login(client, "kps963", "2963")

    resp = client.post("/api/admin/students/import", data={"class_name": "", "text": "1,A01,Alice"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Please select a class before uploading the student file."

    resp = client.post("/api/admin/subjects", json={"class_name": "5", "subject_name": ""})
    assert resp.status_code == 400


def test_import_reports_row_errors(client):
    login(client, "kps963", "2963")

    resp = client.post("/api/admin/students/import", data={"class_name": "5", "text": "1,A01,Alice\nabc,A02,Bob"})

    assert resp.status_code == 422
    assert resp.get_json()["errors"][0]["line"] == 2


def test_admin_export_csv(client, container, fixed_now):
    from college_attendance.core.enums import Role

    container.roster_service.import_roster(current_role=Role.ADMIN, class_name="5", text="1,A01,Alice")
    container.attendance_service.save_attendance(
        current_role=Role.STAFF, class_name="5", subject="Math", period="4", absent_ids=["5-1"], now=fixed_now
    )
    login(client, "kps963", "2963")

    resp = client.get("/api/admin/attendance/export")

    assert resp.mimetype == "text/csv"
    body = resp.data.decode("utf-8-sig").splitlines()
    assert body[0] == "date,class_name,subject,period,absent_count,absentees,timestamp"
    assert body[1].startswith("2025-03-10,5,Math,4,1,1 Alice,")


def test_session_lifetime_wipes_collections_on_start(container):
    save_json(container.store, STUDENTS_KEY, [{"id": "5-1", "rollNo": "1", "name": "Alice", "className": "5"}])

    create_app("college_attendance.settings.testing", container=container)

    assert container.roster_service.list_students() == []


def test_non_string_json_fields_are_coerced(client):
    assert login(client, "classteacher", 7).status_code == 401
    assert login(client, 123, "x").status_code == 401

    login(client, "kps963", "2963")
    resp = client.post("/api/admin/subjects", json={"class_name": 5, "subject_name": "Math"})
    assert resp.status_code == 201
    assert resp.get_json()["subject"]["className"] == "5"

    resp = client.post("/api/admin/students/clear", json={"class_name": 5})
    assert resp.status_code == 200
    assert resp.get_json()["removed"] == 0


def test_import_rejects_non_utf8_file(client, container):
    login(client, "kps963", "2963")

    resp = client.post(
        "/api/admin/students/import",
        data={"class_name": "5", "file": (io.BytesIO(b"1,A01,Al\xffice"), "class5.csv")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "The student file must be UTF-8 text."
    assert container.roster_service.list_students() == []


def test_corrupt_store_value_returns_json_error(client, container):
    login(client, "kps963", "2963")
    container.store.set(STUDENTS_KEY, "{not json")

    resp = client.get("/api/admin/students")

    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "System error, please try again."}


def test_durable_lifetime_keeps_collections_on_start(monkeypatch, container, fixed_now):
    import importlib

    from college_attendance.core.constants import SESSION_SCOPED_KEYS
    from college_attendance.core.enums import Role
    from college_attendance.users.model import Session

    container.roster_service.import_roster(current_role=Role.ADMIN, class_name="5", text="1,A01,Alice")
    container.subject_service.add_subject(current_role=Role.ADMIN, class_name="5", subject_name="Math")
    record = container.attendance_service.save_attendance(
        current_role=Role.STAFF, class_name="5", subject="Math", period="1", absent_ids=["5-1"], now=fixed_now
    ).record
    teacher = Session(username="classteacher", role=Role.CLASS_TEACHER, class_number="5")
    container.recovery_service.toggle(session=teacher, record_id=record.id, student_id="5-1")
    before = {key: container.store.get(key) for key in SESSION_SCOPED_KEYS}

    settings = importlib.import_module("college_attendance.settings.testing")
    monkeypatch.setattr(settings, "PERSISTENCE_LIFETIME", "durable")
    create_app("college_attendance.settings.testing", container=container)

    assert {key: container.store.get(key) for key in SESSION_SCOPED_KEYS} == before
    assert all(before.values())
