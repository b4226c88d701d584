from __future__ import annotations

import csv
import io

from flask import Flask, g, jsonify, request

from ..common.web import api_errors, role_required
from ..container import Container
from ..core.constants import PERIODS
from ..core.enums import Role

EXPORT_FIELDS = ["date", "class_name", "subject", "period", "absent_count", "absentees", "timestamp"]


def register(app: Flask, container: Container) -> None:
    def _write_csv(*, rows: list[dict], filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=EXPORT_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/admin/attendance", methods=["GET"], endpoint="admin_attendance")
    @role_required(Role.ADMIN)
    @api_errors
    def admin_attendance():
        records = container.attendance_service.admin_view()
        return jsonify(
            {
                "success": True,
                "records": [{**r.to_dict(), "absentCount": r.absent_count} for r in records],
            }
        )

    @app.route("/api/admin/attendance/export", methods=["GET"], endpoint="admin_attendance_export")
    @role_required(Role.ADMIN)
    @api_errors
    def admin_attendance_export():
        return _write_csv(rows=container.attendance_service.export_rows(), filename="attendance_records.csv")

    @app.route("/api/staff/classes", methods=["GET"], endpoint="staff_classes")
    @role_required(Role.STAFF)
    @api_errors
    def staff_classes():
        classes = container.subject_service.available_classes()
        return jsonify(
            {
                "success": True,
                "periods": list(PERIODS),
                "classes": [
                    {
                        "className": c,
                        "subjects": [s.subject_name for s in container.subject_service.subjects_for_class(c)],
                    }
                    for c in classes
                ],
            }
        )

    @app.route("/api/staff/classes/<class_name>/sheet", methods=["GET"], endpoint="staff_sheet")
    @role_required(Role.STAFF)
    @api_errors
    def staff_sheet(class_name: str):
        sheet = container.attendance_service.open_sheet(class_name)
        return jsonify({"success": True, "className": class_name, "students": sheet.to_rows()})

    @app.route("/api/staff/attendance", methods=["POST"], endpoint="staff_attendance_save")
    @role_required(Role.STAFF)
    @api_errors
    def staff_attendance_save():
        data = request.get_json(silent=True) or {}
        absent_ids = data.get("absent_ids") or []
        if not isinstance(absent_ids, list):
            return jsonify({"success": False, "message": "absent_ids must be a list."}), 400

        saved = container.attendance_service.save_attendance(
            current_role=g.current_session.role,
            class_name=str(data.get("class_name") or ""),
            subject=str(data.get("subject") or ""),
            period=str(data.get("period") or ""),
            absent_ids=[str(i) for i in absent_ids],
        )
        absent = saved.record.absent_count
        return jsonify(
            {
                "success": True,
                "message": f"Recorded {absent} absent and {saved.present_count} present students.",
                "record": saved.record.to_dict(),
            }
        ), 201
