from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.web import api_errors, role_required
from ..container import Container
from ..core.enums import Role
from .model import DayGroup


def _day_to_dict(day: DayGroup) -> dict:
    return {
        "date": day.date,
        "records": [
            {
                "id": rr.record.id,
                "subject": rr.record.subject,
                "period": rr.record.period,
                "absentCount": rr.record.absent_count,
                "absentees": [{**a.student.to_dict(), "recovered": a.recovered} for a in rr.absentees],
            }
            for rr in day.records
        ],
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/class-teacher/attendance", methods=["GET"], endpoint="class_teacher_attendance")
    @role_required(Role.CLASS_TEACHER)
    @api_errors
    def class_teacher_attendance():
        class_number = g.current_session.class_number
        days = container.recovery_service.class_teacher_view(class_number)
        return jsonify({"success": True, "classNumber": class_number, "days": [_day_to_dict(d) for d in days]})

    @app.route("/api/class-teacher/recovery", methods=["POST"], endpoint="class_teacher_recovery")
    @role_required(Role.CLASS_TEACHER)
    @api_errors
    def class_teacher_recovery():
        data = request.get_json(silent=True) or {}
        try:
            record_id = int(data.get("record_id"))
        except (TypeError, ValueError):
            return jsonify({"success": False, "message": "record_id must be a number."}), 400

        recovered = container.recovery_service.toggle(
            session=g.current_session,
            record_id=record_id,
            student_id=str(data.get("student_id") or ""),
        )
        message = "Student has recovered the missed period." if recovered else "Period recovery status removed."
        return jsonify({"success": True, "recovered": recovered, "message": message})
