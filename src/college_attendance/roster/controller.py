from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.web import api_errors, role_required
from ..container import Container
from ..core.constants import CLASS_NUMBERS
from ..core.enums import Role
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/students", methods=["GET"], endpoint="admin_students")
    @role_required(Role.ADMIN)
    @api_errors
    def admin_students():
        students = container.roster_service.list_students()
        return jsonify(
            {
                "success": True,
                "classes": list(CLASS_NUMBERS),
                "counts": container.roster_service.count_by_class(students),
                "students": [s.to_dict() for s in students],
            }
        )

    @app.route("/api/admin/students/import", methods=["POST"], endpoint="admin_students_import")
    @role_required(Role.ADMIN)
    @api_errors
    def admin_students_import():
        class_name = str(request.form.get("class_name") or "")
        upload = request.files.get("file")
        if upload is not None:
            try:
                text = upload.read().decode("utf-8-sig")
            except UnicodeDecodeError:
                raise ValidationError("The student file must be UTF-8 text.")
        else:
            text = request.form.get("text", "")
        has_header = request.form.get("has_header") in {"1", "true", "on"}

        result = container.roster_service.import_roster(
            current_role=g.current_session.role,
            class_name=class_name,
            text=text,
            has_header=has_header,
        )
        if not result.applied:
            return jsonify(
                {
                    "success": False,
                    "message": f"{len(result.errors)} rows could not be read; nothing was imported.",
                    "errors": [e.to_dict() for e in result.errors],
                }
            ), 422

        return jsonify(
            {
                "success": True,
                "message": f"Successfully updated {len(result.students)} students for Class {result.class_name}.",
                "count": len(result.students),
            }
        )

    @app.route("/api/admin/students/clear", methods=["POST"], endpoint="admin_students_clear")
    @role_required(Role.ADMIN)
    @api_errors
    def admin_students_clear():
        data = request.get_json(silent=True) or request.form
        class_name = str(data.get("class_name") or "")
        removed = container.roster_service.clear_roster(current_role=g.current_session.role, class_name=class_name)
        return jsonify(
            {
                "success": True,
                "message": f"All students from Class {class_name} have been removed.",
                "removed": removed,
            }
        )
