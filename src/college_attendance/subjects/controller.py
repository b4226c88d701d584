from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.web import api_errors, role_required
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/subjects", methods=["GET"], endpoint="admin_subjects")
    @role_required(Role.ADMIN)
    @api_errors
    def admin_subjects():
        subjects = container.subject_service.list_subjects()
        return jsonify({"success": True, "subjects": [s.to_dict() for s in subjects]})

    @app.route("/api/admin/subjects", methods=["POST"], endpoint="admin_subjects_add")
    @role_required(Role.ADMIN)
    @api_errors
    def admin_subjects_add():
        data = request.get_json(silent=True) or request.form
        subject = container.subject_service.add_subject(
            current_role=g.current_session.role,
            class_name=str(data.get("class_name") or ""),
            subject_name=str(data.get("subject_name") or ""),
        )
        return jsonify(
            {
                "success": True,
                "message": f"{subject.subject_name} added for Class {subject.class_name}.",
                "subject": subject.to_dict(),
            }
        ), 201

    @app.route("/api/admin/subjects/<int:subject_id>", methods=["DELETE"], endpoint="admin_subjects_delete")
    @role_required(Role.ADMIN)
    @api_errors
    def admin_subjects_delete(subject_id: int):
        deleted = container.subject_service.delete_subject(current_role=g.current_session.role, subject_id=subject_id)
        return jsonify({"success": True, "deleted": deleted})
