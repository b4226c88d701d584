from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.web import api_errors, login_required
from ..container import Container
from .session_store import FlaskSessionStore


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    @api_errors
    def login():
        data = request.get_json(silent=True) or request.form
        username = str(data.get("username") or "")
        password = str(data.get("password") or "")

        s = container.session_service.login(FlaskSessionStore(), username, password)
        return jsonify({"success": True, "role": s.role.value, "classNumber": s.class_number})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.session_service.logout(FlaskSessionStore())
        return jsonify({"success": True})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify({"success": True, "user": g.current_session.to_dict()})
