## routes.py
from __future__ import annotations

from flask import Blueprint, current_app, jsonify, render_template, request

from demo_viewer.domain.errors import DemoNotFoundError
from demo_viewer.domain.models import RunResult
from demo_viewer.repositories.demo_repository import DemoRepository
from demo_viewer.services.change_service import ChangeService
from demo_viewer.services.execution_service import ExecutionService


def create_blueprint(
    demo_repo: DemoRepository,
    execution_service: ExecutionService,
    change_service: ChangeService,
    *,
    live_reload_enabled: bool = True,
    live_reload_interval_ms: int = 2000,
) -> Blueprint:
    bp = Blueprint("web", __name__)

    @bp.before_app_request
    def log_request():
        current_app.logger.info("%s %s", request.method, request.path)

    @bp.errorhandler(DemoNotFoundError)
    def demo_not_found(e: DemoNotFoundError):
        return jsonify({"error": "Demo not found"}), 404

    @bp.get("/")
    def index():
        return render_template(
            "index.html",
            live_reload_enabled=live_reload_enabled,
            live_reload_interval_ms=live_reload_interval_ms,
        )

    @bp.get("/api/demos")
    def list_demos():
        units = demo_repo.list_units()
        return jsonify([u.to_dict() for u in units])

    @bp.get("/api/run/<demo_id>")
    def run_demo(demo_id: str):
        result: RunResult = execution_service.run(demo_id)
        current_app.logger.info(
            "Run %s success=%s exit=%s duration=%dms",
            demo_id, result.succeeded, result.exit_code, result.duration_ms,
        )
        # Execution failures still answer 200; the flag lives in the body
        return jsonify(result.to_dict())

    @bp.get("/api/mtime/<demo_id>")
    def demo_mtime(demo_id: str):
        try:
            record = change_service.mtime(demo_id)
        except OSError as e:
            current_app.logger.exception("Failed to stat demo %s", demo_id)
            return jsonify({"error": str(e)}), 500
        return jsonify(record.to_dict())

    return bp
