"""HTTP API for Task CLI.

Routes:
- GET    /api/tasks?filter=all|completed|pending
- POST   /api/tasks                {"title": "..."}
- PATCH  /api/tasks/<id>/toggle
- DELETE /api/tasks/<id>
- DELETE /api/tasks/completed
- GET    /api/health

Every response uses the envelope {"success": bool, "data"?: ..., "error"?: str}.
"""

import logging
from typing import Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .config import TaskConfig, load_config
from .errors import NotFoundError, StorageError, ValidationError
from .models import TaskFilter
from .storage import FileTaskStorage
from .task_manager import TaskManager


logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ValidationError: 400,
    NotFoundError: 404,
    StorageError: 500,
}


def ok(data, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def fail_result(result):
    """Map an Err result onto its HTTP status."""
    status = ERROR_STATUS.get(type(result.error), 500)
    return fail(result.message, status)


def _parse_id(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        return None


def create_app(
    manager: Optional[TaskManager] = None,
    config: Optional[TaskConfig] = None,
) -> Flask:
    """Build the Flask app around a TaskManager.

    Args:
        manager: Manager to serve; built from config when omitted.
        config: Settings used when no manager is given.

    Returns:
        Configured Flask application.
    """
    if manager is None:
        config = config or load_config()
        manager = TaskManager(FileTaskStorage(config.data_dir))

    app = Flask(__name__)
    app.json.sort_keys = False
    app.config["TASK_MANAGER"] = manager

    @app.after_request
    def log_request(response):
        logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return fail(e.description or e.name, e.code)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return fail("Internal server error", 500)

    @app.route("/api/health", methods=["GET"])
    def health():
        return ok({"status": "ok"})

    @app.route("/api/tasks", methods=["GET"])
    def list_tasks():
        task_filter = request.args.get("filter") or TaskFilter.ALL.value
        result = manager.get_all_tasks(task_filter)
        if not result.is_ok:
            return fail_result(result)
        return ok([t.to_dict() for t in result.value])

    @app.route("/api/tasks", methods=["POST"])
    def create_task():
        body = request.get_json(silent=True)
        title = body.get("title") if isinstance(body, dict) else None
        if not title or not isinstance(title, str):
            return fail("Title is required", 400)

        result = manager.add_task(title)
        if not result.is_ok:
            return fail_result(result)
        return ok(result.value.to_dict(), 201)

    @app.route("/api/tasks/completed", methods=["DELETE"])
    def clear_completed():
        result = manager.clear_completed()
        if not result.is_ok:
            return fail_result(result)
        return ok({"deletedCount": result.value})

    @app.route("/api/tasks/<task_id>/toggle", methods=["PATCH"])
    def toggle_task(task_id):
        tid = _parse_id(task_id)
        if tid is None:
            return fail("Invalid task ID", 400)

        result = manager.toggle_task(tid)
        if not result.is_ok:
            return fail_result(result)
        return ok(result.value.to_dict())

    @app.route("/api/tasks/<task_id>", methods=["DELETE"])
    def delete_task(task_id):
        tid = _parse_id(task_id)
        if tid is None:
            return fail("Invalid task ID", 400)

        result = manager.delete_task(tid)
        if not result.is_ok:
            return fail_result(result)
        return ok({"deleted": True})

    return app
