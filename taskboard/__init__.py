# taskboard/__init__.py

import json
import logging

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Config
from .errors import TaskboardError
from .services.store import TaskStore

logger = logging.getLogger(__name__)


def create_app(config: Config = None, store: TaskStore = None) -> Flask:
    """Build the Flask app around a single TaskStore instance."""
    if config is None:
        config = Config.from_env()
    if store is None:
        store = TaskStore()

    app = Flask(__name__)
    app.config["TESTING"] = config.testing
    app.config["TASKBOARD"] = config
    app.extensions["task_store"] = store

    CORS(app, origins=config.cors_origins)

    from .routes.tasks import tasks_bp
    from .routes.ui import ui_bp

    app.register_blueprint(tasks_bp)
    app.register_blueprint(ui_bp)

    @app.errorhandler(TaskboardError)
    def handle_taskboard_error(e):
        logger.debug("Request rejected (%s): %s", e.status_code, e.message)
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        response = e.get_response()
        response.data = json.dumps({"error": e.description})
        response.content_type = "application/json"
        return response

    return app
