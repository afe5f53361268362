from flask import current_app

from ..services.store import TaskStore


def get_store() -> TaskStore:
    return current_app.extensions["task_store"]
