# taskboard/routes/tasks.py

import re

from flask import Blueprint, request, jsonify

from . import get_store
from ..errors import ValidationError, TaskNotFound

tasks_bp = Blueprint("tasks", __name__)

TASK_ID_RE = re.compile(r"-?[0-9]+")


def parse_task_id(raw: str) -> int:
    if not TASK_ID_RE.fullmatch(raw):
        raise ValidationError("Invalid task id")
    return int(raw)


def read_title() -> str:
    data = request.get_json(silent=True)
    title = data.get("title") if isinstance(data, dict) else None
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Title is required")
    return title


@tasks_bp.route("/", methods=["GET"])
def hello():
    return "Hello, world!"


@tasks_bp.route("/tasks", methods=["GET"])
def list_tasks():
    return jsonify([task.to_dict() for task in get_store().list()])


@tasks_bp.route("/tasks", methods=["POST"])
def create_task():
    task = get_store().add_task(read_title())
    return jsonify(task.to_dict()), 201


@tasks_bp.route("/tasks/<task_id>", methods=["GET"])
def get_task(task_id):
    task = get_store().find_by_id(parse_task_id(task_id))
    if task is None:
        raise TaskNotFound()
    return jsonify(task.to_dict())
