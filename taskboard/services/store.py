# taskboard/services/store.py

import itertools
import logging

from ..models.task import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task list.

    Ids come from a counter starting at 1 and are never reused. Tasks are
    append-only: nothing is updated or removed once added.
    """

    def __init__(self):
        self._tasks = []
        self._ids = itertools.count(1)

    def add_task(self, title: str) -> Task:
        task = Task(id=next(self._ids), title=title)
        self._tasks.append(task)
        logger.info("Task added id=%s title=%r", task.id, task.title)
        return task

    def list(self) -> list:
        return list(self._tasks)

    def find_by_id(self, task_id: int):
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def __len__(self):
        return len(self._tasks)
