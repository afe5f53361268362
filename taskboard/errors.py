# taskboard/errors.py

class TaskboardError(Exception):
    """Base error; rendered to clients as {"error": message}."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.message}


class ValidationError(TaskboardError):
    status_code = 400


class TaskNotFound(TaskboardError):
    status_code = 404

    def __init__(self, message: str = "Task not found"):
        super().__init__(message)
