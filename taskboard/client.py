# taskboard/client.py

import requests

DEFAULT_BASE_URL = "http://localhost:3000"


class TaskClientError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class TaskClient:
    """Thin wrapper over the task HTTP API."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _check(self, response):
        if response.status_code >= 400:
            try:
                message = response.json().get("error", response.reason)
            except ValueError:
                message = response.reason
            raise TaskClientError(response.status_code, message)
        return response.json()

    def list_tasks(self) -> list:
        response = requests.get(f"{self.base_url}/tasks", timeout=self.timeout)
        return self._check(response)

    def add_task(self, title: str) -> dict:
        response = requests.post(
            f"{self.base_url}/tasks", json={"title": title}, timeout=self.timeout
        )
        return self._check(response)

    def get_task(self, task_id: int) -> dict:
        response = requests.get(f"{self.base_url}/tasks/{task_id}", timeout=self.timeout)
        return self._check(response)
