import unittest
from unittest.mock import patch

from taskboard.client import TaskClient, TaskClientError


class TaskClientTestCase(unittest.TestCase):
    def setUp(self):
        self.client = TaskClient("http://tasks.local/", timeout=2)

    @patch("taskboard.client.requests.get")
    def test_list_tasks_url(self, mock_get):
        mock_get.return_value.status_code = 200
        mock_get.return_value.json.return_value = []

        self.assertEqual(self.client.list_tasks(), [])
        mock_get.assert_called_once_with("http://tasks.local/tasks", timeout=2)

    @patch("taskboard.client.requests.get")
    def test_get_task(self, mock_get):
        mock_get.return_value.status_code = 200
        mock_get.return_value.json.return_value = {"id": 3, "title": "Three"}

        self.assertEqual(self.client.get_task(3)["id"], 3)
        mock_get.assert_called_once_with("http://tasks.local/tasks/3", timeout=2)

    @patch("taskboard.client.requests.post")
    def test_add_task_validation_error(self, mock_post):
        mock_post.return_value.status_code = 400
        mock_post.return_value.json.return_value = {"error": "Title is required"}

        with self.assertRaises(TaskClientError) as ctx:
            self.client.add_task("")
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.message, "Title is required")

    @patch("taskboard.client.requests.get")
    def test_error_without_json_body(self, mock_get):
        mock_get.return_value.status_code = 502
        mock_get.return_value.reason = "Bad Gateway"
        mock_get.return_value.json.side_effect = ValueError("no json")

        with self.assertRaises(TaskClientError) as ctx:
            self.client.list_tasks()
        self.assertEqual(ctx.exception.message, "Bad Gateway")


if __name__ == "__main__":
    unittest.main()
