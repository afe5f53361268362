"""
Single-page task client
"""

from flask import Blueprint, render_template_string

ui_bp = Blueprint("ui", __name__)


@ui_bp.route("/app", methods=["GET"])
def index():
    return render_template_string(TEMPLATE)


TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Task Manager</title>
</head>
<body>
    <div style="padding: 1rem;">
        <h1>Task Manager</h1>
        <p id="error" style="color: red;" hidden></p>
        <form id="task-form">
            <input type="text" id="task-title" placeholder="New task title">
            <button type="submit">Add Task</button>
        </form>
        <p id="loading" hidden>Loading tasks...</p>
        <ul id="task-list"></ul>
    </div>

    <script>
        const taskList = document.getElementById('task-list');
        const titleInput = document.getElementById('task-title');
        const errorLine = document.getElementById('error');
        const loading = document.getElementById('loading');

        function showError(message) {
            errorLine.textContent = message;
            errorLine.hidden = false;
        }

        function renderTask(task) {
            const item = document.createElement('li');
            item.textContent = task.id + ': ' + task.title;
            taskList.appendChild(item);
        }

        async function fetchTasks() {
            loading.hidden = false;
            taskList.hidden = true;
            try {
                const response = await fetch('/tasks');
                if (!response.ok) {
                    throw new Error('Failed to fetch tasks');
                }
                const tasks = await response.json();
                taskList.innerHTML = '';
                tasks.forEach(renderTask);
            } catch (err) {
                showError(err.message || 'An error occurred');
            } finally {
                loading.hidden = true;
                taskList.hidden = false;
            }
        }

        document.getElementById('task-form').addEventListener('submit', async (e) => {
            e.preventDefault();
            const title = titleInput.value.trim();
            if (!title) return;

            try {
                const response = await fetch('/tasks', {
                    method: 'POST',
                    headers: { 'Content-Type': 'application/json' },
                    body: JSON.stringify({ title: title })
                });
                if (!response.ok) {
                    throw new Error('Failed to add task');
                }
                renderTask(await response.json());
                titleInput.value = '';
            } catch (err) {
                showError(err.message || 'An error occurred while adding task');
            }
        });

        fetchTasks();
    </script>
</body>
</html>
"""
