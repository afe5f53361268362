"""
MCP Server wrapping the task API (`mcp_server.py`)
"""

import logging
import os
import sys

from mcp.server.fastmcp import FastMCP

from taskboard.client import TaskClient, DEFAULT_BASE_URL

# stdout carries the protocol
logging.basicConfig(stream=sys.stderr, level=os.environ.get("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP("Taskboard MCP Server")

client = TaskClient(os.environ.get("TASKBOARD_API_URL", DEFAULT_BASE_URL))


@mcp.tool()
def list_tasks() -> list:
    """Fetch all tasks from the task API."""
    return client.list_tasks()


@mcp.tool()
def add_task(title: str) -> dict:
    """Add a new task via the task API."""
    task = client.add_task(title)
    logger.info("Added task %s via MCP", task.get("id"))
    return task


@mcp.tool()
def get_task(task_id: int) -> dict:
    """Fetch a single task by id."""
    return client.get_task(task_id)


def main():
    logger.info("Starting MCP server against %s", client.base_url)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
