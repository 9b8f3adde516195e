"""
Task Codec Module

Converts TaskItem values to and from the service's JSON wire format:
``{"id", "userId", "title", "completed"}``.
"""

import json
from typing import Any, List

from .models import TaskItem


class TaskDecodeError(ValueError):
    """Raised when parsed JSON does not describe a task."""


def encode_task(item: TaskItem) -> bytes:
    """Serialize a task into a JSON request body."""
    payload = {
        "id": item.id,
        "userId": item.owner_id,
        "title": item.title,
        "completed": item.completed,
    }
    return json.dumps(payload).encode("utf-8")


def task_to_dict(item: TaskItem) -> dict:
    return json.loads(encode_task(item))


def _identifier(data: dict, key: str) -> str:
    if key not in data:
        raise TaskDecodeError(f"Missing field '{key}'")
    value = data[key]
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TaskDecodeError(f"Field '{key}' must be a string or integer, got {type(value).__name__}")
    return str(value)


def decode_task(data: Any) -> TaskItem:
    """
    Build a TaskItem from a parsed JSON object.

    Args:
        data: Object decoded from the response body.

    Returns:
        The decoded TaskItem.

    Raises:
        TaskDecodeError: If a field is missing or has the wrong type.
    """
    if not isinstance(data, dict):
        raise TaskDecodeError(f"Expected a JSON object, got {type(data).__name__}")

    title = data.get("title")
    if not isinstance(title, str):
        raise TaskDecodeError("Field 'title' must be a string")

    completed = data.get("completed")
    if not isinstance(completed, bool):
        raise TaskDecodeError("Field 'completed' must be a boolean")

    return TaskItem(
        id=_identifier(data, "id"),
        owner_id=_identifier(data, "userId"),
        title=title,
        completed=completed,
    )


def decode_tasks(data: Any) -> List[TaskItem]:
    """Build an ordered list of TaskItems from a parsed JSON array."""
    if not isinstance(data, list):
        raise TaskDecodeError(f"Expected a JSON array, got {type(data).__name__}")
    return [decode_task(item) for item in data]
