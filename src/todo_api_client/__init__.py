"""
TODO API Client

Minimal client library for a JSONPlaceholder-style TODO REST service.
"""

from .api import (
    AsyncTodoApiClient,
    DecodeError,
    Failure,
    NoConnectionError,
    NotFoundError,
    Success,
    TaskItem,
    TodoApiClient,
    UnknownApiError,
)

__version__ = "0.1.0"

__all__ = [
    "TodoApiClient",
    "AsyncTodoApiClient",
    "TaskItem",
    "NotFoundError",
    "UnknownApiError",
    "NoConnectionError",
    "DecodeError",
    "Success",
    "Failure",
]
