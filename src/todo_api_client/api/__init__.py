"""
API Client Module

Provides blocking and async HTTP clients for the TODO items REST service,
together with the task model and the typed Result/error values they return.
"""

from .client import TodoApiClient
from .async_client import AsyncTodoApiClient
from .models import (
    ApiClientException,
    ApiError,
    DecodeError,
    Failure,
    NoConnectionError,
    NotFoundError,
    Result,
    Success,
    TaskItem,
    UnknownApiError,
)

__all__ = [
    "TodoApiClient",
    "AsyncTodoApiClient",
    "TaskItem",
    "ApiError",
    "NotFoundError",
    "UnknownApiError",
    "NoConnectionError",
    "DecodeError",
    "ApiClientException",
    "Result",
    "Success",
    "Failure",
]
