"""
API Models Module

Value types shared by the TODO API clients: the task itself, the
typed error set, and the Success/Failure result wrapper.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union


T = TypeVar("T")


@dataclass(frozen=True)
class TaskItem:
    """Represents a single TODO entry."""
    id: str
    owner_id: str
    title: str
    completed: bool


class ApiError:
    """Base class for every failure a client operation can report."""


@dataclass(frozen=True)
class NotFoundError(ApiError):
    """The service answered 404."""


@dataclass(frozen=True)
class UnknownApiError(ApiError):
    """The service answered with a non-2xx status other than 404."""
    status_code: int


@dataclass(frozen=True)
class NoConnectionError(ApiError):
    """No response was received (timeout, DNS, refused connection)."""
    reason: str = field(default="", compare=False)


@dataclass(frozen=True)
class DecodeError(ApiError):
    """A 2xx response carried a body that could not be decoded."""
    reason: str = field(default="", compare=False)


class ApiClientException(Exception):
    """Raised by ``Failure.unwrap()`` for callers that opt out of branching."""

    def __init__(self, error: ApiError):
        super().__init__(repr(error))
        self.error = error


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome holding the decoded value."""
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Failed outcome holding the classified error."""
    error: ApiError

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self):
        raise ApiClientException(self.error)


Result = Union[Success[T], Failure]
