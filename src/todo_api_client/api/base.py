"""
Shared Client Module

Endpoint handling and response classification used by both the blocking
and the async TODO API clients.
"""

import logging
from typing import Any, Callable, Dict, Optional
from urllib.parse import quote

import httpx

from ..config import config
from .models import (
    DecodeError,
    Failure,
    NotFoundError,
    Result,
    Success,
    UnknownApiError,
)


logger = logging.getLogger(__name__)


JSON_HEADERS: Dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def classify_response(
    response: httpx.Response,
    decoder: Callable[[Any], Any]
) -> Result:
    """
    Map a raw HTTP response to a Result.

    Args:
        response: The response returned by the transport. The body only
            needs to be loaded for 2xx statuses.
        decoder: Converts the parsed JSON body into the success value.

    Returns:
        Success with the decoded body for 2xx statuses, otherwise a
        Failure carrying NotFoundError, UnknownApiError or DecodeError.
    """
    status = response.status_code

    if 200 <= status < 300:
        try:
            value = decoder(response.json())
        except (ValueError, RecursionError) as e:
            logger.warning(f"Malformed body in {status} response from {response.request.url}: {e}")
            return Failure(DecodeError(str(e)))
        logger.debug(f"{status} response from {response.request.url} decoded")
        return Success(value)

    if status == 404:
        logger.warning(f"Not found: {response.request.url}")
        return Failure(NotFoundError())

    logger.warning(f"Unexpected status {status} from {response.request.url}")
    return Failure(UnknownApiError(status))


def content_decoding_failure(method: str, url: str, error: httpx.DecodingError) -> Failure:
    """Failure for a body that could not be decoded under its Content-Encoding."""
    logger.warning(f"Undecodable body for {method} {url}: {error!r}")
    return Failure(DecodeError(str(error)))


class BaseTodoApiClient:
    """
    Endpoint configuration common to both clients.

    Holds only the base URL, timeout and optional transport, all fixed
    at construction.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Any = None
    ):
        """
        Initialize the API client.

        Args:
            base_url: Service root (uses config default if None).
            timeout: Request timeout in seconds (uses config default if None).
            transport: Transport override, mainly for tests.
        """
        self.base_url = (base_url or config.api.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.api.timeout_seconds
        self.transport = transport
        logger.info(f"{type(self).__name__} initialized (base_url: {self.base_url})")

    @property
    def todos_url(self) -> str:
        return f"{self.base_url}{config.api.todos_endpoint}"

    def task_url(self, task_id: str) -> str:
        return f"{self.todos_url}/{quote(task_id, safe='')}"
