"""
API Client Module

HTTP client for the TODO items REST service. Every operation issues one
request and returns a Result: transport and status failures are
classified into typed errors instead of being raised.
"""

import logging
from typing import Any, Callable, Optional

import httpx

from .base import BaseTodoApiClient, JSON_HEADERS, classify_response, content_decoding_failure
from .codec import decode_task, decode_tasks, encode_task
from .models import Failure, NoConnectionError, Result, TaskItem


logger = logging.getLogger(__name__)


class TodoApiClient(BaseTodoApiClient):
    """
    Blocking client for the TODO API.

    Each call opens its own ``httpx.Client``, so one instance can be
    shared across threads.
    """

    def list_all(self) -> Result:
        """Fetch every task, in the order the service returns them."""
        return self._request("GET", self.todos_url, decode_tasks)

    def get_by_id(self, task_id: str) -> Result:
        """Fetch a single task by its identifier."""
        return self._request("GET", self.task_url(task_id), decode_task)

    def create(self, item: TaskItem) -> Result:
        """
        Create a task.

        Returns:
            Result holding the task as echoed back by the service,
            which may differ from ``item``.
        """
        return self._request("POST", self.todos_url, decode_task, body=encode_task(item))

    def _request(
        self,
        method: str,
        url: str,
        decoder: Callable[[Any], Any],
        body: Optional[bytes] = None
    ) -> Result:
        logger.info(f"{method} {url}")

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                request = client.build_request(method, url, headers=JSON_HEADERS, content=body)
                response = client.send(request, stream=True)
                try:
                    # Only 2xx bodies are decoded
                    if response.is_success:
                        response.read()
                finally:
                    response.close()
        except httpx.DecodingError as e:
            return content_decoding_failure(method, url, e)
        except httpx.TransportError as e:
            logger.warning(f"No response for {method} {url}: {e!r}")
            return Failure(NoConnectionError(str(e)))

        return classify_response(response, decoder)
