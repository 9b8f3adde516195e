"""
Async API Client Module

Non-blocking counterpart of TodoApiClient backed by ``httpx.AsyncClient``.
Endpoint handling and status classification are shared with the
blocking client.
"""

import logging
from typing import Any, Callable, Optional

import httpx

from .base import BaseTodoApiClient, JSON_HEADERS, classify_response, content_decoding_failure
from .codec import decode_task, decode_tasks, encode_task
from .models import Failure, NoConnectionError, Result, TaskItem


logger = logging.getLogger(__name__)


class AsyncTodoApiClient(BaseTodoApiClient):
    """Awaitable client for the TODO API."""

    async def list_all(self) -> Result:
        return await self._request("GET", self.todos_url, decode_tasks)

    async def get_by_id(self, task_id: str) -> Result:
        return await self._request("GET", self.task_url(task_id), decode_task)

    async def create(self, item: TaskItem) -> Result:
        return await self._request("POST", self.todos_url, decode_task, body=encode_task(item))

    async def _request(
        self,
        method: str,
        url: str,
        decoder: Callable[[Any], Any],
        body: Optional[bytes] = None
    ) -> Result:
        logger.info(f"{method} {url}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                request = client.build_request(method, url, headers=JSON_HEADERS, content=body)
                response = await client.send(request, stream=True)
                try:
                    if response.is_success:
                        await response.aread()
                finally:
                    await response.aclose()
        except httpx.DecodingError as e:
            return content_decoding_failure(method, url, e)
        except httpx.TransportError as e:
            logger.warning(f"No response for {method} {url}: {e!r}")
            return Failure(NoConnectionError(str(e)))

        return classify_response(response, decoder)
