"""
Tests for the async API Client

The async client shares request building and classification with the
blocking one; these tests check it end to end through a fake service.
"""

import asyncio
import pytest
import sys
from pathlib import Path

import httpx

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from todo_api_client.api.async_client import AsyncTodoApiClient
from todo_api_client.api.models import (
    DecodeError,
    Failure,
    NoConnectionError,
    NotFoundError,
    Success,
    TaskItem,
    UnknownApiError,
)
from fakes import FakeTodoServer, sample_tasks


BASE_URL = "http://todo.test"


@pytest.fixture
def server():
    return FakeTodoServer()


@pytest.fixture
def client(server):
    return AsyncTodoApiClient(base_url=BASE_URL, transport=server.transport)


class TestAsyncListAll:

    @pytest.mark.asyncio
    async def test_parses_all_tasks(self, client, server):
        server.enqueue(200, sample_tasks())

        result = await client.list_all()

        assert len(result.value) == 200
        assert result.value[0] == TaskItem("1", "1", "delectus aut autem", False)

    @pytest.mark.asyncio
    async def test_parses_an_empty_response(self, client, server):
        server.enqueue(200, [])

        assert await client.list_all() == Success([])

    @pytest.mark.asyncio
    async def test_sends_json_headers(self, client, server):
        server.enqueue(200, [])

        await client.list_all()

        assert server.last_request.method == "GET"
        assert server.last_request.url.path == "/todos"
        assert server.last_request.headers["Accept"] == "application/json"
        assert server.last_request.headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_timeout_is_no_connection(self, client, server):
        server.fail_with(httpx.ConnectTimeout)

        assert await client.list_all() == Failure(NoConnectionError())


class TestAsyncGetById:

    @pytest.mark.asyncio
    async def test_parses_task(self, client, server):
        server.enqueue(200, {"id": "1", "userId": "1", "title": "delectus aut autem", "completed": False})

        result = await client.get_by_id("1")

        assert server.last_request.url.path == "/todos/1"
        assert result == Success(TaskItem("1", "1", "delectus aut autem", False))

    @pytest.mark.asyncio
    async def test_not_found(self, client, server):
        server.enqueue(404)

        assert await client.get_by_id("0") == Failure(NotFoundError())

    @pytest.mark.asyncio
    async def test_malformed_body(self, client, server):
        server.enqueue(200, raw="<html>")

        assert await client.get_by_id("1") == Failure(DecodeError())


class TestAsyncCreate:

    @pytest.mark.asyncio
    async def test_posts_body_and_returns_echo(self, client, server):
        server.enqueue(201, {"id": 201, "userId": 1, "title": "Finish this kata", "completed": False})

        result = await client.create(TaskItem("1", "2", "Finish this kata", False))

        assert server.last_request.method == "POST"
        assert server.last_json_body() == {
            "id": "1", "userId": "2", "title": "Finish this kata", "completed": False
        }
        assert result == Success(TaskItem("201", "1", "Finish this kata", False))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 500])
    async def test_error_statuses(self, client, server, status):
        server.enqueue(status)

        result = await client.create(TaskItem("", "1", "delectus aut autem", False))

        assert result == Failure(UnknownApiError(status))


class TestAsyncConcurrency:

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self, client, server):
        server.enqueue(200, sample_tasks(1)[0])
        server.enqueue(404)
        server.enqueue(500)

        results = await asyncio.gather(
            client.get_by_id("1"),
            client.get_by_id("2"),
            client.get_by_id("3"),
        )

        assert len(server.requests) == 3
        assert sorted(type(r).__name__ for r in results) == ["Failure", "Failure", "Success"]


OPERATIONS = ["list_all", "get_by_id", "create"]


async def call_operation(client: AsyncTodoApiClient, operation: str):
    """Await one of the three client operations with representative input."""
    if operation == "list_all":
        return await client.list_all()
    if operation == "get_by_id":
        return await client.get_by_id("1")
    return await client.create(TaskItem("2", "1", "delectus aut autem", False))


class TestAsyncClassification:
    """Status and transport classification shared by every async operation."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", OPERATIONS)
    async def test_404_is_not_found(self, client, server, operation):
        server.enqueue(404)

        assert await call_operation(client, operation) == Failure(NotFoundError())

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", OPERATIONS)
    @pytest.mark.parametrize("status", [302, 400, 401, 403, 409, 418, 429, 500, 502, 503])
    async def test_other_statuses_keep_their_code(self, client, server, operation, status):
        server.enqueue(status)

        assert await call_operation(client, operation) == Failure(UnknownApiError(status))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", OPERATIONS)
    @pytest.mark.parametrize("error_type", [
        httpx.ConnectError,
        httpx.ConnectTimeout,
        httpx.ReadTimeout,
        httpx.RemoteProtocolError,
    ])
    async def test_transport_failures_are_no_connection(self, client, server, operation, error_type):
        server.fail_with(error_type)

        assert await call_operation(client, operation) == Failure(NoConnectionError())

    @pytest.mark.asyncio
    @pytest.mark.parametrize("operation", OPERATIONS)
    @pytest.mark.parametrize("streamed", [False, True])
    async def test_corrupt_content_encoding_is_decode_error(self, client, server, operation, streamed):
        server.enqueue(200, raw=b"not gzip at all", headers={"Content-Encoding": "gzip"}, streamed=streamed)

        assert await call_operation(client, operation) == Failure(DecodeError())

    @pytest.mark.asyncio
    async def test_status_wins_over_undecodable_error_body(self, client, server):
        server.enqueue(404, raw=b"not gzip at all", headers={"Content-Encoding": "gzip"}, streamed=True)

        assert await client.get_by_id("1") == Failure(NotFoundError())

    @pytest.mark.asyncio
    async def test_deeply_nested_body_is_decode_error(self, client, server):
        server.enqueue(200, raw="[" * 100000 + "]" * 100000)

        assert await client.list_all() == Failure(DecodeError())

    @pytest.mark.asyncio
    async def test_streamed_body_is_decoded(self, client, server):
        server.enqueue(200, sample_tasks(2), streamed=True)

        result = await client.list_all()

        assert [task.id for task in result.value] == ["1", "2"]
