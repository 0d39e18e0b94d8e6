import asyncio
import logging
import socket
from collections.abc import Callable

import aiohttp.web
import aiohttp.web_request
import aiohttp.web_response
import pytest
from aiohttp.test_utils import TestServer
from pytest_aiohttp.plugin import AiohttpServer

import aio_call

logging.basicConfig(level="DEBUG")


class FakeTransport(aio_call.Transport):
    __slots__ = ("_delay", "requests", "timeouts")

    def __init__(self, delay: float = 0) -> None:
        self._delay = delay
        self.requests: list[aio_call.Request] = []
        self.timeouts: list[float] = []

    async def send(self, request: aio_call.Request, timeout: float) -> aio_call.ClosableResponse:
        self.requests.append(request)
        self.timeouts.append(timeout)
        if self._delay:
            await asyncio.sleep(self._delay)
        return aio_call.EmptyResponse(status=200)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def slow_transport() -> FakeTransport:
    return FakeTransport(delay=1)


@pytest.fixture
async def server(aiohttp_server: AiohttpServer) -> TestServer:
    async def echo(request: aiohttp.web_request.Request) -> aiohttp.web_response.Response:
        body = await request.read()
        return aiohttp.web.json_response(
            {
                "method": request.method,
                "body": body.decode("utf-8"),
                "headers": dict(request.headers),
            }
        )

    async def slow(request: aiohttp.web_request.Request) -> aiohttp.web_response.Response:
        await asyncio.sleep(float(request.query.get("delay", "1")))
        return aiohttp.web_response.Response()

    app = aiohttp.web.Application()
    app.router.add_route("*", "/echo", echo)
    app.router.add_get("/slow", slow)
    return await aiohttp_server(app)


@pytest.fixture(scope="session")
def unused_port() -> Callable[[], int]:
    def f() -> int:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.bind(("127.0.0.1", 0))
            return s.getsockname()[1]

    return f
