import dataclasses
import json
from typing import Any

import pytest
import yarl

import aio_call


@dataclasses.dataclass
class User:
    Name: str
    Mail: str


def test_new_request() -> None:
    builder = aio_call.new_request("http://x/y")

    assert builder.method == aio_call.Method.GET
    assert builder.url == yarl.URL("http://x/y")
    assert builder.headers == {}
    assert builder.body is None


def test_new_json_request() -> None:
    builder = aio_call.new_json_request("/miep")

    assert builder.method == aio_call.Method.GET
    assert builder.url == yarl.URL("/miep")
    assert builder.headers == {"Content-Type": "application/json; charset=utf-8"}
    assert builder.body is None


@pytest.mark.parametrize("factory", [aio_call.new_request, aio_call.new_json_request])
def test_invalid_url(factory: Any) -> None:
    with pytest.raises(aio_call.InvalidUrlError):
        factory("http://x/\x7f")


def test_methods_are_chained() -> None:
    builder = aio_call.new_request("http://x/y")

    assert builder.post() is builder
    assert builder.method == aio_call.Method.POST
    assert builder.put() is builder
    assert builder.method == aio_call.Method.PUT
    assert builder.set_method(aio_call.Method.DELETE) is builder
    assert builder.method == aio_call.Method.DELETE
    assert builder.get() is builder
    assert builder.method == aio_call.Method.GET


def test_with_body() -> None:
    builder = aio_call.new_request("http://x/y")

    assert builder.with_body(b"payload") is builder
    assert builder.request.body == b"payload"


def test_with_headers() -> None:
    builder = aio_call.new_json_request("http://x/y").with_headers({"content-type": "text/plain", "X-Id": 7})

    assert len(builder.headers) == 2
    assert builder.headers["Content-Type"] == "text/plain"
    assert builder.headers["x-id"] == "7"


def test_with_marshal_body() -> None:
    builder = aio_call.new_json_request("http://x/y").post().with_marshal_body({"name": "a", "mail": "b"})

    assert json.loads(builder.body or b"") == {"name": "a", "mail": "b"}


def test_with_marshal_body_failure_keeps_previous_body() -> None:
    cyclic: list[Any] = []
    cyclic.append(cyclic)
    builder = aio_call.new_json_request("http://x/y").post().with_body(b"previous")

    with pytest.raises(aio_call.SerializationError):
        builder.with_marshal_body(cyclic)

    assert builder.body == b"previous"
    assert builder.method == aio_call.Method.POST


async def test_send_built_request() -> None:
    transport = aio_call.DelegateTransport(lambda request: aio_call.EmptyResponse(status=200))

    builder = aio_call.new_json_request("http://x/y").post().with_marshal_body(User(Name="a", Mail="b"))
    response = await aio_call.send(builder, transport)

    assert response.status == 200
    [request] = transport.requests
    assert request is builder.request
    assert request.method == "POST"
    assert request.body == b'{"Name":"a","Mail":"b"}'
    assert request.headers["Content-Type"] == "application/json; charset=utf-8"
