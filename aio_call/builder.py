from typing import Any

import multidict
import yarl

from .base import JSON_CONTENT_TYPE, Header, Headers, Method, Request, parse_url, set_header
from .serialization import Dumps, dumps, json_dumps


class RequestBuilder:
    """Fluent wrapper around a Request.

    Every mutator changes the wrapped request in place and returns the same builder,
    so calls can be chained until the request is handed to a transport.
    """

    __slots__ = ("__request",)

    def __init__(self, request: Request) -> None:
        self.__request = request

    @property
    def request(self) -> Request:
        return self.__request

    @property
    def method(self) -> str:
        return self.__request.method

    @property
    def url(self) -> yarl.URL:
        return self.__request.url

    @property
    def headers(self) -> multidict.CIMultiDict[str]:
        return self.__request.headers

    @property
    def body(self) -> bytes | None:
        return self.__request.body

    def set_method(self, method: str) -> "RequestBuilder":
        self.__request.method = method
        return self

    def get(self) -> "RequestBuilder":
        return self.set_method(Method.GET)

    def post(self) -> "RequestBuilder":
        return self.set_method(Method.POST)

    def put(self) -> "RequestBuilder":
        return self.set_method(Method.PUT)

    def with_headers(self, headers: Headers) -> "RequestBuilder":
        set_header(self.__request, headers)
        return self

    def with_body(self, body: bytes) -> "RequestBuilder":
        self.__request.body = body
        return self

    def with_marshal_body(self, body: Any, *, serializer: Dumps = json_dumps) -> "RequestBuilder":
        """Serialize body to JSON and attach it.

        Raises SerializationError if body cannot be serialized, the previous body is kept.
        """
        return self.with_body(dumps(body, serializer=serializer))

    def __repr__(self) -> str:
        return f"<RequestBuilder [{self.__request.method} {self.__request.url}]>"


def new_request(url: str | yarl.URL) -> RequestBuilder:
    return RequestBuilder(Request(method=Method.GET, url=parse_url(url)))


def new_json_request(url: str | yarl.URL) -> RequestBuilder:
    return RequestBuilder(
        Request(
            method=Method.GET,
            url=parse_url(url),
            headers={Header.CONTENT_TYPE: JSON_CONTENT_TYPE},
        )
    )
