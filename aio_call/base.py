import abc
import collections.abc
import re
from typing import Any

import multidict
import yarl

from .errors import InvalidUrlError
from .utils import Closable

EMPTY_HEADERS = multidict.CIMultiDictProxy[str](multidict.CIMultiDict[str]())
JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class Method:
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class Header:
    CONTENT_TYPE = multidict.istr("Content-Type")


Headers = collections.abc.Mapping[str, Any]

_control_chars_re = re.compile(r"[\x00-\x1f\x7f]")


def parse_url(value: str | yarl.URL) -> yarl.URL:
    """Parse a URL string, raising InvalidUrlError for malformed input.

    yarl quotes most garbage silently, so control characters are rejected up front.
    """
    if isinstance(value, yarl.URL):
        return value

    match = _control_chars_re.search(value)
    if match is not None:
        raise InvalidUrlError(value, f"invalid control character {match.group()!r} in URL")

    try:
        url = yarl.URL(value)
        # port is parsed lazily
        url.port
    except ValueError as e:
        raise InvalidUrlError(value, str(e)) from e
    return url


class Request:
    __slots__ = ("method", "url", "headers", "body")

    def __init__(
        self,
        *,
        method: str,
        url: yarl.URL,
        headers: Headers | None = None,
        body: bytes | None = None,
    ):
        self.method = method
        self.url = url
        self.headers = multidict.CIMultiDict[str]()
        self.body = body
        if headers is not None:
            set_header(self, headers)

    def __repr__(self) -> str:
        return f"<Request [{self.method} {self.url}]>"


def set_header(request: Request, headers: Headers | None) -> None:
    if not headers:
        return

    for key, value in headers.items():
        request.headers[key] = str(value)


class Response(abc.ABC):
    __slots__ = ()

    @property
    @abc.abstractmethod
    def status(self) -> int: ...

    @property
    @abc.abstractmethod
    def headers(self) -> multidict.CIMultiDictProxy[str]: ...

    @abc.abstractmethod
    async def read(self) -> bytes: ...

    def is_informational(self) -> bool:
        return 100 <= self.status < 200

    def is_successful(self) -> bool:
        return 200 <= self.status < 300

    def is_redirection(self) -> bool:
        return 300 <= self.status < 400

    def is_client_error(self) -> bool:
        return 400 <= self.status < 500

    def is_server_error(self) -> bool:
        return 500 <= self.status < 600

    @property
    def content_type(self) -> str | None:
        return self.headers.get(Header.CONTENT_TYPE)

    def __repr__(self) -> str:
        return f"<Response [{self.status}]>"


class ClosableResponse(Response, Closable):
    __slots__ = ()

    @abc.abstractmethod
    async def close(self) -> None: ...


class EmptyResponse(ClosableResponse):
    __slots__ = ("__status", "__headers")

    def __init__(self, *, status: int = 200, headers: multidict.CIMultiDictProxy[str] = EMPTY_HEADERS):
        self.__status = status
        self.__headers = headers

    @property
    def status(self) -> int:
        return self.__status

    @property
    def headers(self) -> multidict.CIMultiDictProxy[str]:
        return self.__headers

    async def read(self) -> bytes:
        return bytes()

    async def close(self) -> None:
        pass
