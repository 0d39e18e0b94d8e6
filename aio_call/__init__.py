import re
import sys
from typing import NamedTuple

from .base import (
    JSON_CONTENT_TYPE,
    ClosableResponse,
    EmptyResponse,
    Header,
    Method,
    Request,
    Response,
    parse_url,
    set_header,
)
from .builder import RequestBuilder, new_json_request, new_request
from .context import get_context, set_context
from .deadline import Deadline
from .dispatch import DEFAULT_TIMEOUT, build_request, call, call_with_client, call_with_transport, send
from .errors import CallError, InvalidUrlError, RequestTimeoutError, SerializationError, TransportError
from .httpx import HttpxTransport
from .serialization import dumps, json_dumps
from .transport import DelegateTransport, Transport

__all__: tuple[str, ...] = (
    "CallError",
    "ClosableResponse",
    "DEFAULT_TIMEOUT",
    "Deadline",
    "DelegateTransport",
    "EmptyResponse",
    "Header",
    "HttpxTransport",
    "InvalidUrlError",
    "JSON_CONTENT_TYPE",
    "Method",
    "Request",
    "RequestBuilder",
    "RequestTimeoutError",
    "Response",
    "SerializationError",
    "Transport",
    "TransportError",
    "build_request",
    "call",
    "call_with_client",
    "call_with_transport",
    "dumps",
    "get_context",
    "json_dumps",
    "new_json_request",
    "new_request",
    "parse_url",
    "send",
    "set_context",
    "set_header",
)

try:
    import aiohttp  # noqa

    from .aiohttp import AioHttpTransport

    __all__ += ("AioHttpTransport",)  # type: ignore
except ImportError:
    pass

__version__ = "0.1.0"

version = f"{__version__}, Python {sys.version}"


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int
    release_level: str
    serial: int


def _parse_version(v: str) -> VersionInfo:
    version_re = r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<micro>\d+)((?P<release_level>[a-z]+)(?P<serial>\d+)?)?$"
    match = re.match(version_re, v)
    if not match:
        raise ImportError(f"Invalid package version {v}")
    try:
        major = int(match.group("major"))
        minor = int(match.group("minor"))
        micro = int(match.group("micro"))
        levels = {"rc": "candidate", "a": "alpha", "b": "beta", None: "final"}
        release_level = levels[match.group("release_level")]
        serial = int(match.group("serial")) if match.group("serial") else 0
        return VersionInfo(major, minor, micro, release_level, serial)
    except Exception as e:
        raise ImportError(f"Invalid package version {v}") from e


version_info = _parse_version(__version__)
