import asyncio
import logging
from typing import Any

import httpx
import yarl

from .base import ClosableResponse, Headers, Method, Request, parse_url
from .builder import RequestBuilder
from .context import get_context
from .deadline import Deadline
from .errors import RequestTimeoutError
from .httpx import HttpxTransport
from .serialization import Dumps, dumps, json_dumps
from .transport import Transport

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0

_METHODS_WITH_BODY = frozenset((Method.POST, Method.PUT))


async def call(
    endpoint: str | yarl.URL,
    method: str,
    body: Any = None,
    headers: Headers | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    deadline: Deadline | None = None,
    serializer: Dumps = json_dumps,
) -> ClosableResponse:
    """Send a request using a short-lived httpx client.

    The response payload is buffered before the client is closed.
    """
    async with httpx.AsyncClient() as client:
        return await call_with_client(
            client,
            endpoint,
            method,
            body,
            headers,
            timeout=timeout,
            deadline=deadline,
            serializer=serializer,
        )


async def call_with_client(
    client: httpx.AsyncClient,
    endpoint: str | yarl.URL,
    method: str,
    body: Any = None,
    headers: Headers | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    deadline: Deadline | None = None,
    serializer: Dumps = json_dumps,
) -> ClosableResponse:
    return await call_with_transport(
        HttpxTransport(client),
        endpoint,
        method,
        body,
        headers,
        timeout=timeout,
        deadline=deadline,
        serializer=serializer,
    )


async def call_with_transport(
    transport: Transport,
    endpoint: str | yarl.URL,
    method: str,
    body: Any = None,
    headers: Headers | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    deadline: Deadline | None = None,
    serializer: Dumps = json_dumps,
) -> ClosableResponse:
    """Build a request and send it through the transport.

    Body is serialized to JSON for POST and PUT only, for other methods it is ignored.
    Raises InvalidUrlError, SerializationError, TransportError or RequestTimeoutError.
    """
    request = build_request(endpoint, method, body, headers, serializer=serializer)
    return await send(request, transport, timeout=timeout, deadline=deadline)


def build_request(
    endpoint: str | yarl.URL,
    method: str,
    body: Any = None,
    headers: Headers | None = None,
    *,
    serializer: Dumps = json_dumps,
) -> Request:
    url = parse_url(endpoint)
    method = method.upper()
    payload = dumps(body, serializer=serializer) if body is not None and method in _METHODS_WITH_BODY else None
    return Request(method=method, url=url, headers=headers, body=payload)


async def send(
    request: Request | RequestBuilder,
    transport: Transport,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    deadline: Deadline | None = None,
) -> ClosableResponse:
    """Send a prepared request.

    The effective deadline is the earlier of timeout and the caller deadline,
    which is taken from the current context unless passed explicitly.
    """
    if isinstance(request, RequestBuilder):
        request = request.request

    caller_deadline = deadline if deadline is not None else get_context().deadline
    effective_deadline = Deadline.from_timeout(timeout).min(caller_deadline)
    if effective_deadline.expired:
        logger.warning(
            "Request %s %s is not sent: deadline has expired",
            request.method,
            request.url,
            extra={
                "request_method": request.method,
                "request_url": request.url,
            },
        )
        raise RequestTimeoutError(f"Request {request.method} {request.url} is not sent: deadline has expired")

    effective_timeout = effective_deadline.timeout
    try:
        async with asyncio.timeout(effective_timeout):
            return await transport.send(request, effective_timeout)
    except TimeoutError as e:
        logger.warning(
            "Request %s %s has timed out after %s",
            request.method,
            request.url,
            effective_timeout,
            extra={
                "request_method": request.method,
                "request_url": request.url,
                "request_timeout": effective_timeout,
            },
        )
        raise RequestTimeoutError(
            f"Request {request.method} {request.url} has timed out after {effective_timeout}"
        ) from e
