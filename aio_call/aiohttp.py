import logging

import aiohttp
import multidict

from .base import ClosableResponse, Request
from .errors import RequestTimeoutError, TransportError
from .transport import Transport

logger = logging.getLogger(__package__)


class AioHttpTransport(Transport):
    __slots__ = ("__buffer_payload", "__client_session")

    def __init__(self, client_session: aiohttp.ClientSession, *, buffer_payload: bool = True) -> None:
        self.__client_session = client_session
        self.__buffer_payload = buffer_payload

    async def send(self, request: Request, timeout: float) -> ClosableResponse:
        method = request.method
        url = request.url

        try:
            logger.debug(
                "Sending request %s %s with timeout %s",
                method,
                url,
                timeout,
                extra={
                    "request_method": method,
                    "request_url": url,
                    "request_timeout": timeout,
                },
            )
            response = await self.__client_session.request(
                method,
                url,
                headers=request.headers,
                data=request.body,
                timeout=aiohttp.ClientTimeout(total=timeout),
            )
            if self.__buffer_payload:
                await response.read()  # force response to buffer its body
            return _AioHttpResponse(response)
        except TimeoutError as e:
            logger.warning(
                "Request %s %s has timed out after %s",
                method,
                url,
                timeout,
                extra={
                    "request_method": method,
                    "request_url": url,
                    "request_timeout": timeout,
                },
            )
            raise RequestTimeoutError(f"Request {method} {url} has timed out after {timeout}") from e
        except (aiohttp.ClientError, ValueError) as e:
            logger.warning(
                "Request %s %s has failed: network error",
                method,
                url,
                exc_info=True,
                extra={
                    "request_method": method,
                    "request_url": url,
                },
            )
            raise TransportError(f"Request {method} {url} has failed: {e}") from e


class _AioHttpResponse(ClosableResponse):
    __slots__ = ("__response",)

    def __init__(self, response: aiohttp.ClientResponse):
        self.__response = response

    async def close(self) -> None:
        self.__response.release()

    @property
    def status(self) -> int:
        return self.__response.status

    @property
    def headers(self) -> multidict.CIMultiDictProxy[str]:
        return self.__response.headers

    async def read(self) -> bytes:
        return await self.__response.read()
