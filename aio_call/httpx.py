import logging

import httpx
import multidict

from .base import ClosableResponse, Request
from .errors import RequestTimeoutError, TransportError
from .transport import Transport

logger = logging.getLogger(__package__)


class HttpxTransport(Transport):
    __slots__ = ("__client", "__buffer_payload")

    def __init__(self, client: httpx.AsyncClient, buffer_payload: bool = True):
        self.__client = client
        self.__buffer_payload = buffer_payload

    async def send(self, request: Request, timeout: float) -> ClosableResponse:
        method = request.method
        url = request.url

        try:
            client_request = self.__client.build_request(
                method=method,
                url=httpx.URL(str(url)),
                content=request.body,
                headers=list(request.headers.items()),
                timeout=timeout,
            )
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
            client_response = await self.__client.send(client_request)
            if self.__buffer_payload:
                await client_response.aread()
            return _HttpxResponse(client_response)
        except httpx.TimeoutException as e:
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
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
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


class _HttpxResponse(ClosableResponse):
    __slots__ = ("__response",)

    def __init__(self, response: httpx.Response):
        self.__response = response

    async def close(self) -> None:
        await self.__response.aclose()

    @property
    def status(self) -> int:
        return self.__response.status_code

    @property
    def headers(self) -> multidict.CIMultiDictProxy[str]:
        return multidict.CIMultiDictProxy[str](multidict.CIMultiDict[str](self.__response.headers.multi_items()))

    async def read(self) -> bytes:
        return await self.__response.aread()
