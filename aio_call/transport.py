import abc
import collections.abc
import inspect

from .base import ClosableResponse, Request


class Transport(abc.ABC):
    __slots__ = ()

    @abc.abstractmethod
    async def send(self, request: Request, timeout: float) -> ClosableResponse: ...


SendDelegate = collections.abc.Callable[[Request], ClosableResponse]
AsyncSendDelegate = collections.abc.Callable[[Request], collections.abc.Awaitable[ClosableResponse]]


class DelegateTransport(Transport):
    """Transport which hands every request to a function instead of the network.

    Requests are recorded in order of arrival, so tests can inspect what would have been sent.
    """

    __slots__ = ("__send_delegate", "requests")

    def __init__(self, send_delegate: SendDelegate | AsyncSendDelegate) -> None:
        self.__send_delegate = send_delegate
        self.requests: list[Request] = []

    async def send(self, request: Request, timeout: float) -> ClosableResponse:
        self.requests.append(request)
        response = self.__send_delegate(request)
        if inspect.isawaitable(response):
            response = await response
        return response  # type: ignore
