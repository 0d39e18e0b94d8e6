class CallError(Exception):
    """Base class for failures raised while building or dispatching a request"""


class InvalidUrlError(CallError, ValueError):
    """URL cannot be parsed"""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Invalid url {url!r}: {reason}")
        self.url = url
        self.reason = reason


class SerializationError(CallError, ValueError):
    """Body cannot be serialized to JSON"""


class TransportError(CallError):
    """Transport has failed to produce a response"""


class RequestTimeoutError(TransportError):
    """Deadline has expired before a response was received"""
