from .utils import perf_counter, perf_counter_elapsed


class Deadline:
    @staticmethod
    def from_timeout(seconds: float) -> "Deadline":
        if seconds < 0:
            raise ValueError("seconds cannot be negative")

        return Deadline(started_at=perf_counter(), seconds=seconds)

    __slots__ = ("__seconds", "__started_at")

    def __init__(self, started_at: float, seconds: float) -> None:
        self.__seconds = seconds
        self.__started_at = started_at

    @property
    def timeout(self) -> float:
        remaining = self.__seconds - perf_counter_elapsed(self.__started_at)
        return remaining if remaining > 0 else 0

    @property
    def expired(self) -> bool:
        return self.__seconds - perf_counter_elapsed(self.__started_at) <= 0

    def min(self, other: "Deadline | None") -> "Deadline":
        if other is None:
            return self
        return other if other.timeout < self.timeout else self

    def __float__(self) -> float:
        return self.timeout

    def __repr__(self) -> str:
        if self.expired:
            return "<Deadline [expired]>"
        return f"<Deadline [timeout={self.timeout}]>"
