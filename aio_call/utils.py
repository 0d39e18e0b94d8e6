import abc
import time

perf_counter = time.perf_counter


def perf_counter_elapsed(started_at: float) -> float:
    return perf_counter() - started_at


class Closable(abc.ABC):
    __slots__ = ()

    @abc.abstractmethod
    async def close(self) -> None: ...
