import collections.abc
import contextlib
import contextvars
import dataclasses

from .deadline import Deadline


@dataclasses.dataclass(frozen=True, slots=True, kw_only=True)
class Context:
    deadline: Deadline | None = None

    def __repr__(self) -> str:
        return f"<Context [{self.deadline}]>"


context_var = contextvars.ContextVar("aio_call_context", default=Context())


@contextlib.contextmanager
def set_context(*, deadline: Deadline | None) -> collections.abc.Iterator[None]:
    reset_token = context_var.set(Context(deadline=deadline))
    try:
        yield
    finally:
        context_var.reset(reset_token)


def get_context() -> Context:
    return context_var.get()
