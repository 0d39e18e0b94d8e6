import collections.abc
import dataclasses
import json
from typing import Any

from .errors import SerializationError

Dumps = collections.abc.Callable[[Any], str | bytes]


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def json_dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_default)


def dumps(value: Any, *, serializer: Dumps = json_dumps, encoding: str = "utf-8") -> bytes:
    try:
        data = serializer(value)
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(f"Cannot serialize {type(value).__name__}: {e}") from e
    return data if isinstance(data, bytes) else data.encode(encoding)
