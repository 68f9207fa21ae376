"""Binary property list codec for structured attribute values."""

from __future__ import annotations

import functools
import plistlib
from datetime import UTC, datetime
from typing import Any
from xml.parsers.expat import ExpatError

from pydantic import TypeAdapter, ValidationError

from typed_xattrs.exceptions import SerializationCorruptError

# Range of integers the binary format can represent.
_INT_MIN = -(1 << 63)
_INT_MAX = (1 << 64) - 1


def is_encodable(value: Any) -> bool:
    """Return ``True`` if *value* can be written as a binary property list."""
    return _is_encodable(value, set())


def _is_encodable(value: Any, seen: set[int]) -> bool:
    if isinstance(value, bool | str | float | datetime | bytes | bytearray):
        return True
    if isinstance(value, int):
        return _INT_MIN <= value <= _INT_MAX
    if isinstance(value, list | tuple | dict):
        if id(value) in seen:
            return False
        seen.add(id(value))
        try:
            if isinstance(value, dict):
                return all(
                    isinstance(k, str) and _is_encodable(v, seen) for k, v in value.items()
                )
            return all(_is_encodable(item, seen) for item in value)
        finally:
            seen.discard(id(value))
    return False


def dumps(value: Any) -> bytes:
    """Serialize *value* to binary property list bytes.

    Timezone-aware datetimes are stored in UTC; they read back naive.
    """
    return plistlib.dumps(_naive_utc(value), fmt=plistlib.FMT_BINARY, sort_keys=False)


def _naive_utc(value: Any) -> Any:
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    if isinstance(value, dict):
        return {k: _naive_utc(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [_naive_utc(item) for item in value]
    return value


def loads(data: bytes, name: str = "") -> Any:
    """Parse property list bytes (binary or XML).

    Raises:
        SerializationCorruptError: If *data* is not a property list.
    """
    try:
        return plistlib.loads(data)
    except (
        plistlib.InvalidFileException,
        ExpatError,
        ValueError,
        TypeError,
        KeyError,
        IndexError,
    ) as exc:
        raise SerializationCorruptError(name, Any, str(exc) or type(exc).__name__) from exc


@functools.lru_cache(maxsize=256)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def conform(value: Any, tp: Any, name: str = "") -> Any:
    """Check that a decoded *value* has the shape of *tp*.

    ``typing.Any`` accepts every value.  The check is strict: no coercion
    between strings, numbers and booleans.

    Raises:
        SerializationCorruptError: If *value* does not match *tp*.
    """
    if tp is Any:
        return value
    try:
        return _adapter(tp).validate_python(value, strict=True)
    except ValidationError as exc:
        raise SerializationCorruptError(name, tp, f"{exc.error_count()} validation error(s)") from exc
