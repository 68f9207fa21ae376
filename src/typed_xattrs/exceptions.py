"""Custom exceptions for the typed_xattrs package."""

from __future__ import annotations

import errno
from typing import Any

#: errno reported by the OS when an attribute does not exist.
ENOATTR: int = getattr(errno, "ENOATTR", errno.ENODATA)


def is_missing_attribute(exc: OSError) -> bool:
    """Return ``True`` if *exc* is the OS saying "no such attribute"."""
    return exc.errno == ENOATTR


class XattrError(Exception):
    """Base exception for all typed_xattrs errors."""


class NotAccessibleError(XattrError, FileNotFoundError):
    """Raised when the target is not a reachable local filesystem object.

    No OS call is attempted before this is raised.
    """

    def __init__(self, path: Any, detail: str = "") -> None:
        self.path = path
        msg = f"Not a local filesystem object: {path!r}"
        if detail:
            msg += f" ({detail})"
        super().__init__(errno.ENOENT, msg)

    def __str__(self) -> str:
        return self.strerror or ""


class FlagCodecError(XattrError, ValueError):
    """Raised when a name cannot be transcoded to or from its flag suffix."""

    def __init__(self, name: str, detail: str) -> None:
        self.name = name
        super().__init__(f"Cannot transcode flags for attribute name {name!r}: {detail}")


class SerializationInvalidError(XattrError, ValueError):
    """Raised when a value cannot be encoded as a property list.

    The store is not touched when this is raised.
    """

    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value = value
        super().__init__(
            f"Value of type {type(value).__name__} for attribute {name!r} "
            "is not a valid property list"
        )


class SerializationCorruptError(XattrError, ValueError):
    """Raised when stored bytes do not decode into the requested type."""

    def __init__(self, name: str, expected: Any, detail: str = "") -> None:
        self.name = name
        self.expected = expected
        msg = f"Attribute {name!r} does not hold a property list of type {_type_name(expected)}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


def _type_name(tp: Any) -> str:
    return tp.__name__ if isinstance(tp, type) else repr(tp)
