"""ExtendedAttributes — raw and property-list access to one path's attributes."""

from __future__ import annotations

import os
import re
from typing import TYPE_CHECKING, Any, TypeVar, overload
from urllib.parse import unquote, urlsplit

from typed_xattrs import plist
from typed_xattrs.backends.system import SystemBackend
from typed_xattrs.exceptions import (
    NotAccessibleError,
    SerializationInvalidError,
    is_missing_attribute,
)
from typed_xattrs.flags import Flags, name_with_flags, name_without_flags
from typed_xattrs.names import Name

if TYPE_CHECKING:
    from typed_xattrs.backends.base import Backend

T = TypeVar("T")

_URL_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")

PathTarget = str | bytes | os.PathLike[str]


def local_path(target: PathTarget) -> str:
    """Return the local filesystem path for *target*.

    Accepts plain paths, path-like objects and ``file://`` URLs.  Any other
    URL raises :class:`NotAccessibleError`.
    """
    if isinstance(target, os.PathLike):
        target = os.fspath(target)
    if isinstance(target, bytes):
        target = os.fsdecode(target)
    if not isinstance(target, str) or not target:
        raise NotAccessibleError(target, "expected a path")
    if _URL_RE.match(target):
        parts = urlsplit(target)
        if parts.scheme.lower() != "file" or parts.netloc not in ("", "localhost"):
            raise NotAccessibleError(target, f"{parts.scheme} URLs are not local files")
        return unquote(parts.path)
    return target


class ExtendedAttributes:
    """Extended attributes of the file or directory at *path*.

    Raw values are ``bytes``; a missing attribute reads as ``None`` rather
    than raising.  Strongly-typed access goes through :class:`Name`
    descriptors, which ``get``/``set``/``has``/``remove`` accept in place
    of a raw name::

        attrs = ExtendedAttributes("/path/to/file")
        attrs.set("com.example.attribute", b"value")
        attrs.get(Names.quarantine)

    Parameters:
        path:    Path, path-like object or ``file://`` URL of the target.
        backend: Syscall backend.  Defaults to :class:`SystemBackend`.

    Every call first checks that the target is an existing local
    filesystem object and raises :class:`NotAccessibleError` otherwise.
    Other OS failures propagate as :class:`OSError` with their ``errno``.
    """

    def __init__(self, path: PathTarget, backend: Backend | None = None) -> None:
        self._target = path
        self._backend: Backend = backend or SystemBackend()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"

    @property
    def path(self) -> PathTarget:
        return self._target

    @property
    def backend(self) -> Backend:
        return self._backend

    def _checked_path(self) -> str:
        path = local_path(self._target)
        exists = os.path.exists if self._backend.follow_symlinks else os.path.lexists
        if not exists(path):
            raise NotAccessibleError(self._target, "no such file or directory")
        return path

    # ── raw access ───────────────────────────────────────────

    @overload
    def get(self, name: Name[T]) -> T: ...

    @overload
    def get(self, name: str) -> bytes | None: ...

    def get(self, name: str | Name[Any]) -> Any:
        """Return the value of *name*, or ``None`` if it does not exist.

        With a :class:`Name`, returns the value decoded by its codec.
        """
        if isinstance(name, Name):
            return name.decode(self)
        path = self._checked_path()
        try:
            return self._backend.getxattr(path, name)
        except OSError as exc:
            if is_missing_attribute(exc):
                return None
            raise

    @overload
    def set(self, name: Name[T], value: T, flags: Flags | None = None) -> None: ...

    @overload
    def set(self, name: str, value: bytes, flags: Flags | None = None) -> None: ...

    def set(self, name: str | Name[Any], value: Any, flags: Flags | None = None) -> None:
        """Write *value* under *name*, overwriting any existing value.

        When *flags* are given they are encoded into the name that is
        actually written (see :func:`name_with_flags`).  With a
        :class:`Name`, *value* is encoded by its codec; for optional names
        ``None`` removes the attribute instead.
        """
        if isinstance(name, Name):
            name.encode(self, value, flags)
            return
        if not isinstance(value, bytes | bytearray | memoryview):
            raise TypeError(f"raw attribute values must be bytes, not {type(value).__name__}")
        path = self._checked_path()
        final_name = name_with_flags(name, flags) if flags is not None else name
        self._backend.setxattr(path, final_name, bytes(value))

    def has(self, name: str | Name[Any]) -> bool:
        """Return ``True`` if an attribute with exactly this name exists."""
        raw_name = name.raw_name if isinstance(name, Name) else name
        path = self._checked_path()
        try:
            return self._backend.hasxattr(path, raw_name)
        except OSError as exc:
            if is_missing_attribute(exc):
                return False
            raise

    def remove(self, name: str | Name[Any]) -> None:
        """Delete *name*.  Does nothing if it does not exist."""
        raw_name = name.raw_name if isinstance(name, Name) else name
        path = self._checked_path()
        try:
            self._backend.removexattr(path, raw_name)
        except OSError as exc:
            if not is_missing_attribute(exc):
                raise

    def all_names(self, *, with_flags: bool = False) -> list[str]:
        """Return the names of all attributes on the target.

        Parameters:
            with_flags: Keep flag suffixes (e.g. ``kMDItemCreator#S``).
                        When ``False`` every suffix is stripped.

        Order is whatever the OS enumeration yields.
        """
        path = self._checked_path()
        names = self._backend.listxattr(path)
        if not with_flags:
            names = [name_without_flags(n) for n in names]
        return names

    # ── property lists ───────────────────────────────────────

    def get_plist(self, name: str, type: Any = Any) -> Any:
        """Return the property list stored under *name*, checked against *type*.

        Returns ``None`` if the attribute does not exist.

        Raises:
            SerializationCorruptError: If the bytes are not a property list
                                       or do not match *type*.
        """
        data = self.get(name)
        if data is None:
            return None
        return plist.conform(plist.loads(data, name), type, name)

    def set_plist(self, name: str, value: Any, flags: Flags | None = None) -> None:
        """Write *value* as a binary property list under *name*.

        Raises:
            SerializationInvalidError: If *value* is not representable.  The
                                       existing value is left untouched.
        """
        self._checked_path()
        if not plist.is_encodable(value):
            raise SerializationInvalidError(name, value)
        self.set(name, plist.dumps(value), flags)

    # ── flag transcoding ─────────────────────────────────────

    name_with_flags = staticmethod(name_with_flags)
    name_without_flags = staticmethod(name_without_flags)
