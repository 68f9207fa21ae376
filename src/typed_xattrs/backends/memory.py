"""InMemoryBackend — dict-backed attributes for development and testing."""

from __future__ import annotations

import errno
import os
from collections import defaultdict

from typed_xattrs.backends.base import Backend
from typed_xattrs.exceptions import ENOATTR


class InMemoryBackend(Backend):
    """In-memory attributes keyed by path.  Data is lost on process exit.

    The errno contract of the real syscalls is kept: ``ENOENT`` when the
    path does not exist on disk, ``ENOATTR`` when the attribute is missing.
    """

    def __init__(self) -> None:
        self._data: dict[str, dict[str, bytes]] = defaultdict(dict)

    def _attrs(self, path: str) -> dict[str, bytes]:
        if not os.path.lexists(path):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        return self._data[os.path.realpath(path)]

    def getxattr(self, path: str, name: str) -> bytes:
        try:
            return self._attrs(path)[name]
        except KeyError:
            raise OSError(ENOATTR, os.strerror(ENOATTR), path) from None

    def setxattr(self, path: str, name: str, value: bytes) -> None:
        self._attrs(path)[name] = bytes(value)

    def listxattr(self, path: str) -> list[str]:
        return list(self._attrs(path).keys())

    def removexattr(self, path: str, name: str) -> None:
        try:
            del self._attrs(path)[name]
        except KeyError:
            raise OSError(ENOATTR, os.strerror(ENOATTR), path) from None

    def hasxattr(self, path: str, name: str) -> bool:
        return name in self._attrs(path)
