"""Backend protocol — the OS extended-attribute syscalls for one path at a time."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Backend(ABC):
    """Abstract base for all syscall backends.

    A backend is a thin, stateless pass-through to the host facility.
    Every failure is an :class:`OSError` carrying the host ``errno``; a
    missing attribute is reported with
    :data:`typed_xattrs.exceptions.ENOATTR`, never swallowed here.
    """

    #: Whether symbolic links are resolved before their attributes are touched.
    follow_symlinks: bool = True

    @abstractmethod
    def getxattr(self, path: str, name: str) -> bytes:
        """Return the value stored under *name*."""
        ...

    @abstractmethod
    def setxattr(self, path: str, name: str, value: bytes) -> None:
        """Create or overwrite the value stored under *name*."""
        ...

    @abstractmethod
    def listxattr(self, path: str) -> list[str]:
        """Return every attribute name present on *path*, as written."""
        ...

    @abstractmethod
    def removexattr(self, path: str, name: str) -> None:
        """Delete *name*.  Fails with ``ENOATTR`` if it does not exist."""
        ...

    def hasxattr(self, path: str, name: str) -> bool:
        """Return ``True`` if *name* exists, without reading its value."""
        return name in self.listxattr(path)
