"""SystemBackend — the host's extended attributes through the ``xattr`` package."""

from __future__ import annotations

import xattr
from xattr.lib import _listxattr

from typed_xattrs.backends.base import Backend
from typed_xattrs.exceptions import is_missing_attribute


class SystemBackend(Backend):
    """Reads and writes real extended attributes.

    Parameters:
        follow_symlinks: When ``False``, operate on a symbolic link itself
                         rather than on the file it points to.
    """

    def __init__(self, follow_symlinks: bool = True) -> None:
        self.follow_symlinks = follow_symlinks

    @property
    def _symlink(self) -> bool:
        return not self.follow_symlinks

    def getxattr(self, path: str, name: str) -> bytes:
        value: bytes = xattr.getxattr(path, name, symlink=self._symlink)
        return value

    def setxattr(self, path: str, name: str, value: bytes) -> None:
        xattr.setxattr(path, name, value, symlink=self._symlink)

    def listxattr(self, path: str) -> list[str]:
        """Return the attribute names on *path*, skipping any that are not UTF-8."""
        options = xattr.XATTR_NOFOLLOW if self._symlink else 0
        names = []
        for raw in _listxattr(path, options).split(b"\x00"):
            if not raw:
                continue
            try:
                names.append(raw.decode("utf-8"))
            except UnicodeDecodeError:
                continue
        return names

    def removexattr(self, path: str, name: str) -> None:
        xattr.removexattr(path, name, symlink=self._symlink)

    def hasxattr(self, path: str, name: str) -> bool:
        # Probe the one name so unrelated undecodable names cannot interfere.
        try:
            self.getxattr(path, name)
        except OSError as exc:
            if is_missing_attribute(exc):
                return False
            raise
        return True
