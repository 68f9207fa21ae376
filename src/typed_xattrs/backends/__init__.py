"""Syscall backends for extended attribute access."""

from typed_xattrs.backends.base import Backend
from typed_xattrs.backends.memory import InMemoryBackend
from typed_xattrs.backends.system import SystemBackend

__all__ = ["Backend", "InMemoryBackend", "SystemBackend"]
