"""Shared test fixtures."""

import errno

import pytest

from typed_xattrs import ExtendedAttributes, SystemMetadata
from typed_xattrs.backends import Backend, InMemoryBackend, SystemBackend


class UntouchableBackend(Backend):
    """Fails the test if any syscall is attempted."""

    def getxattr(self, path, name):
        raise AssertionError("getxattr must not be called")

    def setxattr(self, path, name, value):
        raise AssertionError("setxattr must not be called")

    def listxattr(self, path):
        raise AssertionError("listxattr must not be called")

    def removexattr(self, path, name):
        raise AssertionError("removexattr must not be called")


@pytest.fixture
def test_file(tmp_path):
    path = tmp_path / "file.txt"
    path.write_text("Test content")
    return path


@pytest.fixture
def test_dir(tmp_path):
    path = tmp_path / "folder"
    path.mkdir()
    return path


@pytest.fixture
def backend():
    return InMemoryBackend()


@pytest.fixture
def untouchable():
    return UntouchableBackend()


@pytest.fixture
def attrs(test_file, backend):
    return ExtendedAttributes(test_file, backend)


@pytest.fixture
def metadata(attrs):
    return SystemMetadata(attrs)


@pytest.fixture
def system_backend(test_file):
    """A real backend, skipped where the filesystem has no user attributes."""
    backend = SystemBackend()
    try:
        backend.setxattr(str(test_file), "user.typed_xattrs.probe", b"")
        backend.removexattr(str(test_file), "user.typed_xattrs.probe")
    except OSError as exc:
        if exc.errno in (errno.ENOTSUP, errno.EOPNOTSUPP, errno.EPERM, errno.EACCES):
            pytest.skip(f"extended attributes unsupported here: {exc}")
        raise
    return backend
