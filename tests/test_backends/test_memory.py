"""Tests for InMemoryBackend."""

import errno

import pytest

from typed_xattrs.backends import InMemoryBackend
from typed_xattrs.exceptions import ENOATTR


@pytest.fixture
def path(test_file):
    return str(test_file)


def test_get_nonexistent(backend, path):
    with pytest.raises(OSError) as exc_info:
        backend.getxattr(path, "nope")
    assert exc_info.value.errno == ENOATTR


def test_set_and_get(backend, path):
    backend.setxattr(path, "k", b"value")
    assert backend.getxattr(path, "k") == b"value"


def test_overwrite(backend, path):
    backend.setxattr(path, "k", b"a")
    backend.setxattr(path, "k", b"b")
    assert backend.getxattr(path, "k") == b"b"


def test_remove(backend, path):
    backend.setxattr(path, "k", b"v")
    backend.removexattr(path, "k")
    assert not backend.hasxattr(path, "k")


def test_remove_nonexistent_reports_enoattr(backend, path):
    with pytest.raises(OSError) as exc_info:
        backend.removexattr(path, "nope")
    assert exc_info.value.errno == ENOATTR


def test_list(backend, path):
    backend.setxattr(path, "a", b"")
    backend.setxattr(path, "b", b"")
    assert sorted(backend.listxattr(path)) == ["a", "b"]


def test_list_empty(backend, path):
    assert backend.listxattr(path) == []


def test_missing_path(backend, tmp_path):
    with pytest.raises(FileNotFoundError) as exc_info:
        backend.listxattr(str(tmp_path / "gone"))
    assert exc_info.value.errno == errno.ENOENT


def test_paths_are_isolated(backend, tmp_path):
    one = tmp_path / "one"
    two = tmp_path / "two"
    one.touch()
    two.touch()
    backend.setxattr(str(one), "k", b"1")
    backend.setxattr(str(two), "k", b"2")
    assert backend.getxattr(str(one), "k") == b"1"
    assert backend.getxattr(str(two), "k") == b"2"


def test_backends_do_not_share_state(path):
    first = InMemoryBackend()
    first.setxattr(path, "k", b"v")
    assert not InMemoryBackend().hasxattr(path, "k")
