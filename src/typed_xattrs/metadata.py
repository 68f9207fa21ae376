"""SystemMetadata — desktop search metadata stored as namespaced extended attributes.

Search metadata (creator, keywords, star rating, download origin, ...)
lives in ordinary extended attributes whose names start with
:data:`PREFIX` and whose values are binary property lists.  This module
applies the prefix, exactly once, to every operation::

    metadata = SystemMetadata("/path/to/file")
    metadata.set("kMDItemKeywords", ["a", "b"])   # com.apple.metadata:kMDItemKeywords
    metadata.get(MetadataNames.keywords)          # ["a", "b"]

Attributes in this namespace should be accessed through this API rather
than through :class:`ExtendedAttributes` directly.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

from typed_xattrs.attributes import ExtendedAttributes

if TYPE_CHECKING:
    from typed_xattrs.attributes import PathTarget
    from typed_xattrs.backends.base import Backend

T = TypeVar("T")

PREFIX = "com.apple.metadata:"


def metadata_name(key: str) -> str:
    """Return the extended attribute name that stores metadata *key*."""
    return f"{PREFIX}{key}"


@dataclass(frozen=True)
class MetadataName(Generic[T]):
    """A strongly-typed search metadata key.

    By default the value is read with :meth:`SystemMetadata.get` checked
    against *type* and written with :meth:`SystemMetadata.set`; writing
    ``None`` removes the key.  :meth:`custom` supplies a different mapping,
    e.g. to store URLs as strings.

    Attributes:
        key:  Metadata key without the namespace prefix (``kMDItemCreator``).
        type: Expected type of the stored property list.
    """

    key: str
    type: Any = Any
    getter: Callable[[SystemMetadata], T | None] | None = field(default=None, repr=False)
    setter: Callable[[SystemMetadata, T], None] | None = field(default=None, repr=False)

    @property
    def raw_name(self) -> str:
        return metadata_name(self.key)

    @staticmethod
    def custom(
        key: str,
        type: Any,
        *,
        get: Callable[[SystemMetadata], T | None],
        set: Callable[[SystemMetadata, T], None],
    ) -> MetadataName[T]:
        return MetadataName(key, type, get, set)

    def decode(self, metadata: SystemMetadata) -> T | None:
        if self.getter is not None:
            return self.getter(metadata)
        value: T | None = metadata.get(self.key, self.type)
        return value

    def encode(self, metadata: SystemMetadata, value: T | None) -> None:
        if value is None:
            metadata.remove(self.key)
        elif self.setter is not None:
            self.setter(metadata, value)
        else:
            metadata.set(self.key, value)


class SystemMetadata:
    """Search metadata of the file or directory at *path*.

    Parameters:
        path:    Path, path-like object, ``file://`` URL, or an existing
                 :class:`ExtendedAttributes` to share.
        backend: Syscall backend when *path* is not an
                 :class:`ExtendedAttributes`.
    """

    def __init__(
        self,
        path: PathTarget | ExtendedAttributes,
        backend: Backend | None = None,
    ) -> None:
        if isinstance(path, ExtendedAttributes):
            self._attributes = path
        else:
            self._attributes = ExtendedAttributes(path, backend)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes.path!r})"

    @property
    def attributes(self) -> ExtendedAttributes:
        return self._attributes

    @overload
    def get(self, key: MetadataName[T]) -> T | None: ...

    @overload
    def get(self, key: str, type: Any = ...) -> Any: ...

    def get(self, key: str | MetadataName[Any], type: Any = Any) -> Any:
        """Return the value of *key*, or ``None`` if it is not set.

        Raises:
            SerializationCorruptError: If the stored value does not match *type*.
        """
        if isinstance(key, MetadataName):
            return key.decode(self)
        return self._attributes.get_plist(metadata_name(key), type)

    def set(self, key: str | MetadataName[Any], value: Any) -> None:
        """Write *value* under *key*.

        No flags are applied: the desktop environment ignores them in this
        namespace.  Metadata that shows up in the Finder "Get Info" window:
        ``kMDItemDescription``, ``kMDItemHeadline``, ``kMDItemInstructions``,
        ``kMDItemWhereFroms`` and ``kMDItemKeywords``.

        Raises:
            SerializationInvalidError: If *value* is not a valid property list.
        """
        if isinstance(key, MetadataName):
            key.encode(self, value)
            return
        self._attributes.set_plist(metadata_name(key), value)

    def has(self, key: str | MetadataName[Any]) -> bool:
        """Return ``True`` if *key* is set."""
        if isinstance(key, MetadataName):
            key = key.key
        return self._attributes.has(metadata_name(key))

    def remove(self, key: str | MetadataName[Any]) -> None:
        """Remove *key*.  Does nothing if it is not set."""
        if isinstance(key, MetadataName):
            key = key.key
        self._attributes.remove(metadata_name(key))

    def keys(self) -> list[str]:
        """Return the bare keys of all metadata set on the target."""
        return [
            name[len(PREFIX) :]
            for name in self._attributes.all_names(with_flags=False)
            if name.startswith(PREFIX)
        ]
