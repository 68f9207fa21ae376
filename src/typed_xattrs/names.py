"""Name — a strongly-typed extended attribute name that carries its own codec."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar, overload

if TYPE_CHECKING:
    from typed_xattrs.attributes import ExtendedAttributes
    from typed_xattrs.flags import Flags

T = TypeVar("T")
U = TypeVar("U")

_MISSING: Any = object()


class Codec(Protocol[T]):
    """How a :class:`Name` reads and writes its value.

    ``decode`` may return ``None`` for "no value".  ``encode`` writes
    through the given :class:`ExtendedAttributes`, so flags, path checks
    and error semantics stay in one place.
    """

    def decode(self, attributes: ExtendedAttributes, name: str) -> T: ...

    def encode(
        self,
        attributes: ExtendedAttributes,
        name: str,
        value: T,
        flags: Flags | None,
    ) -> None: ...


@dataclass(frozen=True)
class StringCodec:
    """UTF-8 text.  Undecodable bytes read as ``None``; writing ``None`` removes."""

    def decode(self, attributes: ExtendedAttributes, name: str) -> str | None:
        data = attributes.get(name)
        if data is None:
            return None
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            return None

    def encode(
        self,
        attributes: ExtendedAttributes,
        name: str,
        value: str | None,
        flags: Flags | None,
    ) -> None:
        if value is None:
            attributes.remove(name)
            return
        attributes.set(name, value.encode("utf-8"), flags)


@dataclass(frozen=True)
class BytesCodec:
    """Raw bytes, no transcoding.  Writing ``None`` removes."""

    def decode(self, attributes: ExtendedAttributes, name: str) -> bytes | None:
        return attributes.get(name)

    def encode(
        self,
        attributes: ExtendedAttributes,
        name: str,
        value: bytes | None,
        flags: Flags | None,
    ) -> None:
        if value is None:
            attributes.remove(name)
            return
        attributes.set(name, value, flags)


@dataclass(frozen=True)
class PlistCodec:
    """Optional property list of a declared type.  Writing ``None`` removes."""

    type: Any = Any

    def decode(self, attributes: ExtendedAttributes, name: str) -> Any:
        return attributes.get_plist(name, self.type)

    def encode(
        self,
        attributes: ExtendedAttributes,
        name: str,
        value: Any,
        flags: Flags | None,
    ) -> None:
        if value is None:
            attributes.remove(name)
            return
        attributes.set_plist(name, value, flags)


@dataclass(frozen=True)
class PlistDefaultCodec:
    """Property list that reads as *default* when absent.  Always writes."""

    type: Any
    default: Any

    def decode(self, attributes: ExtendedAttributes, name: str) -> Any:
        value = attributes.get_plist(name, self.type)
        return self.default if value is None else value

    def encode(
        self,
        attributes: ExtendedAttributes,
        name: str,
        value: Any,
        flags: Flags | None,
    ) -> None:
        attributes.set_plist(name, value, flags)


@dataclass(frozen=True)
class CallbackCodec(Generic[T]):
    """Codec built from an explicit getter/setter pair."""

    getter: Callable[[ExtendedAttributes], T]
    setter: Callable[[ExtendedAttributes, T, Flags | None], None]

    def decode(self, attributes: ExtendedAttributes, name: str) -> T:
        return self.getter(attributes)

    def encode(
        self,
        attributes: ExtendedAttributes,
        name: str,
        value: T,
        flags: Flags | None,
    ) -> None:
        self.setter(attributes, value, flags)


@dataclass(frozen=True)
class Name(Generic[T]):
    """A strongly-typed extended attribute name.

    A ``Name`` holds no per-file state and can be shared freely, typically
    as a module-level constant::

        my_attribute = Name.string("com.example.my-attribute")

        attrs = ExtendedAttributes("/path/to/file")
        attrs.set(my_attribute, "Hello")
        attrs.get(my_attribute)     # "Hello"
        attrs.set(my_attribute, None)
        attrs.has(my_attribute)     # False

    ``has`` and ``remove`` act on :attr:`raw_name` directly, so existence
    does not depend on whether the stored value decodes.

    Attributes:
        raw_name: The attribute name as written to the file.
        codec:    Reads and writes the typed value.
    """

    raw_name: str
    codec: Codec[T] = field(repr=False)

    # ── factories ────────────────────────────────────────────

    @staticmethod
    def string(name: str) -> Name[str | None]:
        """Text stored as UTF-8.  Setting ``None`` removes the attribute."""
        return Name(name, StringCodec())

    @staticmethod
    def bytes(name: str) -> Name[bytes | None]:
        """Raw bytes.  Setting ``None`` removes the attribute."""
        return Name(name, BytesCodec())

    @overload
    @staticmethod
    def plist(name: str, type: type[U]) -> Name[U | None]: ...

    @overload
    @staticmethod
    def plist(name: str, type: type[U], default: U) -> Name[U]: ...

    @staticmethod
    def plist(name: str, type: Any = Any, default: Any = _MISSING) -> Name[Any]:
        """A binary property list of *type*.

        Without *default* the name is optional: it reads ``None`` when the
        attribute is absent and setting ``None`` removes it.  With
        *default* absent attributes read as *default* and every set writes.
        """
        if default is _MISSING:
            return Name(name, PlistCodec(type))
        return Name(name, PlistDefaultCodec(type, default))

    @staticmethod
    def custom(
        name: str,
        *,
        get: Callable[[ExtendedAttributes], U],
        set: Callable[[ExtendedAttributes, U, Flags | None], None],
    ) -> Name[U]:
        """A name with a hand-written getter and setter."""
        return Name(name, CallbackCodec(get, set))

    # ── codec dispatch ───────────────────────────────────────

    def decode(self, attributes: ExtendedAttributes) -> T:
        return self.codec.decode(attributes, self.raw_name)

    def encode(self, attributes: ExtendedAttributes, value: T, flags: Flags | None = None) -> None:
        self.codec.encode(attributes, self.raw_name, value, flags)
