"""Flags — attribute copy/sync/export policy encoded into the attribute name.

The host does not store flags next to an attribute.  They travel as a
suffix of the name itself: ``com.example.attr#PS`` is the attribute
``com.example.attr`` written with the *no-export* and *syncable* flags.
"""

from __future__ import annotations

import enum

from typed_xattrs.exceptions import FlagCodecError

FLAG_DELIMITER = "#"


class Flags(enum.IntFlag):
    """Policy bits for copying, syncing and exporting an attribute.

    Members:
        NO_EXPORT:         Do not export the attribute, e.g. when sharing.
        CONTENT_DEPENDENT: Tied to the file contents; preserved for copy
                           and share but not across a safe save.
        NEVER_PRESERVE:    Never copied, whatever the operation.
        SYNCABLE:          Preserved when syncing.  Syncing keeps as little
                           metadata as possible, so this is opt-in.
        ONLY_BACKUP:       Only copied when the operation is a backup.
    """

    NO_EXPORT = 1 << 0
    CONTENT_DEPENDENT = 1 << 1
    NEVER_PRESERVE = 1 << 2
    SYNCABLE = 1 << 3
    ONLY_BACKUP = 1 << 4


class OperationIntent(enum.IntEnum):
    """What a caller is about to do with a file, for ``preserve_for_intent``."""

    COPY = 1
    SAVE = 2
    SHARE = 3
    SYNC = 4
    BACKUP = 5


# Token order is the order used when writing a suffix.
_TOKENS: dict[str, Flags] = {
    "C": Flags.CONTENT_DEPENDENT,
    "P": Flags.NO_EXPORT,
    "N": Flags.NEVER_PRESERVE,
    "S": Flags.SYNCABLE,
    "B": Flags.ONLY_BACKUP,
}

# Flags that drop the attribute for a given intent.
_DROPPED_BY: dict[OperationIntent, Flags] = {
    OperationIntent.COPY: Flags.NEVER_PRESERVE,
    OperationIntent.SAVE: Flags.CONTENT_DEPENDENT | Flags.NEVER_PRESERVE,
    OperationIntent.SHARE: Flags.NO_EXPORT | Flags.NEVER_PRESERVE,
    OperationIntent.SYNC: Flags.NEVER_PRESERVE,
    OperationIntent.BACKUP: Flags.NEVER_PRESERVE,
}


def _check_name(name: str) -> None:
    if not name:
        raise FlagCodecError(name, "name is empty")
    if "\x00" in name:
        raise FlagCodecError(name, "name contains a NUL character")


def name_with_flags(name: str, flags: Flags | int) -> str:
    """Return *name* with *flags* encoded as a suffix.

    An empty flag set returns *name* unchanged.
    """
    _check_name(name)
    flags = Flags(flags)
    suffix = "".join(token for token, flag in _TOKENS.items() if flag in flags)
    if not suffix:
        return name
    return f"{name}{FLAG_DELIMITER}{suffix}"


def name_without_flags(name: str) -> str:
    """Return *name* with any flag suffix stripped."""
    _check_name(name)
    return name.partition(FLAG_DELIMITER)[0]


def flags_from_name(name: str) -> Flags:
    """Decode the flags carried by *name*.  No suffix means no flags.

    Unlike the host codec, well-known names get no built-in default flags.
    """
    _check_name(name)
    _, delimiter, suffix = name.partition(FLAG_DELIMITER)
    flags = Flags(0)
    if not delimiter:
        return flags
    for token in suffix:
        try:
            flags |= _TOKENS[token]
        except KeyError:
            raise FlagCodecError(name, f"unknown flag token {token!r}") from None
    return flags


def preserve_for_intent(name: str, intent: OperationIntent) -> bool:
    """Return ``True`` if the attribute *name* should survive *intent*.

    The decision only looks at the flags encoded in *name*.
    """
    flags = flags_from_name(name)
    intent = OperationIntent(intent)
    if flags & _DROPPED_BY[intent]:
        return False
    if Flags.ONLY_BACKUP in flags and intent is not OperationIntent.BACKUP:
        return False
    if intent is OperationIntent.SYNC:
        return Flags.SYNCABLE in flags
    return True
