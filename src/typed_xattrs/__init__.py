"""typed_xattrs — strongly-typed access to extended file attributes.

Raw attributes are byte strings keyed by name.  A :class:`Name` pairs a
raw name with a codec so callers read and write typed values; search
metadata lives in its own prefixed namespace behind
:class:`SystemMetadata`.
"""

from typed_xattrs.attributes import ExtendedAttributes
from typed_xattrs.catalog import ATTRIBUTE_NAMES, METADATA_NAMES, MetadataNames, Names
from typed_xattrs.config import BackendConfigSchema, create_backend
from typed_xattrs.exceptions import (
    FlagCodecError,
    NotAccessibleError,
    SerializationCorruptError,
    SerializationInvalidError,
    XattrError,
)
from typed_xattrs.flags import Flags, OperationIntent, preserve_for_intent
from typed_xattrs.metadata import PREFIX, MetadataName, SystemMetadata
from typed_xattrs.names import Name

__all__ = [
    "ATTRIBUTE_NAMES",
    "BackendConfigSchema",
    "ExtendedAttributes",
    "FlagCodecError",
    "Flags",
    "METADATA_NAMES",
    "MetadataName",
    "MetadataNames",
    "Name",
    "Names",
    "NotAccessibleError",
    "OperationIntent",
    "PREFIX",
    "SerializationCorruptError",
    "SerializationInvalidError",
    "SystemMetadata",
    "XattrError",
    "create_backend",
    "preserve_for_intent",
]
