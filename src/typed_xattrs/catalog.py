"""Predefined names for well-known extended attributes and search metadata keys.

Supported metadata keys:
https://developer.apple.com/documentation/coreservices/file_metadata/mditem/common_metadata_attribute_keys
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import AnyUrl, ValidationError

from typed_xattrs.metadata import MetadataName
from typed_xattrs.names import Name

if TYPE_CHECKING:
    from typed_xattrs.metadata import SystemMetadata


class Names:
    """Well-known extended attribute names."""

    # ── security and protection ──────────────────────────────

    #: Whether the file is protected by System Integrity Protection.
    #: Usually read-only; writing it tends to fail with ``EPERM``.
    is_protected: Name[bool] = Name.plist("com.apple.rootless", bool, default=False)

    #: Quarantine information for downloaded files.
    quarantine: Name[str | None] = Name.string("com.apple.quarantine")

    # ── finder information ───────────────────────────────────

    #: When the file was last opened.  The raw name carries its own flags.
    last_used_date: Name[bytes | None] = Name.bytes("com.apple.lastuseddate#PS")

    #: Finder type/creator codes, flags and icon position.
    finder_info: Name[bytes | None] = Name.bytes("com.apple.FinderInfo")

    #: The resource fork, for files that have one.
    resource_fork: Name[bytes | None] = Name.bytes("com.apple.ResourceFork")

    # ── text encoding ────────────────────────────────────────

    #: Text encoding of the file contents, e.g. ``utf-8;134217984``.
    text_encoding: Name[str | None] = Name.string("com.apple.TextEncoding")


def _get_where_froms(metadata: SystemMetadata) -> list[AnyUrl] | None:
    strings = metadata.get("kMDItemWhereFroms", list[str])
    if strings is None:
        return None
    urls = []
    for string in strings:
        try:
            urls.append(AnyUrl(string))
        except ValidationError:
            continue
    return urls


def _set_where_froms(metadata: SystemMetadata, urls: list[AnyUrl | str]) -> None:
    metadata.set("kMDItemWhereFroms", [str(url) for url in urls])


def _get_downloaded_date(metadata: SystemMetadata) -> datetime | None:
    dates = metadata.get("kMDItemDownloadedDate", list[datetime])
    return dates[0] if dates else None


def _set_downloaded_date(metadata: SystemMetadata, value: datetime) -> None:
    # Stored as a one-element array, which is what the system writes.
    metadata.set("kMDItemDownloadedDate", [value])


class MetadataNames:
    """Well-known search metadata keys."""

    # ── general ──────────────────────────────────────────────

    #: Application that created the file.
    creator: MetadataName[str] = MetadataName("kMDItemCreator", str)

    #: Authors of the content.
    authors: MetadataName[list[str]] = MetadataName("kMDItemAuthors", list[str])

    #: Copyright owner of the content.
    copyright: MetadataName[str] = MetadataName("kMDItemCopyright", str)

    #: Localized name shown to the user, which may differ from the file name.
    display_name: MetadataName[str] = MetadataName("kMDItemDisplayName", str)

    #: Description of the content.
    description: MetadataName[str] = MetadataName("kMDItemDescription", str)

    #: Keywords associated with the file.
    keywords: MetadataName[list[str]] = MetadataName("kMDItemKeywords", list[str])

    #: Subject of the content.
    subject: MetadataName[str] = MetadataName("kMDItemSubject", str)

    #: Title of the content.
    title: MetadataName[str] = MetadataName("kMDItemTitle", str)

    # ── download information ─────────────────────────────────

    #: URLs the file was downloaded from.  Unparsable entries are skipped.
    where_froms: MetadataName[list[AnyUrl]] = MetadataName.custom(
        "kMDItemWhereFroms",
        list[AnyUrl],
        get=_get_where_froms,
        set=_set_where_froms,
    )

    #: When the file was downloaded.
    downloaded_date: MetadataName[datetime] = MetadataName.custom(
        "kMDItemDownloadedDate",
        datetime,
        get=_get_downloaded_date,
        set=_set_downloaded_date,
    )

    # ── media information ────────────────────────────────────

    #: Star rating, 0 to 5.
    star_rating: MetadataName[int] = MetadataName("kMDItemStarRating", int)

    #: Whether the file is a screenshot.
    is_screen_capture: MetadataName[bool] = MetadataName("kMDItemIsScreenCapture", bool)

    # ── content ──────────────────────────────────────────────

    #: Text content of the file, as indexed.
    text_content: MetadataName[str] = MetadataName("kMDItemTextContent", str)

    #: Special instructions for handling the content.
    instructions: MetadataName[str] = MetadataName("kMDItemInstructions", str)

    #: Finder comment ("Comments" in the Get Info window).
    finder_comment: MetadataName[str] = MetadataName("kMDItemFinderComment", str)

    #: When the file was last opened.
    last_used_date: MetadataName[datetime] = MetadataName("kMDItemLastUsedDate", datetime)


#: Predefined :class:`Name` objects keyed by raw attribute name.
ATTRIBUTE_NAMES: dict[str, Name[Any]] = {
    value.raw_name: value for value in vars(Names).values() if isinstance(value, Name)
}

#: Predefined :class:`MetadataName` objects keyed by bare metadata key.
METADATA_NAMES: dict[str, MetadataName[Any]] = {
    value.key: value for value in vars(MetadataNames).values() if isinstance(value, MetadataName)
}
