"""Tests for the flag-name codec."""

import pytest

from typed_xattrs import FlagCodecError, Flags, OperationIntent, preserve_for_intent
from typed_xattrs.flags import flags_from_name, name_with_flags, name_without_flags


def test_name_with_single_flag():
    assert name_with_flags("com.example.flagged", Flags.NO_EXPORT) == "com.example.flagged#P"


def test_name_with_several_flags_uses_canonical_order():
    flags = Flags.SYNCABLE | Flags.CONTENT_DEPENDENT | Flags.NO_EXPORT
    assert name_with_flags("attr", flags) == "attr#CPS"


def test_name_with_no_flags_is_unchanged():
    assert name_with_flags("attr", Flags(0)) == "attr"


def test_name_with_flags_accepts_int():
    assert name_with_flags("attr", 8) == "attr#S"


def test_name_without_flags():
    assert name_without_flags("com.apple.lastuseddate#PS") == "com.apple.lastuseddate"
    assert name_without_flags("plain") == "plain"


def test_flags_from_name():
    assert flags_from_name("attr#PS") == Flags.NO_EXPORT | Flags.SYNCABLE
    assert flags_from_name("attr") == Flags(0)
    assert flags_from_name("attr#") == Flags(0)


def test_flag_suffix_is_lossless():
    for bits in range(1 << len(Flags)):
        flags = Flags(bits)
        encoded = name_with_flags("com.example.attr", flags)
        assert flags_from_name(encoded) == flags
        assert name_without_flags(encoded) == "com.example.attr"


def test_unknown_flag_token_raises():
    with pytest.raises(FlagCodecError) as exc_info:
        flags_from_name("attr#PZ")
    assert exc_info.value.name == "attr#PZ"
    assert "'Z'" in str(exc_info.value)


@pytest.mark.parametrize("bad", ["", "with\x00nul"])
def test_malformed_names_raise(bad):
    with pytest.raises(FlagCodecError):
        name_with_flags(bad, Flags.SYNCABLE)
    with pytest.raises(FlagCodecError):
        name_without_flags(bad)
    with pytest.raises(FlagCodecError):
        flags_from_name(bad)


def test_flag_codec_error_is_value_error():
    with pytest.raises(ValueError):
        name_without_flags("")


def test_plain_attribute_survives_everything_but_sync():
    assert preserve_for_intent("attr", OperationIntent.COPY)
    assert preserve_for_intent("attr", OperationIntent.SAVE)
    assert preserve_for_intent("attr", OperationIntent.SHARE)
    assert preserve_for_intent("attr", OperationIntent.BACKUP)
    assert not preserve_for_intent("attr", OperationIntent.SYNC)


def test_syncable_attribute_is_synced():
    assert preserve_for_intent("attr#S", OperationIntent.SYNC)


def test_never_preserve():
    for intent in OperationIntent:
        assert not preserve_for_intent("attr#N", intent)


def test_content_dependent_dropped_on_save():
    assert not preserve_for_intent("attr#C", OperationIntent.SAVE)
    assert preserve_for_intent("attr#C", OperationIntent.COPY)


def test_no_export_dropped_on_share():
    assert not preserve_for_intent("attr#P", OperationIntent.SHARE)
    assert preserve_for_intent("attr#P", OperationIntent.COPY)


def test_only_backup():
    assert preserve_for_intent("attr#B", OperationIntent.BACKUP)
    assert not preserve_for_intent("attr#B", OperationIntent.COPY)
