# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for the VarInt and VarLong value types."""

import pytest
from mcvarint.errors import OverlongError, TruncatedError
from mcvarint.types import VarInt, VarLong


class TestVarIntConstruction:
    """Tests for building VarInt values."""

    def test_from_int(self):
        """from_int and the constructor agree."""
        assert VarInt.from_int(25565) == VarInt(25565)

    def test_unsigned_input_stored_signed(self):
        """Unsigned bit patterns are normalized to the signed value."""
        assert VarInt(0xFFFFFFFF) == VarInt(-1)
        assert VarInt(0xFFFFFFFF).value == -1
        assert VarInt(0x80000000).value == -(2**31)

    def test_out_of_range_raises(self):
        """Values that fit neither the signed nor unsigned range are rejected."""
        with pytest.raises(ValueError, match="out of range"):
            VarInt(2**32)
        with pytest.raises(ValueError, match="out of range"):
            VarInt(-(2**31) - 1)

    def test_immutable(self):
        """Values are frozen."""
        v = VarInt(1)
        with pytest.raises(AttributeError):
            v.value = 2

    def test_non_int_raises(self):
        """Non-integers get the codec's TypeError, not a comparison error."""
        with pytest.raises(TypeError, match="Expected int, got str"):
            VarInt("1")
        with pytest.raises(TypeError, match="Expected int, got float"):
            VarLong(1.0)

    def test_repr(self):
        """repr shows the signed value."""
        assert repr(VarInt(0xFFFFFFFF)) == "VarInt(value=-1)"


class TestVarIntConversions:
    """Tests for converting VarInt to other representations."""

    def test_bytes(self):
        """bytes() gives the minimal encoding."""
        assert bytes(VarInt(25565)) == b"\xDD\xC7\x01"
        assert bytes(VarInt(-1)) == b"\xFF\xFF\xFF\xFF\x0F"

    def test_len(self):
        """len() is the encoded length."""
        assert len(VarInt(0)) == 1
        assert len(VarInt(25565)) == 3
        assert len(VarInt(-1)) == 5

    def test_int(self):
        """int() is the signed value."""
        assert int(VarInt(0xFFFFFFFF)) == -1

    def test_signed_and_unsigned(self):
        """Both interpretations are available."""
        v = VarInt(-1)
        assert v.signed == -1
        assert v.unsigned == 0xFFFFFFFF

    def test_padded(self):
        """padded() fills up to MAX_LEN with zeros."""
        assert VarInt(25565).padded() == b"\xDD\xC7\x01\x00\x00"
        assert VarInt(-1).padded() == b"\xFF\xFF\xFF\xFF\x0F"

    def test_hex(self):
        """hex() is space separated."""
        assert VarInt(25565).hex() == "dd c7 01"
        assert VarInt(128).hex("") == "8001"
        assert VarLong(-1).hex("") == "ff" * 9 + "01"

    def test_not_usable_as_index(self):
        """A VarInt is not silently accepted as a sequence index."""
        with pytest.raises(TypeError):
            [10, 20][VarInt(1)]
        with pytest.raises(TypeError):
            b"abc"[:VarInt(1)]


class TestVarIntParsing:
    """Tests for VarInt.from_bytes, from_padded and parse."""

    def test_from_bytes(self):
        """Decode the leading varint."""
        assert VarInt.from_bytes(b"\xDD\xC7\x01") == VarInt(25565)

    def test_from_bytes_ignores_trailing(self):
        """Bytes after the terminator are ignored."""
        assert VarInt.from_bytes(b"\x01\xFF\xFF") == VarInt(1)

    def test_from_bytes_normalizes_loose(self):
        """A loose encoding becomes the minimal one."""
        v = VarInt.from_bytes(b"\x80\x00")
        assert v == VarInt(0)
        assert bytes(v) == b"\x00"

        v = VarInt.from_bytes(b"\x81\x81\x80\x00")
        assert bytes(v) == b"\x81\x01"

    def test_from_padded(self):
        """The fixed-size form decodes back."""
        assert VarInt.from_padded(b"\xDD\xC7\x01\x00\x00") == VarInt(25565)

    def test_from_padded_wrong_size_raises(self):
        """Padded input must be exactly MAX_LEN bytes."""
        with pytest.raises(ValueError, match="Expected 5 bytes"):
            VarInt.from_padded(b"\xDD\xC7\x01")

    def test_from_padded_overlong_raises(self):
        """All continuation bits set never terminates."""
        with pytest.raises(OverlongError):
            VarInt.from_padded(b"\x80" * 5)

    def test_parse_with_offset(self):
        """parse returns the value and bytes consumed."""
        assert VarInt.parse(b"\xAA\x80\x01\xCC", offset=1) == (VarInt(128), 2)

    def test_parse_truncated_raises(self):
        """Truncation is reported."""
        with pytest.raises(TruncatedError):
            VarInt.parse(b"\xFF\xFF")


class TestVarLong:
    """Tests for VarLong."""

    def test_bytes_and_len(self):
        """Negative VarLongs are ten bytes."""
        v = VarLong(-1)
        assert bytes(v) == b"\xFF" * 9 + b"\x01"
        assert len(v) == 10
        assert v.hex() == "ff ff ff ff ff ff ff ff ff 01"

    def test_unsigned_input(self):
        """The full unsigned 64-bit range is accepted."""
        assert VarLong(2**64 - 1) == VarLong(-1)
        assert VarLong(-1).unsigned == 2**64 - 1

    def test_wider_than_varint(self):
        """Values a VarInt rejects fit in a VarLong."""
        with pytest.raises(ValueError):
            VarInt(2**40)
        assert VarLong.from_bytes(bytes(VarLong(2**40))) == VarLong(2**40)

    def test_padded(self):
        """Padded to ten bytes."""
        assert VarLong(1).padded() == b"\x01" + b"\x00" * 9
        assert VarLong.from_padded(VarLong(1).padded()) == VarLong(1)

    def test_not_equal_to_varint(self):
        """Different widths never compare equal."""
        assert VarInt(1) != VarLong(1)

    def test_hashable(self):
        """Equal values hash the same."""
        assert len({VarLong(-1), VarLong(2**64 - 1), VarLong(0)}) == 2
