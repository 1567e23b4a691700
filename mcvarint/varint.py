# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
VarInt/VarLong encoding/decoding (Minecraft protocol flavour).

Each byte carries 7 bits of the value, least-significant group first, with
bit 7 set when more bytes follow. Signed values are encoded through their
two's-complement bit pattern, not zig-zag, so negative numbers always take
the maximum length (5 bytes for a VarInt, 10 for a VarLong).
"""

from typing import Tuple

from .errors import OverlongError, TruncatedError

CONTINUE_BIT = 0x80
SEGMENT_BITS = 0x7F

VARINT_MAX_LEN = 5
VARLONG_MAX_LEN = 10

_MAX_LEN = {32: VARINT_MAX_LEN, 64: VARLONG_MAX_LEN}


def max_length(width: int) -> int:
    """
    Return the maximum encoded length for an integer width.

    Args:
        width: Integer width in bits (32 or 64)

    Returns:
        5 for 32-bit values, 10 for 64-bit values

    Raises:
        ValueError: If width is not 32 or 64
    """
    try:
        return _MAX_LEN[width]
    except KeyError:
        raise ValueError(f"Unsupported width: {width} (expected 32 or 64)") from None


def _unsigned_bits(value: int, width: int, signed: bool) -> int:
    """Validate value against the width and return its unsigned bit pattern."""
    max_length(width)
    if not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")

    if signed:
        bound = 1 << (width - 1)
        if not -bound <= value < bound:
            raise ValueError(f"Value {value} out of range for signed {width}-bit varint")
        return value & ((1 << width) - 1)

    if value < 0:
        raise ValueError("Cannot encode negative value as unsigned varint")
    if value >> width:
        raise ValueError(f"Value {value} out of range for unsigned {width}-bit varint")
    return value


def _to_signed(value: int, width: int) -> int:
    if value & (1 << (width - 1)):
        value -= 1 << width
    return value


def encode_unsigned(value: int, width: int = 32) -> bytes:
    """
    Encode an unsigned integer as a varint.

    Args:
        value: Integer in [0, 2**width)
        width: Integer width in bits (32 or 64)

    Returns:
        Varint-encoded bytes (1-5 bytes for 32-bit, 1-10 for 64-bit)

    Raises:
        ValueError: If value is negative or does not fit in width bits
    """
    value = _unsigned_bits(value, width, signed=False)

    result = []
    while value >= CONTINUE_BIT:
        result.append((value & SEGMENT_BITS) | CONTINUE_BIT)
        value >>= 7
    result.append(value)
    return bytes(result)


def decode_unsigned(data: bytes, width: int = 32, offset: int = 0) -> Tuple[int, int]:
    """
    Decode an unsigned varint from bytes.

    Bits of the final group that fall beyond the target width are dropped,
    and non-minimal encodings (e.g. ``80 00``) are accepted.

    Args:
        data: Bytes containing the varint
        width: Integer width in bits (32 or 64)
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, number of bytes consumed)

    Raises:
        TruncatedError: If data ends before the terminating byte
        OverlongError: If the varint is longer than the width allows
    """
    limit = max_length(width)
    if offset < 0:
        raise ValueError(f"Negative offset: {offset}")

    value = 0
    shift = 0
    pos = offset

    while True:
        if pos >= len(data):
            raise TruncatedError(
                "Varint decode: unexpected end of data", consumed=max(0, pos - offset)
            )

        byte = data[pos]
        pos += 1
        value |= (byte & SEGMENT_BITS) << shift

        if not (byte & CONTINUE_BIT):
            break

        if pos - offset >= limit:
            raise OverlongError(
                f"Varint decode: value too long (more than {limit} bytes)", limit
            )
        shift += 7

    return value & ((1 << width) - 1), pos - offset


def encode_signed(value: int, width: int = 32) -> bytes:
    """
    Encode a signed integer as a varint.

    The two's-complement bit pattern is encoded as-is, so any negative value
    produces the maximum length.

    Raises:
        ValueError: If value does not fit in a signed width-bit integer
    """
    return encode_unsigned(_unsigned_bits(value, width, signed=True), width)


def decode_signed(data: bytes, width: int = 32, offset: int = 0) -> Tuple[int, int]:
    """Decode a varint and reinterpret it as a two's-complement integer."""
    value, consumed = decode_unsigned(data, width, offset)
    return _to_signed(value, width), consumed


def encoded_length(value: int, width: int = 32, signed: bool = True) -> int:
    """Return the number of bytes value occupies once encoded."""
    value = _unsigned_bits(value, width, signed)
    return max(1, (value.bit_length() + 6) // 7)


def encode_varint(value: int) -> bytes:
    """Encode a signed 32-bit VarInt."""
    return encode_signed(value, 32)


def decode_varint(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """Decode a signed 32-bit VarInt."""
    return decode_signed(data, 32, offset)


def encode_varlong(value: int) -> bytes:
    """Encode a signed 64-bit VarLong."""
    return encode_signed(value, 64)


def decode_varlong(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """Decode a signed 64-bit VarLong."""
    return decode_signed(data, 64, offset)


def encode_uvarint(value: int) -> bytes:
    return encode_unsigned(value, 32)


def decode_uvarint(data: bytes, offset: int = 0) -> Tuple[int, int]:
    return decode_unsigned(data, 32, offset)


def encode_uvarlong(value: int) -> bytes:
    return encode_unsigned(value, 64)


def decode_uvarlong(data: bytes, offset: int = 0) -> Tuple[int, int]:
    return decode_unsigned(data, 64, offset)
