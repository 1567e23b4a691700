# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
mcvarint - VarInt/VarLong codec for the Minecraft network protocol.

Values are split into 7-bit groups, least-significant first, with bit 7 of
each byte set while more bytes follow. Signed values are encoded via their
two's-complement bit pattern (no zig-zag).

Example usage:
    from mcvarint import encode_varint, decode_varint, read_varint

    data = encode_varint(25565)         # b"\\xdd\\xc7\\x01"
    value, size = decode_varint(data)   # (25565, 3)

    encode_varint(-1)                   # b"\\xff\\xff\\xff\\xff\\x0f"

    with open("packet.bin", "rb") as f:
        length = read_varint(f)
"""

from .errors import VarIntError, TruncatedError, OverlongError
from .varint import (
    CONTINUE_BIT,
    SEGMENT_BITS,
    VARINT_MAX_LEN,
    VARLONG_MAX_LEN,
    max_length,
    encode_unsigned,
    decode_unsigned,
    encode_signed,
    decode_signed,
    encoded_length,
    encode_varint,
    decode_varint,
    encode_varlong,
    decode_varlong,
    encode_uvarint,
    decode_uvarint,
    encode_uvarlong,
    decode_uvarlong,
)
from .types import VarInt, VarLong
from .stream import (
    read_varint,
    write_varint,
    read_varlong,
    write_varlong,
    read_varint_async,
    write_varint_async,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "VarIntError",
    "TruncatedError",
    "OverlongError",
    # Constants
    "CONTINUE_BIT",
    "SEGMENT_BITS",
    "VARINT_MAX_LEN",
    "VARLONG_MAX_LEN",
    # Codec
    "max_length",
    "encode_unsigned",
    "decode_unsigned",
    "encode_signed",
    "decode_signed",
    "encoded_length",
    "encode_varint",
    "decode_varint",
    "encode_varlong",
    "decode_varlong",
    "encode_uvarint",
    "decode_uvarint",
    "encode_uvarlong",
    "decode_uvarlong",
    # Types
    "VarInt",
    "VarLong",
    # Streams
    "read_varint",
    "write_varint",
    "read_varlong",
    "write_varlong",
    "read_varint_async",
    "write_varint_async",
]
