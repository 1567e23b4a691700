# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Read and write varints on caller-owned streams.

The blocking helpers accept anything with ``read(n)`` / ``write(data)``:
files, io.BytesIO, or a pyserial ``serial.Serial``. A read that returns no
data (end of file, or a serial read timeout) is reported as truncation.
The async helpers work on asyncio.StreamReader / asyncio.StreamWriter.
"""

import asyncio
from typing import BinaryIO

from .errors import OverlongError, TruncatedError
from .varint import (
    CONTINUE_BIT,
    SEGMENT_BITS,
    _to_signed,
    encode_signed,
    encode_unsigned,
    max_length,
)


def _finish(value: int, width: int, signed: bool) -> int:
    value &= (1 << width) - 1
    return _to_signed(value, width) if signed else value


def _encode(value: int, width: int, signed: bool) -> bytes:
    return encode_signed(value, width) if signed else encode_unsigned(value, width)


def read_varint(reader: BinaryIO, width: int = 32, signed: bool = True) -> int:
    """
    Read one varint from a stream, one byte at a time.

    Args:
        reader: Object with a read(n) method
        width: Integer width in bits (32 or 64)
        signed: Reinterpret the result as two's complement

    Returns:
        Decoded value

    Raises:
        TruncatedError: If the stream runs out before the terminating byte
        OverlongError: If the varint is longer than the width allows
    """
    limit = max_length(width)
    value = 0

    for index in range(limit):
        byte = reader.read(1)
        if not byte:
            raise TruncatedError("Varint read: unexpected end of stream", consumed=index)
        value |= (byte[0] & SEGMENT_BITS) << (7 * index)
        if not (byte[0] & CONTINUE_BIT):
            return _finish(value, width, signed)

    raise OverlongError(f"Varint read: value too long (more than {limit} bytes)", limit)


def write_varint(writer: BinaryIO, value: int, width: int = 32, signed: bool = True) -> int:
    """
    Write one varint to a stream.

    Returns:
        Number of bytes written
    """
    data = _encode(value, width, signed)
    writer.write(data)
    return len(data)


def read_varlong(reader: BinaryIO, signed: bool = True) -> int:
    return read_varint(reader, 64, signed)


def write_varlong(writer: BinaryIO, value: int, signed: bool = True) -> int:
    return write_varint(writer, value, 64, signed)


async def read_varint_async(
    reader: asyncio.StreamReader,
    width: int = 32,
    signed: bool = True,
) -> int:
    """Read one varint from an asyncio stream. Same errors as read_varint."""
    limit = max_length(width)
    value = 0

    for index in range(limit):
        try:
            byte = await reader.readexactly(1)
        except asyncio.IncompleteReadError:
            raise TruncatedError(
                "Varint read: unexpected end of stream", consumed=index
            ) from None
        value |= (byte[0] & SEGMENT_BITS) << (7 * index)
        if not (byte[0] & CONTINUE_BIT):
            return _finish(value, width, signed)

    raise OverlongError(f"Varint read: value too long (more than {limit} bytes)", limit)


async def write_varint_async(
    writer: asyncio.StreamWriter,
    value: int,
    width: int = 32,
    signed: bool = True,
) -> int:
    """Write one varint to an asyncio stream and wait for it to drain."""
    data = _encode(value, width, signed)
    writer.write(data)
    await writer.drain()
    return len(data)
