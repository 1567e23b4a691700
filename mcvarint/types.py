# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
VarInt and VarLong value types.

These wrap a single integer together with its wire encoding so a value can
move freely between int, bytes, and the fixed-size padded form:

    v = VarInt(25565)
    bytes(v)        # b"\\xdd\\xc7\\x01"
    v.padded()      # b"\\xdd\\xc7\\x01\\x00\\x00"
    VarInt.from_bytes(b"\\xdd\\xc7\\x01") == v
"""

from dataclasses import dataclass
from typing import ClassVar, Tuple, Type, TypeVar

from .varint import (
    VARINT_MAX_LEN,
    VARLONG_MAX_LEN,
    _to_signed,
    _unsigned_bits,
    decode_signed,
    encode_signed,
    encoded_length,
)

T = TypeVar("T", bound="_VarNum")


@dataclass(frozen=True)
class _VarNum:
    """Common base for VarInt and VarLong. Stores the signed value."""
    value: int

    WIDTH: ClassVar[int] = 32
    MAX_LEN: ClassVar[int] = VARINT_MAX_LEN

    def __post_init__(self):
        if not isinstance(self.value, int):
            raise TypeError(f"Expected int, got {type(self.value).__name__}")
        # Accept both the signed and the unsigned range, store signed.
        bits = _unsigned_bits(self.value, self.WIDTH, signed=self.value < 0)
        object.__setattr__(self, "value", _to_signed(bits, self.WIDTH))

    @classmethod
    def from_int(cls: Type[T], value: int) -> T:
        """Create from a signed or unsigned integer of the right width."""
        return cls(value)

    @classmethod
    def parse(cls: Type[T], data: bytes, offset: int = 0) -> Tuple[T, int]:
        """
        Parse a value from the start of data[offset:].

        Returns:
            Tuple of (parsed value, number of bytes consumed)

        Raises:
            TruncatedError: If data ends before the terminating byte
            OverlongError: If the encoding exceeds MAX_LEN bytes
        """
        value, consumed = decode_signed(data, cls.WIDTH, offset)
        return cls(value), consumed

    @classmethod
    def from_bytes(cls: Type[T], data: bytes) -> T:
        """Decode the leading varint of data. Loose encodings are normalized."""
        return cls.parse(data)[0]

    @classmethod
    def from_padded(cls: Type[T], data: bytes) -> T:
        """Decode the fixed-size form: exactly MAX_LEN bytes, zero padded."""
        if len(data) != cls.MAX_LEN:
            raise ValueError(f"Expected {cls.MAX_LEN} bytes, got {len(data)}")
        return cls.from_bytes(data)

    @property
    def signed(self) -> int:
        return self.value

    @property
    def unsigned(self) -> int:
        return self.value & ((1 << self.WIDTH) - 1)

    def padded(self) -> bytes:
        """Return the encoding zero-padded to MAX_LEN bytes."""
        return bytes(self).ljust(self.MAX_LEN, b"\x00")

    def hex(self, sep: str = " ") -> str:
        """Return the encoding as hex, bytes separated by sep (may be empty)."""
        return bytes(self).hex(sep) if sep else bytes(self).hex()

    def __int__(self) -> int:
        return self.value

    def __bytes__(self) -> bytes:
        return encode_signed(self.value, self.WIDTH)

    def __len__(self) -> int:
        return encoded_length(self.value, self.WIDTH)


class VarInt(_VarNum):
    """A 32-bit variable-length integer (1-5 bytes)."""
    WIDTH = 32
    MAX_LEN = VARINT_MAX_LEN


class VarLong(_VarNum):
    """A 64-bit variable-length integer (1-10 bytes)."""
    WIDTH = 64
    MAX_LEN = VARLONG_MAX_LEN
