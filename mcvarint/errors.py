# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Exceptions raised when decoding malformed VarInt/VarLong input."""


class VarIntError(ValueError):
    """Base exception for malformed varint data."""
    pass


class TruncatedError(VarIntError):
    """Input ended before a byte with the continuation bit clear."""

    def __init__(self, message: str, consumed: int = 0):
        super().__init__(message)
        self.consumed = consumed


class OverlongError(VarIntError):
    """Input did not terminate within the maximum length for its width."""

    def __init__(self, message: str, max_len: int):
        super().__init__(message)
        self.max_len = max_len
