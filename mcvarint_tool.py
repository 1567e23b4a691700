#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for Minecraft protocol VarInts/VarLongs.

Usage:
    python mcvarint_tool.py encode 25565 -1
    python mcvarint_tool.py decode "dd c7 01 ff ff ff ff 0f"
    python mcvarint_tool.py read --port /dev/ttyUSB0 --count 4 --long

Requirements:
    pip install pyserial
"""

import argparse
import sys

try:
    import serial
except ImportError:
    print("Error: pyserial not installed. Run: pip install pyserial")
    sys.exit(1)

from mcvarint import VarIntError, decode_signed, decode_unsigned, encode_signed, encode_unsigned
from mcvarint.stream import read_varint


def cmd_encode(values, width: int, signed: bool):
    """Print the encoding of each value."""
    encode = encode_signed if signed else encode_unsigned
    for value in values:
        data = encode(value, width)
        print(f"{value}: {data.hex(' ')}")


def cmd_decode(data: bytes, width: int, signed: bool):
    """Decode consecutive varints from data."""
    decode = decode_signed if signed else decode_unsigned
    offset = 0
    while offset < len(data):
        value, size = decode(data, width, offset)
        print(f"{value} ({size} bytes)")
        offset += size


def cmd_read(port, count: int, width: int, signed: bool):
    """Read count varints from an open serial port."""
    for _ in range(count):
        print(read_varint(port, width, signed))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encode and decode Minecraft protocol VarInts/VarLongs"
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--long", "-l", action="store_true",
                        help="Use 64-bit VarLong instead of 32-bit VarInt")
    common.add_argument("--unsigned", "-u", action="store_true",
                        help="Treat values as unsigned")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser("encode", parents=[common],
                                          help="Encode integers to hex")
    encode_parser.add_argument("values", type=int, nargs="+", help="Integers to encode")

    # decode command
    decode_parser = subparsers.add_parser("decode", parents=[common],
                                          help="Decode varints from a hex string")
    decode_parser.add_argument("hex", help="Hex bytes, spaces allowed (e.g. \"dd c7 01\")")

    # read command
    read_parser = subparsers.add_parser("read", parents=[common],
                                        help="Read varints from a serial port")
    read_parser.add_argument("--port", "-p", required=True,
                             help="Serial port or pyserial URL (e.g., /dev/ttyUSB0, loop://)")
    read_parser.add_argument("--count", "-n", type=int, default=1,
                             help="Number of values to read")
    read_parser.add_argument("--baudrate", "-b", type=int, default=115200,
                             help="Baud rate (default 115200)")
    read_parser.add_argument("--timeout", "-t", type=float, default=5.0,
                             help="Read timeout in seconds (default 5.0)")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    width = 64 if args.long else 32
    signed = not args.unsigned

    try:
        if args.command == "encode":
            cmd_encode(args.values, width, signed)
        elif args.command == "decode":
            cmd_decode(bytes.fromhex(args.hex), width, signed)
        elif args.command == "read":
            try:
                port = serial.serial_for_url(
                    args.port, baudrate=args.baudrate, timeout=args.timeout
                )
            except serial.SerialException as e:
                print(f"Error: cannot open {args.port}: {e}")
                return 1
            try:
                cmd_read(port, args.count, width, signed)
            finally:
                port.close()
    except VarIntError as e:
        print(f"Error: malformed input: {e}")
        return 1
    except (ValueError, serial.SerialException) as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
