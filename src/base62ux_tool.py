#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Base62UX: Human-Friendly Binary Encoding
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: src/base62ux_tool.py

"""
Command-Line Interface for the Base62UX codec.

Subcommands:

1.  **encode**: Encodes bytes given as hex (`--hex`), read from a file
    (`--file`), generated at random (`--random N`) or read from stdin.
    `--group N` inserts one separator after the first N characters; the
    default comes from `[Codec] group_size` in config.ini.
2.  **decode**: Decodes a Base62UX string. Prints the bytes as hex, or writes
    them raw to `--output`.
3.  **normalize**: Prints the canonical form of a string (separators removed).
4.  **demo**: Round-trips random byte buffers, plain and with separators,
    and reports whether every buffer came back intact.

Exit codes: 0 on success, 1 on invalid input or I/O failure.
"""

import argparse
import logging
import secrets
import sys

from colorama import Fore, init

from base62ux import Base62UXError, SEPARATOR, decode, encode, normalize
from config_loader import APP_CONFIG, get_config_value, get_log_level

# Initialize colorama
init(autoreset=True, strip=False)


def _read_input_bytes(args) -> bytes:
    """Returns the bytes selected by the encode subcommand's source options."""
    if args.hex is not None:
        try:
            return bytes.fromhex(args.hex)
        except ValueError as e:
            raise ValueError(f"--hex is not valid hexadecimal: {e}") from e
    if args.file is not None:
        with open(args.file, 'rb') as f:
            return f.read()
    if args.random is not None:
        return secrets.token_bytes(args.random)
    return sys.stdin.buffer.read()


def _decorate(text: str, every: int) -> str:
    """Inserts a separator after every `every` characters."""
    return SEPARATOR.join(text[i:i + every] for i in range(0, len(text), every))


def run_encode(args) -> int:
    data = _read_input_bytes(args)
    group_size = args.group
    if group_size is None:
        group_size = get_config_value(APP_CONFIG, 'Codec', 'group_size', fallback=0, value_type=int)
    logging.debug(f"Encoding {len(data)} bytes with group size {group_size}.")
    print(encode(data, group_size))
    return 0


def run_decode(args) -> int:
    data = decode(args.text)
    if args.output:
        with open(args.output, 'wb') as f:
            f.write(data)
        logging.info(f"{Fore.CYAN}Wrote {len(data)} bytes to '{args.output}'.")
    else:
        print(data.hex())
    return 0


def run_normalize(args) -> int:
    print(normalize(args.text))
    return 0


def run_demo(args) -> int:
    """Round-trips random buffers and reports any mismatch."""
    size = args.size
    if size is None:
        size = get_config_value(APP_CONFIG, 'Demo', 'sample_size', fallback=32, value_type=int)
    iterations = args.iterations
    if iterations is None:
        iterations = get_config_value(APP_CONFIG, 'Demo', 'iterations', fallback=100, value_type=int)
    if size is None or size < 1:
        raise ValueError(f"demo size must be a positive integer, got {size}")
    if iterations is None or iterations < 1:
        raise ValueError(f"demo iterations must be a positive integer, got {iterations}")

    failures = 0
    for i in range(iterations):
        data = secrets.token_bytes(size)
        text = encode(data)
        decoded = decode(text)
        if i == 0:
            # text, input length, output length, match
            print(f"{text} {len(data)} {len(decoded)} {decoded == data}")
            print(encode(data, 4))
        if decoded != data or decode(_decorate(text, 4)) != data:
            failures += 1
            logging.error(f"{Fore.RED}Round-trip failed for case {i}: {data.hex()}")

    if failures:
        print(f"{Fore.RED}{failures} of {iterations} round-trips failed.")
        return 1
    print(f"{Fore.GREEN}All {iterations} round-trips of {size} bytes succeeded.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="base62ux", description="Encode and decode binary data as Base62UX text.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_encode = subparsers.add_parser("encode", help="Encode bytes into a Base62UX string.")
    source = p_encode.add_mutually_exclusive_group()
    source.add_argument("--hex", help="Bytes to encode, as a hexadecimal string.")
    source.add_argument("--file", help="Path of a file whose contents are encoded.")
    source.add_argument("--random", type=int, metavar="N", help="Encode N random bytes.")
    p_encode.add_argument("--group", type=int, metavar="N", help="Insert one separator after the first N characters.")
    p_encode.set_defaults(func=run_encode)

    p_decode = subparsers.add_parser("decode", help="Decode a Base62UX string.")
    p_decode.add_argument("text", help="The encoded string (separators allowed).")
    p_decode.add_argument("--output", help="Write the raw bytes to this file instead of printing hex.")
    p_decode.set_defaults(func=run_decode)

    p_normalize = subparsers.add_parser("normalize", help="Strip separators from a Base62UX string.")
    p_normalize.add_argument("text", help="The encoded string.")
    p_normalize.set_defaults(func=run_normalize)

    p_demo = subparsers.add_parser("demo", help="Round-trip random buffers as a self-check.")
    p_demo.add_argument("--size", type=int, help="Bytes per buffer (default from config.ini).")
    p_demo.add_argument("--iterations", type=int, help="Number of buffers (default from config.ini).")
    p_demo.set_defaults(func=run_demo)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else get_log_level(APP_CONFIG)
    logging.basicConfig(level=log_level, format='%(levelname)s: %(message)s', force=True)

    try:
        return args.func(args)
    except (Base62UXError, OSError, ValueError) as e:
        print(f"{Fore.RED}ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

# === End of src/base62ux_tool.py ===
