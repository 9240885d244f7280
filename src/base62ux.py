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
# Filename: src/base62ux.py

"""
Encodes and decodes arbitrary binary data as Base62UX strings.

Base62UX uses the 62 symbols `0-9A-Za-z` (in that order) and adds two
refinements over plain base conversion:

-   **Leading zero bytes survive**: each leading 0x00 byte is written as a
    leading '0' symbol, so `b"\\x00\\x00\\x01"` and `b"\\x01"` encode differently.
-   **Cosmetic separator**: the underscore `_` may appear anywhere in an
    encoded string and is ignored on decode. `encode()` can optionally insert
    a single separator after the first `group_size` characters.

There is no padding and the encoding is case-sensitive.

Usage:
    from base62ux import encode, decode, normalize

    text = encode(b"\\x00\\x00hello", group_size=4)
    data = decode(text)
    canonical = normalize(text)
"""

import logging
import operator
from types import MappingProxyType

logger = logging.getLogger(__name__)

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)
SEPARATOR = "_"
ZERO_SYMBOL = ALPHABET[0]

# Symbol -> digit value, read-only
_DIGIT_VALUES = MappingProxyType({char: index for index, char in enumerate(ALPHABET)})


class Base62UXError(Exception):
    """Base class for all Base62UX errors."""


class InvalidArgument(Base62UXError, TypeError):
    """Raised when an argument has the wrong type or an unusable value."""


class InvalidCharacter(Base62UXError, ValueError):
    """Raised when decode meets a character outside the Base62UX alphabet."""

    def __init__(self, character: str, index: int):
        super().__init__(character, index)
        self.character = character
        self.index = index

    def __str__(self):
        return f"Invalid Base62UX character {self.character!r} at index {self.index}"


def _validate_group_size(group_size) -> int:
    if group_size is None:
        return 0
    # bool is an int subclass
    if isinstance(group_size, bool):
        raise InvalidArgument(f"group_size must be a non-negative integer, got {group_size!r}")
    if isinstance(group_size, float):
        if not group_size.is_integer():
            raise InvalidArgument(f"group_size must be a non-negative integer, got {group_size!r}")
        group_size = int(group_size)
    else:
        try:
            group_size = operator.index(group_size)
        except TypeError as e:
            raise InvalidArgument(f"group_size must be a non-negative integer, got {group_size!r}") from e
    if group_size < 0:
        raise InvalidArgument(f"group_size must be a non-negative integer, got {group_size}")
    return group_size


def _require_text(text, operation: str) -> str:
    if not isinstance(text, str):
        raise InvalidArgument(f"{operation}: input must be a str, got {type(text).__name__}")
    return text


def encode(data, group_size=0) -> str:
    """
    Encodes a bytes-like object into a Base62UX string.

    Args:
        data (bytes | bytearray | memoryview): The bytes to encode.
        group_size (int, optional): When positive and shorter than the encoded
            string, a single separator is inserted after this many characters.
            0 or None returns the canonical form. Integral floats such as
            4.0 are accepted.

    Returns:
        str: The canonical or grouped encoding. Empty input gives "".

    Raises:
        InvalidArgument: If `data` is not bytes-like or `group_size` is not a
            non-negative integer.
    """
    group_size = _validate_group_size(group_size)
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidArgument(f"encode: data must be bytes-like, got {type(data).__name__}")

    data = bytes(data)
    if not data:
        return ""

    significant = data.lstrip(b"\x00")
    zeros = len(data) - len(significant)

    digits = []
    num = int.from_bytes(significant, "big")
    while num > 0:
        num, remainder = divmod(num, BASE)
        digits.append(ALPHABET[remainder])
    digits.reverse()

    encoded_str = ZERO_SYMBOL * zeros + "".join(digits)
    logger.debug(f"Encoded {len(data)} bytes ({zeros} leading zero) into {len(encoded_str)} symbols.")

    if 0 < group_size < len(encoded_str):
        encoded_str = encoded_str[:group_size] + SEPARATOR + encoded_str[group_size:]
    return encoded_str


def decode(text) -> bytes:
    """
    Decodes a Base62UX string, with or without separators, back into bytes.

    Raises:
        InvalidArgument: If `text` is not a str.
        InvalidCharacter: If `text` holds a character outside the alphabet.
            The reported index refers to the string with separators removed.
    """
    canonical = normalize(_require_text(text, "decode"))
    if not canonical:
        return b""

    zeros = len(canonical) - len(canonical.lstrip(ZERO_SYMBOL))

    num = 0
    for index in range(zeros, len(canonical)):
        char = canonical[index]
        value = _DIGIT_VALUES.get(char)
        if value is None:
            raise InvalidCharacter(char, index)
        num = num * BASE + value

    body = num.to_bytes((num.bit_length() + 7) // 8, "big")
    logger.debug(f"Decoded {len(canonical)} symbols into {zeros + len(body)} bytes.")
    return bytes(zeros) + body


def normalize(text) -> str:
    """Removes every separator, returning the canonical form of `text`."""
    return _require_text(text, "normalize").replace(SEPARATOR, "")


def is_canonical(text) -> bool:
    """Returns True if `text` consists solely of alphabet symbols."""
    return all(char in _DIGIT_VALUES for char in _require_text(text, "is_canonical"))


def canonicalize(text) -> str:
    """
    Validates a (possibly decorated) Base62UX string and returns its canonical form.

    Unlike `normalize()`, every character is checked, so malformed input
    raises `InvalidCharacter` instead of passing through.
    """
    return encode(decode(text))

# === End of src/base62ux.py ===
