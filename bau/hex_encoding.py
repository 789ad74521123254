"""Hex encoding/decoding of byte arrays."""

import logging
import re
from typing import Optional

from .exceptions import InvalidDigitError
from .util import as_bytes

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = " "

# ASCII only, so pasted non-ASCII punctuation is dropped rather than decoded
_NON_WORD = re.compile(r"\W", re.ASCII)
_NON_HEX = re.compile(r"[^0-9a-fA-F]")


def hex_to_byte(hex_str: str) -> bytes:
    """Convert hex string to bytes.

    Each pair of characters is one byte. Whitespace, punctuation and ':'
    (as found in data copied out of Wireshark) are removed first. An odd
    trailing character is dropped.
    """
    digits = _NON_WORD.sub("", hex_str).replace(":", "")
    if len(digits) % 2 != 0:
        logger.warning(f"Odd hex length {len(digits)}, dropping trailing {digits[-1]!r}")
        digits = digits[:-1]

    bad = _NON_HEX.search(digits)
    if bad is not None:
        raise InvalidDigitError(bad.group(), bad.start())

    data = bytes.fromhex(digits)
    logger.debug(f"Decoded {len(data)} bytes from hex")
    return data


class HexFormat:
    """Formatting options for rendering bytes as hex digits.

    After every ``group_size`` bytes the separator is written ``pad_size``
    times, including after the final group when it is complete. Options are
    fixed at construction.
    """

    def __init__(self, separator: Optional[str] = DEFAULT_SEPARATOR, pad_size: int = 1,
                 group_size: int = 1, upper: bool = False):
        if separator is None:
            separator = DEFAULT_SEPARATOR
        if group_size == 0:
            group_size = 1
        self._separator = separator
        self._pad_size = pad_size
        self._group_size = group_size
        self._upper = upper

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def pad_size(self) -> int:
        return self._pad_size

    @property
    def group_size(self) -> int:
        return self._group_size

    @property
    def upper(self) -> bool:
        return self._upper

    @property
    def padding(self) -> str:
        """Text written after each complete group."""
        return self._separator * max(self._pad_size, 0)

    def format(self, data: Optional[bytes]) -> str:
        """Render ``data`` as hex digits. ``None`` renders as an empty string."""
        if data is None:
            return ""
        data = as_bytes(data)

        if self.group_size < 0:
            # a negative group size never fills, so no separator is written
            groups = [data.hex()]
            padding = ""
        else:
            groups = [data[i:i + self.group_size] for i in range(0, len(data), self.group_size)]
            groups = [g.hex() for g in groups]
            padding = self.padding

        parts = []
        for group in groups:
            parts.append(group.upper() if self.upper else group)
            if self.group_size > 0 and len(group) == 2 * self.group_size:
                parts.append(padding)
        return "".join(parts)

    def __repr__(self) -> str:
        return (f"HexFormat(separator={self.separator!r}, pad_size={self.pad_size}, "
                f"group_size={self.group_size}, upper={self.upper})")


DEFAULT_FORMAT = HexFormat()
PAIRED_FORMAT = HexFormat(DEFAULT_SEPARATOR, 1, 2, True)


def byte_to_hex(data: Optional[bytes], separator: Optional[str] = DEFAULT_SEPARATOR,
                pad_size: int = 1, group_size: int = 1, upper: bool = False) -> str:
    """Convert bytes to a hex string, e.g. "1a 2b 3c " by default."""
    return HexFormat(separator, pad_size, group_size, upper).format(data)


def byte_to_hex_pairs(data: Optional[bytes]) -> str:
    """Convert bytes to upper case hex with pairs of bytes separated by spaces, e.g. "1A2B 3C4D "."""
    return PAIRED_FORMAT.format(data)


def byte_to_hex_spaced(data: Optional[bytes], num_spaces: int) -> str:
    """Convert bytes to lower case hex with ``num_spaces`` spaces after each byte."""
    return byte_to_hex(data, DEFAULT_SEPARATOR, num_spaces, 1, False)


def byte_to_hex_separated(data: Optional[bytes], separator: Optional[str]) -> str:
    """Convert bytes to lower case hex with ``separator`` after each byte."""
    return byte_to_hex(data, separator, 1, 1, False)
