"""
Byte Array Utilities.

Conversions for working with raw byte arrays: hex text to bytes and back,
readable dumps with control code mnemonics, and byte-wise XOR.
"""

import logging

from .exceptions import BauError, InvalidDigitError, LengthMismatchError
from .hex_encoding import (
    DEFAULT_FORMAT,
    PAIRED_FORMAT,
    HexFormat,
    byte_to_hex,
    byte_to_hex_pairs,
    byte_to_hex_separated,
    byte_to_hex_spaced,
    hex_to_byte,
)
from .rendering import byte_to_text
from .xor import xor

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BauError",
    "InvalidDigitError",
    "LengthMismatchError",
    "DEFAULT_FORMAT",
    "PAIRED_FORMAT",
    "HexFormat",
    "byte_to_hex",
    "byte_to_hex_pairs",
    "byte_to_hex_separated",
    "byte_to_hex_spaced",
    "hex_to_byte",
    "byte_to_text",
    "xor",
]
