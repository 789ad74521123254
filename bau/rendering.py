"""Readable rendering of byte arrays."""

from .control_codes import label_of
from .util import as_bytes


def byte_to_text(data: bytes) -> str:
    """Convert bytes to the characters they represent, four columns per byte.

    Control codes (0x00-0x20, 0x7F) are shown by mnemonic, e.g. "SPC" for
    a space. Every other byte is shown as the character with that code
    point, so 0x80-0xFF map through Latin-1.
    """
    parts = []
    for value in as_bytes(data):
        pad, label = label_of(value)
        parts.append(pad)
        parts.append(label)
    return "".join(parts)
