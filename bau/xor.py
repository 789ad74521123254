"""Byte-wise XOR."""

from .exceptions import LengthMismatchError
from .util import as_bytes


def xor(seq_a: bytes, seq_b: bytes) -> bytes:
    """Return the xor of two sequences of bytes, which must be the same length."""
    seq_a = as_bytes(seq_a)
    seq_b = as_bytes(seq_b)
    if len(seq_a) != len(seq_b):
        raise LengthMismatchError(len(seq_a), len(seq_b))
    return bytes(a ^ b for a, b in zip(seq_a, seq_b))
