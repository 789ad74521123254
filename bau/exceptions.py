"""
Exceptions raised by the byte array utilities.
"""


class BauError(ValueError):
    """Base class for all errors raised by bau."""
    pass


class InvalidDigitError(BauError):
    """A character in hex input is not a hex digit."""

    def __init__(self, digit: str, position: int):
        self.digit = digit
        self.position = position
        super().__init__(f"invalid hex digit {digit!r} at position {position}")


class LengthMismatchError(BauError):
    """Operands of a byte-wise operation differ in length."""

    def __init__(self, length_a: int, length_b: int):
        self.length_a = length_a
        self.length_b = length_b
        super().__init__(f"length mismatch: {length_a} != {length_b}")
