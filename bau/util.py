"""Input coercion shared by the byte array operations."""


def as_bytes(data) -> bytes:
    """Return ``data`` as an immutable bytes copy.

    Accepts bytes-like values and iterables of ints in 0-255. A bare int is
    rejected, since ``bytes(n)`` would quietly produce n zero bytes.
    """
    if isinstance(data, int):
        raise TypeError(f"expected a bytes-like value, got {type(data).__name__}")
    return bytes(data)
