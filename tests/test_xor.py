import pytest

from bau import LengthMismatchError, xor


def test_xor():
    assert xor(b'\x00\x01\x02', b'\xff\xff\xff') == b'\xff\xfe\xfd'


def test_xor_empty():
    assert xor(b'', b'') == b''


def test_xor_self_is_zero():
    data = b'\x12\x34\x56\x78'
    assert xor(data, data) == b'\x00' * 4


def test_xor_self_inverse():
    a = b'secret'
    b = b'\x01\x02\x03\x04\x05\x06'
    assert xor(xor(a, b), b) == a


def test_xor_commutative():
    a = bytes(range(16))
    b = bytes(range(255, 239, -1))
    assert xor(a, b) == xor(b, a)


def test_xor_returns_new_bytes():
    a = bytearray(b'\x0f\x0f')
    result = xor(a, [0xf0, 0xf0])
    assert result == b'\xff\xff'
    assert type(result) is bytes
    assert a == bytearray(b'\x0f\x0f')


def test_xor_length_mismatch():
    with pytest.raises(LengthMismatchError) as excinfo:
        xor(b'\x00' * 3, b'\x00' * 4)
    assert excinfo.value.length_a == 3
    assert excinfo.value.length_b == 4
    assert isinstance(excinfo.value, ValueError)


def test_xor_rejects_int():
    with pytest.raises(TypeError):
        xor(3, 3)
    with pytest.raises(TypeError):
        xor(b'\x00', 1)
