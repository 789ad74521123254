import pytest

from bau.util import as_bytes


def test_as_bytes():
    assert as_bytes(b'\x01') == b'\x01'
    assert as_bytes(bytearray(b'\x02')) == b'\x02'
    assert as_bytes(memoryview(b'\x03')) == b'\x03'
    assert as_bytes([4, 5]) == b'\x04\x05'
    assert type(as_bytes(bytearray(b'\x02'))) is bytes


@pytest.mark.parametrize("value", [0, 3, True])
def test_as_bytes_rejects_int(value):
    with pytest.raises(TypeError):
        as_bytes(value)


def test_as_bytes_rejects_str():
    with pytest.raises(TypeError):
        as_bytes("00")
