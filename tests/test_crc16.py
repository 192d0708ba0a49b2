import pytest

from quasar_api.crc16 import byteswap16, crc16, crc16_ccitt

CHECK_INPUT = b"123456789"


def test_crc16_modbus_check_value():
    assert crc16(CHECK_INPUT) == 0x4B37


def test_crc16_ccitt_check_value():
    assert crc16_ccitt(CHECK_INPUT) == 0x29B1


@pytest.mark.parametrize("func", [crc16, crc16_ccitt])
@pytest.mark.parametrize("data", [b"", None, bytearray(), memoryview(b"")])
def test_empty_input_gives_zero(func, data):
    assert func(data) == 0


@pytest.mark.parametrize(
    "data", [b"\x00", b"hello world", bytes(range(256)), b"\xff" * 40]
)
def test_crc16_residue_is_zero(data):
    value = crc16(data)
    assert crc16(data + value.to_bytes(2, "little")) == 0


@pytest.mark.parametrize(
    "data", [b"\x00", b"hello world", bytes(range(256)), b"\xff" * 40]
)
def test_crc16_ccitt_residue_is_zero(data):
    value = crc16_ccitt(data)
    assert crc16_ccitt(data + value.to_bytes(2, "big")) == 0


@pytest.mark.parametrize("func", [crc16, crc16_ccitt])
def test_accepts_any_bytes_like(func):
    payload = b"quasar metadata"
    assert func(bytearray(payload)) == func(payload)
    assert func(memoryview(payload)) == func(payload)


@pytest.mark.parametrize("func", [crc16, crc16_ccitt])
def test_result_fits_sixteen_bits(func):
    for length in range(1, 64):
        assert 0 <= func(bytes(range(length))) <= 0xFFFF


@pytest.mark.parametrize("func", [crc16, crc16_ccitt])
def test_single_bit_change_changes_checksum(func):
    base = bytearray(b"abcdefgh")
    original = func(base)
    base[3] ^= 0x01
    assert func(base) != original
    base[3] ^= 0x01
    assert func(base) == original


def test_byteswap16_marker():
    assert byteswap16(0xE1FF) == 0xFFE1


@pytest.mark.parametrize("value", [0, 1, 0x00FF, 0xFF00, 0xABCD, 0xFFFF])
def test_byteswap16_is_involution(value):
    assert byteswap16(byteswap16(value)) == value


@pytest.mark.parametrize("value", [0, 0x1234, 0xFFFF])
def test_byteswap16_matches_byte_order(value):
    swapped = byteswap16(value)
    assert swapped.to_bytes(2, "little") == value.to_bytes(2, "big")


@pytest.mark.parametrize("value", [-1, 0x10000])
def test_byteswap16_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        byteswap16(value)