"""CRC-16 checksums used by the on-board data formats."""

from __future__ import annotations

from typing import Optional, Union

__all__ = ["crc16", "crc16_ccitt", "byteswap16"]

BytesLike = Union[bytes, bytearray, memoryview]

_MODBUS_POLY = 0xA001
_CCITT_POLY = 0x1021
_INITIAL = 0xFFFF


def _build_ccitt_table() -> tuple[int, ...]:
    table = []
    for index in range(256):
        crc = index << 8
        for _ in range(8):
            crc = ((crc << 1) ^ _CCITT_POLY) if crc & 0x8000 else (crc << 1)
        table.append(crc & 0xFFFF)
    return tuple(table)


_CCITT_TABLE = _build_ccitt_table()


def crc16(data: Optional[BytesLike]) -> int:
    """Modbus CRC-16 (CRC-16-ANSI, reflected polynomial 0xA001).

    Returns 0 for empty or missing data.
    """
    if not data:
        return 0
    crc = _INITIAL
    for byte in bytes(data):
        crc ^= byte
        for _ in range(8):
            crc = (crc >> 1) ^ _MODBUS_POLY if crc & 1 else crc >> 1
    return crc


def crc16_ccitt(data: Optional[BytesLike]) -> int:
    """CRC-16-CCITT (polynomial 0x1021, initial value 0xFFFF).

    Returns 0 for empty or missing data.
    """
    if not data:
        return 0
    crc = _INITIAL
    for byte in bytes(data):
        crc = ((crc << 8) & 0xFFFF) ^ _CCITT_TABLE[(crc >> 8) ^ byte]
    return crc


def byteswap16(value: int) -> int:
    """Swap the two bytes of a 16-bit unsigned value."""
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"value {value!r} is not a 16-bit unsigned integer")
    return ((value >> 8) | (value << 8)) & 0xFFFF