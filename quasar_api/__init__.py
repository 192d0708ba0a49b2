"""SAR image metadata, CRC-16 checksums, shared enums and power-switch messages."""

__version__ = "0.1.0"
__all__ = ["crc16", "enums", "metadata", "powerswitch"]