"""Wire messages for the power switch control protocol."""

from __future__ import annotations

import struct
from dataclasses import dataclass

__all__ = [
    "REQUEST_MARKER",
    "REQUEST_DUMMY_CHANNEL",
    "RESPONSE_MARKER",
    "PowerSwitchRequest",
    "PowerSwitchResponse",
]

REQUEST_MARKER = 0xAAAAAAAA
REQUEST_DUMMY_CHANNEL = 0x270F
RESPONSE_MARKER = 0xBBBBBBBB

_REQUEST = struct.Struct("<IHHH")
_RESPONSE = struct.Struct("<HBBII")


def _unpack(layout: struct.Struct, data, what: str) -> tuple:
    raw = bytes(data)
    if len(raw) != layout.size:
        raise ValueError(
            f"{what} must be {layout.size} bytes long, got {len(raw)}"
        )
    return layout.unpack(raw)


def _pack(layout: struct.Struct, what: str, *fields: int) -> bytes:
    try:
        return layout.pack(*fields)
    except struct.error as exc:
        raise ValueError(f"cannot encode {what}: {exc}") from exc


@dataclass
class PowerSwitchRequest:
    """Request sent to the power switch (10 bytes, packed)."""

    marker: int = REQUEST_MARKER
    channel: int = REQUEST_DUMMY_CHANNEL
    response_port: int = 0
    checksum: int = 0

    SIZE = _REQUEST.size

    def pack(self) -> bytes:
        """Encode the request in its wire layout."""
        return _pack(
            _REQUEST,
            "power switch request",
            self.marker,
            self.channel,
            self.response_port,
            self.checksum,
        )

    @classmethod
    def unpack(cls, data) -> "PowerSwitchRequest":
        """Decode a request from exactly ``SIZE`` bytes."""
        marker, channel, response_port, checksum = _unpack(
            _REQUEST, data, "power switch request"
        )
        return cls(marker, channel, response_port, checksum)


@dataclass
class PowerSwitchResponse:
    """Response from the power switch (12 bytes, packed).

    ``voltage`` is in millivolts and ``current`` in milliamperes.
    """

    marker: int = 0
    channel: int = 0
    enabled: int = 0
    voltage: int = 0
    current: int = 0

    SIZE = _RESPONSE.size

    def pack(self) -> bytes:
        """Encode the response in its wire layout."""
        return _pack(
            _RESPONSE,
            "power switch response",
            self.marker,
            self.channel,
            self.enabled,
            self.voltage,
            self.current,
        )

    @classmethod
    def unpack(cls, data) -> "PowerSwitchResponse":
        """Decode a response from exactly ``SIZE`` bytes."""
        marker, channel, enabled, voltage, current = _unpack(
            _RESPONSE, data, "power switch response"
        )
        return cls(marker, channel, enabled, voltage, current)