"""Radar image metadata: binary EXIF block, JSON documents and checksums."""

from __future__ import annotations

import json
import struct
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from .crc16 import crc16
from .enums import ImageKind

__all__ = [
    "EXIF_HEADER_OFFSET",
    "EXIF_HEADER_MARKER",
    "MetadataError",
    "ImageMetadata",
    "version_check",
]

EXIF_HEADER_OFFSET = 20
EXIF_HEADER_MARKER = 0xFFE1

# Packed little-endian layout of the 92-byte metadata block.
_LAYOUT = struct.Struct("<2d14f3H2s2BQH")
_EXIF_HEADER = struct.Struct(">HH")
_CRC_SIZE = 2
_FLOAT32 = struct.Struct("<f")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_LEGACY_VERSION = (1, 6, 0)
_KMH_PER_MS = 3.6


class MetadataError(ValueError):
    """Raised when metadata cannot be decoded or encoded."""


def _f32(value: float) -> float:
    """Round a number to the nearest single-precision float."""
    try:
        return _FLOAT32.unpack(_FLOAT32.pack(float(value)))[0]
    except (struct.error, OverflowError) as exc:
        raise MetadataError(f"value {value!r} does not fit a 32-bit float") from exc


def _from_unix(seconds: int) -> datetime:
    try:
        return datetime.fromtimestamp(seconds, timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise MetadataError(f"invalid unix timestamp {seconds!r}") from exc


def _to_unix(moment: datetime) -> int:
    return int(moment.timestamp())


def version_check(version, required) -> int:
    """Compare two (major, minor, patch) versions.

    Returns 1 if ``version`` is newer than ``required``, -1 if older, 0 if equal.
    """
    left, right = tuple(version), tuple(required)
    if left > right:
        return 1
    if left < right:
        return -1
    return 0


@dataclass
class ImageMetadata:
    """Geometry, navigation and capture parameters of a radar image.

    Angles are in radians, distances in meters, velocity in meters per second,
    time offsets and durations in seconds.
    """

    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float = 0.0
    velocity: float = 0.0
    near_edge: float = 0.0
    frame_shift: float = 0.0
    width: float = 0.0
    height: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    angle: float = 0.0
    drift_angle: float = 0.0
    time_offset: float = 0.0
    time_duration: float = 0.0
    timestamp: datetime = _EPOCH
    kind: ImageKind = ImageKind.UNDEFINED
    library_version: tuple[int, int, int] = (0, 0, 0)
    sar_mode: int = 0
    divergence_angle: float = 0.0
    frequency_interpolation_coefficient: float = 0.0
    crc16: int = 0
    _reserved: bytes = field(default=b"\x00\x00", repr=False, compare=False)

    SIZE = _LAYOUT.size

    # --- binary form -----------------------------------------------------

    def to_bytes(self) -> bytes:
        """Encode the metadata in its packed 92-byte layout."""
        major, minor, patch = self.library_version
        try:
            return _LAYOUT.pack(
                self.latitude,
                self.longitude,
                self.dx,
                self.dy,
                self.near_edge,
                self.frame_shift,
                self.angle,
                self.drift_angle,
                self.width,
                self.height,
                self.divergence_angle,
                self.velocity,
                self.altitude,
                self.frequency_interpolation_coefficient,
                self.time_offset,
                self.time_duration,
                major,
                minor,
                patch,
                self._reserved,
                self.sar_mode,
                int(self.kind),
                _to_unix(self.timestamp),
                self.crc16,
            )
        except (struct.error, OverflowError) as exc:
            raise MetadataError(f"cannot encode image metadata: {exc}") from exc

    @classmethod
    def from_bytes(cls, data) -> "ImageMetadata":
        """Decode metadata from exactly ``SIZE`` bytes."""
        raw = bytes(data)
        if len(raw) != _LAYOUT.size:
            raise MetadataError(
                f"image metadata must be {_LAYOUT.size} bytes long, got {len(raw)}"
            )
        (
            latitude,
            longitude,
            dx,
            dy,
            x0,
            y0,
            angle,
            drift_angle,
            lx,
            ly,
            divergence_angle,
            velocity,
            altitude,
            fic,
            time_offset,
            time_duration,
            major,
            minor,
            patch,
            reserved,
            sar_mode,
            kind,
            timestamp,
            checksum,
        ) = _LAYOUT.unpack(raw)
        try:
            image_kind = ImageKind(kind)
        except ValueError as exc:
            raise MetadataError(f"unknown image kind {kind}") from exc
        return cls(
            latitude=latitude,
            longitude=longitude,
            altitude=altitude,
            velocity=velocity,
            near_edge=x0,
            frame_shift=y0,
            width=lx,
            height=ly,
            dx=dx,
            dy=dy,
            angle=angle,
            drift_angle=drift_angle,
            time_offset=time_offset,
            time_duration=time_duration,
            timestamp=_from_unix(timestamp),
            kind=image_kind,
            library_version=(major, minor, patch),
            sar_mode=sar_mode,
            divergence_angle=divergence_angle,
            frequency_interpolation_coefficient=fic,
            crc16=checksum,
            _reserved=reserved,
        )

    def calculate_checksum(self) -> int:
        """CRC-16 of the packed metadata, excluding the stored checksum."""
        return crc16(self.to_bytes()[:-_CRC_SIZE])

    @classmethod
    def from_exif_bytes(cls, exif) -> "ImageMetadata":
        """Extract metadata from the leading bytes of a JPEG file.

        Raises MetadataError when the data is too short or the APP1 marker
        is missing.
        """
        raw = bytes(exif)
        failure = MetadataError("failed to parse EXIF metadata: error code 1")
        if len(raw) < _LAYOUT.size + EXIF_HEADER_OFFSET:
            raise failure
        header_end = EXIF_HEADER_OFFSET + _EXIF_HEADER.size
        if header_end > len(raw):
            raise failure
        marker, _length = _EXIF_HEADER.unpack(raw[EXIF_HEADER_OFFSET:header_end])
        if marker != EXIF_HEADER_MARKER:
            raise failure
        if header_end + _LAYOUT.size > len(raw):
            return cls()
        result = cls.from_bytes(raw[header_end:header_end + _LAYOUT.size])
        if version_check(result.library_version, _LEGACY_VERSION) <= 0:
            result.velocity = _f32(result.velocity / _f32(_KMH_PER_MS))
        return result

    # --- JSON form -------------------------------------------------------

    def to_json(self) -> dict[str, Any]:
        """Build the JSON document describing this metadata."""
        seconds = _to_unix(self.timestamp)
        human = _from_unix(seconds).strftime("%Y-%m-%d %H:%M:%S")
        divergence: Optional[float] = (
            _f32(self.divergence_angle) if self.kind == ImageKind.TELESCOPIC else None
        )
        return {
            "meta": {
                "timestamp": {"unix": seconds, "human": human},
                "library_version": list(self.library_version),
                "sar_mode": self.sar_mode,
            },
            "image_kind": self.kind.json_name,
            "nav": {
                "coordinates": [self.latitude, self.longitude],
                "velocity": _f32(self.velocity),
                "altitude": _f32(self.altitude),
            },
            "image": {
                "resolution": {"dx": _f32(self.dx), "dy": _f32(self.dy)},
                "dimensions": {
                    "lx": _f32(self.width),
                    "ly": _f32(self.height),
                    "x0": _f32(self.near_edge),
                    "y0": _f32(self.frame_shift),
                },
                "angle": _f32(self.angle),
                "drift_angle": _f32(self.drift_angle),
                "div": divergence,
                "fic": _f32(self.frequency_interpolation_coefficient),
                "time_offset": _f32(self.time_offset),
                "time_duration": _f32(self.time_duration),
            },
        }

    def to_json_string(self, indent=2) -> str:
        """Serialise to JSON text with sorted keys."""
        return json.dumps(
            self.to_json(), indent=indent, sort_keys=True, ensure_ascii=False
        )

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "ImageMetadata":
        """Read metadata from a JSON document, current or legacy layout."""
        try:
            if _is_legacy(data):
                return cls._from_legacy_json(data)
            return cls._from_current_json(data)
        except MetadataError:
            raise
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise MetadataError(f"malformed metadata document: {exc!r}") from exc

    @classmethod
    def from_json_string(cls, text: str) -> "ImageMetadata":
        """Parse JSON text and read metadata from it."""
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MetadataError(f"invalid JSON: {exc}") from exc
        return cls.from_json(document)

    @classmethod
    def _from_current_json(cls, data: Mapping[str, Any]) -> "ImageMetadata":
        nav, image, meta = data["nav"], data["image"], data["meta"]
        resolution, dimensions = image["resolution"], image["dimensions"]
        drift = image["drift_angle"]
        divergence = image.get("div")
        version = meta["library_version"]
        return cls(
            latitude=float(nav["coordinates"][0]),
            longitude=float(nav["coordinates"][1]),
            velocity=_f32(nav["velocity"]),
            altitude=_f32(nav["altitude"]),
            angle=_f32(image["angle"]),
            dx=_f32(resolution["dx"]),
            dy=_f32(resolution["dy"]),
            width=_f32(dimensions["lx"]),
            height=_f32(dimensions["ly"]),
            near_edge=_f32(dimensions["x0"]),
            frame_shift=_f32(dimensions["y0"]),
            drift_angle=0.0 if drift is None else _f32(drift),
            divergence_angle=0.0 if divergence is None else _f32(divergence),
            frequency_interpolation_coefficient=_f32(image["fic"]),
            time_offset=_f32(image["time_offset"]),
            time_duration=_f32(image["time_duration"]),
            kind=ImageKind.from_json_name(data["image_kind"]),
            library_version=(int(version[0]), int(version[1]), int(version[2])),
            sar_mode=int(meta["sar_mode"]),
            timestamp=_from_unix(int(meta["timestamp"]["unix"])),
        )

    @classmethod
    def _from_legacy_json(cls, data: Mapping[str, Any]) -> "ImageMetadata":
        nav = data["nav"]
        resolution = data["resolution"]
        dimensions = data["dimensions"]
        drift = data["drift_angle"]
        kind = ImageKind.TELESCOPIC if data["image_type"] == "telescopic" else ImageKind.STRIP
        return cls(
            latitude=float(nav["coordinates"][0]),
            longitude=float(nav["coordinates"][1]),
            # legacy documents store velocity in km/h
            velocity=_f32(_f32(nav["velocity"]) / _f32(_KMH_PER_MS)),
            altitude=_f32(nav["altitude"]),
            angle=_f32(nav["azimuth"]),
            dx=_f32(resolution["dx"]),
            dy=_f32(resolution["dy"]),
            width=_f32(dimensions["lx"]),
            height=_f32(dimensions["ly"]),
            near_edge=_f32(dimensions["x0"]),
            frame_shift=_f32(dimensions["y0"]),
            drift_angle=0.0 if drift is None else _f32(drift),
            divergence_angle=_f32(data["div"]),
            sar_mode=int(data["mode"]),
            frequency_interpolation_coefficient=_f32(data["fic"]),
            time_offset=_f32(data["time_offset"]),
            time_duration=_f32(data["time_duration"]),
            kind=kind,
            library_version=_LEGACY_VERSION,
        )


def _is_legacy(data: Mapping[str, Any]) -> bool:
    meta = data.get("meta")
    if not isinstance(meta, Mapping) or "library_version" not in meta:
        return True
    version = meta["library_version"]
    return not isinstance(version, list) or len(version) != 3