"""Enumerations shared by the processing pipeline and image metadata."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "DSPBackend",
    "WindowFunction",
    "ImageFormat",
    "ImageUnderlyingType",
    "ImageKind",
    "size_of",
]


class _CodedEnum(IntEnum):
    """Integer enum whose members carry a display label and a JSON name."""

    label: str
    json_name: str

    def __new__(cls, value: int, label: str, json_name: str):
        member = int.__new__(cls, value)
        member._value_ = value
        member.label = label
        member.json_name = json_name
        return member

    def __str__(self) -> str:
        return self.label

    def __format__(self, spec: str) -> str:
        return format(self.label, spec)

    @classmethod
    def _lookup_json_name(cls, name):
        """Find a member by JSON name, falling back to the first declared member."""
        for member in cls:
            if member.json_name == name:
                return member
        return next(iter(cls))


class DSPBackend(_CodedEnum):
    """Signal processing backend."""

    BASIC = (0, "Basic", "basic")
    CUDA = (1, "CUDA", "cuda")
    UNDEFINED = (255, "Undefined", "undefined")

    @classmethod
    def from_json_name(cls, name):
        """Look up a member by its JSON name; unknown names give BASIC."""
        return cls._lookup_json_name(name)


class WindowFunction(_CodedEnum):
    """Window function applied during processing."""

    HAMMING = (0, "Hamming", "hamming")
    BLACKMAN = (1, "Blackman", "blackman")
    NUTTALL = (2, "Nuttall", "nuttall")
    UNDEFINED = (255, "Undefined", "undefined")

    @classmethod
    def from_json_name(cls, name):
        """Look up a member by its JSON name; unknown names give HAMMING."""
        return cls._lookup_json_name(name)


class ImageFormat(_CodedEnum):
    """Output image file format."""

    PNG = (0, "PNG", "png")
    JPEG = (1, "JPEG", "jpeg")
    UNDEFINED = (255, "Undefined", "undefined")

    @classmethod
    def from_json_name(cls, name):
        """Look up a member by its JSON name; unknown names give PNG."""
        return cls._lookup_json_name(name)


class ImageUnderlyingType(_CodedEnum):
    """Pixel data type of an image."""

    UNSIGNED_8_BIT = (0, "Unsigned 8-bit", "unsigned_8_bit")
    SIGNED_16_BIT = (1, "Signed 16-bit", "signed_16_bit")
    FLOAT_32_BIT = (2, "32-bit Float", "float_32_bit")
    COMPLEX_FLOAT_64_BIT = (3, "64-bit Complex Float", "complex_float_64_bit")
    UNDEFINED = (255, "Undefined", "undefined")

    @classmethod
    def from_json_name(cls, name):
        """Look up a member by its JSON name; unknown names give UNSIGNED_8_BIT."""
        return cls._lookup_json_name(name)


class ImageKind(_CodedEnum):
    """Geometry of a radar image."""

    TELESCOPIC = (0, "Telescopic", "telescopic")
    STRIP = (1, "Strip", "strip")
    UNDEFINED = (255, "Undefined", "undefined")

    @classmethod
    def from_json_name(cls, name):
        """Look up a member by its JSON name; unknown names give TELESCOPIC."""
        return cls._lookup_json_name(name)


_FLOAT_SIZE = 4

_SIZES = {
    ImageUnderlyingType.UNSIGNED_8_BIT: 1,
    ImageUnderlyingType.SIGNED_16_BIT: 2,
    ImageUnderlyingType.FLOAT_32_BIT: _FLOAT_SIZE,
    ImageUnderlyingType.COMPLEX_FLOAT_64_BIT: _FLOAT_SIZE * 2,
    ImageUnderlyingType.UNDEFINED: 0,
}


def size_of(underlying_type: ImageUnderlyingType) -> int:
    """Size in bytes of one pixel of the given type; 0 for undefined."""
    return _SIZES.get(underlying_type, 0)