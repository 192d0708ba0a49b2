# quasar-api

Data types shared by the QuaSAR synthetic-aperture-radar tools. The package
depends only on the Python standard library.

## Modules

- `quasar_api.crc16`
  - `crc16(data)`: Modbus CRC-16 (CRC-16-ANSI, reflected polynomial `0xA001`,
    initial value `0xFFFF`).
  - `crc16_ccitt(data)`: CRC-16-CCITT (polynomial `0x1021`, initial value
    `0xFFFF`).
  - `byteswap16(value)`: swaps the two bytes of a 16-bit value. Raises
    `ValueError` for values outside `0..0xFFFF`.

  Both checksums return `0` for empty data or `None`.

- `quasar_api.enums`
  - `DSPBackend`, `WindowFunction`, `ImageFormat`, `ImageUnderlyingType` and
    `ImageKind`: integer enums. Each member has a display `label` (also what
    `str()` and `format()` give) and a `json_name`.
    `from_json_name(name)` looks a member up by its JSON name. An unknown name
    gives the first member of the enum (for example `ImageKind.TELESCOPIC`).
  - `size_of(underlying_type)`: bytes per pixel of an `ImageUnderlyingType`
    (1, 2, 4, 8, or 0 for `UNDEFINED`).

- `quasar_api.powerswitch`
  - `PowerSwitchRequest`: a 10-byte little-endian packed message (`marker`,
    `channel`, `response_port`, `checksum`). By default it carries
    `REQUEST_MARKER` (`0xAAAAAAAA`) and `REQUEST_DUMMY_CHANNEL` (`0x270F`).
  - `PowerSwitchResponse`: a 12-byte packed message (`marker`, `channel`,
    `enabled`, `voltage` in millivolts, `current` in milliamperes).
    `RESPONSE_MARKER` (`0xBBBBBBBB`) is also exported.

  Both have `pack()` and the class method `unpack(data)`. `unpack` requires
  exactly `SIZE` bytes. Both raise `ValueError` on bad input.

- `quasar_api.metadata`
  - `ImageMetadata`: a dataclass holding the image geometry, navigation and
    capture parameters. It converts to and from:
    - the packed 92-byte binary block, with `to_bytes()` and `from_bytes(data)`;
    - a JSON document, with `to_json()` / `from_json(data)`;
    - JSON text, with `to_json_string(indent=2)` (keys sorted) and
      `from_json_string(text)`.

    `from_json` also recognises the legacy JSON layout. In that case velocity
    is converted from km/h to m/s and `library_version` is set to
    `(1, 6, 0)`.

    `calculate_checksum()` returns the CRC-16 of the binary block without its
    trailing `crc16` field.

    `from_exif_bytes(exif)` reads the block that follows the APP1 marker
    (`0xFFE1`) found at byte offset 20 (`EXIF_HEADER_OFFSET`) of a JPEG file.
    For blocks written by library version 1.6.0 or older, the stored velocity
    is converted from km/h to m/s.
  - `MetadataError`: a subclass of `ValueError`. It is raised for short or
    malformed input, a missing marker, an unknown image kind, or values that
    do not fit the binary layout.
  - `version_check(version, required)`: compares two `(major, minor, patch)`
    tuples and returns `1`, `0` or `-1`.

## Installation

```
pip install .
```

## Usage

Read the metadata from the start of a JPEG file:

```python
from quasar_api.metadata import ImageMetadata, MetadataError

with open("image.jpg", "rb") as f:
    head = f.read(2048)

try:
    meta = ImageMetadata.from_exif_bytes(head)
except MetadataError as exc:
    print("no metadata:", exc)
else:
    print(meta.kind, meta.latitude, meta.longitude)
    print(meta.to_json_string(indent=2))
```

Convert a JSON document to the binary block and add a checksum:

```python
meta = ImageMetadata.from_json_string(text)
meta.crc16 = meta.calculate_checksum()
block = meta.to_bytes()
```

Compute checksums:

```python
from quasar_api.crc16 import crc16, crc16_ccitt

crc16(b"123456789")        # Modbus CRC-16
crc16_ccitt(b"123456789")  # CRC-16-CCITT
```

## What this package does not do

It is a library of data types only. It has no command-line tool. It does not
process radar data or produce images. It does not send or receive the
power-switch messages; it only encodes and decodes them. It does not write
metadata back into JPEG files.

## Tests

```
pip install .[test]
pytest
```