import pytest

from quasar_api.enums import (
    DSPBackend,
    ImageFormat,
    ImageKind,
    ImageUnderlyingType,
    WindowFunction,
    size_of,
)


def test_undefined_value():
    assert DSPBackend.from_json_name("undefined") == 255
    assert WindowFunction.from_json_name("undefined") == 255
    assert ImageFormat.from_json_name("undefined") == 255
    assert ImageUnderlyingType.from_json_name("undefined") == 255
    assert ImageKind.from_json_name("undefined") == 255
    assert str(ImageKind.from_json_name("undefined")) == "Undefined"
    assert str(DSPBackend(255)) == "Undefined"


@pytest.mark.parametrize(
    "member, label",
    [
        (DSPBackend.BASIC, "Basic"),
        (DSPBackend.CUDA, "CUDA"),
        (WindowFunction.HAMMING, "Hamming"),
        (WindowFunction.BLACKMAN, "Blackman"),
        (WindowFunction.NUTTALL, "Nuttall"),
        (ImageFormat.PNG, "PNG"),
        (ImageFormat.JPEG, "JPEG"),
        (ImageUnderlyingType.UNSIGNED_8_BIT, "Unsigned 8-bit"),
        (ImageUnderlyingType.SIGNED_16_BIT, "Signed 16-bit"),
        (ImageUnderlyingType.FLOAT_32_BIT, "32-bit Float"),
        (ImageUnderlyingType.COMPLEX_FLOAT_64_BIT, "64-bit Complex Float"),
        (ImageKind.TELESCOPIC, "Telescopic"),
        (ImageKind.STRIP, "Strip"),
    ],
)
def test_labels_in_str_and_format(member, label):
    assert str(member) == label
    assert f"{member}" == label
    assert f"[{member:>30}]" == f"[{label:>30}]"


@pytest.mark.parametrize(
    "member, json_name",
    [
        (DSPBackend.CUDA, "cuda"),
        (WindowFunction.NUTTALL, "nuttall"),
        (ImageFormat.JPEG, "jpeg"),
        (ImageUnderlyingType.COMPLEX_FLOAT_64_BIT, "complex_float_64_bit"),
        (ImageKind.TELESCOPIC, "telescopic"),
        (ImageKind.STRIP, "strip"),
    ],
)
def test_json_names(member, json_name):
    assert member.json_name == json_name
    assert type(member).from_json_name(json_name) is member


def test_json_name_round_trip():
    for member in DSPBackend:
        assert DSPBackend.from_json_name(member.json_name) is member
    for member in WindowFunction:
        assert WindowFunction.from_json_name(member.json_name) is member
    for member in ImageFormat:
        assert ImageFormat.from_json_name(member.json_name) is member
    for member in ImageUnderlyingType:
        assert ImageUnderlyingType.from_json_name(member.json_name) is member
    for member in ImageKind:
        assert ImageKind.from_json_name(member.json_name) is member


@pytest.mark.parametrize("name", ["bogus", "", None, 3])
def test_unknown_json_name_falls_back_to_first_member(name):
    assert DSPBackend.from_json_name(name) is DSPBackend.BASIC
    assert WindowFunction.from_json_name(name) is WindowFunction.HAMMING
    assert ImageFormat.from_json_name(name) is ImageFormat.PNG
    assert (
        ImageUnderlyingType.from_json_name(name)
        is ImageUnderlyingType.UNSIGNED_8_BIT
    )
    assert ImageKind.from_json_name(name) is ImageKind.TELESCOPIC


def test_members_compare_as_ints():
    assert DSPBackend(1) is DSPBackend.CUDA
    assert WindowFunction(2) is WindowFunction.NUTTALL
    assert ImageFormat(1) is ImageFormat.JPEG
    assert ImageUnderlyingType(3) is ImageUnderlyingType.COMPLEX_FLOAT_64_BIT
    assert ImageKind(255) is ImageKind.UNDEFINED
    assert WindowFunction.BLACKMAN + 1 == 2


def test_kind_values():
    assert ImageKind(0) is ImageKind.TELESCOPIC
    assert ImageKind(1) is ImageKind.STRIP


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        ImageKind(7)


def test_size_of():
    assert size_of(ImageUnderlyingType.UNSIGNED_8_BIT) == 1
    assert size_of(ImageUnderlyingType.UNDEFINED) == 0
    assert size_of(ImageUnderlyingType.COMPLEX_FLOAT_64_BIT) == 2 * size_of(
        ImageUnderlyingType.FLOAT_32_BIT
    )
    assert size_of(ImageUnderlyingType.SIGNED_16_BIT) == 2 * size_of(
        ImageUnderlyingType.UNSIGNED_8_BIT
    )


def test_size_of_grows_with_type():
    sizes = [
        size_of(t)
        for t in ImageUnderlyingType
        if t is not ImageUnderlyingType.UNDEFINED
    ]
    assert sizes == sorted(sizes)
    assert len(set(sizes)) == len(sizes)