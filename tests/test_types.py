import pytest

from qoicodec.errors import InvalidChannelsError, InvalidColorSpaceError
from qoicodec.types import Channels, ColorSpace


def test_channels_from_u8():
    assert Channels.from_u8(3) is Channels.RGB
    assert Channels.from_u8(4) is Channels.RGBA


@pytest.mark.parametrize("value", [0, 1, 2, 5, 255])
def test_channels_from_u8_invalid(value):
    with pytest.raises(InvalidChannelsError) as info:
        Channels.from_u8(value)
    assert info.value.channels == value


def test_colorspace_from_u8():
    assert ColorSpace.from_u8(0) is ColorSpace.SRGB
    assert ColorSpace.from_u8(1) is ColorSpace.LINEAR


@pytest.mark.parametrize("value", [2, 3, 128, 255])
def test_colorspace_from_u8_invalid(value):
    with pytest.raises(InvalidColorSpaceError) as info:
        ColorSpace.from_u8(value)
    assert info.value.colorspace == value


@pytest.mark.parametrize("channels", list(Channels))
def test_channels_round_trip(channels):
    assert Channels.from_u8(int(channels)) is channels


@pytest.mark.parametrize("colorspace", list(ColorSpace))
def test_colorspace_round_trip(colorspace):
    assert ColorSpace.from_u8(int(colorspace)) is colorspace


def test_channel_predicates():
    assert Channels.RGB.is_rgb() and not Channels.RGB.is_rgba()
    assert Channels.RGBA.is_rgba() and not Channels.RGBA.is_rgb()


def test_colorspace_predicates():
    assert ColorSpace.SRGB.is_srgb() and not ColorSpace.SRGB.is_linear()
    assert ColorSpace.LINEAR.is_linear() and not ColorSpace.LINEAR.is_srgb()


def test_values_match_format():
    assert [int(Channels.from_u8(v)) for v in (3, 4)] == [3, 4]
    assert [int(ColorSpace.from_u8(v)) for v in (0, 1)] == [0, 1]
    assert [Channels.from_u8(v).is_rgba() for v in (3, 4)] == [False, True]
    assert [ColorSpace.from_u8(v).is_linear() for v in (0, 1)] == [False, True]