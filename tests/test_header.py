import pytest
from hypothesis import given
from hypothesis import strategies as st

from qoicodec.consts import QOI_HEADER_SIZE, QOI_OP_RGB, QOI_OP_RUN, QOI_PADDING_SIZE
from qoicodec.errors import (
    InvalidChannelsError,
    InvalidColorSpaceError,
    InvalidImageDimensionsError,
    InvalidMagicError,
    UnexpectedBufferEndError,
)
from qoicodec.header import Header, encode_max_len
from qoicodec.types import Channels, ColorSpace


def test_encode_wire_bytes():
    header = Header.try_new(800, 600, Channels.RGBA, ColorSpace.LINEAR)
    assert header.encode() == b"qoif" + b"\x00\x00\x03\x20" + b"\x00\x00\x02\x58" + b"\x04\x01"


def test_default_header():
    header = Header()
    assert (header.width, header.height) == (1, 1)
    assert header.channels is Channels.RGB
    assert header.colorspace is ColorSpace.SRGB


@given(
    width=st.integers(1, 20000),
    height=st.integers(1, 20000),
    channels=st.sampled_from(list(Channels)),
    colorspace=st.sampled_from(list(ColorSpace)),
)
def test_encode_decode_round_trip(width, height, channels, colorspace):
    header = Header.try_new(width, height, channels, colorspace)
    encoded = header.encode()
    assert len(encoded) == QOI_HEADER_SIZE
    assert Header.decode(encoded) == header


def test_decode_from_misc_stream():
    header = Header.try_new(3, 1, Channels.RGBA, ColorSpace.LINEAR)
    data = header.encode() + bytes([QOI_OP_RUN | 1, QOI_OP_RGB, 10, 20, 30]) + bytes(7) + b"\x01"
    assert Header.decode(data) == header


def test_decode_accepts_memoryview():
    header = Header.try_new(5, 7, Channels.RGB, ColorSpace.SRGB)
    assert Header.decode(memoryview(header.encode())) == header


@pytest.mark.parametrize("length", [0, 1, 13])
def test_decode_short(length):
    data = Header().encode()[:length]
    with pytest.raises(UnexpectedBufferEndError):
        Header.decode(data)


def test_decode_bad_magic():
    data = b"qoig" + Header().encode()[4:]
    with pytest.raises(InvalidMagicError) as info:
        Header.decode(data)
    assert info.value.magic == int.from_bytes(b"qoig", "big")


def test_channels_checked_before_magic():
    data = b"nope" + b"\x00\x00\x00\x01" * 2 + b"\x05\x00"
    with pytest.raises(InvalidChannelsError):
        Header.decode(data)


def test_colorspace_checked_before_magic():
    data = b"nope" + b"\x00\x00\x00\x01" * 2 + b"\x03\x02"
    with pytest.raises(InvalidColorSpaceError):
        Header.decode(data)


def test_decode_zero_width():
    data = b"qoif" + b"\x00\x00\x00\x00" + b"\x00\x00\x00\x01" + b"\x03\x00"
    with pytest.raises(InvalidImageDimensionsError):
        Header.decode(data)


def test_try_new_limits():
    assert Header.try_new(20000, 20000, Channels.RGB, ColorSpace.SRGB).n_pixels() == 400_000_000
    with pytest.raises(InvalidImageDimensionsError):
        Header.try_new(20001, 20000, Channels.RGB, ColorSpace.SRGB)
    with pytest.raises(InvalidImageDimensionsError):
        Header.try_new(0, 10, Channels.RGB, ColorSpace.SRGB)
    with pytest.raises(InvalidImageDimensionsError):
        Header.try_new(10, 0, Channels.RGB, ColorSpace.SRGB)


def test_with_methods_return_copies():
    header = Header.try_new(2, 3, Channels.RGB, ColorSpace.SRGB)
    rgba = header.with_channels(Channels.RGBA)
    linear = header.with_colorspace(ColorSpace.LINEAR)
    assert rgba.channels is Channels.RGBA and header.channels is Channels.RGB
    assert linear.colorspace is ColorSpace.LINEAR and header.colorspace is ColorSpace.SRGB
    assert (rgba.width, rgba.height) == (2, 3)


def test_sizes():
    header = Header.try_new(3, 1, Channels.RGBA, ColorSpace.LINEAR)
    assert header.n_pixels() == 3
    assert header.n_bytes() == 12
    assert header.with_channels(Channels.RGB).n_bytes() == 9


@given(st.integers(1, 500), st.integers(1, 500), st.sampled_from(list(Channels)))
def test_encode_max_len_bounds(width, height, channels):
    header = Header.try_new(width, height, channels, ColorSpace.SRGB)
    limit = header.encode_max_len()
    assert limit == encode_max_len(width, height, channels)
    assert limit > header.n_bytes() + QOI_HEADER_SIZE + QOI_PADDING_SIZE