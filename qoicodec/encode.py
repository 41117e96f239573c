"""Encoding raw RGB or RGBA pixels into QOI images."""

import dataclasses

from .consts import QOI_HEADER_SIZE, QOI_OP_INDEX, QOI_OP_RUN, QOI_PADDING
from .errors import InvalidImageLengthError, OutputBufferTooSmallError, QoiIOError
from .header import Header
from .pixel import encode_pixel, hash_index
from .types import Channels, ColorSpace

_MAX_RUN = 62


def _iter_pixels(data, n_channels):
    """Yield the pixels of a raw buffer as tuples of channel values."""
    it = iter(bytes(data))
    return zip(*[it] * n_channels)


def _encode_body(data, channels):
    """Encode the pixel data into QOI chunks followed by the end marker."""
    n = int(channels)
    out = bytearray()
    index = [(0, 0, 0, 0)] * 64
    px_prev = (0, 0, 0) if n == 3 else (0, 0, 0, 0xFF)
    hash_prev = hash_index(px_prev)
    run = 0
    index_allowed = False
    last = len(data) // n - 1

    for i, px in enumerate(_iter_pixels(data, n)):
        if px == px_prev:
            run += 1
            if run == _MAX_RUN or i == last:
                out.append(QOI_OP_RUN | (run - 1))
                run = 0
            continue

        if run:
            # A single repeat of the previous pixel is as short as an index hit.
            if run == 1 and index_allowed:
                out.append(QOI_OP_INDEX | hash_prev)
            else:
                out.append(QOI_OP_RUN | (run - 1))
            run = 0
        index_allowed = True

        px_rgba = px if n == 4 else (*px, 0xFF)
        hash_prev = hash_index(px_rgba)
        if index[hash_prev] == px_rgba:
            out.append(QOI_OP_INDEX | hash_prev)
        else:
            index[hash_prev] = px_rgba
            out += encode_pixel(px, px_prev, channels)
        px_prev = px

    out += QOI_PADDING
    return out


class Encoder:
    """Encode QOI images into buffers, byte strings or streams."""

    def __init__(self, data, width, height):
        header = Header.try_new(width, height, Channels.RGB, ColorSpace.SRGB)
        size = len(data)
        n_pixels = header.n_pixels()
        n_channels = size // n_pixels
        if n_pixels * n_channels != size:
            raise InvalidImageLengthError(size, width, height)
        self._data = data
        self._header = header.with_channels(Channels.from_u8(min(n_channels, 0xFF)))

    def with_colorspace(self, colorspace):
        """Return an encoder that stores another color space in the header."""
        other = Encoder.__new__(Encoder)
        other._data = self._data
        other._header = dataclasses.replace(self._header, colorspace=ColorSpace(colorspace))
        return other

    def channels(self):
        """The number of channels inferred from the data."""
        return self._header.channels

    def header(self):
        """The header that will be stored in the encoded image."""
        return self._header

    def required_buf_len(self):
        """The largest number of bytes the encoded image can take."""
        return self._header.encode_max_len()

    def encode_to_buf(self, buf):
        """Encode into a writable buffer and return the number of bytes written."""
        view = memoryview(buf).cast("B")
        required = self.required_buf_len()
        if len(view) < required:
            raise OutputBufferTooSmallError(len(view), required)
        body = _encode_body(self._data, self._header.channels)
        view[:QOI_HEADER_SIZE] = self._header.encode()
        view[QOI_HEADER_SIZE:QOI_HEADER_SIZE + len(body)] = body
        return QOI_HEADER_SIZE + len(body)

    def encode_to_vec(self):
        """Encode into a new bytes object."""
        return self._header.encode() + bytes(_encode_body(self._data, self._header.channels))

    def encode_to_stream(self, writer):
        """Encode into a binary writer and return the number of bytes written."""
        body = _encode_body(self._data, self._header.channels)
        try:
            writer.write(self._header.encode())
            writer.write(bytes(body))
        except OSError as err:
            raise QoiIOError(err) from err
        return QOI_HEADER_SIZE + len(body)


def encode_to_buf(buf, data, width, height):
    """Encode an image into a writable buffer and return the number of bytes written."""
    return Encoder(data, width, height).encode_to_buf(buf)


def encode_to_vec(data, width, height):
    """Encode an image into a new bytes object."""
    return Encoder(data, width, height).encode_to_vec()