"""Decoding QOI images from byte strings or binary streams."""

import copy

from .consts import (
    QOI_HEADER_SIZE,
    QOI_OP_DIFF,
    QOI_OP_INDEX,
    QOI_OP_LUMA,
    QOI_OP_RGB,
    QOI_OP_RGBA,
    QOI_OP_RUN,
    QOI_PADDING,
    QOI_PADDING_SIZE,
)
from .errors import (
    InvalidPaddingError,
    OutputBufferTooSmallError,
    QoiIOError,
    UnexpectedBufferEndError,
)
from .header import Header
from .pixel import apply_diff, apply_luma, hash_index
from .types import Channels

_INDEX_END = QOI_OP_INDEX | 0x3F
_RUN_END = QOI_OP_RUN | 0x3D  # 0x3e and 0x3f belong to the RGB and RGBA opcodes
_DIFF_END = QOI_OP_DIFF | 0x3F
_LUMA_END = QOI_OP_LUMA | 0x3F

_OPAQUE_BLACK = (0, 0, 0, 0xFF)


def _decode_slice(data, n_pixels, channels, src_channels):
    """Decode pixels from bytes.

    Returns the raw pixels and the offset just past the end marker.
    Pixels are kept as RGBA tuples; with three output channels alpha stays 255.
    """
    src_rgba = src_channels == 4
    keep_alpha = channels == 4
    index = [(0, 0, 0, 0)] * 64
    px = _OPAQUE_BLACK
    out = bytearray()
    end = len(data)
    pos = 0
    remaining = n_pixels

    while remaining:
        remaining -= 1
        left = end - pos
        b1 = data[pos] if left else -1

        if left and b1 <= _INDEX_END:
            entry = index[b1]
            px = entry if keep_alpha else (*entry[:3], 0xFF)
            out += bytes(px[:channels])
            pos += 1
            continue
        if left >= 4 and b1 == QOI_OP_RGB:
            r, g, b = data[pos + 1:pos + 4]
            px = (r, g, b, px[3])
            pos += 4
        elif src_rgba and left >= 5 and b1 == QOI_OP_RGBA:
            r, g, b, a = data[pos + 1:pos + 5]
            px = (r, g, b, a if keep_alpha else 0xFF)
            pos += 5
        elif left and QOI_OP_RUN <= b1 <= _RUN_END:
            run = min(b1 & 0x3F, remaining)
            out += bytes(px[:channels]) * (run + 1)
            remaining -= run
            pos += 1
            continue
        elif left and QOI_OP_DIFF <= b1 <= _DIFF_END:
            px = apply_diff(px, b1)
            pos += 1
        elif left >= 2 and QOI_OP_LUMA <= b1 <= _LUMA_END:
            px = apply_luma(px, b1, data[pos + 1])
            pos += 2
        elif left < QOI_PADDING_SIZE:
            raise UnexpectedBufferEndError()

        index[hash_index(px)] = px
        out += bytes(px[:channels])

    if end - pos < QOI_PADDING_SIZE:
        raise UnexpectedBufferEndError()
    if data[pos:pos + QOI_PADDING_SIZE] != QOI_PADDING:
        raise InvalidPaddingError()
    return out, pos + QOI_PADDING_SIZE


def _read_exact(reader, size):
    """Read exactly ``size`` bytes from a binary reader."""
    buf = bytearray()
    while len(buf) < size:
        try:
            chunk = reader.read(size - len(buf))
        except OSError as err:
            raise QoiIOError(err) from err
        if not chunk:
            raise QoiIOError(EOFError("failed to fill whole buffer"))
        buf += chunk
    return bytes(buf)


def _decode_stream(reader, n_pixels, channels, src_channels):
    """Decode pixels and the end marker from a binary reader."""
    src_rgba = src_channels == 4
    keep_alpha = channels == 4
    index = [(0, 0, 0, 0) if keep_alpha else _OPAQUE_BLACK] * 64
    px = _OPAQUE_BLACK
    out = bytearray()
    remaining = n_pixels

    while remaining:
        remaining -= 1
        b1 = _read_exact(reader, 1)[0]

        if b1 <= _INDEX_END:
            px = index[b1]
            out += bytes(px[:channels])
            continue
        if b1 == QOI_OP_RGB:
            r, g, b = _read_exact(reader, 3)
            px = (r, g, b, px[3])
        elif b1 == QOI_OP_RGBA and src_rgba:
            r, g, b, a = _read_exact(reader, 4)
            px = (r, g, b, a if keep_alpha else 0xFF)
        elif QOI_OP_RUN <= b1 <= _RUN_END:
            run = min(b1 & 0x3F, remaining)
            out += bytes(px[:channels]) * (run + 1)
            remaining -= run
            continue
        elif QOI_OP_DIFF <= b1 <= _DIFF_END:
            px = apply_diff(px, b1)
        elif QOI_OP_LUMA <= b1 <= _LUMA_END:
            px = apply_luma(px, b1, _read_exact(reader, 1)[0])

        index[hash_index(px)] = px
        out += bytes(px[:channels])

    if _read_exact(reader, QOI_PADDING_SIZE) != QOI_PADDING:
        raise InvalidPaddingError()
    return out


class Decoder:
    """Decode QOI images from byte strings or from binary streams.

    The header is decoded as soon as the decoder is created.
    """

    def __init__(self, data):
        data = bytes(data)
        self._header = Header.decode(data)
        self._tail = data[QOI_HEADER_SIZE:]
        self._stream = None
        self._channels = self._header.channels

    @classmethod
    def from_stream(cls, reader):
        """Create a decoder reading from a binary file-like object."""
        header = Header.decode(_read_exact(reader, QOI_HEADER_SIZE))
        decoder = cls.__new__(cls)
        decoder._header = header
        decoder._tail = None
        decoder._stream = reader
        decoder._channels = header.channels
        return decoder

    def with_channels(self, channels):
        """Return a decoder producing the given number of channels.

        RGB images decoded as RGBA get an alpha of 255; RGBA images decoded
        as RGB lose their alpha.
        """
        other = copy.copy(self)
        other._channels = Channels.from_u8(int(channels))
        return other

    def channels(self):
        """The number of channels in the decoded image."""
        return self._channels

    def header(self):
        """The decoded image header."""
        return self._header

    def data(self):
        """The undecoded tail of the input bytes."""
        if self._stream is not None:
            raise TypeError("a decoder reading from a stream holds no input bytes")
        return self._tail

    def reader(self):
        """The underlying binary reader."""
        if self._stream is None:
            raise TypeError("a decoder reading from bytes has no reader")
        return self._stream

    def required_buf_len(self):
        """The number of bytes the decoded image takes."""
        return self._header.n_pixels() * int(self._channels)

    def _decode(self):
        n_pixels = self._header.n_pixels()
        channels = int(self._channels)
        src_channels = int(self._header.channels)
        if self._stream is not None:
            return _decode_stream(self._stream, n_pixels, channels, src_channels)
        pixels, consumed = _decode_slice(self._tail, n_pixels, channels, src_channels)
        self._tail = self._tail[consumed:]
        return pixels

    def decode_to_buf(self, buf):
        """Decode into a writable buffer and return the number of bytes written."""
        view = memoryview(buf).cast("B")
        size = self.required_buf_len()
        if len(view) < size:
            raise OutputBufferTooSmallError(len(view), size)
        view[:size] = self._decode()
        return size

    def decode_to_vec(self):
        """Decode into a new bytes object."""
        return bytes(self._decode())


def decode_to_buf(buf, data):
    """Decode an image into a writable buffer and return its header."""
    decoder = Decoder(data)
    decoder.decode_to_buf(buf)
    return decoder.header()


def decode_to_vec(data):
    """Decode an image and return its header and raw pixels."""
    decoder = Decoder(data)
    pixels = decoder.decode_to_vec()
    return decoder.header(), pixels


def decode_header(data):
    """Decode only the image header."""
    return Header.decode(data)