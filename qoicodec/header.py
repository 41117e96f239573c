"""The 14-byte QOI image header."""

import dataclasses
import struct
from dataclasses import dataclass

from .consts import QOI_HEADER_SIZE, QOI_MAGIC, QOI_PADDING_SIZE, QOI_PIXELS_MAX
from .errors import InvalidImageDimensionsError, InvalidMagicError, UnexpectedBufferEndError
from .types import Channels, ColorSpace

_U32_MAX = 0xFFFF_FFFF
_HEADER_STRUCT = struct.Struct(">IIIBB")


def encode_max_len(width, height, channels):
    """The largest number of bytes an encoded image of this size can take."""
    n_pixels = width * height
    return QOI_HEADER_SIZE + n_pixels * int(channels) + n_pixels + QOI_PADDING_SIZE


@dataclass(frozen=True)
class Header:
    """Image header: dimensions, channels and color space."""

    width: int = 1
    height: int = 1
    channels: Channels = Channels.RGB
    colorspace: ColorSpace = ColorSpace.SRGB

    @classmethod
    def try_new(cls, width, height, channels, colorspace):
        """Create a header, checking that the image is neither empty nor over 400Mp."""
        if not (0 <= width <= _U32_MAX and 0 <= height <= _U32_MAX):
            raise InvalidImageDimensionsError(width, height)
        n_pixels = width * height
        if n_pixels == 0 or n_pixels > QOI_PIXELS_MAX:
            raise InvalidImageDimensionsError(width, height)
        return cls(width, height, Channels(channels), ColorSpace(colorspace))

    def with_channels(self, channels):
        """Return a copy with other channels."""
        return dataclasses.replace(self, channels=Channels(channels))

    def with_colorspace(self, colorspace):
        """Return a copy with another color space."""
        return dataclasses.replace(self, colorspace=ColorSpace(colorspace))

    def encode(self):
        """Serialize the header into 14 bytes."""
        return _HEADER_STRUCT.pack(
            QOI_MAGIC, self.width, self.height, int(self.channels), int(self.colorspace)
        )

    @classmethod
    def decode(cls, data):
        """Parse a header from the start of a bytes-like object."""
        if len(data) < QOI_HEADER_SIZE:
            raise UnexpectedBufferEndError()
        magic, width, height, channels, colorspace = _HEADER_STRUCT.unpack_from(bytes(data[:QOI_HEADER_SIZE]))
        channels = Channels.from_u8(channels)
        colorspace = ColorSpace.from_u8(colorspace)
        if magic != QOI_MAGIC:
            raise InvalidMagicError(magic)
        return cls.try_new(width, height, channels, colorspace)

    def n_pixels(self):
        """Number of pixels in the image."""
        return self.width * self.height

    def n_bytes(self):
        """Number of bytes in the raw pixel array."""
        return self.n_pixels() * int(self.channels)

    def encode_max_len(self):
        """The largest number of bytes the encoded image can take."""
        return encode_max_len(self.width, self.height, self.channels)