"""Channel count and color space of an image."""

from enum import IntEnum

from .errors import InvalidChannelsError, InvalidColorSpaceError


class ColorSpace(IntEnum):
    """Image color space; informative only, it does not affect coding."""

    SRGB = 0
    LINEAR = 1

    @classmethod
    def from_u8(cls, value):
        """Return the color space for a header byte, raising on anything but 0 or 1."""
        if value | 1 != 1:
            raise InvalidColorSpaceError(value)
        return cls.SRGB if value == 0 else cls.LINEAR

    def is_srgb(self):
        """True for sRGB with linear alpha."""
        return self is ColorSpace.SRGB

    def is_linear(self):
        """True if all channels are linear."""
        return self is ColorSpace.LINEAR


class Channels(IntEnum):
    """Number of 8-bit channels in a pixel."""

    RGB = 3
    RGBA = 4

    @classmethod
    def from_u8(cls, value):
        """Return the channel count for a header byte, raising on anything but 3 or 4."""
        if value not in (3, 4):
            raise InvalidChannelsError(value)
        return cls.RGB if value == 3 else cls.RGBA

    def is_rgb(self):
        """True for three channels."""
        return self is Channels.RGB

    def is_rgba(self):
        """True for four channels."""
        return self is Channels.RGBA