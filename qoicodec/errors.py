"""Exceptions raised while encoding or decoding QOI images."""

from .consts import QOI_MAGIC


class QoiError(Exception):
    """Base class of every error raised by the codec."""


class InvalidMagicError(QoiError):
    """The leading four magic bytes do not match."""

    def __init__(self, magic):
        self.magic = magic
        got = list(int(magic).to_bytes(4, "big"))
        super().__init__(f"invalid magic: expected {QOI_MAGIC}, got {got}")


class InvalidChannelsError(QoiError):
    """The number of channels is neither 3 nor 4."""

    def __init__(self, channels):
        self.channels = channels
        super().__init__(f"invalid number of channels: {channels}")


class InvalidColorSpaceError(QoiError):
    """The color space is neither 0 nor 1."""

    def __init__(self, colorspace):
        self.colorspace = colorspace
        super().__init__(f"invalid color space: {colorspace} (expected 0 or 1)")


class InvalidImageDimensionsError(QoiError):
    """The image is empty or larger than 400 megapixels."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        super().__init__(f"invalid image dimensions: {width}x{height}")


class InvalidImageLengthError(QoiError):
    """The pixel buffer length does not match the image dimensions."""

    def __init__(self, size, width, height):
        self.size = size
        self.width = width
        self.height = height
        super().__init__(f"invalid image length: {size} bytes for {width}x{height}")


class OutputBufferTooSmallError(QoiError):
    """The output buffer cannot hold the encoded or decoded image."""

    def __init__(self, size, required):
        self.size = size
        self.required = required
        super().__init__(f"output buffer size too small: {size} (required: {required})")


class UnexpectedBufferEndError(QoiError):
    """The input ended before decoding was finished."""

    def __init__(self):
        super().__init__("unexpected input buffer end while decoding")


class InvalidPaddingError(QoiError):
    """The stream end marker does not match."""

    def __init__(self):
        super().__init__("invalid padding (stream end marker mismatch)")


class QoiIOError(QoiError):
    """An I/O error raised by a wrapped reader or writer."""

    def __init__(self, error):
        self.error = error
        super().__init__(f"i/o error: {error}")