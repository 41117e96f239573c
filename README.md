# qoicodec

An encoder and decoder for the QOI ("Quite Okay Image") lossless image format,
written in pure Python with no third-party dependencies.

- RGB and RGBA images, with an sRGB or linear colour space stored in the header.
- Decodes from in-memory bytes or from any binary stream.
- Encodes to new bytes, into a pre-allocated writable buffer, or to any binary stream.
- Can decode RGB images as RGBA (alpha set to 255), and RGBA images as RGB (alpha dropped).

## Installation

```
pip install qoicodec
```

## Usage

Raw pixel data is a flat sequence of bytes: 3 bytes per pixel for RGB, 4 for
RGBA. The encoder infers the channel count from the data length and the image
size; any other length raises `InvalidImageLengthError`, and a length giving
a count other than 3 or 4 raises `InvalidChannelsError`.

```python
from qoicodec.encode import encode_to_vec
from qoicodec.decode import decode_to_vec

width, height = 2, 1
pixels = bytes([255, 0, 0, 0, 255, 0])        # two RGB pixels

encoded = encode_to_vec(pixels, width, height)
header, decoded = decode_to_vec(encoded)

assert header.width == width and header.height == height
assert decoded == pixels
```

### Encoder and Decoder

```python
import io

from qoicodec.decode import Decoder, decode_header
from qoicodec.encode import Encoder
from qoicodec.types import Channels, ColorSpace

encoder = Encoder(pixels, width, height).with_colorspace(ColorSpace.LINEAR)
buf = bytearray(encoder.required_buf_len())
n_written = encoder.encode_to_buf(buf)         # bytes actually written

stream = io.BytesIO()
encoder.encode_to_stream(stream)

print(decode_header(buf))

decoder = Decoder(bytes(buf[:n_written])).with_channels(Channels.RGBA)
rgba = decoder.decode_to_vec()                 # alpha set to 255

stream.seek(0)
decoder = Decoder.from_stream(stream)
rgb = decoder.decode_to_vec()
```

`Encoder` offers `channels()`, `header()`, `required_buf_len()` (an upper
bound on the encoded size), `encode_to_buf(buf)`, `encode_to_vec()` and
`encode_to_stream(writer)`. The module-level `encode_to_buf(buf, data, width, height)`
and `encode_to_vec(data, width, height)` are shortcuts for them.

`Decoder(data)` decodes the header at once. It offers `with_channels(channels)`,
`channels()`, `header()`, `required_buf_len()`, `decode_to_buf(buf)` and
`decode_to_vec()`. A decoder built from bytes returns the undecoded rest of its
input from `data()`; one built with `Decoder.from_stream(reader)` returns its
reader from `reader()`. Each raises `TypeError` on the other kind of decoder.
The module-level `decode_to_buf(buf, data)` returns the header, and
`decode_to_vec(data)` returns a `(header, pixels)` pair.

### Headers

`qoicodec.header.Header` is a frozen dataclass holding `width`, `height`,
`channels` (`qoicodec.types.Channels`) and `colorspace`
(`qoicodec.types.ColorSpace`). `Header.try_new(...)` checks the dimensions,
`Header.encode()` and `Header.decode(data)` convert to and from the 14-byte
header, and `n_pixels()`, `n_bytes()` and `encode_max_len()` give sizes.
`qoicodec.header.encode_max_len(width, height, channels)` gives the same
upper bound without a header.

### Errors

Every failure raises a subclass of `qoicodec.errors.QoiError`:
`InvalidMagicError`, `InvalidChannelsError`, `InvalidColorSpaceError`,
`InvalidImageDimensionsError`, `InvalidImageLengthError`,
`OutputBufferTooSmallError`, `UnexpectedBufferEndError` and
`InvalidPaddingError`. `OSError`s from a stream, and a stream that ends
early, are wrapped in `QoiIOError`.

### Lower-level pieces

`qoicodec.consts` holds the format's opcodes, sizes and limits, and
`qoicodec.pixel` the per-pixel operations (`hash_index`, `apply_diff`,
`apply_luma`, `encode_pixel`) the codec is built from.

## Limits

Width and height must both be non-zero, and an image may hold at most
400 000 000 pixels.

## What it does not do

This is a library only: it has no command-line tool, and it reads and writes
raw pixel bytes, not PNG or other image formats. Converting to or from such
formats is left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```