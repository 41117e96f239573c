"""Per-pixel operations of the QOI format.

A pixel is a tuple of three (RGB) or four (RGBA) integers in 0..255.
"""

from .consts import QOI_OP_DIFF, QOI_OP_LUMA, QOI_OP_RGB, QOI_OP_RGBA


def hash_index(pixel):
    """Position of the pixel in the 64-entry index; alpha is 255 for RGB pixels."""
    r, g, b = pixel[0], pixel[1], pixel[2]
    a = pixel[3] if len(pixel) >= 4 else 0xFF
    return (r * 3 + g * 5 + b * 7 + a * 11) % 64


def apply_diff(pixel, b1):
    """Return the pixel changed by a QOI_OP_DIFF byte."""
    r = (pixel[0] + ((b1 >> 4) & 0x03) - 2) & 0xFF
    g = (pixel[1] + ((b1 >> 2) & 0x03) - 2) & 0xFF
    b = (pixel[2] + (b1 & 0x03) - 2) & 0xFF
    return (r, g, b, *pixel[3:])


def apply_luma(pixel, b1, b2):
    """Return the pixel changed by a QOI_OP_LUMA byte pair."""
    vg = (b1 & 0x3F) - 32
    vr = vg - 8 + ((b2 >> 4) & 0x0F)
    vb = vg - 8 + (b2 & 0x0F)
    r = (pixel[0] + vr) & 0xFF
    g = (pixel[1] + vg) & 0xFF
    b = (pixel[2] + vb) & 0xFF
    return (r, g, b, *pixel[3:])


def encode_pixel(pixel, previous, channels):
    """Encode a pixel relative to the previous one as DIFF, LUMA, RGB or RGBA bytes."""
    r, g, b = pixel[0], pixel[1], pixel[2]
    if int(channels) == 4 and pixel[3] != previous[3]:
        return bytes((QOI_OP_RGBA, r, g, b, pixel[3]))

    vg = (g - previous[1]) & 0xFF
    vg_32 = (vg + 32) & 0xFF
    if vg_32 > 63:
        return bytes((QOI_OP_RGB, r, g, b))

    vr = (r - previous[0]) & 0xFF
    vb = (b - previous[2]) & 0xFF
    vr_2, vg_2, vb_2 = (vr + 2) & 0xFF, (vg + 2) & 0xFF, (vb + 2) & 0xFF
    if max(vr_2, vg_2, vb_2) <= 3:
        return bytes((QOI_OP_DIFF | (vr_2 << 4) | (vg_2 << 2) | vb_2,))

    vg_r_8 = (vr - vg + 8) & 0xFF
    vg_b_8 = (vb - vg + 8) & 0xFF
    if max(vg_r_8, vg_b_8) <= 15:
        return bytes((QOI_OP_LUMA | vg_32, (vg_r_8 << 4) | vg_b_8))

    return bytes((QOI_OP_RGB, r, g, b))