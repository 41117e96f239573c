"""Opcodes, sizes and limits of the QOI format."""

QOI_OP_INDEX = 0x00  # 00xxxxxx
QOI_OP_DIFF = 0x40  # 01xxxxxx
QOI_OP_LUMA = 0x80  # 10xxxxxx
QOI_OP_RUN = 0xC0  # 11xxxxxx
QOI_OP_RGB = 0xFE  # 11111110
QOI_OP_RGBA = 0xFF  # 11111111

QOI_MASK_2 = 0xC0  # (11)000000

QOI_HEADER_SIZE = 14

QOI_PADDING = bytes(7) + b"\x01"  # seven zeros and one 0x01 marker
QOI_PADDING_SIZE = 8

QOI_MAGIC = int.from_bytes(b"qoif", "big")

QOI_PIXELS_MAX = 400_000_000