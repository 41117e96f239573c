"""Encoder and decoder for the QOI (Quite Okay Image) format."""

__version__ = "0.4.1"

__all__ = ["consts", "decode", "encode", "errors", "header", "pixel", "types"]