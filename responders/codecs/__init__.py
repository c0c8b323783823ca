"""Codecs that encode converted responses for the wire."""

from .base import Codec
from .json_codec import JsonCodec

__all__ = [
    "Codec",
    "JsonCodec",
]
