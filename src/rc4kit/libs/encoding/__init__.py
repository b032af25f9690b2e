"""
Conversions between bytes and their hex or text representations.
"""

__all__ = [
    "bytes_to_hex",
    "hex_to_bytes",
    "bytes_to_text",
    "text_to_bytes",
]

from .hexcodec import bytes_to_hex, hex_to_bytes
from .text import bytes_to_text, text_to_bytes
