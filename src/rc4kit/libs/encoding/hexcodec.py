from __future__ import annotations

__all__ = ["bytes_to_hex", "hex_to_bytes"]

import re

from rc4kit.exceptions import InvalidEncodingError

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]*")


def bytes_to_hex(data: bytes) -> str:
    """Render bytes as lowercase hex, two digits per byte.

    Args:
        data: Bytes to render.

    Returns:
        A string of length ``2 * len(data)``.
    """
    return bytes(data).hex()


def hex_to_bytes(text: str) -> bytes:
    """Parse a hex string into bytes.

    Both upper and lower case digits are accepted. No whitespace or
    separators are allowed.

    Args:
        text: Hex string with an even number of digits.

    Returns:
        The decoded bytes.

    Raises:
        InvalidEncodingError: If ``text`` contains a non-hex character or
            has an odd length.
    """
    if not _HEX_PATTERN.fullmatch(text):
        raise InvalidEncodingError(
            "Invalid hex format: only hexadecimal characters are allowed"
        )
    if len(text) % 2:
        raise InvalidEncodingError(
            "Invalid hex length: an even number of characters is required"
        )
    return bytes.fromhex(text)
