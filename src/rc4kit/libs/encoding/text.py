"""
Text <-> bytes conversion at the cipher boundary.

The default ``latin-1`` codec maps each code point 0..255 to exactly one
byte, which is the legacy one-byte-per-character model. Any other Python
codec may be chosen for encoding-aware conversion.
"""

from __future__ import annotations

__all__ = ["DEFAULT_TEXT_ENCODING", "bytes_to_text", "text_to_bytes"]

from rc4kit.exceptions import InvalidEncodingError

DEFAULT_TEXT_ENCODING = "latin-1"


def text_to_bytes(text: str, encoding: str = DEFAULT_TEXT_ENCODING) -> bytes:
    """Encode text to bytes.

    Args:
        text: Input text.
        encoding: Python codec name.

    Returns:
        Encoded bytes.

    Raises:
        InvalidEncodingError: If the codec is unknown or ``text`` contains
            characters the codec cannot represent.
    """
    try:
        return text.encode(encoding)
    except UnicodeEncodeError as e:
        raise InvalidEncodingError(
            f"Character {text[e.start]!r} at position {e.start} "
            f"cannot be encoded as {encoding}"
        ) from e
    except LookupError:
        raise InvalidEncodingError(f"Unknown text encoding: {encoding}") from None


def bytes_to_text(data: bytes, encoding: str = DEFAULT_TEXT_ENCODING) -> str:
    """Decode bytes to text.

    Raises:
        InvalidEncodingError: If the codec is unknown or ``data`` is not
            valid in it.
    """
    try:
        return bytes(data).decode(encoding)
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(
            f"Bytes at position {e.start} are not valid {encoding}"
        ) from e
    except LookupError:
        raise InvalidEncodingError(f"Unknown text encoding: {encoding}") from None
