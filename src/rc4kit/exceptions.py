"""
Error types raised by rc4kit.

All of them derive from :class:`ValueError` so callers that only guard
against bad input values keep working.
"""

__all__ = [
    "RC4KitError",
    "InvalidKeyError",
    "InvalidEncodingError",
]


class RC4KitError(ValueError):
    """Base class for all rc4kit input errors."""


class InvalidKeyError(RC4KitError):
    """Raised when an RC4 key is empty."""


class InvalidEncodingError(RC4KitError):
    """Raised when hex or text input cannot be converted to bytes (or back)."""
