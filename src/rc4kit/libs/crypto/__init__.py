"""
Stream cipher primitives.
"""

__all__ = [
    "RC4",
    "encrypt_or_decrypt",
    "keystream",
    "process",
    "schedule",
]

from .rc4 import RC4, encrypt_or_decrypt, keystream, process, schedule
