"""
RC4 (ARCFOUR) stream cipher.

RC4 is cryptographically broken and is provided for interoperability with
legacy data only. Encryption and decryption are the same operation.
"""

from __future__ import annotations

__all__ = [
    "RC4",
    "encrypt_or_decrypt",
    "keystream",
    "process",
    "schedule",
]

from collections.abc import Iterator, Sequence

from rc4kit.exceptions import InvalidKeyError

STATE_SIZE = 256


def schedule(key: bytes) -> list[int]:
    """Perform the RC4 Key-Scheduling Algorithm (KSA).

    Args:
        key: RC4 key bytes. Must not be empty.

    Returns:
        A new list holding a permutation of ``0..255``.

    Raises:
        InvalidKeyError: If ``key`` is empty.
    """
    klen = len(key)
    if klen == 0:
        raise InvalidKeyError("Key must not be empty")

    key = bytes(key)
    S = list(range(STATE_SIZE))
    j = 0
    for i in range(STATE_SIZE):
        j = (j + S[i] + key[i % klen]) & 0xFF
        S[i], S[j] = S[j], S[i]
    return S


def keystream(S: Sequence[int], drop: int = 0) -> Iterator[int]:
    """Yield RC4 keystream bytes (PRGA) from a private copy of ``S``.

    The generator never terminates; callers take as many bytes as they need.

    Args:
        S: Initial state as returned by :func:`schedule`. It is not modified.
        drop: Number of leading keystream bytes to discard (RC4-drop[n]).

    Yields:
        Keystream bytes as integers in ``0..255``.

    Raises:
        ValueError: If ``drop`` is negative.
    """
    if drop < 0:
        raise ValueError("drop must not be negative")
    return _generate(list(S), drop)


def _generate(S: list[int], drop: int) -> Iterator[int]:
    i = 0
    j = 0
    while True:
        i = (i + 1) & 0xFF
        j = (j + S[i]) & 0xFF
        S[i], S[j] = S[j], S[i]
        if drop:
            drop -= 1
            continue
        yield S[(S[i] + S[j]) & 0xFF]


def process(S: Sequence[int], data: bytes, drop: int = 0) -> bytes:
    """XOR ``data`` with the keystream derived from ``S``.

    This is the RC4 Pseudo-Random Generation Algorithm (PRGA) combined with
    the XOR step. ``S`` is copied, so the same state can be reused to
    reproduce the keystream.

    Args:
        S: Initial state as returned by :func:`schedule`.
        data: Input bytes, either plaintext or ciphertext.
        drop: Number of leading keystream bytes to discard.

    Returns:
        Output bytes, same length as ``data``.
    """
    if drop < 0:
        raise ValueError("drop must not be negative")
    if not data:
        return b""

    out = bytearray(len(data))
    for idx, (ch, k) in enumerate(zip(data, keystream(S, drop))):
        out[idx] = ch ^ k
    return bytes(out)


def encrypt_or_decrypt(message: bytes, key: bytes, drop: int = 0) -> bytes:
    """Encrypt or decrypt ``message`` with ``key``.

    A fresh state is scheduled on every call.

    Raises:
        InvalidKeyError: If ``key`` is empty.
    """
    return process(schedule(key), message, drop)


class RC4:
    """Minimal RC4 cipher object.

    Only the key is kept; every call schedules a fresh state, so calls
    never share keystream.
    """

    def __init__(self, key: bytes, drop: int = 0) -> None:
        """
        Args:
            key: RC4 key bytes (must not be empty).
            drop: Number of leading keystream bytes to discard.
        """
        if not key:
            raise InvalidKeyError("Key must not be empty")
        if drop < 0:
            raise ValueError("drop must not be negative")

        self._key = bytes(key)
        self._drop = drop

    def crypt(self, data: bytes) -> bytes:
        """Encrypts/Decrypts data

        Args:
            data: Input bytes, either plaintext or ciphertext.

        Returns:
            Output bytes after XOR with the RC4 keystream.
        """
        return encrypt_or_decrypt(data, self._key, self._drop)

    encrypt = crypt
    decrypt = crypt
