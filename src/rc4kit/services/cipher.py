from __future__ import annotations

import logging

from rc4kit.libs.crypto import encrypt_or_decrypt
from rc4kit.libs.encoding import (
    bytes_to_hex,
    bytes_to_text,
    hex_to_bytes,
    text_to_bytes,
)
from rc4kit.schemas import CipherConfig

logger = logging.getLogger(__name__)


def encrypt_text(message: str, key: str, config: CipherConfig | None = None) -> str:
    """Encrypt text and return the ciphertext as lowercase hex.

    Args:
        message: Plaintext. May be empty.
        key: Key text. Must not be empty.
        config: Cipher settings. Defaults are used when omitted.

    Returns:
        Lowercase hex string, two digits per ciphertext byte.

    Raises:
        InvalidKeyError: If ``key`` is empty.
        InvalidEncodingError: If ``message`` or ``key`` cannot be encoded
            with the configured text encoding.
    """
    cfg = config or CipherConfig()
    key_bytes = text_to_bytes(key, cfg.text_encoding)
    data = text_to_bytes(message, cfg.text_encoding)

    out = encrypt_or_decrypt(data, key_bytes, cfg.drop)
    logger.debug(
        "Encrypted %d bytes -> %d bytes (encoding=%s, drop=%d)",
        len(data),
        len(out),
        cfg.text_encoding,
        cfg.drop,
    )
    return bytes_to_hex(out)


def decrypt_text(hex_text: str, key: str, config: CipherConfig | None = None) -> str:
    """Decrypt hex ciphertext and return the plaintext.

    The hex input is fully validated before any decryption happens.

    Args:
        hex_text: Ciphertext as hex. May be empty.
        key: Key text. Must not be empty.
        config: Cipher settings. Defaults are used when omitted.

    Returns:
        Recovered plaintext.

    Raises:
        InvalidKeyError: If ``key`` is empty.
        InvalidEncodingError: If ``hex_text`` is not valid hex, or the
            recovered bytes are not valid in the configured text encoding.
    """
    cfg = config or CipherConfig()
    if cfg.strip_input:
        hex_text = hex_text.strip()
    data = hex_to_bytes(hex_text)
    key_bytes = text_to_bytes(key, cfg.text_encoding)

    out = encrypt_or_decrypt(data, key_bytes, cfg.drop)
    logger.debug(
        "Decrypted %d bytes -> %d bytes (encoding=%s, drop=%d)",
        len(data),
        len(out),
        cfg.text_encoding,
        cfg.drop,
    )
    return bytes_to_text(out, cfg.text_encoding)
