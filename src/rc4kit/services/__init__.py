"""
Text-level encrypt and decrypt operations built on the RC4 core.
"""

__all__ = ["decrypt_text", "encrypt_text"]

from .cipher import decrypt_text, encrypt_text
