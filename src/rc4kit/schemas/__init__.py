"""
Data contracts and type definitions.
"""

__all__ = [
    "CipherConfig",
    "LogConfig",
]

from .config import CipherConfig, LogConfig
