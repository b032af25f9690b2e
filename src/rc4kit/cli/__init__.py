"""
Command line interface for rc4kit.
"""

__all__ = ["main"]

from .main import main
