"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class CipherConfig:
    """Configuration for text-level RC4 operations.

    Attributes:
        text_encoding: Codec used to turn message and key text into bytes.
            ``latin-1`` keeps one byte per character.
        drop: Number of leading keystream bytes to discard (0 is plain RC4).
        strip_input: Whether surrounding whitespace is removed from hex
            input before decryption.
    """

    text_encoding: str = "latin-1"
    drop: int = 0
    strip_input: bool = True


@dataclass
class LogConfig:
    """Configuration for logging output.

    Attributes:
        log_level: Level name for the ``rc4kit`` logger.
        log_dir: Directory for log files.
        save_log: Whether log records are also written to a file.
    """

    log_level: str = "INFO"
    log_dir: Path = field(default_factory=lambda: Path("./logs"))
    save_log: bool = False
