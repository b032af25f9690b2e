from __future__ import annotations

from pathlib import Path
from typing import Any

from rc4kit.schemas import CipherConfig, LogConfig


class ConfigAdapter:
    """High-level accessor for general and profile-specific configuration.

    All configuration resolution follows the order:

    **general -> profile-specific -> built-in defaults**

    Args:
        config (dict[str, Any]): Fully loaded configuration mapping containing
            a ``general`` block and optionally a ``profiles`` block.

    Attributes:
        _config (dict[str, Any]): Internal stored configuration mapping.
    """

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        self._config: dict[str, Any] = dict(config or {})

    def get_config(self) -> dict[str, Any]:
        """Return the full raw configuration mapping.

        Returns:
            dict[str, Any]: The stored configuration.
        """
        return self._config

    def get_profiles(self) -> list[str]:
        """Return the names of all configured profiles.

        Returns:
            list[str]: Profile names in file order.
        """
        profiles = self._config.get("profiles")
        if not isinstance(profiles, dict):
            return []
        return [name for name, value in profiles.items() if isinstance(value, dict)]

    def get_cipher_config(self, profile: str | None = None) -> CipherConfig:
        """Build a CipherConfig by merging general and profile overrides.

        Args:
            profile (str | None): Optional profile key.

        Returns:
            CipherConfig: Resolved cipher configuration.

        Raises:
            ValueError: If ``profile`` is not configured, or ``drop`` or
                ``text_encoding`` has an invalid value.
        """
        profile_cfg = self._profile_cfg(profile) if profile else {}
        cfg = {**self._gen_cfg(), **profile_cfg}

        text_encoding = cfg.get("text_encoding") or "latin-1"
        if not isinstance(text_encoding, str):
            raise ValueError(
                f"text_encoding must be str, got {type(text_encoding).__name__}"
            )

        return CipherConfig(
            text_encoding=text_encoding,
            drop=self._to_drop(cfg.get("drop", 0)),
            strip_input=bool(cfg.get("strip_input", True)),
        )

    def get_log_config(self) -> LogConfig:
        """Build a LogConfig from the ``general.debug`` block.

        Returns:
            LogConfig: Resolved logging configuration.
        """
        debug_cfg = self._debug_cfg()
        return LogConfig(
            log_level=self.get_log_level(),
            log_dir=self.get_log_dir(),
            save_log=bool(debug_cfg.get("save_log", False)),
        )

    def get_log_level(self) -> str:
        """Return the configured logging level.

        Returns:
            str: Logging level or ``"INFO"`` if missing.
        """
        return str(self._debug_cfg().get("log_level") or "INFO").upper()

    def get_log_dir(self) -> Path:
        """Return directory for log files.

        Returns:
            Path: Absolute log directory path.
        """
        log_dir = self._debug_cfg().get("log_dir") or "./logs"
        return Path(log_dir).expanduser().resolve()

    def _gen_cfg(self) -> dict[str, Any]:
        """Return general configuration mapping.

        Returns:
            dict[str, Any]: ``general`` config or empty dict.
        """
        general = self._config.get("general")
        return general if isinstance(general, dict) else {}

    def _debug_cfg(self) -> dict[str, Any]:
        debug = self._gen_cfg().get("debug")
        return debug if isinstance(debug, dict) else {}

    def _profile_cfg(self, profile: str) -> dict[str, Any]:
        """Return configuration block for the given profile.

        Args:
            profile (str): Profile name.

        Returns:
            dict[str, Any]: Profile configuration.

        Raises:
            ValueError: If the profile does not exist.
        """
        profiles = self._config.get("profiles") or {}
        value = profiles.get(profile) if isinstance(profiles, dict) else None
        if not isinstance(value, dict):
            raise ValueError(f"Unknown profile: {profile}")
        return value

    @staticmethod
    def _to_drop(value: Any) -> int:
        """Validate the ``drop`` setting.

        Raises:
            ValueError: If ``value`` is not a non-negative integer.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"drop must be int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"drop must not be negative, got {value}")
        return value
