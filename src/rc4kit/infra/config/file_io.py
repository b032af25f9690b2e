"""
Reading, locating and writing rc4kit settings files.

Settings are plain mappings with a ``general`` table and optional
``profiles``. TOML and JSON are read; the per-user file is always JSON.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

from rc4kit.infra.paths import DEFAULT_CONFIG_FILE, SETTING_PATH

logger = logging.getLogger(__name__)

LOCAL_SETTING_NAMES = ("settings.toml", "settings.json")

ConfigCheck = Callable[[dict[str, Any]], None]


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _read_toml(path: Path) -> Any:
    with path.open("rb") as f:
        return tomllib.load(f)


_READERS: dict[str, tuple[str, Callable[[Path], Any], type[Exception]]] = {
    ".json": ("JSON", _read_json, json.JSONDecodeError),
    ".toml": ("TOML", _read_toml, tomllib.TOMLDecodeError),
}


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse a single settings file, chosen by its suffix.

    Args:
        path: A ``.toml`` or ``.json`` file (suffix is case-insensitive).

    Returns:
        The parsed settings mapping.

    Raises:
        ValueError: If the suffix is unsupported, the file does not parse, or
            its top level is not a table / object.
    """
    suffix = path.suffix.lower()
    if suffix not in _READERS:
        raise ValueError(f"Unsupported config file extension: {suffix}")

    kind, reader, parse_error = _READERS[suffix]
    try:
        data = reader(path)
    except (OSError, parse_error) as e:
        raise ValueError(f"Invalid {kind} in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a dict, got {type(data)} in {path}")
    return data


def find_config_file(config_path: str | Path | None = None) -> Path | None:
    """Locate the settings file to use.

    An explicit ``config_path`` is used alone: when it does not exist the
    result is ``None`` instead of silently falling back. Otherwise the
    working directory is searched for ``settings.toml`` then
    ``settings.json``, and finally the per-user ``SETTING_PATH``.
    """
    if config_path:
        path = Path(config_path).expanduser().resolve()
        if path.is_file():
            return path
        logger.warning("Specified file not found: %s", path)
        return None

    cwd = Path.cwd()
    for name in LOCAL_SETTING_NAMES:
        candidate = cwd / name
        if candidate.is_file():
            logger.debug("Using local file: %s", candidate)
            return candidate.resolve()

    return SETTING_PATH.resolve() if SETTING_PATH.is_file() else None


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Find and parse the active settings file.

    Raises:
        FileNotFoundError: If :func:`find_config_file` finds nothing.
        ValueError: If the file cannot be parsed.
    """
    path = find_config_file(config_path)
    if path is None:
        raise FileNotFoundError("No valid config file found.")

    logger.debug("Loading configuration from: %s", path)
    return read_config_file(path)


def copy_default_config(target: Path) -> None:
    """Write the bundled sample settings to ``target``."""
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(DEFAULT_CONFIG_FILE.read_bytes())


def save_config(
    config: dict[str, Any],
    output_path: str | Path | None = None,
) -> Path:
    """Write a settings mapping as indented JSON.

    ``output_path`` defaults to the per-user settings file.

    Returns:
        The resolved path that was written.

    Raises:
        OSError: If the file cannot be written.
    """
    output = Path(output_path or SETTING_PATH).expanduser().resolve()
    output.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(config, indent=2, ensure_ascii=False)

    try:
        output.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        logger.error("Failed to write config JSON '%s': %s", output, e)
        raise
    return output


def save_config_file(
    source_path: str | Path,
    output_path: str | Path | None = None,
    check: ConfigCheck | None = None,
) -> Path:
    """Import a TOML/JSON settings file as the JSON settings file.

    Nothing is written unless ``source_path`` parses and ``check`` (when
    given) accepts the parsed mapping.

    Args:
        source_path: Settings file to import.
        output_path: JSON file to write, the per-user settings by default.
        check: Callable raising ``ValueError`` for unusable settings.

    Returns:
        The resolved path that was written.

    Raises:
        FileNotFoundError: If ``source_path`` does not exist.
        ValueError: If the source cannot be parsed or fails ``check``.
    """
    source = Path(source_path).expanduser().resolve()
    if not source.is_file():
        raise FileNotFoundError(f"Source file not found: {source}")

    data = read_config_file(source)
    if check is not None:
        check(data)
    return save_config(data, output_path)
