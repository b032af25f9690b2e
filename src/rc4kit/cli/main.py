"""
Entry point for the ``rc4kit`` command.

Usage:
  rc4kit encrypt --key Key Plaintext
  rc4kit decrypt --key Key bbf316e8d940af0ad3
  rc4kit config init
  rc4kit config import my-settings.toml
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from rc4kit import __version__
from rc4kit.exceptions import RC4KitError
from rc4kit.infra.config import (
    ConfigAdapter,
    copy_default_config,
    load_config,
    save_config_file,
)
from rc4kit.infra.logger import setup_logging
from rc4kit.infra.paths import DEFAULT_CONFIG_FILENAME
from rc4kit.libs.encoding import text_to_bytes
from rc4kit.schemas import CipherConfig
from rc4kit.services import decrypt_text, encrypt_text

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_CONFIG_ERROR = 2


class ConfigError(Exception):
    """Raised for problems with configuration files or settings."""


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return number


def _read_input(value: str | None) -> str:
    """Return ``value``, or read stdin when it is missing or ``-``."""
    if value is not None and value != "-":
        return value
    text = sys.stdin.read()
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


def _load_adapter(config_path: str | None) -> ConfigAdapter:
    """Load settings into a ConfigAdapter.

    Built-in defaults are used when no file is found and no explicit path
    was given.
    """
    try:
        data = load_config(config_path)
    except FileNotFoundError as e:
        if config_path:
            raise ConfigError(f"Config file not found: {config_path}") from e
        logger.debug("No config file found, using defaults")
        data = {}
    except ValueError as e:
        raise ConfigError(str(e)) from e
    return ConfigAdapter(data)


def _cipher_config(adapter: ConfigAdapter, args: argparse.Namespace) -> CipherConfig:
    try:
        cfg = adapter.get_cipher_config(args.profile)
    except ValueError as e:
        raise ConfigError(str(e)) from e
    if getattr(args, "drop", None) is not None:
        cfg = dataclasses.replace(cfg, drop=args.drop)
    return cfg


def _cmd_encrypt(args: argparse.Namespace, adapter: ConfigAdapter) -> int:
    cfg = _cipher_config(adapter, args)
    message = _read_input(args.message)
    print(encrypt_text(message, args.key, cfg))
    return EXIT_OK


def _cmd_decrypt(args: argparse.Namespace, adapter: ConfigAdapter) -> int:
    cfg = _cipher_config(adapter, args)
    hex_text = _read_input(args.hex_text)
    print(decrypt_text(hex_text, args.key, cfg))
    return EXIT_OK


def _cmd_config_init(args: argparse.Namespace, adapter: ConfigAdapter) -> int:
    target = Path(args.path).expanduser()
    if target.exists() and not args.force:
        raise ConfigError(f"{target} already exists (use --force to overwrite)")
    copy_default_config(target)
    print(f"Configuration written to {target}")
    return EXIT_OK


def _check_settings(data: dict[str, Any]) -> None:
    """Resolve general settings and every profile; ValueError if one is unusable."""
    adapter = ConfigAdapter(data)
    adapter.get_log_config()
    for profile in [None, *adapter.get_profiles()]:
        cfg = adapter.get_cipher_config(profile)
        text_to_bytes("", cfg.text_encoding)


def _cmd_config_import(args: argparse.Namespace, adapter: ConfigAdapter) -> int:
    try:
        written = save_config_file(args.source, args.output, check=_check_settings)
    except (FileNotFoundError, ValueError) as e:
        raise ConfigError(str(e)) from e
    print(f"Configuration imported to {written}")
    return EXIT_OK


def _cmd_config_show(args: argparse.Namespace, adapter: ConfigAdapter) -> int:
    cfg = _cipher_config(adapter, args)
    for name, value in dataclasses.asdict(cfg).items():
        print(f"{name} = {value!r}")
    profiles = adapter.get_profiles()
    if profiles:
        print(f"profiles = {profiles!r}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rc4kit",
        description="Encrypt and decrypt text with the RC4 stream cipher.",
        epilog="RC4 is cryptographically broken; use it for legacy data only.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--config", help="Path to a TOML or JSON settings file.")
    parser.add_argument("--profile", help="Settings profile to apply.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_cipher_command(name: str, dest: str, metavar: str, help_text: str):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("-k", "--key", required=True, help="Key text.")
        sub.add_argument(
            "-d",
            "--drop",
            type=_non_negative_int,
            help="Discard the first N keystream bytes (overrides settings).",
        )
        sub.add_argument(
            dest,
            nargs="?",
            metavar=metavar,
            help="Input text; read from stdin when omitted or '-'.",
        )
        return sub

    add_cipher_command(
        "encrypt", "message", "MESSAGE", "Encrypt text, print hex."
    ).set_defaults(func=_cmd_encrypt)
    add_cipher_command(
        "decrypt", "hex_text", "HEX", "Decrypt hex, print text."
    ).set_defaults(func=_cmd_decrypt)

    config_parser = subparsers.add_parser("config", help="Manage settings.")
    config_sub = config_parser.add_subparsers(dest="config_command", required=True)

    init_parser = config_sub.add_parser("init", help="Write the sample settings file.")
    init_parser.add_argument("--path", default=DEFAULT_CONFIG_FILENAME)
    init_parser.add_argument("--force", action="store_true")
    init_parser.set_defaults(func=_cmd_config_init)

    show_parser = config_sub.add_parser("show", help="Print resolved cipher settings.")
    show_parser.add_argument(
        "--profile",
        default=argparse.SUPPRESS,
        help="Settings profile to show (overrides the global --profile).",
    )
    show_parser.set_defaults(func=_cmd_config_show)

    import_parser = config_sub.add_parser(
        "import", help="Validate a TOML/JSON file and save it as user settings."
    )
    import_parser.add_argument("source", metavar="SOURCE")
    import_parser.add_argument(
        "--output", help="JSON file to write (default: user settings.json)."
    )
    import_parser.set_defaults(func=_cmd_config_import)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        adapter = _load_adapter(args.config)
        log_cfg = adapter.get_log_config()
        setup_logging(
            log_level=args.log_level or log_cfg.log_level,
            log_dir=log_cfg.log_dir,
            save_log=log_cfg.save_log,
        )
    except (ConfigError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    func: Any = args.func
    try:
        return func(args, adapter)
    except ConfigError as e:
        logger.debug("%s failed: %s", args.command, e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except RC4KitError as e:
        logger.debug("%s failed: %s", args.command, e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
