import json
import tomllib
from pathlib import Path

import pytest

from rc4kit.infra.config.file_io import (
    copy_default_config,
    find_config_file,
    load_config,
    read_config_file,
    save_config,
    save_config_file,
)
from rc4kit.infra.paths import DEFAULT_CONFIG_FILE


@pytest.fixture
def no_user_settings(tmp_path, monkeypatch):
    """Point the per-user settings file at a path that does not exist."""
    monkeypatch.setattr(
        "rc4kit.infra.config.file_io.SETTING_PATH",
        tmp_path / "user" / "settings.json",
    )


# ================================================================
# load_config() resolution order
# ================================================================


def test_load_config_user_path_exists(tmp_path, monkeypatch):
    cfgfile = tmp_path / "custom.toml"
    cfgfile.write_text("[general]\ndrop = 3", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert load_config(config_path=cfgfile) == {"general": {"drop": 3}}


def test_load_config_user_path_missing_does_not_fall_back(
    tmp_path, monkeypatch, no_user_settings
):
    """A missing explicit path is an error even when a local file exists."""
    (tmp_path / "settings.toml").write_text("a = 1", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    with pytest.raises(FileNotFoundError):
        load_config(config_path=tmp_path / "not_exists.toml")


def test_load_config_local_toml_preferred_over_json(
    tmp_path, monkeypatch, no_user_settings
):
    (tmp_path / "settings.toml").write_text("source = 'toml'", encoding="utf-8")
    (tmp_path / "settings.json").write_text(
        json.dumps({"source": "json"}), encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    assert load_config() == {"source": "toml"}


def test_load_config_local_json(tmp_path, monkeypatch, no_user_settings):
    (tmp_path / "settings.json").write_text(
        json.dumps({"general": {"text_encoding": "utf-8"}}), encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    assert load_config() == {"general": {"text_encoding": "utf-8"}}


def test_load_config_user_settings_fallback(tmp_path, monkeypatch):
    fallback = tmp_path / "fallback.json"
    fallback.write_text(json.dumps({"a": 1}), encoding="utf-8")
    monkeypatch.setattr("rc4kit.infra.config.file_io.SETTING_PATH", fallback)

    workdir = tmp_path / "empty"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    assert load_config() == {"a": 1}


def test_load_config_none_found(tmp_path, monkeypatch, no_user_settings):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(FileNotFoundError):
        load_config()


# ================================================================
# read_config_file
# ================================================================


@pytest.mark.parametrize(
    "name, content, message",
    [
        ("broken.json", "{ invalid json", "Invalid JSON in"),
        ("broken.toml", "a = [1,2,,3]", "Invalid TOML in"),
        ("settings.yaml", "hello: 1", "Unsupported config file extension"),
        ("list.json", "[1, 2, 3]", "Config root must be a dict"),
    ],
)
def test_read_config_file_errors(tmp_path, name, content, message):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        read_config_file(path)


def test_read_config_file_case_insensitive_suffix(tmp_path):
    path = tmp_path / "SETTINGS.TOML"
    path.write_text("drop = 1", encoding="utf-8")

    assert read_config_file(path) == {"drop": 1}


# ================================================================
# copy_default_config
# ================================================================


def test_bundled_sample_is_valid_toml():
    data = tomllib.loads(DEFAULT_CONFIG_FILE.read_text(encoding="utf-8"))
    assert data["general"]["text_encoding"] == "latin-1"
    assert data["general"]["drop"] == 0


def test_copy_default_config(tmp_path):
    target = tmp_path / "out" / "settings.toml"
    copy_default_config(target)

    assert target.read_bytes() == DEFAULT_CONFIG_FILE.read_bytes()


# ================================================================
# find_config_file
# ================================================================


def test_find_config_file_explicit_path(tmp_path):
    cfgfile = tmp_path / "mine.json"
    cfgfile.write_text("{}", encoding="utf-8")

    assert find_config_file(cfgfile) == cfgfile.resolve()
    assert find_config_file(tmp_path / "missing.json") is None


def test_find_config_file_nothing_found(tmp_path, monkeypatch, no_user_settings):
    monkeypatch.chdir(tmp_path)

    assert find_config_file() is None


# ================================================================
# save_config / save_config_file
# ================================================================


def test_save_config_creates_parent_and_returns_path(tmp_path):
    outfile = tmp_path / "nested" / "config.json"

    written = save_config({"general": {"drop": 0}}, outfile)
    assert written == outfile.resolve()
    assert json.loads(outfile.read_text(encoding="utf-8")) == {"general": {"drop": 0}}


def test_save_config_defaults_to_user_settings(tmp_path, monkeypatch):
    user_file = tmp_path / "user" / "settings.json"
    monkeypatch.setattr("rc4kit.infra.config.file_io.SETTING_PATH", user_file)

    assert save_config({"a": 1}) == user_file.resolve()
    assert json.loads(user_file.read_text(encoding="utf-8")) == {"a": 1}


def test_save_config_failure_propagates(tmp_path, monkeypatch):
    def fake_write_text(*args, **kwargs):
        raise OSError("write fail")

    monkeypatch.setattr(Path, "write_text", fake_write_text)

    with pytest.raises(OSError):
        save_config({"a": 1}, tmp_path / "cannot_write.json")


def test_save_config_file_source_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        save_config_file(tmp_path / "missing.toml", tmp_path / "out.json")


def test_save_config_file_converts_toml_to_json(tmp_path):
    source = tmp_path / "in.toml"
    source.write_text("[profiles.utf8]\ntext_encoding = 'utf-8'", encoding="utf-8")

    out = tmp_path / "out.json"
    save_config_file(source, out)

    assert json.loads(out.read_text(encoding="utf-8")) == {
        "profiles": {"utf8": {"text_encoding": "utf-8"}}
    }


def test_save_config_file_check_runs_before_writing(tmp_path):
    source = tmp_path / "in.toml"
    source.write_text("[general]\ndrop = -1", encoding="utf-8")
    out = tmp_path / "out.json"
    seen = []

    def reject(data):
        seen.append(data)
        raise ValueError("drop must not be negative")

    with pytest.raises(ValueError, match="negative"):
        save_config_file(source, out, check=reject)

    assert seen == [{"general": {"drop": -1}}]
    assert not out.exists()


def test_save_config_file_invalid_source(tmp_path):
    source = tmp_path / "bad.toml"
    source.write_text("invalid = [1,,2]")

    with pytest.raises(ValueError):
        save_config_file(source, tmp_path / "out.json")
