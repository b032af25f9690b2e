import pytest


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every CLI test in an empty directory with no user settings."""
    monkeypatch.setattr(
        "rc4kit.infra.config.file_io.SETTING_PATH",
        tmp_path / "user" / "settings.json",
    )
    monkeypatch.chdir(tmp_path)
