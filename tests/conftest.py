import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    # keep settings out of the real home / %APPDATA%
    monkeypatch.setenv("APPDATA", str(tmp_path))
    return tmp_path / "pwforge" / "config.json"
