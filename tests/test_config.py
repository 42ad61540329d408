import json
import logging

import pytest

from pwforge.config import DEFAULTS, coerce_value, config_path, load_config, options_from_config, save_config
from pwforge.generator import CharacterClass


def test_defaults_when_missing(isolated_config):
    assert not isolated_config.exists()
    assert load_config() == DEFAULTS


def test_config_path_uses_appdata(isolated_config):
    assert config_path() == str(isolated_config)
    assert isolated_config.parent.is_dir()


def test_fallback_to_home(tmp_path, monkeypatch):
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert config_path() == str(tmp_path / ".pwforge" / "config.json")


def test_save_and_load_roundtrip(isolated_config):
    cfg = load_config()
    cfg["length"] = 24
    cfg["symbols"] = False
    save_config(cfg)
    assert json.loads(isolated_config.read_text(encoding="utf-8"))["length"] == 24
    loaded = load_config()
    assert loaded["length"] == 24
    assert loaded["symbols"] is False
    assert loaded["lower"] is True
    assert not isolated_config.with_name("config.json.tmp").exists()


def test_corrupt_file_falls_back(isolated_config, caplog):
    config_path()
    isolated_config.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="pwforge.config"):
        assert load_config() == DEFAULTS
    assert "using defaults" in caplog.text


def test_bad_values_and_unknown_keys_are_dropped(isolated_config):
    config_path()
    isolated_config.write_text(json.dumps({"length": "abc", "digits": False, "theme": "dark"}),
                               encoding="utf-8")
    cfg = load_config()
    assert cfg["length"] == DEFAULTS["length"]
    assert cfg["digits"] is False
    assert "theme" not in cfg


def test_non_object_json_falls_back(isolated_config):
    config_path()
    isolated_config.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_config() == DEFAULTS


def test_coerce_value():
    assert coerce_value("length", "20") == 20
    assert coerce_value("avoid_ambiguous", "yes") is True
    assert coerce_value("upper", "off") is False
    with pytest.raises(ValueError):
        coerce_value("length", "twenty")
    with pytest.raises(ValueError):
        coerce_value("lower", "maybe")
    with pytest.raises(KeyError):
        coerce_value("colour", "red")


def test_options_from_config():
    cfg = dict(DEFAULTS, upper=False, symbols=False, avoid_ambiguous=True)
    opts = options_from_config(cfg)
    assert opts.classes == {CharacterClass.LOWERCASE, CharacterClass.DIGITS}
    assert opts.avoid_ambiguous is True


@pytest.mark.parametrize("key,value", [("length", 12.9), ("copies", 1.5)])
def test_fractional_numbers_are_rejected(isolated_config, key, value):
    config_path()
    isolated_config.write_text(json.dumps({key: value}), encoding="utf-8")
    assert load_config()[key] == DEFAULTS[key]
    with pytest.raises(ValueError):
        coerce_value(key, value)
    assert coerce_value("length", 20.0) == 20


def test_failed_save_leaves_no_temp_file(isolated_config):
    cfg = dict(DEFAULTS, length=object())
    with pytest.raises(TypeError):
        save_config(cfg)
    assert not isolated_config.with_name("config.json.tmp").exists()
    assert not isolated_config.exists()
