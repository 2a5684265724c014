import json

import pytest
from pydantic import ValidationError

from wrapped_defaults import DefaultsConfig


def test_defaults_config_defaults():
    cfg = DefaultsConfig()

    assert cfg.suite_name == "standard"
    assert cfg.log_level == "WARNING"
    assert cfg.defaults == {}


def test_defaults_must_have_stored_shapes():
    with pytest.raises(ValidationError, match="cannot persist"):
        DefaultsConfig(defaults={"ok": 1, "bad": None})


def test_log_level_is_restricted():
    with pytest.raises(ValidationError):
        DefaultsConfig(log_level="TRACE")


def test_from_file_loads_json(tmp_path):
    path = tmp_path / "defaults.json"
    path.write_text(json.dumps({"suite_name": "com.example.app", "defaults": {"theme": "dark", "ids": [1, 2]}}))

    cfg = DefaultsConfig.from_file(path)

    assert cfg.suite_name == "com.example.app"
    assert cfg.defaults == {"theme": "dark", "ids": [1, 2]}


def test_from_file_loads_yaml(tmp_path):
    path = tmp_path / "defaults.yaml"
    path.write_text(
        "log_level: DEBUG\n"
        "defaults:\n"
        "  launch_count: 0\n"
        "  layout:\n"
        "    columns: 2\n"
    )

    cfg = DefaultsConfig.from_file(str(path))

    assert cfg.log_level == "DEBUG"
    assert cfg.defaults == {"launch_count": 0, "layout": {"columns": 2}}


def test_from_file_empty_yaml_gives_empty_config(tmp_path):
    path = tmp_path / "defaults.yml"
    path.write_text("")

    assert DefaultsConfig.from_file(path).defaults == {}


def test_from_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        DefaultsConfig.from_file(tmp_path / "nope.json")


def test_from_file_rejects_unknown_suffix(tmp_path):
    path = tmp_path / "defaults.toml"
    path.write_text("")

    with pytest.raises(ValueError, match="Unsupported config format"):
        DefaultsConfig.from_file(path)
