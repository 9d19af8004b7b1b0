from __future__ import annotations

from pathlib import Path

from house.config import HouseConfig, load_config

HOUSE_YAML = """\
logging:
  level: debug
  format: text
fixtures:
  - name: front_door
    kind: door
    state: {open: closed, lock: locked}
  - name: kitchen_window
    kind: window
    state: {state: open}
  - name: desk_chair
    kind: chair
"""


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "house.yaml"
    path.write_text(text)
    return path


def test_from_yaml(tmp_path):
    result = HouseConfig.from_yaml(write_config(tmp_path, HOUSE_YAML))

    assert result.is_ok()
    config = result.unwrap()
    assert config.logging.level == "debug"
    assert config.logging.format == "text"
    assert [f.name for f in config.fixtures] == ["front_door", "kitchen_window", "desk_chair"]
    assert config.fixtures[0].state == {"open": "closed", "lock": "locked"}
    assert config.fixtures[2].state == {}
    assert config.validate().is_ok()


def test_missing_file(tmp_path):
    result = HouseConfig.from_yaml(tmp_path / "nope.yaml")
    assert result.is_err()
    assert result.unwrap_err().field == "path"


def test_bad_yaml(tmp_path):
    result = HouseConfig.from_yaml(write_config(tmp_path, "fixtures: [unclosed\n"))
    assert result.unwrap_err().field == "yaml"


def test_fixture_without_kind():
    result = HouseConfig.from_dict({"fixtures": [{"name": "front_door"}]})
    assert result.unwrap_err().field == "fixtures[0]"


def test_validate_unknown_kind():
    config = HouseConfig.from_dict({"fixtures": [{"name": "hatch", "kind": "trapdoor"}]}).unwrap()
    error = config.validate().unwrap_err()
    assert error.field == "fixtures.hatch.kind"


def test_validate_duplicate_name():
    config = HouseConfig.from_dict({"fixtures": [
        {"name": "door", "kind": "door"},
        {"name": "door", "kind": "window"},
    ]}).unwrap()
    assert config.validate().unwrap_err().message == "Duplicate fixture name"


def test_validate_open_and_locked_door():
    config = HouseConfig.from_dict({"fixtures": [
        {"name": "door", "kind": "door", "state": {"open": "open", "lock": "locked"}},
    ]}).unwrap()
    assert config.validate().unwrap_err().field == "fixtures.door.state"


def test_validate_bad_state_name():
    config = HouseConfig.from_dict({"fixtures": [
        {"name": "seat", "kind": "chair", "state": {"occupation": "reserved"}},
    ]}).unwrap()
    assert config.validate().is_err()


def test_validate_log_level():
    config = HouseConfig.from_dict({"logging": {"level": "loud"}}).unwrap()
    assert config.validate().unwrap_err().field == "logging.level"


def test_load_config_defaults(tmp_path):
    config = load_config(tmp_path).unwrap()
    assert config.fixtures == []
    assert config.logging.level == "info"


def test_load_config_reads_house_yaml(tmp_path):
    write_config(tmp_path, HOUSE_YAML)
    config = load_config(tmp_path).unwrap()
    assert len(config.fixtures) == 3


def test_load_config_propagates_validation_error(tmp_path):
    write_config(tmp_path, "fixtures:\n  - {name: a, kind: sofa}\n")
    result = load_config(tmp_path)
    assert result.is_err()
    assert "sofa" in str(result.unwrap_err())


def test_shipped_example_config_is_valid():
    config_dir = Path(__file__).resolve().parent.parent / "config"
    config = load_config(config_dir).unwrap()
    assert [f.kind for f in config.fixtures] == ["door", "door", "window", "window", "chair"]


def test_fixture_state_must_be_mapping():
    result = HouseConfig.from_dict({"fixtures": [{"name": "x", "kind": "door", "state": ["open"]}]})
    error = result.unwrap_err()
    assert error.field == "fixtures[0].state"
    assert "list" in error.message


def test_logging_must_be_mapping():
    result = HouseConfig.from_dict({"logging": "debug"})
    assert result.unwrap_err().field == "logging"


def test_non_mapping_state_in_yaml(tmp_path):
    write_config(tmp_path, "fixtures:\n  - {name: a, kind: chair, state: occupied}\n")
    result = load_config(tmp_path)
    assert result.unwrap_err().field == "fixtures[0].state"
