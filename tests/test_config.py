"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from kinematic_pendulum.config import DEFAULT_CONFIG, ConfigError, load_config
from kinematic_pendulum.pose_store import PoseStore

REPO_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "pendulum.yaml"


def _write(tmp_path, data):
    path = tmp_path / "pendulum.yaml"
    path.write_text(yaml.safe_dump(data))
    return path


def test_defaults_without_path():
    cfg = load_config(None)
    assert cfg == DEFAULT_CONFIG
    assert cfg is not DEFAULT_CONFIG


def test_repo_config_loads():
    cfg = load_config(REPO_CONFIG)
    assert cfg["controls"]["discipline"] == "IK"
    assert cfg["pendulum"]["arm1"]["length"] == 70


def test_partial_file_is_merged_over_defaults(tmp_path):
    path = _write(tmp_path, {"pendulum": {"arm2": {"length": 120}}, "controls": {"discipline": "fk"}})
    cfg = load_config(path)
    assert cfg["pendulum"]["arm2"]["length"] == 120
    assert cfg["pendulum"]["arm2"]["angle_deg"] == 157.5
    assert cfg["pendulum"]["anchor"] == [150.0, 200.0]
    assert cfg["controls"]["discipline"] == "fk"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == DEFAULT_CONFIG


@pytest.mark.parametrize("override", [
    {"pendulum": {"arm1": {"length": 0}}},
    {"pendulum": {"arm2": {"length": -5}}},
    {"pendulum": {"arm1": {"angle_deg": "north"}}},
    {"pendulum": {"anchor": [1, 2, 3]}},
    {"pendulum": {"anchor": ["a", 1]}},
    {"pendulum": {"arm2": None}},
    {"pendulum": None},
    {"controls": None},
    {"controls": {"discipline": "physics"}},
    {"visualization": {"update_interval_ms": 0}},
    {"visualization": {"field_size": [400, "wide"]}},
    {"visualization": {"field_size": 400}},
    {"tensorboard": {"log_interval": 0}},
    {"tensorboard": {"log_interval": "10"}},
    {"interaction": {"arm_padding": -1}},
    {"interaction": {"arm_padding": "8"}},
    {"interaction": {"fulcrum_radius": None}},
])
def test_invalid_values_raise(tmp_path, override):
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, override))


def test_invalid_yaml_scalars_raise(tmp_path):
    # unquoted scalars as a user would type them
    path = tmp_path / "bad.yaml"
    path.write_text("pendulum:\n  anchor: [a, 1]\n")
    with pytest.raises(ConfigError):
        load_config(path)
    path.write_text("controls:\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_valid_config_builds_a_store(tmp_path):
    path = _write(tmp_path, {"pendulum": {"anchor": [10, 20.5]}})
    store = PoseStore.from_config(load_config(path))
    assert store.snapshot().anchor.to_cartesian() == pytest.approx((10, 20.5))


def test_non_mapping_file_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)
