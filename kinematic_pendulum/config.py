"""
Configuration loading - YAML file merged over built-in defaults.
"""

import copy
import math
import numbers

import yaml

from kinematic_pendulum.solvers import Discipline

DEFAULT_CONFIG = {
    "pendulum": {
        "anchor": [150.0, 200.0],
        "arm1": {"length": 70.0, "angle_deg": 30.0},
        "arm2": {"length": 90.0, "angle_deg": 157.5},
    },
    "controls": {
        "discipline": "IK",
    },
    "interaction": {
        "arm_padding": 8.0,
        "fulcrum_radius": 3.0,
    },
    "visualization": {
        "update_interval_ms": 16,
        "field_size": [400, 400],
    },
    "tensorboard": {
        "log_dir": "runs",
        "log_interval": 10,
    },
}


class ConfigError(ValueError):
    pass


def _merge(base, override):
    out = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def load_config(path=None):
    if path is None:
        cfg = copy.deepcopy(DEFAULT_CONFIG)
    else:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: top level must be a mapping")
        cfg = _merge(DEFAULT_CONFIG, data)
    validate_config(cfg)
    return cfg


def _number(value, name):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigError(f"{name} must be finite, got {value!r}")
    return float(value)


def _section(cfg, name):
    section = cfg.get(name)
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be a mapping, got {section!r}")
    return section


def _pair(value, name):
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ConfigError(f"{name} must be a pair of numbers, got {value!r}")
    return tuple(_number(v, f"{name}[{i}]") for i, v in enumerate(value))


def validate_config(cfg):
    for name in DEFAULT_CONFIG:
        _section(cfg, name)

    # ---- pendulum ----
    pcfg = cfg["pendulum"]
    _pair(pcfg.get("anchor"), "pendulum.anchor")
    for name in ("arm1", "arm2"):
        arm = _section(pcfg, name)
        length = _number(arm.get("length"), f"pendulum.{name}.length")
        _number(arm.get("angle_deg"), f"pendulum.{name}.angle_deg")
        if length <= 0:
            raise ConfigError(f"pendulum.{name}.length must be positive, got {length}")

    # ---- controls ----
    try:
        Discipline.parse(cfg["controls"].get("discipline"))
    except ValueError as e:
        raise ConfigError(str(e)) from None

    # ---- interaction ----
    icfg = cfg["interaction"]
    if _number(icfg.get("arm_padding"), "interaction.arm_padding") < 0:
        raise ConfigError("interaction.arm_padding must not be negative")
    if _number(icfg.get("fulcrum_radius"), "interaction.fulcrum_radius") < 0:
        raise ConfigError("interaction.fulcrum_radius must not be negative")

    # ---- visualization ----
    vcfg = cfg["visualization"]
    if _number(vcfg.get("update_interval_ms"), "visualization.update_interval_ms") <= 0:
        raise ConfigError("visualization.update_interval_ms must be positive")
    if min(_pair(vcfg.get("field_size"), "visualization.field_size")) <= 0:
        raise ConfigError("visualization.field_size must be positive")

    # ---- tensorboard ----
    tcfg = cfg["tensorboard"]
    if not isinstance(tcfg.get("log_dir"), str):
        raise ConfigError(f"tensorboard.log_dir must be a path, got {tcfg.get('log_dir')!r}")
    log_interval = tcfg.get("log_interval")
    if isinstance(log_interval, bool) or not isinstance(log_interval, int) or log_interval <= 0:
        raise ConfigError(f"tensorboard.log_interval must be a positive integer, got {log_interval!r}")
