#!/usr/bin/env python3
"""
Kinematic Pendulum - Main Entry Point.

Opens an interactive field with a two-segment pendulum that can be posed by
dragging its arms, either by inverse kinematics (drag arm2, both arms
follow) or forward kinematics (each arm rotates on its own).

Usage:
    python main.py [--config configs/pendulum.yaml] [--discipline IK|FK] [--no-tb]
"""

import argparse
import os
import sys

from kinematic_pendulum.config import ConfigError, load_config
from kinematic_pendulum.controller import PendulumController
from kinematic_pendulum.pose_store import PoseStore
from kinematic_pendulum.solvers import Discipline

DEFAULT_CONFIG_PATH = "configs/pendulum.yaml"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Kinematic double pendulum (FK / IK posing)"
    )
    parser.add_argument(
        "--config", default=None,
        help=f"Path to YAML config file (default: {DEFAULT_CONFIG_PATH})"
    )
    parser.add_argument(
        "--discipline", choices=[d.value for d in Discipline], type=str.upper,
        help="Override the initial posing discipline"
    )
    parser.add_argument(
        "--no-tb", action="store_true",
        help="Disable TensorBoard logging"
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    config_path = args.config
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
        if not os.path.exists(config_path):
            print(f"[pendulum] {config_path} not found, using defaults")
            config_path = None

    try:
        cfg = load_config(config_path)
    except OSError as e:
        print(f"[pendulum] Cannot read config {config_path}: {e}", file=sys.stderr)
        return 2
    except ConfigError as e:
        print(f"[pendulum] Invalid config {config_path}: {e}", file=sys.stderr)
        return 2

    discipline = Discipline.parse(args.discipline or cfg["controls"]["discipline"])
    store = PoseStore.from_config(cfg)
    controller = PendulumController(
        store, discipline=discipline,
        arm_padding=cfg["interaction"]["arm_padding"],
    )
    pose = store.snapshot()
    print(f"[pendulum] Anchor {tuple(round(c, 1) for c in pose.anchor.to_cartesian())}, "
          f"arms {pose.arm1.length:g} / {pose.arm2.length:g}")
    print(f"[pendulum] Discipline: {discipline.value}")

    # TensorBoard
    tb_logger = None
    if not args.no_tb:
        from kinematic_pendulum.tb_logger import TBLogger

        tb_cfg = cfg["tensorboard"]
        os.makedirs(tb_cfg["log_dir"], exist_ok=True)
        tb_logger = TBLogger(
            log_dir=tb_cfg["log_dir"],
            log_interval=tb_cfg["log_interval"],
        )
        print(f"[pendulum] TensorBoard logging to {tb_cfg['log_dir']}/")
        print(f"           Run: tensorboard --logdir {tb_cfg['log_dir']}")

    from kinematic_pendulum.visualizer import PendulumVisualizer

    print("[pendulum] Launching field. Drag an arm to pose it; close the window to exit.")
    viz = PendulumVisualizer(controller, cfg)

    try:
        viz.run(tb_logger=tb_logger)
    except KeyboardInterrupt:
        print("\n[pendulum] Interrupted.")
    finally:
        if tb_logger:
            tb_logger.close()
        print("[pendulum] Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
