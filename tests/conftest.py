"""Shared pytest fixtures for the kinematic pendulum tests."""

import math
import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from kinematic_pendulum.pose_store import Pose, PoseStore
from kinematic_pendulum.vector import Vector


# =============================================================================
# Poses
# =============================================================================


@pytest.fixture
def example_pose() -> Pose:
    """Anchor (200, 225), arm1 (85, -pi/5), arm2 (105, -7pi/8)."""
    return Pose(
        anchor=Vector.from_cartesian(200, 225),
        arm1=Vector(85, -math.pi / 5),
        arm2=Vector(105, -7 * math.pi / 8),
    )


@pytest.fixture
def example_store(example_pose) -> PoseStore:
    return PoseStore(example_pose)


# =============================================================================
# Animation
# =============================================================================


class ManualFrameScheduler:
    """Frame scheduler driven by hand from the tests."""

    def __init__(self):
        self.pending = {}
        self.cancelled = []
        self._next_id = 0

    def request_frame(self, callback):
        self._next_id += 1
        self.pending[self._next_id] = callback
        return self._next_id

    def cancel_frame(self, handle):
        if self.pending.pop(handle, None) is not None:
            self.cancelled.append(handle)

    def fire(self, timestamp_ms):
        for handle in list(self.pending):
            callback = self.pending.pop(handle)
            callback(timestamp_ms)


@pytest.fixture
def scheduler() -> ManualFrameScheduler:
    return ManualFrameScheduler()
