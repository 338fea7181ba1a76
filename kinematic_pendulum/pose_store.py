"""
Pose Store - owns the anchor and the two arm vectors of the pendulum.

arm1 is relative to the anchor, arm2 is relative to the tip of arm1.
Arm lengths and the anchor are fixed for the lifetime of a store; only the
arm angles change.
"""

import dataclasses
import enum
import math

from kinematic_pendulum.vector import Vector


class Arm(enum.Enum):
    ARM1 = 1
    ARM2 = 2


@dataclasses.dataclass(frozen=True)
class Pose:
    anchor: Vector
    arm1: Vector
    arm2: Vector

    @property
    def anchor2(self) -> Vector:
        """Root of arm2 (tip of arm1)."""
        return self.anchor + self.arm1

    @property
    def tip(self) -> Vector:
        return self.anchor2 + self.arm2

    def with_angles(self, angle1: float, angle2: float) -> "Pose":
        return Pose(
            anchor=self.anchor,
            arm1=self.arm1.with_angle(angle1),
            arm2=self.arm2.with_angle(angle2),
        )

    def joint_positions(self):
        """Cartesian (anchor, elbow, tip) for drawing."""
        return (
            self.anchor.to_cartesian(),
            self.anchor2.to_cartesian(),
            self.tip.to_cartesian(),
        )


DEFAULT_POSE = Pose(
    anchor=Vector.from_cartesian(150, 200),
    arm1=Vector(70, math.pi / 6),
    arm2=Vector(90, 7 * math.pi / 8),
)


class PoseStore:
    """Holds the current pose and notifies subscribers when it changes."""

    def __init__(self, initial: Pose = DEFAULT_POSE):
        self._initial = initial
        self._pose = initial
        self._subscribers = []

    @classmethod
    def from_config(cls, cfg: dict) -> "PoseStore":
        pcfg = cfg["pendulum"]
        ax, ay = pcfg["anchor"]
        pose = Pose(
            anchor=Vector.from_cartesian(ax, ay),
            arm1=Vector(pcfg["arm1"]["length"], math.radians(pcfg["arm1"]["angle_deg"])),
            arm2=Vector(pcfg["arm2"]["length"], math.radians(pcfg["arm2"]["angle_deg"])),
        )
        return cls(pose)

    def snapshot(self) -> Pose:
        return self._pose

    @property
    def initial(self) -> Pose:
        return self._initial

    def replace(self, pose: Pose):
        if not math.isclose(pose.arm1.length, self._initial.arm1.length) or \
                not math.isclose(pose.arm2.length, self._initial.arm2.length):
            raise ValueError("arm lengths are fixed for the session")
        if pose.anchor != self._initial.anchor:
            raise ValueError("the anchor is fixed for the session")
        self._pose = pose
        self._notify()

    def update_arm_angles(self, angle1: float, angle2: float):
        self.replace(self._pose.with_angles(angle1, angle2))

    def reset(self):
        self.replace(self._initial)

    def subscribe(self, callback):
        """Register ``callback(pose)``; returns a function that unsubscribes."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self):
        for callback in list(self._subscribers):
            callback(self._pose)
