"""
Arm outlines and hit testing.

Each arm is drawn as a rectangle padded around its segment; a press inside
that rectangle grabs the arm.
"""

from typing import Optional

from kinematic_pendulum.pose_store import Arm, Pose
from kinematic_pendulum.vector import Vector, as_vector

ARM_PADDING = 8.0
FULCRUM_RADIUS = 3.0


def arm_outline(root: Vector, arm: Vector, padding: float = ARM_PADDING):
    """Corners of the padded rectangle around ``arm`` as (x, y) tuples."""
    length_padding = arm.normalize().scale(padding)
    root_edge = root - length_padding
    tip_edge = root + arm + length_padding
    width_padding = length_padding.perpendicular()
    return [
        (root_edge + width_padding).to_cartesian(),
        (root_edge - width_padding).to_cartesian(),
        (tip_edge - width_padding).to_cartesian(),
        (tip_edge + width_padding).to_cartesian(),
    ]


def arm_contains(root: Vector, arm: Vector, point, padding: float = ARM_PADDING) -> bool:
    rel = as_vector(point) - root
    # rotate into the arm's frame: x runs along the arm, y across it
    along, across = rel.with_angle(rel.angle - arm.angle).to_cartesian()
    return -padding <= along <= arm.length + padding and abs(across) <= padding


def arm_at(pose: Pose, point, padding: float = ARM_PADDING) -> Optional[Arm]:
    # arm2 is drawn over arm1
    if arm_contains(pose.anchor2, pose.arm2, point, padding):
        return Arm.ARM2
    if arm_contains(pose.anchor, pose.arm1, point, padding):
        return Arm.ARM1
    return None
