"""
Kinematics Solvers - forward and inverse kinematics for the two-link arm.

Both solvers are pure: they take the current pose, a drag target and the
offsets captured when the drag started, and return a new pose. Degenerate
geometry never raises out of a solver; the input pose is returned instead.
"""

import enum
import math

import numpy as np

from kinematic_pendulum.pose_store import Arm, Pose
from kinematic_pendulum.vector import as_vector

TWO_PI = 2 * math.pi
EPS = 1e-9


class Discipline(enum.Enum):
    FK = "FK"
    IK = "IK"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown kinematics discipline: {value!r}") from None


def _finite(*values):
    return all(math.isfinite(v) for v in values)


def solve_fk(pose: Pose, target, grabbed: Arm, offset1=None, offset2=None) -> Pose:
    """Set the grabbed arm's angle directly from the cursor direction."""
    target = as_vector(target)

    if grabbed is Arm.ARM1 and offset1 is not None and offset2 is not None:
        angle1 = (target - pose.anchor).angle + offset1
        angle2 = angle1 + offset2
    elif grabbed is Arm.ARM2 and offset2 is not None:
        angle1 = pose.arm1.angle
        angle2 = (target - pose.anchor2).angle + offset2
    else:
        return pose

    if not _finite(angle1, angle2):
        return pose
    return pose.with_angles(angle1, angle2)


def concavity(pose: Pose) -> int:
    """Elbow branch of the current pose: 0 is concave, 1 is convex."""
    return int(math.floor((pose.arm2.angle_difference(pose.arm1) + TWO_PI) / math.pi) % 2)


def solve_ik(pose: Pose, target, grabbed: Arm, offset2=None, phantom=None,
             offset1=None) -> Pose:
    """Back-solve both arm angles so the grabbed point of arm2 reaches target.

    ``phantom`` is the vector from arm2's root to the cursor at grab time; its
    length stands in for the second link when bounding the reachable
    distance. Arm1 drags have a single degree of freedom and use the FK rule.
    """
    if grabbed is Arm.ARM1:
        return solve_fk(pose, target, grabbed, offset1, offset2)
    if grabbed is not Arm.ARM2 or offset2 is None or phantom is None:
        return pose

    target = as_vector(target)
    a1 = pose.arm1.length
    reach = phantom.length
    if a1 < EPS or reach < EPS:
        return pose

    # 1. Target relative to the chain root, clamped into the reachable annulus
    raw = target - pose.anchor
    if raw.length < EPS:
        return pose
    diff = raw.clamp_length(a1 - reach, a1 + reach)
    dist = diff.length
    if dist < EPS:
        return pose

    # 2-3. Interior elbow angle by the law of cosines
    cos_arms_angle = (a1 ** 2 + reach ** 2 - dist ** 2) / (2 * a1 * reach)
    arms_angle = math.acos(float(np.clip(cos_arms_angle, -1.0, 1.0)))

    # 4. Keep whichever elbow branch the arm is currently in
    phi = arms_angle if concavity(pose) == 0 else TWO_PI - arms_angle

    # 5. Base angle, asin(reach * sin(phi) / dist) without the obtuse ambiguity
    gamma = math.atan2(reach * math.sin(phi), a1 - reach * math.cos(phi))

    # 6-7. Arm angles
    angle1 = -(gamma - diff.angle)
    angle2 = math.pi + angle1 + offset2 - phi

    if not _finite(angle1, angle2):
        return pose
    return pose.with_angles(angle1, angle2)


def solve(discipline: Discipline, pose: Pose, target, grabbed: Arm,
          offset1=None, offset2=None, phantom=None) -> Pose:
    if discipline is Discipline.IK:
        return solve_ik(pose, target, grabbed, offset2=offset2, phantom=phantom,
                        offset1=offset1)
    return solve_fk(pose, target, grabbed, offset1, offset2)
