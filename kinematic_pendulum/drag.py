"""
Drag-Interaction State Machine.

Idle --PointerDown(arm)--> Grabbed(arm, no offsets)
Grabbed(arm, no offsets) --PointerMove--> Grabbed(arm, offsets) + solve
Grabbed(arm, offsets) --PointerMove--> solve with the stored offsets
Grabbed --PointerUp--> Idle

Offsets are measured against the pose as it was when the arm was grabbed,
so the drag keeps the angle between arm and cursor instead of snapping the
arm onto the cursor.
"""

import dataclasses
from typing import Optional

from kinematic_pendulum.pose_store import Arm, Pose, PoseStore
from kinematic_pendulum.solvers import Discipline, solve
from kinematic_pendulum.vector import DomainError, Vector, as_vector


# ---- Events ----

@dataclasses.dataclass(frozen=True)
class PointerDown:
    arm: Arm
    position: Optional[tuple] = None


@dataclasses.dataclass(frozen=True)
class PointerMove:
    position: tuple


@dataclasses.dataclass(frozen=True)
class PointerUp:
    pass


@dataclasses.dataclass(frozen=True)
class ChangeDiscipline:
    discipline: Discipline


# ---- State ----

@dataclasses.dataclass(frozen=True)
class DragState:
    grabbed_arm: Optional[Arm] = None
    offset1: Optional[float] = None
    offset2: Optional[float] = None
    phantom_arm2: Optional[Vector] = None
    discipline: Optional[Discipline] = None
    grab_pose: Optional[Pose] = None

    @property
    def is_idle(self) -> bool:
        return self.grabbed_arm is None

    @property
    def has_offsets(self) -> bool:
        return self.offset2 is not None


IDLE = DragState()


def grab_offsets(pose: Pose, arm: Arm, position):
    """Return (offset1, offset2, phantom_arm2) for a grab at ``position``."""
    position = as_vector(position)
    phantom = position - pose.anchor2
    if arm is Arm.ARM1:
        offset1 = pose.arm1.angle_difference(position - pose.anchor)
        offset2 = pose.arm2.angle_difference(pose.arm1)
    else:
        offset1 = None
        offset2 = pose.arm2.angle_difference(phantom)
    return offset1, offset2, phantom


class DragStateMachine:
    """Routes pointer events to the active solver and updates the store."""

    def __init__(self, store: PoseStore, discipline: Discipline = Discipline.IK):
        self.store = store
        self.discipline = discipline
        self.state = IDLE

    def dispatch(self, event):
        if isinstance(event, PointerDown):
            self._pointer_down(event.arm, event.position)
        elif isinstance(event, PointerMove):
            self._pointer_move(event.position)
        elif isinstance(event, PointerUp):
            self.state = IDLE
        elif isinstance(event, ChangeDiscipline):
            self.discipline = Discipline.parse(event.discipline)
        else:
            raise TypeError(f"Unknown drag event: {event!r}")
        return self.state

    def _pointer_down(self, arm: Arm, position):
        if not self.state.is_idle:
            return
        self.state = DragState(
            grabbed_arm=arm,
            discipline=self.discipline,
            grab_pose=self.store.snapshot(),
        )
        if position is not None:
            self._capture_offsets(position)

    def _pointer_move(self, position):
        if self.state.is_idle:
            return
        target = as_vector(position)
        if not self.state.has_offsets:
            self._capture_offsets(target)

        s = self.state
        current = self.store.snapshot()
        try:
            pose = solve(
                s.discipline, current, target, s.grabbed_arm,
                offset1=s.offset1, offset2=s.offset2, phantom=s.phantom_arm2,
            )
        except DomainError:
            pose = current
        if pose is not current:
            self.store.replace(pose)

    def _capture_offsets(self, position):
        offset1, offset2, phantom = grab_offsets(
            self.state.grab_pose, self.state.grabbed_arm, position
        )
        self.state = dataclasses.replace(
            self.state, offset1=offset1, offset2=offset2, phantom_arm2=phantom
        )
