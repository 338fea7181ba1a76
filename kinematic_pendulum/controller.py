"""
Pendulum Controller - the surface the rendering layer talks to.

Wraps the pose store, the drag state machine and the animation clock
behind plain method calls: pointer events in, pose snapshots out.
"""

from kinematic_pendulum.drag import (
    ChangeDiscipline,
    DragStateMachine,
    PointerDown,
    PointerMove,
    PointerUp,
)
from kinematic_pendulum.geometry import ARM_PADDING, arm_at
from kinematic_pendulum.pose_store import Arm, Pose, PoseStore
from kinematic_pendulum.solvers import Discipline


class PendulumController:

    def __init__(self, store: PoseStore, clock=None,
                 discipline=Discipline.IK, arm_padding=ARM_PADDING):
        self.store = store
        self.clock = clock
        self.arm_padding = arm_padding
        self.machine = DragStateMachine(store, Discipline.parse(discipline))

    # ---- Pointer events ----

    def on_pointer_down(self, arm_index, position=None):
        arm = arm_index if isinstance(arm_index, Arm) else Arm(arm_index)
        self.machine.dispatch(PointerDown(arm, position))

    def on_pointer_move(self, position):
        self.machine.dispatch(PointerMove(position))

    def on_pointer_up(self):
        self.machine.dispatch(PointerUp())

    def press_at(self, position):
        """Grab whichever arm lies under ``position``; returns it or None."""
        arm = arm_at(self.store.snapshot(), position, self.arm_padding)
        if arm is not None:
            self.on_pointer_down(arm, position)
        return arm

    # ---- Mode / state ----

    def set_discipline(self, discipline):
        self.machine.dispatch(ChangeDiscipline(Discipline.parse(discipline)))

    @property
    def discipline(self) -> Discipline:
        return self.machine.discipline

    @property
    def drag_state(self):
        return self.machine.state

    def current_pose(self) -> Pose:
        return self.store.snapshot()

    def reset_pose(self):
        self.on_pointer_up()
        self.store.reset()

    # ---- Animation ----

    def tick(self, timestamp_ms):
        if self.clock is not None:
            self.clock.tick(timestamp_ms)

    def pause(self):
        if self.clock is not None:
            self.clock.pause()

    def resume(self):
        if self.clock is not None:
            self.clock.resume()

    def on_field_enter(self):
        self.pause()

    def on_field_leave(self):
        self.resume()
