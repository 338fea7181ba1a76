"""Tests for the PendulumController facade."""

import pytest

from kinematic_pendulum.animation import AnimationClock
from kinematic_pendulum.controller import PendulumController
from kinematic_pendulum.pose_store import Arm
from kinematic_pendulum.solvers import Discipline


@pytest.fixture
def controller(example_store, scheduler):
    clock = AnimationClock(example_store, scheduler)
    return PendulumController(example_store, clock=clock)


def test_default_discipline_is_ik(controller):
    assert controller.discipline is Discipline.IK


def test_pointer_down_by_index(controller):
    controller.on_pointer_down(1)
    assert controller.drag_state.grabbed_arm is Arm.ARM1


def test_pointer_down_rejects_unknown_arm(controller):
    with pytest.raises(ValueError):
        controller.on_pointer_down(3)


def test_example_drag(controller, example_pose):
    controller.on_pointer_down(2)
    controller.on_pointer_move(example_pose.tip.to_cartesian())
    controller.on_pointer_move((250, 300))
    assert controller.current_pose().tip.to_cartesian() == pytest.approx((250, 300))

    controller.on_pointer_up()
    assert controller.drag_state.is_idle
    after = controller.current_pose()
    controller.on_pointer_move((10, 10))
    assert controller.current_pose() is after


def test_press_at_grabs_arm_under_cursor(controller, example_pose):
    mid = example_pose.anchor + example_pose.arm1.scale(0.5)
    assert controller.press_at(mid.to_cartesian()) is Arm.ARM1
    state = controller.drag_state
    assert state.grabbed_arm is Arm.ARM1
    assert state.has_offsets


def test_press_at_empty_field(controller):
    assert controller.press_at((0, 0)) is None
    assert controller.drag_state.is_idle


def test_set_discipline(controller):
    controller.set_discipline("fk")
    assert controller.discipline is Discipline.FK
    with pytest.raises(ValueError):
        controller.set_discipline("physics")


def test_fk_press_and_drag_keeps_arm1(controller, example_pose):
    controller.set_discipline(Discipline.FK)
    tip = example_pose.tip.to_cartesian()
    assert controller.press_at(tip) is Arm.ARM2
    controller.on_pointer_move((300, 300))
    assert controller.current_pose().arm1 == example_pose.arm1


def test_reset_pose(controller, example_pose):
    controller.on_pointer_down(2, example_pose.tip)
    controller.on_pointer_move((250, 300))
    controller.reset_pose()
    assert controller.current_pose() == example_pose
    assert controller.drag_state.is_idle


def test_field_enter_pauses_and_leave_resumes(controller):
    controller.resume()
    assert controller.clock.running
    controller.on_field_enter()
    assert not controller.clock.running
    controller.on_field_leave()
    assert controller.clock.running


def test_tick_forwards_to_clock(controller):
    controller.tick(100.0)
    controller.tick(116.0)
    assert controller.clock.last_dt == pytest.approx(0.016)


def test_animation_hooks_without_clock(example_store):
    controller = PendulumController(example_store)
    controller.tick(1.0)
    controller.pause()
    controller.resume()
    assert controller.current_pose() is example_store.snapshot()
