"""
Interactive Visualizer - matplotlib field for posing the pendulum by hand.

Press on an arm and drag to pose it. The radio buttons switch between
inverse kinematics (drag arm2 and both arms follow the cursor) and forward
kinematics (each arm rotates on its own). The animation clock is paused
while the cursor is over the field and resumed when it leaves.
"""

import math
import os
import time

import matplotlib

# Pick the best available interactive backend
if "MPLBACKEND" not in os.environ:
    for _be in ("TkAgg", "Qt5Agg", "GTK3Agg", "Agg"):
        try:
            matplotlib.use(_be)
            break
        except Exception:
            continue

import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Polygon
from matplotlib.widgets import Button, RadioButtons

from kinematic_pendulum.animation import AnimationClock
from kinematic_pendulum.geometry import arm_outline
from kinematic_pendulum.pose_store import Arm
from kinematic_pendulum.solvers import Discipline

ARM_COLORS = {Arm.ARM1: "#ff6b6b", Arm.ARM2: "#74c0fc"}
ACTIVE_COLOR = "#ffd43b"


class MatplotlibFrameScheduler:
    """Animation frames on single-shot canvas timers."""

    def __init__(self, fig, interval_ms=16):
        self.fig = fig
        self.interval_ms = interval_ms
        self._timers = {}
        self._next_id = 0

    def request_frame(self, callback):
        self._next_id += 1
        handle = self._next_id
        timer = self.fig.canvas.new_timer(interval=self.interval_ms)
        timer.single_shot = True
        timer.add_callback(self._fire, handle, callback)
        self._timers[handle] = timer
        timer.start()
        return handle

    def cancel_frame(self, handle):
        timer = self._timers.pop(handle, None)
        if timer is not None:
            timer.stop()

    def _fire(self, handle, callback):
        if self._timers.pop(handle, None) is None:
            return
        callback(time.monotonic() * 1000.0)


class PendulumVisualizer:
    """matplotlib window around a PendulumController."""

    def __init__(self, controller, cfg):
        self.ctrl = controller
        self.cfg = cfg
        self.arm_padding = cfg["interaction"]["arm_padding"]
        self.fulcrum_radius = cfg["interaction"]["fulcrum_radius"]

        plt.style.use("dark_background")
        self.fig = plt.figure(figsize=(7, 8), facecolor="#0a0a0a")
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title("Kinematic Pendulum")

        # Field in screen coordinates: y grows downward
        width, height = cfg["visualization"]["field_size"]
        self.ax = self.fig.add_axes([0.05, 0.18, 0.9, 0.76], facecolor="#0a0a0a")
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_aspect("equal")
        self.ax.set_xticks([])
        self.ax.set_yticks([])

        self.arm_patches = {}
        self.fulcrums = {}
        for arm in (Arm.ARM1, Arm.ARM2):
            patch = Polygon([[0, 0]] * 4, closed=True, facecolor=ARM_COLORS[arm],
                            edgecolor="white", linewidth=0.8, alpha=0.85, zorder=5)
            self.ax.add_patch(patch)
            self.arm_patches[arm] = patch
            fulcrum = Circle((0, 0), self.fulcrum_radius, color="white", zorder=6)
            self.ax.add_patch(fulcrum)
            self.fulcrums[arm] = fulcrum

        # Controls
        ax_radio = self.fig.add_axes([0.05, 0.03, 0.14, 0.11], facecolor="#1a1a2a")
        labels = (Discipline.IK.value, Discipline.FK.value)
        self.radio = RadioButtons(ax_radio, labels,
                                  active=labels.index(controller.discipline.value))
        self.radio.on_clicked(self._on_discipline)

        ax_reset = self.fig.add_axes([0.25, 0.05, 0.14, 0.06])
        self.b_reset = Button(ax_reset, "Reset", color="#2a2a3a", hovercolor="#3a3a4a")
        self.b_reset.on_clicked(self._on_reset)

        # Animation frames come from the canvas timer
        interval = cfg["visualization"]["update_interval_ms"]
        self.scheduler = MatplotlibFrameScheduler(self.fig, interval)
        self.clock = AnimationClock(controller.store, self.scheduler)
        self.ctrl.clock = self.clock

        canvas = self.fig.canvas
        self._cids = [
            canvas.mpl_connect("button_press_event", self._on_press),
            canvas.mpl_connect("motion_notify_event", self._on_motion),
            canvas.mpl_connect("button_release_event", self._on_release),
            canvas.mpl_connect("axes_enter_event", self._on_axes_enter),
            canvas.mpl_connect("axes_leave_event", self._on_axes_leave),
        ]
        self._unsubscribe = controller.store.subscribe(self._on_pose_change)
        self._draw_pose(controller.current_pose())

    # ---- Mouse ----

    def _field_position(self, event):
        if event.inaxes is not self.ax or event.xdata is None:
            return None
        return (event.xdata, event.ydata)

    def _on_press(self, event):
        pos = self._field_position(event)
        if pos is None or event.button != 1:
            return
        if self.ctrl.press_at(pos) is not None:
            self._draw_pose(self.ctrl.current_pose())

    def _on_motion(self, event):
        pos = self._field_position(event)
        if pos is None:
            return
        self.ctrl.on_pointer_move(pos)

    def _on_release(self, event):
        was_dragging = not self.ctrl.drag_state.is_idle
        self.ctrl.on_pointer_up()
        if was_dragging:
            self._draw_pose(self.ctrl.current_pose())

    def _on_axes_enter(self, event):
        if event.inaxes is self.ax:
            self.ctrl.on_field_enter()

    def _on_axes_leave(self, event):
        if event.inaxes is self.ax:
            self.ctrl.on_field_leave()

    # ---- Controls ----

    def _on_discipline(self, label):
        self.ctrl.set_discipline(label)
        self._draw_pose(self.ctrl.current_pose())

    def _on_reset(self, event):
        self.ctrl.reset_pose()

    # ---- Drawing ----

    def _on_pose_change(self, pose):
        self._draw_pose(pose)

    def _draw_pose(self, pose):
        grabbed = self.ctrl.drag_state.grabbed_arm
        roots = {Arm.ARM1: pose.anchor, Arm.ARM2: pose.anchor2}
        vectors = {Arm.ARM1: pose.arm1, Arm.ARM2: pose.arm2}
        for arm, patch in self.arm_patches.items():
            patch.set_xy(arm_outline(roots[arm], vectors[arm], self.arm_padding))
            patch.set_facecolor(ACTIVE_COLOR if arm is grabbed else ARM_COLORS[arm])
            self.fulcrums[arm].center = roots[arm].to_cartesian()

        self.ax.set_title(
            f"{self.ctrl.discipline.value}  |  "
            f"arm1={math.degrees(pose.arm1.angle):.1f}°  "
            f"arm2={math.degrees(pose.arm2.angle):.1f}°",
            fontsize=10, color="#aaa",
        )
        self.fig.canvas.draw_idle()

    def run(self, tb_logger=None):
        """Start the clock and show the window."""
        if tb_logger is not None:
            self.clock.on_step = lambda dt: tb_logger.log(self.ctrl, dt)
        self.ctrl.resume()
        try:
            plt.show()
        finally:
            self.ctrl.pause()

    def close(self):
        self.ctrl.pause()
        self._unsubscribe()
        for cid in self._cids:
            self.fig.canvas.mpl_disconnect(cid)
        plt.close(self.fig)
