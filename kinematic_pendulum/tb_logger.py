"""
TensorBoard Logger - logs the pendulum pose to TensorBoard.
"""

from torch.utils.tensorboard import SummaryWriter

from kinematic_pendulum.solvers import Discipline


class TBLogger:
    """Wraps TensorBoard SummaryWriter for pose telemetry."""

    def __init__(self, log_dir="runs", log_interval=10):
        self.writer = SummaryWriter(log_dir=log_dir)
        self.log_interval = log_interval
        self.step_count = 0

    def log(self, controller, dt=None):
        """Log the controller's current pose every ``log_interval`` calls."""
        self.step_count += 1
        if self.step_count % self.log_interval != 0:
            return

        t = self.step_count
        pose = controller.current_pose()
        drag = controller.drag_state

        self.writer.add_scalar("arm1/angle", pose.arm1.angle, t)
        self.writer.add_scalar("arm2/angle", pose.arm2.angle, t)
        tip_x, tip_y = pose.tip.to_cartesian()
        self.writer.add_scalar("tip/x", tip_x, t)
        self.writer.add_scalar("tip/y", tip_y, t)

        self.writer.add_scalar("drag/active", 0.0 if drag.is_idle else 1.0, t)
        self.writer.add_scalar(
            "drag/discipline_ik",
            1.0 if controller.discipline is Discipline.IK else 0.0, t,
        )
        if dt is not None:
            self.writer.add_scalar("clock/dt", dt, t)

    def close(self):
        self.writer.close()
