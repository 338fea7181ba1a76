"""
Animation Clock - frame-driven tick loop for the pendulum.

There is no autonomous motion: each step re-publishes the current arm
angles. The clock exists so time-based updates have somewhere to live.
Pausing cancels the pending frame so no stale callback runs afterwards.
"""

MS_PER_SEC = 1000


class AnimationClock:
    """
    Cooperative periodic ticker.

    ``scheduler`` provides ``request_frame(callback) -> handle`` and
    ``cancel_frame(handle)``; ``callback`` receives a timestamp in ms.
    """

    def __init__(self, store, scheduler, on_step=None):
        self.store = store
        self.scheduler = scheduler
        self.on_step = on_step
        self.anim_id = None
        self.timestamp = None
        self.last_dt = None

    @property
    def running(self) -> bool:
        return self.anim_id is not None

    def resume(self):
        if self.running:
            return
        self.anim_id = self.scheduler.request_frame(self.tick)

    def pause(self):
        if self.anim_id is not None:
            self.scheduler.cancel_frame(self.anim_id)
        self.anim_id = None
        self.timestamp = None

    def tick(self, timestamp_ms: float):
        prev = self.timestamp
        if prev is not None:
            self.last_dt = (timestamp_ms - prev) / MS_PER_SEC
            self._execute_step(self.last_dt)

        self.timestamp = timestamp_ms
        # a tick driven by hand while paused does not restart the loop
        if self.running:
            self.scheduler.cancel_frame(self.anim_id)
            self.anim_id = self.scheduler.request_frame(self.tick)

    def _execute_step(self, dt: float):
        pose = self.store.snapshot()
        self.store.update_arm_angles(pose.arm1.angle, pose.arm2.angle)
        if self.on_step is not None:
            self.on_step(dt)
