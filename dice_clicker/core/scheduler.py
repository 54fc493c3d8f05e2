"""Cooperative task scheduler driven by the frame loop.

The App calls ``advance(dt_ms)`` once per frame. Two task kinds exist:

  * repeating timers (``call_every``) used by the auto roller
  * per-frame steps (``call_each_frame``) used by the dice roll animation

Every task is returned as a TaskHandle so owners can release it explicitly
instead of gating its effect with a flag.
"""
from __future__ import annotations
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class TaskHandle:
    _id_seq = 0

    def __init__(self, scheduler: "Scheduler", name: str):
        TaskHandle._id_seq += 1
        self.id = TaskHandle._id_seq
        self.name = name
        self._scheduler = scheduler
        self.active = True
        # Called with this handle if the scheduler drops the task after its callback raised
        self.on_drop: Optional[Callable[["TaskHandle"], None]] = None

    def cancel(self) -> None:
        """Release the task. Safe to call more than once."""
        if not self.active:
            return
        self.active = False
        self._scheduler._discard(self)

    def __repr__(self) -> str:
        return f"TaskHandle(id={self.id}, name={self.name!r}, active={self.active})"


class _RepeatingTask:
    def __init__(self, handle: TaskHandle, interval_ms: int, callback: Callable[[], None]):
        self.handle = handle
        self.interval_ms = interval_ms
        self.callback = callback
        self.elapsed_ms = 0

    def run(self, dt_ms: int) -> bool:
        self.elapsed_ms += dt_ms
        # At most one fire per tick; intervals missed during a stall are skipped
        if self.elapsed_ms >= self.interval_ms:
            self.elapsed_ms %= self.interval_ms
            self.callback()
        return True


class _FrameTask:
    def __init__(self, handle: TaskHandle, step: Callable[[], bool]):
        self.handle = handle
        self.step = step

    def run(self, dt_ms: int) -> bool:
        return bool(self.step())


class Scheduler:
    def __init__(self):
        self._tasks: list = []
        self.now_ms: int = 0

    def call_every(self, interval_ms: int, callback: Callable[[], None], name: str = "timer") -> TaskHandle:
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        handle = TaskHandle(self, name)
        self._tasks.append(_RepeatingTask(handle, interval_ms, callback))
        return handle

    def call_each_frame(self, step: Callable[[], bool], name: str = "frame") -> TaskHandle:
        """Run step() once per advance() until it returns False or the handle is cancelled."""
        handle = TaskHandle(self, name)
        self._tasks.append(_FrameTask(handle, step))
        return handle

    def advance(self, dt_ms: int) -> None:
        self.now_ms += dt_ms
        # Tasks scheduled during this tick first run on the next one
        for task in list(self._tasks):
            if not task.handle.active:
                continue
            try:
                keep = task.run(dt_ms)
            except Exception:
                logger.exception("Scheduled task %s failed; dropping it", task.handle.name)
                task.handle.cancel()
                if task.handle.on_drop is not None:
                    task.handle.on_drop(task.handle)
                continue
            if not keep:
                task.handle.cancel()

    def cancel_all(self) -> None:
        for task in list(self._tasks):
            task.handle.cancel()

    def pending(self, name: Optional[str] = None) -> int:
        return sum(1 for t in self._tasks if t.handle.active and (name is None or t.handle.name == name))

    def _discard(self, handle: TaskHandle) -> None:
        self._tasks = [t for t in self._tasks if t.handle is not handle]
