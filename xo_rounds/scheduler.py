"""
delayed callbacks: qt timer for the app, manual clock for tests
"""
import logging

from PySide6.QtCore import QObject, QTimer

logger = logging.getLogger(__name__)


class ScheduledTask:
    """
    handle for one pending callback
    """
    def __init__(self, callback, due_ms, cancel_hook=None):
        self.callback = callback
        self.due_ms = due_ms            # absolute time on the scheduler clock
        self.fired = False
        self.cancelled = False
        self._cancel_hook = cancel_hook

    @property
    def pending(self):
        return not (self.fired or self.cancelled)

    def cancel(self):
        """stop the callback from firing; no-op once fired or cancelled"""
        if not self.pending:
            return
        self.cancelled = True
        if self._cancel_hook:
            self._cancel_hook()
        logger.debug("cancelled task due at %s ms", self.due_ms)

    def run(self):
        # scheduler calls this when due
        if not self.pending:
            return
        self.fired = True
        self.callback()


class QtScheduler(QObject):
    """
    schedules on the qt event loop with single-shot QTimers
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self._timers = set()            # keep timers alive until they fire

    def call_later(self, delay_ms, callback):
        timer = QTimer(self)
        timer.setSingleShot(True)

        def drop_timer():
            timer.stop()
            self._timers.discard(timer)
            timer.deleteLater()

        task = ScheduledTask(callback, delay_ms, cancel_hook=drop_timer)

        def on_timeout():
            drop_timer()
            task.run()

        timer.timeout.connect(on_timeout)
        self._timers.add(timer)
        timer.start(delay_ms)
        logger.debug("scheduled callback in %s ms", delay_ms)
        return task


class ManualScheduler:
    """
    deterministic scheduler, time only moves when advance() is called
    """
    def __init__(self):
        self.now_ms = 0
        self._tasks = []

    def call_later(self, delay_ms, callback):
        task = ScheduledTask(callback, self.now_ms + delay_ms)
        self._tasks.append(task)
        logger.debug("scheduled callback at %s ms", task.due_ms)
        return task

    def pending_tasks(self):
        return [t for t in self._tasks if t.pending]

    def advance(self, ms):
        """
        move the clock forward and run every task that comes due,
        in due order. tasks scheduled by callbacks run too if due.
        """
        target = self.now_ms + ms
        while True:
            due = [t for t in self.pending_tasks() if t.due_ms <= target]
            if not due:
                break
            task = min(due, key=lambda t: t.due_ms)
            self.now_ms = task.due_ms
            task.run()
        self.now_ms = target
        self._tasks = self.pending_tasks()
