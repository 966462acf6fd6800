# QTimer driver for a single CounterAnimator. One ticker owns one animator and one QTimer and tickers share nothing,
# so any number of counters can run side by side on the same event loop.

from PySide6.QtCore import QObject, QTimer, Signal
from cb.common.logger import log
from cb.core.animator import CounterAnimator


class CounterTicker(QObject):

    # Emitted on every tick with (counter text, circle background-image)
    frame = Signal(str, str)
    # Emitted on every tick with the sweep progress in [0, 1]
    progressed = Signal(float)
    # Emitted once, after the final frame
    finished = Signal()

    def __init__(self, animator: CounterAnimator, parent=None):
        super().__init__(parent)
        self.animator = animator
        self._timer = QTimer(self)
        self._timer.setInterval(max(0, int(animator.step_time)))
        self._timer.timeout.connect(self._tick)

    @property
    def interval(self):
        return self._timer.interval()

    def is_active(self):
        return self._timer.isActive()

    # Starts the count-up. A ticker only ever runs once.
    def start(self):
        if self.animator.done or self._timer.isActive():
            return
        self.animator.start()
        self._timer.start()
        log.debug(f"Ticker for '{self.animator.name}' started at {self._timer.interval()}ms")

    def _tick(self):
        frame = self.animator.tick()
        if frame is not None:
            self.frame.emit(frame.text, frame.background)
            self.progressed.emit(frame.progress)
        if self.animator.done:
            self._timer.stop()
            self.finished.emit()
