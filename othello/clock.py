"""Per-player stopwatches kept by the engine facade."""

import time
from datetime import timedelta
from typing import Optional

from othello.core.board import Cell


class Stopwatch:
    def __init__(self, offset: Optional[timedelta] = None):
        # offset carries time accumulated before a restore
        self.offset = offset or timedelta(0)
        self._accumulated = 0.0
        self._started_at: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._started_at is not None

    def start(self):
        if self._started_at is None:
            self._started_at = time.perf_counter()

    def stop(self):
        if self._started_at is not None:
            self._accumulated += time.perf_counter() - self._started_at
            self._started_at = None

    def reset(self):
        self._accumulated = 0.0
        self._started_at = None
        self.offset = timedelta(0)

    @property
    def elapsed(self) -> timedelta:
        seconds = self._accumulated
        if self._started_at is not None:
            seconds += time.perf_counter() - self._started_at
        return timedelta(seconds=seconds) + self.offset


class PlayerClocks:
    """One stopwatch per side; ``switch_to`` leaves exactly one running."""

    def __init__(self, first: Cell = Cell.BLACK):
        self.white = Stopwatch()
        self.black = Stopwatch()
        self.switch_to(first)

    def switch_to(self, side: Cell):
        running, stopped = (self.white, self.black) if side == Cell.WHITE else (self.black, self.white)
        stopped.stop()
        running.start()

    def running_side(self) -> Optional[Cell]:
        if self.white.running:
            return Cell.WHITE
        if self.black.running:
            return Cell.BLACK
        return None

    def reset(self, first: Cell = Cell.BLACK):
        self.white.reset()
        self.black.reset()
        self.switch_to(first)

    def restore(self, white: timedelta, black: timedelta):
        """Seed both clocks with previously recorded totals."""
        self.white.offset = white
        self.black.offset = black
