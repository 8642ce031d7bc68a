"""
Execution timing utilities.

Wall-clock timing for the phases of a solve (elimination, back
substitution, residual check). Backends wrap each solve in timed() and
report Timer.result() as Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer with named, accumulating phases.

    Usage:
        with timed() as timer:
            with timer.section('elimination'):
                system.gaussian_elimination(0)
            with timer.section('back_substitution'):
                system.back_substitution()
        timer.result()
        # {'total_seconds': 0.002, 'elimination': 0.0015, 'back_substitution': 0.0005}
    """

    def __init__(self):
        self._phases: dict[str, float] = {}
        self._started_at: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time one phase. Re-entering a name adds to its total; the time is
        recorded even when the block raises.
        """
        began = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + (time.perf_counter() - began)

    def result(self) -> dict[str, float]:
        """
        Phase timings plus 'total_seconds'.

        Raises:
            RuntimeError: If called before stop()
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._phases}


@contextmanager
def timed() -> Iterator[Timer]:
    """Start a Timer for the duration of the block; it is stopped on exit."""
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
