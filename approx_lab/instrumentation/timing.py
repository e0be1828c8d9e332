"""
Timing utilities for approximation benchmarking.

Provides a nanosecond timer, a context manager for timed regions and the
discard sink every timed result is written into.
"""

import gc
import time
from contextlib import contextmanager
from typing import Any, Callable, Iterator


class DiscardSink:
    """Destination for values produced inside a timed loop.

    Every computed value is stored on the sink so the work that produced it
    is observable from outside the loop and cannot be skipped.
    """

    __slots__ = ("value", "writes")

    def __init__(self):
        self.value: Any = None
        self.writes: int = 0

    def __repr__(self) -> str:
        return f"DiscardSink(value={self.value!r}, writes={self.writes})"


class Timer:
    """Simple nanosecond timer for manual timing control."""

    def __init__(self, name: str = "timer", clock: Callable[[], int] = time.perf_counter_ns):
        self.name = name
        self.clock = clock
        self.start_ns: int = 0
        self.end_ns: int = 0
        self._running = False

    def start(self) -> "Timer":
        """Start the timer."""
        self.start_ns = self.clock()
        self._running = True
        return self

    def stop(self) -> "Timer":
        """Stop the timer."""
        self.end_ns = self.clock()
        self._running = False
        return self

    @property
    def running(self) -> bool:
        return self._running

    @property
    def elapsed_ns(self) -> int:
        """Elapsed time in nanoseconds."""
        end = self.end_ns if not self._running else self.clock()
        return max(end - self.start_ns, 0)

    @property
    def elapsed_ms(self) -> float:
        """Elapsed time in milliseconds."""
        return self.elapsed_ns / 1_000_000


@contextmanager
def timed(name: str = "operation", disable_gc: bool = True) -> Iterator[Timer]:
    """Context manager for timing a synchronous region.

    The garbage collector is paused for the duration of the region and
    restored to its previous state afterwards.

    Usage:
        with timed("sqrtf #1") as timer:
            # do work
        print(f"Elapsed: {timer.elapsed_ns}ns")
    """
    gc_was_enabled = gc.isenabled()
    if disable_gc:
        gc.disable()
    timer = Timer(name).start()
    try:
        yield timer
    finally:
        timer.stop()
        if disable_gc and gc_was_enabled:
            gc.enable()
