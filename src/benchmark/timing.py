"""
Timing primitives for the benchmark engine.

All durations come from time.perf_counter(), which is monotonic and has the
highest available resolution, and are reported in fractional milliseconds.
"""

import time
from typing import Any, Callable, Optional


def measure(operation: Callable[..., Any], *args: Any, **kwargs: Any) -> float:
    """
    Call operation once with the given arguments and return its duration.

    Side effects of the call (e.g. in-place sorting of an argument) are kept,
    so callers must pass fresh copies when repeated calls need the same input.

    Returns:
        Elapsed time in milliseconds
    """
    start = time.perf_counter()
    operation(*args, **kwargs)
    end = time.perf_counter()
    return (end - start) * 1000  # Convert to milliseconds


class Stopwatch:
    """Context manager measuring the time spent inside a with block."""

    def __init__(self):
        self._start: Optional[float] = None
        self._end: Optional[float] = None

    def __enter__(self):
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._end = time.perf_counter()

    @property
    def elapsed_ms(self) -> float:
        """Milliseconds elapsed so far, or for the whole block once it exits."""
        if self._start is None:
            return 0.0
        end = self._end if self._end is not None else time.perf_counter()
        return (end - self._start) * 1000
