"""
Wall-clock timing of named computation phases.

Results report a breakdown such as
``{'total_seconds': 0.05, 'orthogonalize': 0.049, 'check': 0.001}``.
All work is synchronous on the host, so reading the clock around a
phase measures it fully.
"""

import time
from contextlib import contextmanager
from typing import Callable, Iterator


class Timer:
    """
    Accumulating phase timer.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('orthogonalize'):
            modified_gram_schmidt(Q, rtol)
        with timer.section('check'):
            ...
        timer.stop()
        timer.result()

    A section entered more than once accumulates; ``calls`` records how
    many times each was entered.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._sections: dict[str, float] = {}
        self._calls: dict[str, int] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._start_time = self._clock()

    def stop(self) -> None:
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = self._clock() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time the enclosed block under ``name``.

        The elapsed time is recorded even if the block raises.
        """
        begin = self._clock()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + (self._clock() - begin)
            self._calls[name] = self._calls.get(name, 0) + 1

    @property
    def calls(self) -> dict[str, int]:
        return dict(self._calls)

    def result(self) -> dict[str, float]:
        """
        Seconds per section plus 'total_seconds'.

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a whole block.

    Usage:
        with timed() as timer:
            Q = build_orthonormal_basis(A)
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
