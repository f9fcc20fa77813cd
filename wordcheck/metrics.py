import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("wordcheck")


class StageTimer:
    """Collects per-stage timing for a single request.

    Entering the same stage more than once (one "check" per word) adds to
    its total.
    """

    def __init__(self):
        self.timings: dict[str, float] = {}
        self.counts: dict[str, int] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            elapsed_ms = (time.perf_counter() - t0) * 1000
            self.timings[name] = self.timings.get(name, 0.0) + elapsed_ms
            self.counts[name] = self.counts.get(name, 0) + 1
            logger.debug("stage=%s elapsed=%.1fms", name, elapsed_ms)

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**{name: round(ms, 1) for name, ms in self.timings.items()}, "total": self.total_ms}
