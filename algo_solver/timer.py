"""
Per-request stage timing for log lines.
"""

import time


class StageTimer:
    """
    Tracks elapsed time of one solve request and of its current stage.
    """

    def __init__(self) -> None:
        self.start_time: float | None = None
        self.stage_start: float | None = None

    def start(self) -> None:
        """Start timing the request."""
        self.start_time = time.perf_counter()
        self.stage_start = self.start_time

    def elapsed(self) -> float:
        """Return elapsed seconds since start."""
        if self.start_time is None:
            return 0.0
        return time.perf_counter() - self.start_time

    def lap(self) -> float:
        """Return seconds spent in the current stage and begin the next one."""
        if self.stage_start is None:
            return 0.0
        now = time.perf_counter()
        spent = now - self.stage_start
        self.stage_start = now
        return spent
