"""Wall-clock timer producing integer nanosecond timestamps."""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Callable


class Timer:
    """Reports the current time in nanoseconds, shifted by a fixed offset."""

    def __init__(
        self,
        offset: int | timedelta = 0,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        if isinstance(offset, timedelta):
            offset = (
                offset.days * 86_400_000_000_000
                + offset.seconds * 1_000_000_000
                + offset.microseconds * 1_000
            )
        self.offset = int(offset)
        self._clock = clock

    def now(self) -> int:
        """Return the current timestamp in nanoseconds."""
        return self.offset + self._clock()