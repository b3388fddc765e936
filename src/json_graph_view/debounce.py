"""Debouncer: trailing debounce for rebuilds driven by an event loop tick.

There are no threads and no timers. The owner calls ``poll`` from its event
loop; a scheduled action runs once the clock has passed its deadline.
Scheduling again before that replaces the pending action and restarts the
deadline, so a burst of changes produces a single run with the latest
action.
"""

from __future__ import annotations

import time
from collections.abc import Callable

__all__ = ["Debouncer"]


class Debouncer:
    """Runs the most recently scheduled action after a quiet period.

    Args:
        delay: Quiet period in seconds.
        clock: Monotonic clock returning seconds. Defaults to ``time.monotonic``.

    Example::

        debouncer = Debouncer(0.25)
        debouncer.schedule(rebuild)
        ...
        debouncer.poll()   # runs rebuild() once 0.25s passed since the last schedule
    """

    def __init__(self, delay: float, clock: Callable[[], float] = time.monotonic) -> None:
        if delay < 0.0:
            msg = f"delay must be >= 0.0, got {delay}"
            raise ValueError(msg)
        self._delay = delay
        self._clock = clock
        self._action: Callable[[], None] | None = None
        self._deadline = 0.0

    @property
    def pending(self) -> bool:
        """True while an action is waiting to run."""
        return self._action is not None

    @property
    def deadline(self) -> float | None:
        """Clock time at which the pending action becomes due, or None."""
        return self._deadline if self._action is not None else None

    def schedule(self, action: Callable[[], None]) -> None:
        """Replace any pending action with ``action`` and restart the delay."""
        self._action = action
        self._deadline = self._clock() + self._delay

    def poll(self) -> bool:
        """Run the pending action if it is due.

        Returns:
            True if an action ran.
        """
        if self._action is None or self._clock() < self._deadline:
            return False
        return self.flush()

    def flush(self) -> bool:
        """Run the pending action now, regardless of the deadline.

        Returns:
            True if an action ran.
        """
        action = self._action
        if action is None:
            return False
        self._action = None
        action()
        return True

    def cancel(self) -> None:
        """Drop the pending action without running it."""
        self._action = None
