"""Debounced auto-save driven by an explicit clock."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")

_logger = logging.getLogger(__name__)


class Clock(Protocol):
    """Monotonic time source in seconds."""

    def monotonic(self) -> float:
        """Return the current monotonic time."""


class SystemClock:
    """Clock backed by ``time.monotonic``."""

    def monotonic(self) -> float:
        return time.monotonic()


@dataclass
class AutoSaveScheduler(Generic[T]):
    """Collects edits and commits the latest one at most every interval.

    Callers drive it with ``poll()`` from whatever loop they already have;
    the scheduler never starts timers of its own.
    """

    commit: Callable[[T], None]
    interval_seconds: float = 2.0
    clock: Clock = field(default_factory=SystemClock)
    _pending: T | None = field(default=None, init=False)
    _has_pending: bool = field(default=False, init=False)
    _last_commit_at: float | None = field(default=None, init=False)

    @property
    def has_pending(self) -> bool:
        return self._has_pending

    def edit(self, payload: T) -> None:
        """Record an edit; it replaces any edit not yet committed."""
        self._pending = payload
        self._has_pending = True

    def poll(self) -> bool:
        """Commit the pending edit if the interval has elapsed."""
        if not self._has_pending:
            return False
        now = self.clock.monotonic()
        if (
            self._last_commit_at is not None
            and now - self._last_commit_at < self.interval_seconds
        ):
            return False
        self._commit(now)
        return True

    def flush(self) -> bool:
        """Commit the pending edit immediately."""
        if not self._has_pending:
            return False
        self._commit(self.clock.monotonic())
        return True

    def _commit(self, now: float) -> None:
        payload = self._pending
        self._pending = None
        self._has_pending = False
        self._last_commit_at = now
        _logger.debug("Auto-save commit at %.3f", now)
        try:
            self.commit(payload)  # type: ignore[arg-type]
        except Exception:
            if not self._has_pending:
                self._pending = payload
                self._has_pending = True
            raise
