"""Duplicate transition guard.

Order update events are delivered at least once, so the same status change
can arrive twice. When enabled, the guard remembers each dispatched
transition for a time window and rejects repeats within it.
"""

import hashlib
import threading
import time
from collections.abc import Callable

from order_updates.config import get_dedupe_window


def transition_key(order_id: str, from_status: str | None, to_status: str | None) -> str:
    """Build a deterministic key for one status transition of one order."""
    key_string = "|".join(["order_update", str(order_id), f"from={from_status}", f"to={to_status}"])
    key_hash = hashlib.sha256(key_string.encode()).hexdigest()[:16]
    return f"order_update:{key_hash}"


class TransitionGuard:
    """In-process TTL table of recently dispatched transitions."""

    def __init__(self, window_seconds: float, clock: Callable[[], float] = time.monotonic):
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.window_seconds = window_seconds
        self._clock = clock
        self._seen: dict[str, float] = {}
        self._lock = threading.Lock()

    def claim(self, order_id: str, from_status: str | None, to_status: str | None) -> bool:
        """Return True the first time a transition is seen within the window."""
        key = transition_key(order_id, from_status, to_status)
        now = self._clock()

        with self._lock:
            self._seen = {k: expiry for k, expiry in self._seen.items() if expiry > now}
            if key in self._seen:
                return False
            self._seen[key] = now + self.window_seconds
            return True

    def clear(self) -> None:
        with self._lock:
            self._seen.clear()

    def __len__(self) -> int:
        return len(self._seen)


_guard: TransitionGuard | None = None


def get_guard() -> TransitionGuard | None:
    """Return the process-wide guard, or None when deduplication is off."""
    global _guard
    if _guard is None:
        window = get_dedupe_window()
        if window > 0:
            _guard = TransitionGuard(window)

    return _guard


def reset_guard():
    """Drop the guard singleton (useful for testing)."""
    global _guard
    _guard = None
