# app/demo_limit.py
import threading
from typing import Set


class OneShotLimiter:
    """
    Remembers which callers already used their single demo OCR call.
    Routes run in FastAPI's threadpool, hence the lock.
    """
    def __init__(self, enabled: bool = False):
        self.enabled = enabled
        self._used: Set[str] = set()
        self._lock = threading.Lock()

    def try_acquire(self, caller: str) -> bool:
        """True if `caller` may go ahead (and marks the shot as spent)."""
        if not self.enabled:
            return True
        with self._lock:
            if caller in self._used:
                return False
            self._used.add(caller)
            return True

    def release(self, caller: str) -> None:
        """Give the shot back, e.g. after a failed call or an explicit reset."""
        with self._lock:
            self._used.discard(caller)
