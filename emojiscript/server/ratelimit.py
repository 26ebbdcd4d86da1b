"""Per-client request rate limiting for the HTTP server."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass
class RateLimitState:
    """Tracks request timestamps for one client."""

    requests: List[float] = field(default_factory=list)

    def add_request(self, timestamp: float) -> None:
        self.requests.append(timestamp)

    def count_in_window(self, current_time: float, window_seconds: float) -> int:
        """Drop requests older than the window and count the rest."""
        cutoff = current_time - window_seconds
        self.requests = [t for t in self.requests if t > cutoff]
        return len(self.requests)


class RateLimiter:
    """Sliding-window limiter: at most ``max_requests`` per ``window_seconds``."""

    def __init__(self, max_requests: int = 100, window_seconds: float = 60.0):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.state: Dict[str, RateLimitState] = {}
        self._lock = threading.Lock()
        self._last_sweep: Optional[float] = None

    def hit(self, client: str, current_time: Optional[float] = None) -> Tuple[bool, Optional[str]]:
        """Record a request for ``client`` if allowed.

        Returns:
            (allowed, reason) tuple
        """
        current_time = time.monotonic() if current_time is None else current_time
        with self._lock:
            self._sweep_idle(current_time)
            state = self.state.setdefault(client, RateLimitState())
            count = state.count_in_window(current_time, self.window_seconds)
            if count >= self.max_requests:
                return False, f"Rate limit exceeded: {count}/{self.max_requests} requests per {self.window_seconds:g}s"
            state.add_request(current_time)
            return True, None

    def _sweep_idle(self, current_time: float) -> None:
        """Forget clients with no requests in the window, at most once per window."""
        if self._last_sweep is not None and current_time - self._last_sweep < self.window_seconds:
            return
        self._last_sweep = current_time
        idle = [
            client
            for client, state in self.state.items()
            if state.count_in_window(current_time, self.window_seconds) == 0
        ]
        for client in idle:
            del self.state[client]

    def reset(self, client: Optional[str] = None) -> None:
        """Reset state for one client, or for everyone."""
        with self._lock:
            if client:
                self.state.pop(client, None)
            else:
                self.state.clear()


__all__ = ["RateLimiter", "RateLimitState"]
