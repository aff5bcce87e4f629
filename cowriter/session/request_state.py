# FILE: cowriter/session/request_state.py
"""
Per-operation request state.

Each control (send chat, run action, connect) owns one RequestTracker.
A tracker in IN_FLIGHT refuses a second begin(), which is how duplicate
submissions from the same control are dropped. Different trackers are
independent.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class RequestState(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class RequestTracker:
    def __init__(self, name: str):
        self.name = name
        self.state = RequestState.IDLE
        self.error: Optional[str] = None

    @property
    def in_flight(self) -> bool:
        return self.state == RequestState.IN_FLIGHT

    def begin(self) -> bool:
        """Enter IN_FLIGHT. Returns False if a request is already running."""
        if self.in_flight:
            return False
        self.state = RequestState.IN_FLIGHT
        self.error = None
        return True

    def succeed(self) -> None:
        self.state = RequestState.SUCCEEDED
        self.error = None

    def fail(self, error: str) -> None:
        self.state = RequestState.FAILED
        self.error = error

    def __repr__(self) -> str:
        return f"RequestTracker({self.name!r}, state={self.state.value})"
