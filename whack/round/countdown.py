from __future__ import annotations
import math


class Countdown:
    """
    Round timer driven by the game loop: the loop reports elapsed
    milliseconds with `advance` instead of the timer firing on its own, so
    expiry always happens on the loop's thread.
    """

    def __init__(self, duration_sec: int):
        self.duration_sec = duration_sec
        self._remaining_ms: float = 0.0
        self.armed: bool = False

    def arm(self) -> None:
        self._remaining_ms = float(self.duration_sec * 1000)
        self.armed = True

    def disarm(self) -> None:
        self.armed = False

    @property
    def remaining_sec(self) -> int:
        # whole seconds, rounded up so the HUD shows "1" until the very end
        return max(0, math.ceil(self._remaining_ms / 1000.0))

    @property
    def expired(self) -> bool:
        return self._remaining_ms <= 0

    def advance(self, dt_ms: float) -> bool:
        """Returns True exactly once, on the call that runs the timer out."""
        if not self.armed:
            return False
        self._remaining_ms -= dt_ms
        if self._remaining_ms <= 0:
            self._remaining_ms = 0.0
            self.armed = False
            return True
        return False
