from __future__ import annotations
import logging
import random
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Optional, Tuple

from whack.binding import ViewModel, bindable
from whack.round.config import RoundConfig, check_duration
from whack.round.countdown import Countdown

log = logging.getLogger(__name__)


class Phase(Enum):
    Idle = 1
    Running = 2
    Ended = 3


class TargetKind(Enum):
    Normal = 1
    Bonus = 2

    @property
    def points(self) -> int:
        return 2 if self is TargetKind.Bonus else 1


def format_rate(value: float) -> str:
    # at most two decimals, halves away from zero, trailing zeros dropped: 1, 0.5, 0.13
    rounded = Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    text = f"{rounded:f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


class RoundEngine(ViewModel):
    """
    State and rules of one Whack-a-Button session.

    Lifecycle: Idle --start--> Running --countdown expiry--> Ended --retry--> Idle.
    While Running, hit() and miss() change the score and move the target.

    Triggers called in the wrong phase are ignored: they log a warning and
    return False. Successful triggers return True.
    """

    phase = bindable(Phase.Idle)
    score = bindable(0)
    configured_duration = bindable(30)
    remaining_duration = bindable(30)
    target_position = bindable((0, 0))
    decoy_position = bindable((0, 0))
    target_kind = bindable(TargetKind.Normal)

    start_visible = bindable(True)
    play_visible = bindable(False)
    end_visible = bindable(False)

    points_text = bindable("")
    final_time_text = bindable("")
    points_per_sec_text = bindable("")

    exit_requested = bindable(False)

    def __init__(self, config: Optional[RoundConfig] = None, rng: Optional[random.Random] = None):
        super().__init__(display_name="RoundEngine")
        self.config = config or RoundConfig()
        self.rng = rng or random.Random()
        self.countdown: Optional[Countdown] = None

        self.configured_duration = self.config.default_duration
        self.remaining_duration = self.config.default_duration
        self._init_state()

    def _init_state(self) -> None:
        self.phase = Phase.Idle
        self.score = 0
        self.start_visible = True
        self.play_visible = False
        self.end_visible = False
        self.points_text = ""
        self.final_time_text = ""
        self.points_per_sec_text = ""

    def _misuse(self, action: str) -> bool:
        log.warning("Ignoring %s while %s", action, self.phase.name)
        return False

    # ------------- configuration -------------
    def set_configured_duration(self, seconds: int) -> bool:
        check_duration(seconds)
        if self.phase != Phase.Idle:
            return self._misuse("duration change")
        self.configured_duration = seconds
        self.remaining_duration = seconds
        return True

    def adjust_duration(self, delta: int) -> bool:
        """Keyboard-friendly variant of set_configured_duration; clamps at 1."""
        return self.set_configured_duration(max(1, self.configured_duration + delta))

    # ------------- lifecycle -------------
    def start(self) -> bool:
        if self.phase != Phase.Idle:
            return self._misuse("start")
        check_duration(self.configured_duration)

        self.score = 0
        self.start_visible = False
        self.play_visible = True

        # one countdown per engine; replaced only when the round length changed
        if self.countdown is None or self.countdown.duration_sec != self.configured_duration:
            self.countdown = Countdown(self.configured_duration)
        self.countdown.arm()
        self.remaining_duration = self.countdown.remaining_sec

        self.phase = Phase.Running
        log.info("Round started (%d s)", self.configured_duration)
        self.place_target()
        return True

    def place_target(self) -> None:
        w, h = self.config.play_area
        size = self.config.exclusion_size

        left = self.rng.randint(1, w - 1)
        top = self.rng.randint(1, h - 1)

        while True:
            oleft = self.rng.randint(1, w - 1)
            otop = self.rng.randint(1, h - 1)
            inside = left <= oleft < left + size and top <= otop < top + size
            if not inside:
                break

        roll = self.rng.randint(1, self.config.bonus_sides)
        kind = TargetKind.Bonus if roll == self.config.bonus_sides else TargetKind.Normal

        self.target_position = (left, top)
        self.decoy_position = (oleft, otop)
        self.target_kind = kind
        log.debug("Target %s at %s, decoy at %s", kind.name, (left, top), (oleft, otop))

    def hit(self) -> bool:
        if self.phase != Phase.Running:
            return self._misuse("hit")
        self.score += self.target_kind.points
        self.place_target()
        return True

    def miss(self) -> bool:
        if self.phase != Phase.Running:
            return self._misuse("miss")
        self.score -= 1
        self.place_target()
        return True

    def tick(self, dt_ms: float) -> bool:
        """Advance the round timer; expires the round when it runs out."""
        if self.phase != Phase.Running or self.countdown is None:
            return False
        expired = self.countdown.advance(dt_ms)
        self.remaining_duration = self.countdown.remaining_sec
        if expired:
            self.on_countdown_expired()
        return True

    def on_countdown_expired(self) -> bool:
        if self.phase != Phase.Running:
            return self._misuse("countdown expiry")
        if self.countdown is not None:
            self.countdown.disarm()

        self.phase = Phase.Ended
        self.play_visible = False
        self.end_visible = True

        duration = self.configured_duration
        self.points_text = f"Points: {self.score}"
        self.final_time_text = f"Time: {duration} seconds"
        self.points_per_sec_text = f"Points per second: {format_rate(self.score / duration)}"
        log.info("Round over: %d points in %d s", self.score, duration)
        return True

    def retry(self) -> bool:
        if self.phase != Phase.Ended:
            return self._misuse("retry")
        self._init_state()
        self.remaining_duration = self.configured_duration
        return True

    def exit(self) -> None:
        self.exit_requested = True

    @property
    def timer_armed(self) -> bool:
        return self.countdown is not None and self.countdown.armed

    def on_dispose(self) -> None:
        if self.countdown is not None:
            self.countdown.disarm()
