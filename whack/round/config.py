from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from whack.errors import ConfigurationError

PLAY_AREA = (421, 395)       # target/decoy coordinates are drawn from [1, w-1] x [1, h-1]
EXCLUSION_SIZE = 25          # decoy may not land in this square anchored at the target
DEFAULT_DURATION_SEC = 30
BONUS_SIDES = 4              # kind is a 1..BONUS_SIDES roll, only the top face is a bonus


@dataclass
class RoundConfig:
    play_area: Tuple[int, int] = PLAY_AREA
    exclusion_size: int = EXCLUSION_SIZE
    default_duration: int = DEFAULT_DURATION_SEC
    bonus_sides: int = BONUS_SIDES

    def __post_init__(self):
        self.play_area = (int(self.play_area[0]), int(self.play_area[1]))
        self.validate()

    def validate(self) -> None:
        w, h = self.play_area
        # decoy rejection sampling only terminates if some point lies outside the square
        if self.exclusion_size < 1 or self.exclusion_size >= min(w, h) - 1:
            raise ConfigurationError(
                f"exclusion square {self.exclusion_size} must be smaller than play area {w}x{h}")
        if self.bonus_sides < 2:
            raise ConfigurationError("bonus_sides must be at least 2")
        check_duration(self.default_duration)

    @classmethod
    def from_options(cls, options: Dict[str, Any] | None) -> "RoundConfig":
        options = options or {}
        area = options.get("play_area", PLAY_AREA)
        if isinstance(area, dict):
            area = (area.get("width", PLAY_AREA[0]), area.get("height", PLAY_AREA[1]))
        return cls(
            play_area=tuple(area),
            exclusion_size=int(options.get("exclusion_size", EXCLUSION_SIZE)),
            default_duration=options.get("duration", DEFAULT_DURATION_SEC),
            bonus_sides=int(options.get("bonus_sides", BONUS_SIDES)),
        )


def check_duration(seconds: Any) -> int:
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        raise ConfigurationError(f"round length must be whole seconds, got {seconds!r}")
    if seconds < 1:
        raise ConfigurationError(f"round length must be at least 1 second, got {seconds}")
    return seconds
