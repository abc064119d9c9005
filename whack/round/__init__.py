from .config import RoundConfig
from .countdown import Countdown
from .engine import Phase, RoundEngine, TargetKind

__all__ = ["RoundConfig", "Countdown", "Phase", "RoundEngine", "TargetKind"]
