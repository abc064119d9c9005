from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass
class Point:
    x: float
    y: float
    button: int = 1   # pygame mouse button number (1 = left)


@dataclass
class FrameData:
    timestamp: float
    # mouse presses collected since the previous frame, in logical window coords
    clicks: List[Point] = field(default_factory=list)
