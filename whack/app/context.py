from __future__ import annotations
from dataclasses import dataclass, field
import pygame
from typing import Any, Tuple
from whack.api.config import EngineConfig


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock | None
    cfg: EngineConfig
    screen_size: Tuple[int, int]
    # shared values the launcher hands to the game (e.g. a --duration override)
    resources: dict[str, Any] = field(default_factory=dict)
