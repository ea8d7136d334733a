"""Game-mode scoring and cursor state."""

import logging
from typing import Optional, Set

from wordswarm.config import CURSOR_COLOR
from wordswarm.vector import Vector

logger = logging.getLogger(__name__)


class GameMode:
    """Tracks which particles score on contact and how often they have."""

    def __init__(self, enabled: bool = False):
        self.enabled = enabled
        self.ids: Set[int] = set()
        self.score = 0

    def add_score_particle(self, idx: int):
        self.ids.add(idx)

    def clear_score_particles(self):
        self.ids.clear()

    def increase_score(self):
        self.score += 1
        logger.debug("Score is now %d", self.score)

    def is_score_particle(self, idx: int) -> bool:
        if not self.enabled:
            return False
        return idx in self.ids


class Cursor:
    """Last known pointer position; reads as absent while disabled."""

    def __init__(self, enabled: bool = True, color: str = CURSOR_COLOR):
        self.enabled = enabled
        self.color = color
        self.pos: Optional[Vector] = None

    def set_pos(self, x: float, y: float):
        if not self.enabled:
            return
        self.pos = Vector(x, y)

    def get_pos(self) -> Optional[Vector]:
        if not self.enabled:
            return None
        return self.pos

    def clear(self):
        self.pos = None


__all__ = ["GameMode", "Cursor"]
