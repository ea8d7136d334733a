"""The simulation world: owns the particles and advances them one tick at a time."""

import logging
from typing import List, Optional, Tuple

import numpy as np

from wordswarm.config import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    IMPACT_VELOCITY_SCALE,
    RESET_THRESHOLD_TICKS,
    WorldConfig,
)
from wordswarm.exceptions import ConfigurationError
from wordswarm.game import Cursor, GameMode
from wordswarm.layout import GlyphTable, layout_word
from wordswarm.particle import Particle
from wordswarm.vector import Vector

logger = logging.getLogger(__name__)


class World:
    """
    Owns the particle list for the current word and runs the per-tick state machine.

    The world starts paused for `config.delay` ticks, then simulates pairwise
    collisions, wall bounces and integration on every tick(). An external driver calls
    tick() once per frame and renders from the read-only query surface afterwards;
    input arrives through impact(), move_cursor(), clear_cursor(),
    start_reset_threshold(), release_reset_threshold() and resize().

    Args:
        glyphs: mapping of character to a 2-D 0/1 bitmap
        config: WorldConfig; defaults are used when omitted
        width, height: initial viewport size in pixels
        rng: numpy Generator used for velocities and score-target selection
    """

    def __init__(
        self,
        glyphs: GlyphTable,
        config: Optional[WorldConfig] = None,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        rng: Optional[np.random.Generator] = None,
    ):
        self.config = config if config is not None else WorldConfig()
        self.glyphs = glyphs
        self.rng = rng if rng is not None else np.random.default_rng()
        self.width = width
        self.height = height

        self.ticks = 0
        self.ticks_reset_threshold: Optional[int] = None
        self.paused = self.config.delay > 0

        self.cursor = Cursor(self.config.cursor_enabled)
        self.game_mode = GameMode(self.config.game_mode_enabled)

        self.word = ""
        self._particles: List[Particle] = []
        self._init_word(self.config.word)

    # -----------------------------------------
    # Query surface
    # -----------------------------------------

    @property
    def particles(self) -> Tuple[Particle, ...]:
        return tuple(self._particles)

    @property
    def impact_distance(self) -> float:
        return self.config.impact_distance

    @property
    def score(self) -> int:
        return self.game_mode.score

    @property
    def game_mode_enabled(self) -> bool:
        return self.game_mode.enabled

    @property
    def cursor_enabled(self) -> bool:
        return self.cursor.enabled

    @property
    def cursor_position(self) -> Optional[Vector]:
        return self.cursor.get_pos()

    def is_score_particle(self, idx: int) -> bool:
        return self.game_mode.is_score_particle(idx)

    def particles_in_range(self, point: Vector) -> List[Particle]:
        """Particles strictly closer to `point` than the impact distance."""
        return [p for p in self._particles
                if (p.position - point).magnitude() < self.impact_distance]

    def highlighted_particles(self) -> List[Particle]:
        pos = self.cursor.get_pos()
        if pos is None:
            return []
        return self.particles_in_range(pos)

    # -----------------------------------------
    # Input
    # -----------------------------------------

    def impact(self, x: float, y: float):
        """Push every particle near (x, y) outward, proportionally to its distance."""
        if not self.config.impact_enabled:
            return
        impacted = Vector(x, y)
        for p in self.particles_in_range(impacted):
            p.velocity = (p.position - impacted) * IMPACT_VELOCITY_SCALE
        self.paused = False

    def move_cursor(self, x: float, y: float):
        self.cursor.set_pos(x, y)

    def clear_cursor(self):
        self.cursor.clear()

    def start_reset_threshold(self):
        self.ticks_reset_threshold = self.ticks + RESET_THRESHOLD_TICKS

    def release_reset_threshold(self):
        self.ticks_reset_threshold = None

    def resize(self, width: float, height: float):
        """Adopt a new viewport, scaling particle positions by the size ratio."""
        ratio_x = width / self.width if self.width else 1.0
        ratio_y = height / self.height if self.height else 1.0
        for p in self._particles:
            p.position = Vector(p.position.x * ratio_x, p.position.y * ratio_y)
        self.width = width
        self.height = height
        logger.info("Resized world to %sx%s", width, height)

    def set_word(self, word: str):
        """Replace the current word and lay it out again."""
        if not word:
            raise ConfigurationError("word must not be empty")
        self._init_word(word)

    def reset(self):
        """Relayout the current word and restart the pause delay."""
        self.ticks = 0
        self.ticks_reset_threshold = None
        self.paused = self.config.delay > 0
        self._init_word(self.word)
        logger.debug("World reset, paused=%s", self.paused)

    # -----------------------------------------
    # Simulation
    # -----------------------------------------

    def tick(self):
        """Advance the world by one frame."""
        self.ticks += 1
        if self._reset_if_over_threshold():
            return
        if self._check_paused():
            return

        particles = self._particles
        n = len(particles)
        for i in range(n):
            a = particles[i]
            for j in range(i + 1, n):
                collided = a.collide(particles[j])
                if collided and (self.game_mode.is_score_particle(i) or self.game_mode.is_score_particle(j)):
                    self.game_mode.increase_score()

        for p in particles:
            self._bounce_off_walls(p)

        for p in particles:
            p.advance()

    def _bounce_off_walls(self, p: Particle):
        # Uses the pre-integration position; overshoot is not corrected
        vx, vy = p.velocity.x, p.velocity.y
        if p.position.x - p.radius < 0 or p.position.x + p.radius > self.width:
            vx = -vx
        if p.position.y - p.radius < 0 or p.position.y + p.radius > self.height:
            vy = -vy
        p.velocity = Vector(vx, vy)

    def _reset_if_over_threshold(self) -> bool:
        if self.ticks_reset_threshold is None:
            return False
        if self.ticks > self.ticks_reset_threshold:
            self.reset()
            return True
        return False

    def _check_paused(self) -> bool:
        if not self.paused:
            return False
        self.paused = self.ticks <= self.config.delay
        return self.paused

    def _init_word(self, word: str):
        self.word = word
        self._particles = layout_word(
            word,
            self.glyphs,
            self.config.word_size,
            self.width,
            self.height,
            velocity_range=self.config.velocity_range,
            rng=self.rng,
            tail_length=self.config.tail_length,
            tail_threshold=self.config.tail_threshold,
        )

        # One particle per layout is the score target in game mode
        self.game_mode.clear_score_particles()
        if self._particles:
            idx = int(self.rng.integers(len(self._particles)))
            self.game_mode.add_score_particle(idx)
            self._particles[idx].is_score_target = self.game_mode.enabled


__all__ = ["World"]
