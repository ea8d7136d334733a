"""Constants and world configuration for wordswarm."""

import os
from dataclasses import dataclass

from wordswarm.exceptions import ConfigurationError

# =========================================
# CONSTANTS & SIMULATION PARAMETERS
# =========================================

FPS = 60                         # Frames per second driven by the app loop
DEFAULT_WORD = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DEFAULT_WIDTH, DEFAULT_HEIGHT = 300, 150   # Viewport before the first resize

RESET_THRESHOLD_TICKS = 60       # Holding a press this long relays out the word
IMPACT_DISTANCE_FACTOR = 4       # Impact radius in cells
IMPACT_VELOCITY_SCALE = 0.1      # Outward speed per pixel of distance from the impact
DRAG_THRESHOLD = 5               # Pixels a press must travel to count as a drag

# Rendering
CURSOR_COLOR = "#00ff00"
CURSOR_LINE_OPACITY = 0.7
SCORE_COLOR = "red"
TRAIL_OPACITY = 0.1
TRAIL_DECAY = 0.9
SCORE_TEXT_OPACITY = 0.2

# Logging
LOG_LEVEL = os.getenv("WORDSWARM_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv("WORDSWARM_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")


# =========================================
# WORLD CONFIGURATION
# =========================================

@dataclass(frozen=True)
class WorldConfig:
    """
    Settings a World is built from, resolved once at construction.

    Attributes:
        word:              text laid out as particles
        word_size:         cell size in pixels; particle radius is half of it
        delay:             ticks the world stays paused after construction or reset
        velocity_range:    initial velocities are drawn from [-range/2, +range/2] per axis
        impact_enabled:    whether impact() pushes particles
        cursor_enabled:    whether the cursor highlights particles
        game_mode_enabled: whether hits on the score particle are counted
        tail_length:       number of past positions kept per particle
        tail_threshold:    a trail sample is taken every N advances
    """

    word: str = "unknown"
    word_size: float = 20
    delay: int = 120
    velocity_range: float = 0.03
    impact_enabled: bool = False
    cursor_enabled: bool = True
    game_mode_enabled: bool = False
    tail_length: int = 3
    tail_threshold: int = 1

    def __post_init__(self):
        if not self.word:
            raise ConfigurationError("word must not be empty")
        if self.word_size <= 0:
            raise ConfigurationError(f"word_size must be positive, got {self.word_size}")
        if self.delay < 0:
            raise ConfigurationError(f"delay must not be negative, got {self.delay}")
        if self.velocity_range < 0:
            raise ConfigurationError(f"velocity_range must not be negative, got {self.velocity_range}")
        if self.tail_length < 0:
            raise ConfigurationError(f"tail_length must not be negative, got {self.tail_length}")
        if self.tail_threshold < 1:
            raise ConfigurationError(f"tail_threshold must be at least 1, got {self.tail_threshold}")

    @property
    def impact_distance(self) -> float:
        return self.word_size * IMPACT_DISTANCE_FACTOR


__all__ = [
    "FPS",
    "DEFAULT_WORD",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "RESET_THRESHOLD_TICKS",
    "IMPACT_DISTANCE_FACTOR",
    "IMPACT_VELOCITY_SCALE",
    "DRAG_THRESHOLD",
    "CURSOR_COLOR",
    "CURSOR_LINE_OPACITY",
    "SCORE_COLOR",
    "TRAIL_OPACITY",
    "TRAIL_DECAY",
    "SCORE_TEXT_OPACITY",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "WorldConfig",
]
