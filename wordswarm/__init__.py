"""
wordswarm - a word rendered as a swarm of colliding glyph particles.

The simulation core (Vector, Particle, layout_word, GameMode, Cursor, World) has no
drawing or event-loop dependencies; `wordswarm.render` and `wordswarm.app` provide the
pygame front end.
"""

__version__ = "0.1.0"

from .config import WorldConfig
from .exceptions import ConfigurationError, GlyphTableError, WordSwarmError
from .game import Cursor, GameMode
from .glyphs import load_glyph_table
from .layout import glyph_width, layout_word
from .particle import Particle
from .vector import Vector
from .world import World

__all__ = [
    "WorldConfig",
    "WordSwarmError",
    "ConfigurationError",
    "GlyphTableError",
    "Cursor",
    "GameMode",
    "load_glyph_table",
    "glyph_width",
    "layout_word",
    "Particle",
    "Vector",
    "World",
]
