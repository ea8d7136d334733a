"""Turns a word into the initial particle set."""

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from wordswarm.particle import Particle
from wordswarm.vector import Vector

logger = logging.getLogger(__name__)

GlyphTable = Dict[str, Sequence[Sequence[int]]]


def glyph_width(glyphs: GlyphTable) -> int:
    """Row length shared by every glyph in the table; "A" is checked first, blank glyphs are skipped."""
    candidates = [glyphs.get("A")] + list(glyphs.values())
    for matrix in candidates:
        if matrix and len(matrix[0]) > 0:
            return len(matrix[0])
    return 0


def layout_word(
    word: str,
    glyphs: GlyphTable,
    word_size: float,
    width: float,
    height: float,
    velocity_range: float = 0.0,
    rng: Optional[np.random.Generator] = None,
    tail_length: int = 3,
    tail_threshold: int = 1,
) -> List[Particle]:
    """
    Lay `word` out as one particle per set bitmap cell.

    Glyphs are placed side by side, `word_size * glyph_width` apart, with the word
    centered vertically on the viewport. Positions depend only on the arguments;
    velocities are drawn uniformly from [-velocity_range/2, +velocity_range/2] per axis.
    Characters missing from the table contribute no particles.

    Args:
        word: text to lay out
        glyphs: mapping of character to a 2-D 0/1 bitmap
        word_size: cell size in pixels
        width, height: viewport size in pixels
        velocity_range: spread of the initial velocity draw
        rng: numpy Generator for the velocity draw
        tail_length, tail_threshold: trail settings copied onto every particle

    Returns:
        Particles in glyph order, row-major within each glyph.
    """
    if rng is None:
        rng = np.random.default_rng()

    max_width = min(width * 0.8, len(word) * word_size)
    left_margin = (width - max_width) / 3
    letter_width = glyph_width(glyphs)
    half_range = velocity_range / 2

    particles = []
    for seq, letter in enumerate(word):
        matrix = glyphs.get(letter)
        if matrix is None:
            logger.debug("No glyph for %r, skipping", letter)
            continue
        cells = np.argwhere(np.asarray(matrix) == 1)
        for y, x in cells.tolist():
            position = Vector(
                left_margin - max_width / 2 + x * word_size + seq * word_size * letter_width,
                height / 2 + y * word_size,
            )
            vx, vy = rng.uniform(-half_range, half_range, size=2)
            particles.append(Particle(
                position=position,
                velocity=Vector(float(vx), float(vy)),
                radius=word_size / 2,
                info=letter,
                tail_length=tail_length,
                tail_threshold=tail_threshold,
            ))

    logger.debug("Laid out %r as %d particles", word, len(particles))
    return particles


__all__ = ["GlyphTable", "glyph_width", "layout_word"]
