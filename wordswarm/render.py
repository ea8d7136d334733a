"""Drawing a world onto a canvas once per frame."""

from typing import Optional, Protocol, Union

import pygame

from wordswarm.config import (
    CURSOR_LINE_OPACITY,
    SCORE_COLOR,
    SCORE_TEXT_OPACITY,
    TRAIL_DECAY,
    TRAIL_OPACITY,
)

ColorLike = Union[str, tuple, pygame.Color]


class Canvas(Protocol):
    """Drawing primitives the renderer needs; sizes and positions are in pixels."""

    width: int
    height: int

    def clear(self) -> None: ...

    def add_particle(self, x: float, y: float, size: float = 20,
                     border: Optional[ColorLike] = None,
                     foreground: Optional[ColorLike] = None,
                     opacity: float = 1) -> None: ...

    def add_line(self, x1: float, y1: float, x2: float, y2: float,
                 color: Optional[ColorLike] = None, opacity: float = 1) -> None: ...

    def add_background_text(self, text: str) -> None: ...


# =========================================
# FRAME RENDERING
# =========================================

def render_frame(world, canvas: Canvas):
    """
    Draw one frame: background, cursor lines, particles with trails, then the score.

    Reads the world's query surface only; nothing on the world is modified.
    """
    canvas.clear()
    render_cursor(world, canvas)
    render_particles(world, canvas)
    render_score(world, canvas)


def render_cursor(world, canvas: Canvas):
    pos = world.cursor_position
    if pos is None:
        return
    for p in world.highlighted_particles():
        canvas.add_line(
            p.position.x, p.position.y, pos.x, pos.y,
            color=world.cursor.color,
            opacity=CURSOR_LINE_OPACITY,
        )


def render_particles(world, canvas: Canvas):
    highlighted = set(world.highlighted_particles())
    for idx, p in enumerate(world.particles):
        border = world.cursor.color if world.cursor_enabled and p in highlighted else None
        foreground = SCORE_COLOR if world.game_mode_enabled and world.is_score_particle(idx) else None
        size = p.radius * 2
        canvas.add_particle(
            p.position.x - size * 0.5,
            p.position.y - size * 0.5,
            size=size,
            border=border,
            foreground=foreground,
        )
        # The first trail entry is the current position
        for k, trail_pos in enumerate(p.trail):
            if k == 0:
                continue
            multiplier = TRAIL_DECAY ** (k + 1)
            psize = size * TRAIL_DECAY ** multiplier
            canvas.add_particle(
                trail_pos.x - psize * 0.5,
                trail_pos.y - psize * 0.5,
                size=psize,
                foreground=foreground,
                opacity=TRAIL_OPACITY,
            )


def render_score(world, canvas: Canvas):
    if not world.game_mode_enabled or world.score == 0:
        return
    canvas.add_background_text(str(world.score))


# =========================================
# PYGAME CANVAS
# =========================================

def parse_color(color: Optional[str]) -> Optional[pygame.Color]:
    """Accept "ff0000", "#ff0000" or a color name; None stays None."""
    if color is None:
        return None
    if isinstance(color, str) and len(color) in (3, 6, 8) and all(c in "0123456789abcdefABCDEF" for c in color):
        color = f"#{color}"
    return pygame.Color(color)


class PygameCanvas:
    """
    Canvas backed by a pygame Surface.

    Attributes:
        surface:    target Surface (the display surface in the app)
        background: fill color, or None for a plain white page with black particles
    """

    def __init__(self, surface: pygame.Surface, background: Optional[str] = None):
        self.surface = surface
        self.background = parse_color(background)
        self._font_cache = {}

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    @property
    def foreground(self) -> pygame.Color:
        return pygame.Color("white") if self.background is not None else pygame.Color("black")

    def resize(self, surface: pygame.Surface):
        self.surface = surface

    def clear(self):
        self.surface.fill(self.background if self.background is not None else pygame.Color("white"))

    def add_particle(self, x, y, size=20, border=None, foreground=None, opacity=1):
        color = pygame.Color(foreground) if foreground is not None else self.foreground
        side = max(1, int(round(size)))
        square = pygame.Surface((side, side), pygame.SRCALPHA)
        square.fill((color.r, color.g, color.b, int(255 * opacity)))
        if border is not None:
            pygame.draw.rect(square, pygame.Color(border), square.get_rect(), 1)
        self.surface.blit(square, (int(x), int(y)))

    def add_line(self, x1, y1, x2, y2, color=None, opacity=1):
        color = pygame.Color(color) if color is not None else self.foreground
        left, top = int(min(x1, x2)), int(min(y1, y2))
        layer = pygame.Surface(
            (int(abs(x2 - x1)) + 2, int(abs(y2 - y1)) + 2), pygame.SRCALPHA
        )
        pygame.draw.line(
            layer,
            (color.r, color.g, color.b, int(255 * opacity)),
            (x1 - left, y1 - top),
            (x2 - left, y2 - top),
        )
        self.surface.blit(layer, (left, top))

    def add_background_text(self, text):
        size = max(1, int(min(self.width, self.height) / 2))
        font = self._font_cache.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont("arial", size)
            self._font_cache[size] = font
        label = font.render(str(text), True, self.foreground)
        label.set_alpha(int(255 * SCORE_TEXT_OPACITY))
        baseline = self.height / 2 + size / 4
        rect = label.get_rect(midtop=(self.width / 2, baseline - font.get_ascent()))
        self.surface.blit(label, rect)


__all__ = [
    "Canvas",
    "render_frame",
    "render_cursor",
    "render_particles",
    "render_score",
    "parse_color",
    "PygameCanvas",
]
