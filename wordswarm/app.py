"""Interactive pygame front end: input handling, frame loop and command line."""

import argparse
import asyncio
import logging
import platform
import sys
from typing import Optional, Sequence

import pygame

from wordswarm.config import DEFAULT_WORD, DRAG_THRESHOLD, FPS, LOG_LEVEL, WorldConfig
from wordswarm.exceptions import WordSwarmError
from wordswarm.glyphs import DEFAULT_GLYPHS, load_glyph_table
from wordswarm.logging_config import setup_logging
from wordswarm.render import PygameCanvas, render_frame
from wordswarm.world import World

logger = logging.getLogger(__name__)

WINDOW_WIDTH, WINDOW_HEIGHT = 900, 600

# Pyodide sets platform.system() == "Emscripten"
ON_BROWSER = platform.system() == "Emscripten"


# =========================================
# INPUT ADAPTER
# =========================================

class InputAdapter:
    """
    Turns pointer gestures into world calls.

    A press pushes particles away and arms the auto-reset; holding still long enough
    relays out the word. Dragging further than DRAG_THRESHOLD keeps pushing and
    cancels the reset.
    """

    def __init__(self, world: World, drag_threshold: float = DRAG_THRESHOLD):
        self.world = world
        self.drag_threshold = drag_threshold
        self.press_start = None

    def press(self, x, y):
        self.world.impact(x, y)
        self.world.start_reset_threshold()
        self.press_start = (x, y)

    def release(self):
        self.world.release_reset_threshold()
        self.press_start = None

    def move(self, x, y):
        self.world.move_cursor(x, y)
        if self.press_start is None:
            return
        dx = abs(x - self.press_start[0])
        dy = abs(y - self.press_start[1])
        if dx > self.drag_threshold or dy > self.drag_threshold:
            self.world.impact(x, y)
            self.world.release_reset_threshold()

    def touch_end(self):
        self.world.clear_cursor()
        self.release()

    def leave(self):
        self.world.clear_cursor()


def translate_event(adapter: InputAdapter, canvas: PygameCanvas, event) -> bool:
    """
    Apply one pygame event to the adapter / world.

    Returns:
        False when the event asks the app to quit, True otherwise.
    """
    if event.type == pygame.QUIT:
        return False

    # Touches also arrive as synthetic mouse events; handle them once, as fingers
    if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION) \
            and getattr(event, "touch", False):
        return True

    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        adapter.press(*event.pos)
    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        adapter.release()
    elif event.type == pygame.MOUSEMOTION:
        adapter.move(*event.pos)
    elif event.type == pygame.WINDOWLEAVE:
        adapter.leave()
    elif event.type == pygame.FINGERDOWN:
        adapter.press(event.x * canvas.width, event.y * canvas.height)
    elif event.type == pygame.FINGERMOTION:
        adapter.move(event.x * canvas.width, event.y * canvas.height)
    elif event.type == pygame.FINGERUP:
        adapter.touch_end()
    elif event.type == pygame.VIDEORESIZE:
        surface = pygame.display.get_surface()
        if surface is not None:
            canvas.resize(surface)
        adapter.world.resize(event.w, event.h)
    return True


# =========================================
# FRAME LOOP
# =========================================

async def run(world: World, canvas: PygameCanvas, fps: int = FPS):
    """
    Drive the world: tick, render, flip, once per frame until the window closes.

    Uses asyncio.sleep for timing so the loop also runs under Pyodide.
    """
    adapter = InputAdapter(world)
    logger.info("Running %r with %d particles at %d fps", world.word, len(world.particles), fps)
    running = True
    while running:
        for event in pygame.event.get():
            if not translate_event(adapter, canvas, event):
                running = False

        world.tick()
        render_frame(world, canvas)
        pygame.display.flip()

        await asyncio.sleep(1.0 / fps)
    logger.info("Stopped after %d ticks", world.ticks)


# =========================================
# COMMAND LINE
# =========================================

def _flag(value: str) -> bool:
    return value == "1"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordswarm",
        description="Render a word as a swarm of colliding glyph particles.",
    )
    parser.add_argument("-w", "--word", default=DEFAULT_WORD, help="text to render (upper-cased)")
    parser.add_argument("-s", "--size", type=float, default=5, help="cell size in pixels")
    parser.add_argument("-b", "--background", default=None, help="background color, e.g. 101018")
    parser.add_argument("-d", "--delay", type=int, default=120, help="ticks to wait before moving")
    parser.add_argument("-v", "--velocity", type=float, default=0.03, help="initial velocity range")
    parser.add_argument("-i", "--impact", choices=("0", "1"), default="1", help="push particles on click")
    parser.add_argument("-c", "--cursor", choices=("0", "1"), default="1", help="highlight particles near the cursor")
    parser.add_argument("-g", "--game", choices=("0", "1"), default="0", help="count hits on the red particle")
    parser.add_argument("-H", "--glyphs", default=DEFAULT_GLYPHS,
                        help="glyph table: 5x5, 8x8 or a JSON path (-h is taken by help)")
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT)
    parser.add_argument("--log-level", default=LOG_LEVEL)
    return parser


def config_from_args(args: argparse.Namespace) -> WorldConfig:
    return WorldConfig(
        word=args.word.upper(),
        word_size=args.size,
        delay=args.delay,
        velocity_range=args.velocity,
        impact_enabled=_flag(args.impact),
        cursor_enabled=_flag(args.cursor),
        game_mode_enabled=_flag(args.game),
    )


def main(argv: Optional[Sequence[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("wordswarm", args.log_level)

    try:
        config = config_from_args(args)
        glyphs = load_glyph_table(args.glyphs)
    except WordSwarmError as e:
        parser.error(str(e))

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption(f"wordswarm - {config.word}")
    canvas = PygameCanvas(screen, args.background)
    world = World(glyphs, config, width=canvas.width, height=canvas.height)

    if ON_BROWSER:
        asyncio.ensure_future(run(world, canvas, args.fps))  # Pyodide wants "fire and forget" coroutine
        return
    try:
        asyncio.run(run(world, canvas, args.fps))
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())
