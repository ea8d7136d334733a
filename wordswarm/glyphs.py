"""Loading glyph tables: bundled bitmap fonts or JSON files on disk."""

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Dict, List, Union

from wordswarm.exceptions import GlyphTableError

logger = logging.getLogger(__name__)

DEFAULT_GLYPHS = "5x5"
BUNDLED_GLYPHS = {
    "5x5": "glyphs_5x5.json",
    "8x8": "glyphs_8x8.json",
}


def load_glyph_table(source: Union[str, Path] = DEFAULT_GLYPHS) -> Dict[str, List[List[int]]]:
    """
    Load a glyph table by bundled name or from a JSON file.

    Args:
        source: a bundled table name ("5x5" or "8x8") or a path to a JSON object mapping
            single characters to 0/1 matrices. Anything that is neither falls back to
            the default bundled table.

    Returns:
        Mapping of character to bitmap rows.

    Raises:
        GlyphTableError: the file cannot be read or the table is malformed.
    """
    path = Path(source)
    if str(source) not in BUNDLED_GLYPHS and path.is_file():
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise GlyphTableError(f"Cannot read glyph table {path}: {e}") from e
        logger.debug("Loaded glyph table from %s", path)
    else:
        name = str(source) if str(source) in BUNDLED_GLYPHS else DEFAULT_GLYPHS
        if name != str(source):
            logger.warning("Unknown glyph table %r, using %r", str(source), name)
        text = resources.files("wordswarm").joinpath("data").joinpath(BUNDLED_GLYPHS[name]).read_text(encoding="utf-8")
        raw = json.loads(text)
    return validate_glyph_table(raw)


def validate_glyph_table(raw) -> Dict[str, List[List[int]]]:
    """Check that every glyph is a matrix of 0/1 ints with one row length across the table."""
    if not isinstance(raw, dict):
        raise GlyphTableError("Glyph table must be a JSON object")

    row_length = None
    table = {}
    for char, matrix in raw.items():
        if not isinstance(char, str) or len(char) != 1:
            raise GlyphTableError(f"Glyph key must be a single character, got {char!r}")
        if not isinstance(matrix, list):
            raise GlyphTableError(f"Glyph {char!r} must be a list of rows")
        rows = []
        for row in matrix:
            if not isinstance(row, list) or any(cell not in (0, 1) or isinstance(cell, bool) for cell in row):
                raise GlyphTableError(f"Glyph {char!r} rows must be lists of 0/1")
            if row_length is None:
                row_length = len(row)
            elif len(row) != row_length:
                raise GlyphTableError(
                    f"Glyph {char!r} has a row of length {len(row)}, expected {row_length}"
                )
            rows.append([int(cell) for cell in row])
        table[char] = rows
    return table


__all__ = ["DEFAULT_GLYPHS", "BUNDLED_GLYPHS", "load_glyph_table", "validate_glyph_table"]
