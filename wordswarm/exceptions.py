"""Error types raised by wordswarm."""


class WordSwarmError(Exception):
    """Base class for all wordswarm errors."""


class ConfigurationError(WordSwarmError, ValueError):
    """Raised when a world is built from settings that cannot be simulated."""


class GlyphTableError(WordSwarmError):
    """Raised when a glyph table cannot be loaded or is malformed."""


__all__ = ["WordSwarmError", "ConfigurationError", "GlyphTableError"]
