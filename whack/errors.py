class WhackError(Exception):
    """Base class for errors raised by the game."""


class ConfigurationError(WhackError, ValueError):
    """A round length or play-area geometry that the engine cannot run with."""
