"""Exception types raised by the level generation pipeline.

All of them signal a broken contract on the caller's side. Nothing in the
pipeline catches and retries them; a failed step aborts the whole generation.
"""


class LevelGenerationError(Exception):
    """Base class for every error raised while building a level."""


class InvalidArgumentError(LevelGenerationError, ValueError):
    """A constructor or operation received an out-of-range parameter."""


class OutOfBoundsError(LevelGenerationError, IndexError):
    """A coordinate lies outside the room or level it was used on."""


class InvalidStateError(LevelGenerationError, RuntimeError):
    """An operation was invoked while its precondition does not hold."""
