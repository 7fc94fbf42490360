"""
Arena error types.

Configuration errors are fatal at startup. Precondition errors signal a
startup-ordering bug (missing actor or playfield bounds) and fail fast
instead of silently skipping a frame.
"""


class ArenaError(Exception):
    """Base class for all arena errors."""


class ConfigurationError(ArenaError, ValueError):
    """Invalid configuration or spawn parameters."""


class PreconditionError(ArenaError, RuntimeError):
    """A required collaborator (actor, playfield bounds) is missing."""
