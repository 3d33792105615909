"""Errors raised by board generation and validation."""


class QueensError(Exception):
    """Base class for all errors raised by this package."""


class InvalidSeed(QueensError, ValueError):
    """Seed is negative or does not fit in 64 bits."""


class InvalidSize(QueensError, ValueError):
    """Board size is outside the supported range."""


class OutOfRange(QueensError, IndexError):
    """Coordinate or grid shape does not fit the board."""
