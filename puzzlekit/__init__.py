"""Functions for classic grid, string and integer-sequence puzzles."""

__version__ = "0.1.0"
__all__ = ["grids", "strings", "sequences"]