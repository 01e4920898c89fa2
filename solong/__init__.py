"""A tile-based puzzle game: collect everything, then reach the exit."""

__version__ = "0.1.0"