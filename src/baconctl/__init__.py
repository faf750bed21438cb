"""baconctl — Bacon number calculator for actor/movie cast files."""

__version__ = "0.1.0"
