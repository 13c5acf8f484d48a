"""Collectatron 3000: a tile-map collecting puzzle game with an XPM sprite loader."""

__version__ = "1.0.0"
__all__ = ["__version__"]