"""Shogiban — render shogi board diagrams from a plain-text notation."""

__version__ = "0.1.0"
