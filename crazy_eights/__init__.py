"""Crazy Eights: player vs. AI rules engine."""

__version__ = "0.1.0"
