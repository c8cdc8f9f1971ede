"""Backtalk: reverse recordings and score how well they are imitated."""

__version__ = "0.1.0"
