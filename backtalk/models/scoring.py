"""Data models for similarity scoring results."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SimilarityBreakdown:
    """Sub-scores behind a similarity score."""
    duration: float   # 0.0 to 1.0
    amplitude: float  # 0.0 to 1.0
    pattern: float    # -1.0 to 1.0 (Pearson correlation)
    score: int        # 0 to 100


@dataclass(frozen=True)
class ScoreGrade:
    """Display grade for a similarity score."""
    score: int
    tier: str     # "Beginner", "Intermediate", "Advanced", "Expert"
    message: str
    colour: str   # Hex RGB
