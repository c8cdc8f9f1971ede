"""Similarity scoring and grading."""

from .similarity import score, similarity_breakdown
from .grading import grade_score, is_passing

__all__ = [
    'score',
    'similarity_breakdown',
    'grade_score',
    'is_passing',
]
