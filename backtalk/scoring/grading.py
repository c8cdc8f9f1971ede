"""Map similarity scores to player-facing grades."""

from ..models.scoring import ScoreGrade

DEFAULT_PASS_THRESHOLD = 60

# (minimum score, value), checked top to bottom
_TIERS = [
    (80, "Expert"),
    (60, "Advanced"),
    (40, "Intermediate"),
    (0, "Beginner"),
]

_MESSAGES = [
    (90, "Outstanding! Perfect imitation!"),
    (80, "Excellent! You nailed it!"),
    (70, "Great job! Very close!"),
    (60, "Good! Pretty close!"),
    (50, "Not bad! Keep practicing!"),
    (40, "Getting there! Try again!"),
    (0, "Keep practicing! You can do better!"),
]

_COLOURS = [
    (80, "#27ae60"),
    (60, "#f39c12"),
    (40, "#e67e22"),
    (0, "#e74c3c"),
]


def _lookup(table, score: int) -> str:
    for minimum, value in table:
        if score >= minimum:
            return value
    return table[-1][1]


def grade_score(score: int) -> ScoreGrade:
    """Return the tier, message and colour shown for a score."""
    return ScoreGrade(
        score=score,
        tier=_lookup(_TIERS, score),
        message=_lookup(_MESSAGES, score),
        colour=_lookup(_COLOURS, score),
    )


def is_passing(score: int, threshold: int = DEFAULT_PASS_THRESHOLD) -> bool:
    """Whether a score is good enough to complete a level."""
    return score >= threshold
