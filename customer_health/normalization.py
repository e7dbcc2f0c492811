"""Rescaling helpers that map raw metrics into the 0-100 score space."""

import math

MIN_SCORE = 0.0
MAX_SCORE = 100.0
NEUTRAL_SCORE = 50.0


def clamp_score(score: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def normalize(value: float, minimum: float, maximum: float) -> float:
    """Linear rescale of ``value`` from [minimum, maximum] to [0, 100].

    Higher inputs give higher scores. A degenerate range yields the neutral
    score instead of dividing by zero.
    """
    if maximum == minimum:
        return NEUTRAL_SCORE
    normalized = ((value - minimum) / (maximum - minimum)) * 100
    return clamp_score(normalized)


def inverse_normalize(value: float, minimum: float, maximum: float) -> float:
    """Mirror of ``normalize``: higher inputs give lower scores."""
    if maximum == minimum:
        return NEUTRAL_SCORE
    normalized = ((maximum - value) / (maximum - minimum)) * 100
    return clamp_score(normalized)


def round_score(score: float) -> int:
    """Round to the nearest integer with halves going up (18.5 -> 19)."""
    return int(math.floor(score + 0.5))


__all__ = [
    "MAX_SCORE",
    "MIN_SCORE",
    "NEUTRAL_SCORE",
    "clamp_score",
    "inverse_normalize",
    "normalize",
    "round_score",
]
