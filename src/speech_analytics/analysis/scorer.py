"""
Speech quality scores (0-100).

Each score starts at 100 and subtracts a penalty proportional to a rate:

  clarity     = 100 - (filler % of words) * 10
  conciseness = 100 - (repeated-word share of words) * 50
  confidence  = 100 - (weak-starter share of sentences) * 100

Scores are rounded to the nearest integer (halves away from zero) and
clamped to [0, 100].
"""

import math
from typing import Iterable

from speech_analytics.models.entities import AnalyticsScores, RepeatedWord


# ============================================================
# Utility
# ============================================================

CLARITY_WEIGHT = 10.0
CONCISENESS_WEIGHT = 50.0
CONFIDENCE_WEIGHT = 100.0


def _clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, value))


def _round_half_away(value: float) -> int:
    """Round to nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _score(raw: float) -> int:
    """Convenience: round then clamp to [0, 100]."""
    return int(_clamp(_round_half_away(raw)))


# ============================================================
# Scores
# ============================================================

def score_clarity(filler_count: int, word_count: int) -> int:
    """Penalize fillers: 10 points per percent of words that are fillers."""
    if word_count <= 0:
        return 100
    filler_pct = (filler_count / word_count) * 100.0
    return _score(100.0 - filler_pct * CLARITY_WEIGHT)


def score_conciseness(repeated_words: Iterable[RepeatedWord], word_count: int) -> int:
    """Penalize heavy reuse of the same content words."""
    if word_count <= 0:
        return 100
    total = sum(r.count for r in repeated_words)
    return _score(100.0 - (total / word_count) * CONCISENESS_WEIGHT)


def score_confidence(weak_starter_count: int, sentence_count: int) -> int:
    """Penalize weak sentence openers. No sentences means no penalty."""
    if sentence_count <= 0:
        return 100
    rate = weak_starter_count / sentence_count
    return _score(100.0 - rate * CONFIDENCE_WEIGHT)


def compute_scores(
    filler_count: int,
    repeated_words: Iterable[RepeatedWord],
    weak_starter_count: int,
    word_count: int,
    sentence_count: int,
) -> AnalyticsScores:
    """Compute all three scores from detector outputs.

    Example:
        >>> compute_scores(0, [], 0, 10, 2).clarity
        100
    """
    return AnalyticsScores(
        clarity=score_clarity(filler_count, word_count),
        conciseness=score_conciseness(repeated_words, word_count),
        confidence=score_confidence(weak_starter_count, sentence_count),
    )
