"""
Pacing metric computation.

Words per minute from the token count and the supplied duration. Plain
text chunks carry no timestamps, so pause statistics are left unset.
"""

import math

from speech_analytics.config import AnalysisConfig
from speech_analytics.models.entities import PacingMetrics


def compute_words_per_minute(word_count: int, duration_minutes: float, floor: float) -> int:
    """Compute whole words per minute.

    The duration is floored at ``floor`` minutes, so a zero or negative
    duration never divides by zero or yields a negative pace.

    Args:
        word_count: Number of tokens spoken.
        duration_minutes: Recording duration in minutes.
        floor: Minimum duration in minutes.

    Returns:
        ``floor(word_count / max(duration_minutes, floor))``
    """
    return int(math.floor(word_count / max(duration_minutes, floor)))


def compute_pacing(
    word_count: int,
    duration_minutes: float,
    config: AnalysisConfig,
) -> PacingMetrics:
    return PacingMetrics(
        words_per_minute=compute_words_per_minute(
            word_count, duration_minutes, config.min_duration_minutes
        ),
        average_pause_duration=None,
        longest_pause=None,
    )
