"""
Filler word detection.

Detects filler words (e.g., "um", "like") in the lower-case token sequence
by exact token comparison against the configured filler list.

Entries containing spaces ("you know", "sort of") cannot equal a single
whitespace token, so by default they never fire. Setting
``AnalysisConfig.match_multiword_fillers`` matches them against runs of
consecutive tokens instead.
"""

from typing import List, Sequence

from speech_analytics.config import AnalysisConfig
from speech_analytics.models.entities import FillerWordInstance, FillerWords


def detect_filler_instances(
    tokens: Sequence[str],
    config: AnalysisConfig,
) -> List[FillerWordInstance]:
    """Find every filler occurrence, ordered by token position.

    Args:
        tokens: Lower-case token sequence.
        config: Analysis configuration holding the filler list.

    Returns:
        All filler instances (uncapped), in positional order.
    """
    single = {f for f in config.filler_words if " " not in f}
    instances = [
        FillerWordInstance(word=token, position=i)
        for i, token in enumerate(tokens)
        if token in single
    ]

    if config.match_multiword_fillers:
        instances.extend(_detect_multiword(tokens, config))
        instances.sort(key=lambda inst: inst.position)

    return instances


def _detect_multiword(
    tokens: Sequence[str],
    config: AnalysisConfig,
) -> List[FillerWordInstance]:
    phrases = [f.split() for f in config.filler_words if " " in f]
    found: List[FillerWordInstance] = []
    for parts in phrases:
        size = len(parts)
        for i in range(len(tokens) - size + 1):
            if list(tokens[i:i + size]) == parts:
                found.append(FillerWordInstance(word=" ".join(parts), position=i))
    return found


def compute_filler_rate(filler_count: int, duration_minutes: float, floor: float) -> float:
    """Compute fillers per minute, with the duration floored at ``floor``."""
    return filler_count / max(duration_minutes, floor)


def detect_fillers(
    tokens: Sequence[str],
    duration_minutes: float,
    config: AnalysisConfig,
) -> FillerWords:
    """Detect fillers and summarize them.

    ``count`` covers the whole transcript; ``instances`` is capped at
    ``config.max_filler_instances`` in first-occurrence order.

    Example:
        >>> fillers = detect_fillers(["um", "so", "yes"], 1.0, AnalysisConfig())
        >>> fillers.count
        2
    """
    instances = detect_filler_instances(tokens, config)
    return FillerWords(
        count=len(instances),
        rate_per_minute=compute_filler_rate(
            len(instances), duration_minutes, config.min_duration_minutes
        ),
        instances=tuple(instances[:config.max_filler_instances]),
    )
