"""
Sentence starter analysis.

Flags sentences that open with a weak starter ("so", "well", "and"),
which listeners associate with reduced confidence.
"""

from collections import Counter
from typing import Sequence, Tuple

from speech_analytics.config import AnalysisConfig
from speech_analytics.models.entities import SentenceStarters, WeakStarter


def first_word(sentence: str) -> str:
    """Return the lower-cased first whitespace token, or ``""``."""
    parts = sentence.split(maxsplit=1)
    return parts[0].lower() if parts else ""


def analyze_sentence_starters(
    sentences: Sequence[str],
    config: AnalysisConfig,
) -> Tuple[SentenceStarters, int]:
    """Tally weak sentence starters.

    Args:
        sentences: Original-case sentences.
        config: Analysis configuration holding the weak starter list.

    Returns:
        Tuple of (SentenceStarters, total weak starter occurrences). The
        report's ``total`` is the sentence count, not the weak count.
    """
    weak = set(config.weak_starters)
    counts: Counter = Counter()
    for sentence in sentences:
        word = first_word(sentence)
        if word in weak:
            counts[word] += 1

    starters = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    report = SentenceStarters(
        total=len(sentences),
        weak=tuple(WeakStarter(word=word, count=n) for word, n in starters),
    )
    return report, sum(counts.values())
