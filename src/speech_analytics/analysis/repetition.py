"""
Repetition detection.

Two independent passes over the lower-case token sequence:

- **Words**: content words (not stop words, at least ``min_word_length``
  characters) used ``min_repetition_count`` times or more.
- **Phrases**: adjacent word pairs used ``min_phrase_repetition_count``
  times or more. Pairs made only of stop words ("of the") are ignored.

Both lists are sorted by descending count. Ties keep first-seen order.
"""

from collections import Counter
from typing import List, Sequence, Tuple

from speech_analytics.config import AnalysisConfig
from speech_analytics.models.entities import RepeatedPhrase, RepeatedWord, Repetitions


def _top(counts: Counter, minimum: int, limit: int) -> List[Tuple[str, int]]:
    kept = [(key, n) for key, n in counts.items() if n >= minimum]
    # sorted() is stable, so equal counts stay in first-seen order.
    kept = sorted(kept, key=lambda item: item[1], reverse=True)
    return kept[:limit]


def count_words(tokens: Sequence[str], config: AnalysisConfig) -> Counter:
    """Count content-word frequencies."""
    counts: Counter = Counter()
    for token in tokens:
        if token not in config.stop_words and len(token) >= config.min_word_length:
            counts[token] += 1
    return counts


def count_phrases(tokens: Sequence[str], config: AnalysisConfig) -> Counter:
    """Count two-word phrase frequencies, skipping all-stop-word pairs."""
    counts: Counter = Counter()
    stop = config.stop_words
    for first, second in zip(tokens, tokens[1:]):
        if first in stop and second in stop:
            continue
        counts[f"{first} {second}"] += 1
    return counts


def find_repeated_words(tokens: Sequence[str], config: AnalysisConfig) -> List[RepeatedWord]:
    top = _top(count_words(tokens, config), config.min_repetition_count, config.max_repeated_words)
    return [RepeatedWord(word=word, count=n) for word, n in top]


def find_repeated_phrases(tokens: Sequence[str], config: AnalysisConfig) -> List[RepeatedPhrase]:
    top = _top(
        count_phrases(tokens, config),
        config.min_phrase_repetition_count,
        config.max_repeated_phrases,
    )
    return [RepeatedPhrase(phrase=phrase, count=n) for phrase, n in top]


def detect_repetitions(tokens: Sequence[str], config: AnalysisConfig) -> Repetitions:
    """Detect repeated words and phrases.

    Args:
        tokens: Lower-case token sequence.
        config: Analysis configuration (stop words, thresholds, caps).

    Returns:
        Repetitions with the top repeated words and phrases.
    """
    return Repetitions(
        repeated_words=tuple(find_repeated_words(tokens, config)),
        repeated_phrases=tuple(find_repeated_phrases(tokens, config)),
    )
