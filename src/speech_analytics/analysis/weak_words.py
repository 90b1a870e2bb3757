"""
Weak word detection.

Finds imprecise vocabulary ("just", "really", "stuff") by substring
containment in each lower-cased sentence. Matching is not token-aware,
so an entry embedded in a longer word ("just" in "adjust") also matches.
"""

from typing import List, Sequence

from speech_analytics.config import AnalysisConfig
from speech_analytics.models.entities import WeakWordInstance


def detect_weak_words(
    sentences: Sequence[str],
    config: AnalysisConfig,
) -> List[WeakWordInstance]:
    """Detect weak words, sentence by sentence.

    A sentence yields one instance per matching entry. Output is capped at
    ``config.max_weak_word_instances`` in detection order (sentence order,
    then word-list order).

    Args:
        sentences: Original-case sentences.
        config: Analysis configuration holding the weak word list.

    Returns:
        Weak word instances referencing the stripped original sentence.
    """
    limit = config.max_weak_word_instances
    instances: List[WeakWordInstance] = []
    for sentence in sentences:
        lowered = sentence.lower()
        for word in config.weak_words:
            if len(instances) >= limit:
                return instances
            if word in lowered:
                instances.append(
                    WeakWordInstance(word=word, sentence=sentence.strip(), suggestion=None)
                )
    return instances
