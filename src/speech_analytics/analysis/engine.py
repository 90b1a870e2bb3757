"""
Analytics engine.

Runs the full analysis over a finalized transcript:

1. Normalize text (tokens + sentences)
2. Filler words
3. Pacing
4. Repetitions
5. Sentence starters
6. Weak words
7. Scores

The engine holds only its frozen ``AnalysisConfig``; every call is pure
and may run concurrently with others.

Example:
    >>> engine = AnalyticsEngine()
    >>> report = engine.analyze(chunks, duration_minutes=2.5)
    >>> if report is not None:
    ...     print(report.summary)
"""

import logging
import math
from typing import Iterable, Optional

from speech_analytics.analysis.filler_detector import detect_fillers
from speech_analytics.analysis.metrics import compute_pacing
from speech_analytics.analysis.repetition import detect_repetitions
from speech_analytics.analysis.scorer import compute_scores
from speech_analytics.analysis.sentence_starters import analyze_sentence_starters
from speech_analytics.analysis.text import normalize_chunks
from speech_analytics.analysis.weak_words import detect_weak_words
from speech_analytics.config import AnalysisConfig
from speech_analytics.models.entities import SpeechAnalytics, TranscriptChunk

logger = logging.getLogger(__name__)


class AnalyticsEngine:
    """
    Computes ``SpeechAnalytics`` reports from transcript chunks.

    Args:
        config: Word lists and thresholds. Defaults to ``AnalysisConfig()``.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def analyze(
        self,
        chunks: Iterable[TranscriptChunk],
        duration_minutes: float,
    ) -> Optional[SpeechAnalytics]:
        """
        Analyze finalized transcript chunks.

        Args:
            chunks: Transcript chunks in upstream order; interim chunks
                are ignored
            duration_minutes: Recording duration. Values below
                ``config.min_duration_minutes`` are floored to it.

        Returns:
            SpeechAnalytics, or ``None`` when there is nothing to analyze
            (no finalized chunk, or no words in the finalized text)
        """
        normalized = normalize_chunks(chunks)
        if normalized is None:
            logger.info("Insufficient transcript data; no analytics produced")
            return None

        config = self.config
        duration = _coerce_duration(duration_minutes)
        logger.debug(
            "Analyzing %d tokens in %d sentences over %.2f min",
            normalized.token_count, normalized.sentence_count, duration,
        )

        fillers = detect_fillers(normalized.tokens, duration, config)
        pacing = compute_pacing(normalized.token_count, duration, config)
        repetitions = detect_repetitions(normalized.tokens, config)
        starters, weak_starter_count = analyze_sentence_starters(normalized.sentences, config)
        weak_words = detect_weak_words(normalized.sentences, config)

        scores = compute_scores(
            filler_count=fillers.count,
            repeated_words=repetitions.repeated_words,
            weak_starter_count=weak_starter_count,
            word_count=normalized.token_count,
            sentence_count=normalized.sentence_count,
        )

        return SpeechAnalytics(
            filler_words=fillers,
            pacing=pacing,
            repetitions=repetitions,
            sentence_starters=starters,
            weak_words=tuple(weak_words),
            scores=scores,
        )


def _coerce_duration(duration_minutes: float) -> float:
    # NaN would slip through max() in the rate calculations.
    if duration_minutes is None or math.isnan(duration_minutes):
        return 0.0
    return float(duration_minutes)


def analyze_transcript(
    chunks: Iterable[TranscriptChunk],
    duration_minutes: float,
    config: Optional[AnalysisConfig] = None,
) -> Optional[SpeechAnalytics]:
    """Convenience wrapper: ``AnalyticsEngine(config).analyze(...)``."""
    return AnalyticsEngine(config).analyze(chunks, duration_minutes)
