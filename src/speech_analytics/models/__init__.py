"""
Data models for transcript input and analytics output.

Provides frozen Pydantic value records for transcript chunks and every
part of the speech analytics report.
"""

from speech_analytics.models.entities import (
    AnalyticsScores,
    FillerWordInstance,
    FillerWords,
    PacingMetrics,
    RepeatedPhrase,
    RepeatedWord,
    Repetitions,
    SentenceStarters,
    SpeechAnalytics,
    TranscriptChunk,
    WeakStarter,
    WeakWordInstance,
)

__all__ = [
    "AnalyticsScores",
    "FillerWordInstance",
    "FillerWords",
    "PacingMetrics",
    "RepeatedPhrase",
    "RepeatedWord",
    "Repetitions",
    "SentenceStarters",
    "SpeechAnalytics",
    "TranscriptChunk",
    "WeakStarter",
    "WeakWordInstance",
]
