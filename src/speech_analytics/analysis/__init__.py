"""
Analysis module for transcript metrics and speech quality scoring.

Provides text normalization, filler detection, pacing, repetition,
sentence-starter and weak-word analysis, and the 0-100 scores.
"""

from speech_analytics.analysis.engine import AnalyticsEngine, analyze_transcript
from speech_analytics.analysis.filler_detector import detect_fillers
from speech_analytics.analysis.scorer import compute_scores
from speech_analytics.models.entities import score_band

__all__ = [
    "AnalyticsEngine",
    "analyze_transcript",
    "compute_scores",
    "detect_fillers",
    "score_band",
]
