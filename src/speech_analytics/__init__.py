"""
Speech Analytics

Descriptive speech-quality metrics for finalized transcripts: filler words,
pacing, repetition, weak sentence starters, weak vocabulary, and three
derived 0-100 scores.
"""

__version__ = "0.1.0"
__author__ = "Speech Analytics Team"

from speech_analytics.config import AnalysisConfig, Settings
from speech_analytics.analysis.engine import AnalyticsEngine, analyze_transcript

__all__ = [
    "AnalysisConfig",
    "AnalyticsEngine",
    "Settings",
    "analyze_transcript",
    "__version__",
]
