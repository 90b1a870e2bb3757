"""
Shared test fixtures.

Provides pytest fixtures for common test resources including:
- Default and custom analysis configuration
- An analytics engine
- A chunk builder for transcript input
"""

import os
from typing import Callable, List

import pytest

from speech_analytics.analysis.engine import AnalyticsEngine
from speech_analytics.config import AnalysisConfig
from speech_analytics.models.entities import TranscriptChunk


@pytest.fixture
def config() -> AnalysisConfig:
    """Default analysis configuration."""
    return AnalysisConfig()


@pytest.fixture
def engine(config: AnalysisConfig) -> AnalyticsEngine:
    return AnalyticsEngine(config)


@pytest.fixture
def make_chunks() -> Callable[..., List[TranscriptChunk]]:
    """
    Build finalized chunks from plain strings.

    Returns:
        Callable taking texts and an optional ``is_final`` flag
    """
    def _make(*texts: str, is_final: bool = True) -> List[TranscriptChunk]:
        return [TranscriptChunk(text=t, is_final=is_final) for t in texts]

    return _make


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no SPEECH_ANALYTICS_ variables set."""
    for key in list(os.environ):
        if key.startswith("SPEECH_ANALYTICS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
