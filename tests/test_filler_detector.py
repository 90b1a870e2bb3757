"""Tests for filler word detection (filler_detector.py)."""

import pytest

from speech_analytics.analysis.filler_detector import (
    compute_filler_rate,
    detect_filler_instances,
    detect_fillers,
)
from speech_analytics.config import AnalysisConfig


# ------------------------------------------------------------------ #
# 1. Instance detection
# ------------------------------------------------------------------ #

class TestDetectFillerInstances:
    def test_exact_token_matches(self, config):
        tokens = ["i", "think", "um", "like", "you", "know"]
        instances = detect_filler_instances(tokens, config)
        assert [(i.word, i.position) for i in instances] == [("um", 2), ("like", 3)]

    def test_multiword_entries_never_match_by_default(self, config):
        tokens = ["you", "know", "sort", "of", "kind", "of"]
        assert detect_filler_instances(tokens, config) == []

    def test_punctuation_attached_token_is_not_a_filler(self, config):
        assert detect_filler_instances(["um,", "so."], config) == []

    def test_multiword_matching_when_enabled(self, config):
        cfg = config.model_copy(update={"match_multiword_fillers": True})
        tokens = ["um", "you", "know", "it", "is", "kind", "of", "big"]
        instances = detect_filler_instances(tokens, cfg)
        assert [(i.word, i.position) for i in instances] == [
            ("um", 0), ("you know", 1), ("kind of", 5),
        ]

    def test_custom_list_is_lowercased(self):
        cfg = AnalysisConfig(filler_words=["Hmm", "ER"])
        instances = detect_filler_instances(["hmm", "yes", "er"], cfg)
        assert [i.word for i in instances] == ["hmm", "er"]


# ------------------------------------------------------------------ #
# 2. Summary: count, rate, cap
# ------------------------------------------------------------------ #

class TestDetectFillers:
    def test_count_and_rate(self, config):
        fillers = detect_fillers(["um", "hello", "uh"], 2.0, config)
        assert fillers.count == 2
        assert fillers.rate_per_minute == pytest.approx(1.0)

    def test_instances_capped_at_twenty(self, config):
        fillers = detect_fillers(["um"] * 25, 1.0, config)
        assert fillers.count == 25
        assert len(fillers.instances) == 20
        assert [i.position for i in fillers.instances] == list(range(20))

    def test_zero_duration_uses_floor(self, config):
        fillers = detect_fillers(["um", "uh"], 0.0, config)
        assert fillers.rate_per_minute == pytest.approx(2 / 0.1)

    def test_negative_duration_uses_floor(self, config):
        fillers = detect_fillers(["um"], -3.0, config)
        assert fillers.rate_per_minute == pytest.approx(10.0)

    def test_no_fillers(self, config):
        fillers = detect_fillers(["clear", "speech"], 1.0, config)
        assert fillers.count == 0
        assert fillers.rate_per_minute == 0.0
        assert fillers.instances == ()


def test_compute_filler_rate():
    assert compute_filler_rate(6, 3.0, 0.1) == pytest.approx(2.0)
    assert compute_filler_rate(1, 0.05, 0.1) == pytest.approx(10.0)
