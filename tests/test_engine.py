"""
Tests for the analytics engine (engine.py).

Covers:
- Insufficient-data outcomes (no final chunks, no words)
- The end-to-end report for a known transcript
- Chunk filtering and joining
- Duration flooring
- Report-wide invariants over a set of transcripts
- Idempotence and injected word lists
"""

import math

import pytest

from speech_analytics.analysis.engine import AnalyticsEngine, analyze_transcript
from speech_analytics.config import AnalysisConfig
from speech_analytics.models.entities import TranscriptChunk


# ---------------------------------------------------------------------------
#  Insufficient data
# ---------------------------------------------------------------------------

class TestInsufficientData:
    def test_no_chunks(self, engine):
        assert engine.analyze([], 1.0) is None

    def test_only_interim_chunks(self, engine, make_chunks):
        assert engine.analyze(make_chunks("um hello", is_final=False), 1.0) is None

    def test_whitespace_only_text(self, engine, make_chunks):
        assert engine.analyze(make_chunks("   ", "\n\t"), 1.0) is None


# ---------------------------------------------------------------------------
#  Known transcript
# ---------------------------------------------------------------------------

class TestKnownTranscript:
    TEXT = "I think I think this is um really important um"

    @pytest.fixture
    def report(self, engine, make_chunks):
        return engine.analyze(make_chunks(self.TEXT), 1.0)

    def test_fillers(self, report):
        assert report.filler_words.count == 2
        assert report.filler_words.rate_per_minute == pytest.approx(2.0)
        assert [(i.word, i.position) for i in report.filler_words.instances] == [
            ("um", 6), ("um", 9),
        ]

    def test_pacing(self, report):
        assert report.pacing.words_per_minute == 10

    def test_repetitions(self, report):
        # "think" appears twice, below the word threshold of 3.
        assert report.repetitions.repeated_words == ()
        assert [(p.phrase, p.count) for p in report.repetitions.repeated_phrases] == [
            ("i think", 2),
        ]

    def test_sentences(self, report):
        assert report.sentence_starters.total == 1
        assert report.sentence_starters.weak == ()
        assert [w.word for w in report.weak_words] == ["really"]
        assert report.weak_words[0].sentence == self.TEXT

    def test_scores(self, report):
        assert report.scores.clarity == 0
        assert report.scores.conciseness == 100
        assert report.scores.confidence == 100


# ---------------------------------------------------------------------------
#  Chunk handling and duration
# ---------------------------------------------------------------------------

class TestChunkHandling:
    def test_interim_chunks_ignored(self, engine):
        chunks = [
            TranscriptChunk(text="hello world", is_final=True),
            TranscriptChunk(text="um um um", is_final=False),
        ]
        report = engine.analyze(chunks, 1.0)
        assert report.filler_words.count == 0
        assert report.pacing.words_per_minute == 2

    def test_chunks_joined_with_space(self, engine, make_chunks):
        report = engine.analyze(make_chunks("Hello there", "So we go."), 1.0)
        # No period between chunks: one sentence opening with "hello".
        assert report.sentence_starters.total == 1
        assert report.sentence_starters.weak == ()
        assert report.pacing.words_per_minute == 5

    @pytest.mark.parametrize("duration", [0.0, -2.0, float("nan")])
    def test_degenerate_duration_uses_floor(self, engine, make_chunks, duration):
        report = engine.analyze(make_chunks("one two three four five six seven eight nine ten"), duration)
        assert report.pacing.words_per_minute == int(math.floor(10 / 0.1))
        assert report.filler_words.rate_per_minute == 0.0

    def test_zero_sentences_gives_full_confidence(self, engine, make_chunks):
        report = engine.analyze(make_chunks(". . ."), 1.0)
        assert report.sentence_starters.total == 0
        assert report.scores.confidence == 100

    def test_weak_starters_reduce_confidence(self, engine, make_chunks):
        report = engine.analyze(make_chunks("So we begin. Well it works. And then. We end."), 1.0)
        assert report.sentence_starters.total == 4
        assert {w.word for w in report.sentence_starters.weak} == {"so", "well", "and"}
        assert report.scores.confidence == 25


# ---------------------------------------------------------------------------
#  Invariants
# ---------------------------------------------------------------------------

TRANSCRIPTS = [
    "um " * 40,
    "So. Well. And. But. Like. Um. Uh.",
    "The plan is the plan. The team likes the plan. Our team has a plan for the team.",
    "Basically we just really need stuff. Maybe probably. Kind of sort of a bit.",
    "word " * 3 + "other " * 5 + "thing " * 7 + "value " * 9,
    "Unicode — dashes… and ‘quotes’ are fine. Ünïcödé words too.",
    ". . .",
    "a",
]


@pytest.mark.parametrize("text", TRANSCRIPTS)
def test_report_invariants(engine, make_chunks, text):
    report = engine.analyze(make_chunks(text), 0.5)
    assert report is not None

    for score in (report.scores.clarity, report.scores.conciseness, report.scores.confidence):
        assert isinstance(score, int)
        assert 0 <= score <= 100

    fillers = report.filler_words
    assert fillers.count >= len(fillers.instances)
    assert len(fillers.instances) <= 20
    positions = [i.position for i in fillers.instances]
    assert positions == sorted(positions)

    words = report.repetitions.repeated_words
    phrases = report.repetitions.repeated_phrases
    assert len(words) <= 10
    assert len(phrases) <= 5
    assert [w.count for w in words] == sorted((w.count for w in words), reverse=True)
    assert [p.count for p in phrases] == sorted((p.count for p in phrases), reverse=True)
    assert all(w.count >= 3 for w in words)
    assert all(p.count >= 2 for p in phrases)

    expected_sentences = len([s for s in text.split(".") if s.strip()])
    assert report.sentence_starters.total == expected_sentences
    assert len(report.weak_words) <= 10


def test_idempotent(engine, make_chunks):
    chunks = make_chunks("So um this is really the thing. And the thing is just stuff.")
    first = engine.analyze(chunks, 1.5)
    second = engine.analyze(chunks, 1.5)
    assert first == second
    assert first.to_json() == second.to_json()


def test_injected_word_lists(make_chunks):
    config = AnalysisConfig(
        filler_words=["banana"],
        weak_starters=["apple"],
        weak_words=["cherry"],
    )
    report = AnalyticsEngine(config).analyze(
        make_chunks("Apple pie has banana. Um cherry tart"), 1.0
    )
    assert report.filler_words.count == 0  # "banana." keeps its period
    assert [w.word for w in report.sentence_starters.weak] == ["apple"]
    assert [w.word for w in report.weak_words] == ["cherry"]


def test_analyze_transcript_wrapper(make_chunks):
    report = analyze_transcript(make_chunks("um hello"), 1.0)
    assert report.filler_words.count == 1
    assert analyze_transcript([], 1.0) is None
