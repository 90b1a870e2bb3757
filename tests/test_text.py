"""Tests for transcript text normalization (text.py)."""

from dataclasses import fields

from speech_analytics.analysis.text import normalize_chunks, split_sentences, tokenize


class TestNormalizeChunks:
    def test_tokens_and_sentences(self, make_chunks):
        normalized = normalize_chunks(make_chunks("Hello  World.", "So we go. "))
        assert normalized.tokens == ("hello", "world.", "so", "we", "go.")
        assert normalized.sentences == ("Hello  World", "So we go")
        assert normalized.token_count == 5
        assert normalized.sentence_count == 2

    def test_only_derived_views_kept(self, make_chunks):
        normalized = normalize_chunks(make_chunks("hi"))
        assert [f.name for f in fields(normalized)] == ["tokens", "sentences"]

    def test_no_final_chunks(self, make_chunks):
        assert normalize_chunks(make_chunks("hi", is_final=False)) is None

    def test_no_tokens(self, make_chunks):
        assert normalize_chunks(make_chunks(" ", "")) is None


def test_tokenize_splits_on_any_whitespace():
    assert tokenize("A\tb\n c") == ["a", "b", "c"]


def test_split_sentences_drops_empty_pieces():
    assert split_sentences("One. . Two..") == ["One", "Two"]
