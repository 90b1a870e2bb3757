"""
Transcript text normalization.

Joins finalized chunks and derives the two views every detector works on:
a lower-case token sequence and an original-case sentence sequence.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from speech_analytics.models.entities import TranscriptChunk


@dataclass(frozen=True)
class NormalizedText:
    """
    Tokenized view of a transcript.

    Attributes:
        tokens: Lower-case whitespace tokens, empties removed
        sentences: Stripped, non-empty period-delimited pieces of the text
    """

    tokens: Tuple[str, ...]
    sentences: Tuple[str, ...]

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)


def join_final_text(chunks: Iterable[TranscriptChunk]) -> Optional[str]:
    """Join the text of finalized chunks, or ``None`` if none are final."""
    final = [chunk.text for chunk in chunks if chunk.is_final]
    if not final:
        return None
    return " ".join(final)


def tokenize(text: str) -> List[str]:
    """Lower-case ``text`` and split it on whitespace."""
    return text.lower().split()


def split_sentences(text: str) -> List[str]:
    """Split on the literal period, keeping case and dropping empty pieces."""
    pieces = (piece.strip() for piece in text.split("."))
    return [piece for piece in pieces if piece]


def normalize_chunks(chunks: Iterable[TranscriptChunk]) -> Optional[NormalizedText]:
    """
    Normalize finalized chunks for analysis.

    Args:
        chunks: Transcript chunks in upstream order

    Returns:
        NormalizedText, or ``None`` when no chunk is final or the final
        text has no tokens.
    """
    text = join_final_text(chunks)
    if text is None:
        return None

    tokens = tokenize(text)
    if not tokens:
        return None

    return NormalizedText(
        tokens=tuple(tokens),
        sentences=tuple(split_sentences(text)),
    )
