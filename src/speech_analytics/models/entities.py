"""
Pydantic data models for transcript input and the analytics report.

All models are frozen value objects. Field names are snake_case in Python
and camelCase on the wire (``isFinal``, ``ratePerMinute``, ...), so a report
serialized with ``to_json()`` carries exactly the documented fields and
nothing else.
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# (minimum score, band), highest first.
SCORE_BANDS: List[Tuple[int, str]] = [
    (80, "good"),
    (60, "fair"),
    (0, "poor"),
]


def score_band(score: int) -> str:
    """Classify a 0-100 score as ``good`` (>= 80), ``fair`` (>= 60) or ``poor``."""
    for minimum, band in SCORE_BANDS:
        if score >= minimum:
            return band
    return SCORE_BANDS[-1][1]


class _ValueModel(BaseModel):
    """Base for immutable, camelCase-serialized records."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class TranscriptChunk(_ValueModel):
    """
    A transcript segment produced upstream by speech-to-text.

    Only chunks with ``is_final`` set are analyzed; interim chunks may
    still be revised by the transcriber.
    """
    model_config = ConfigDict(extra="ignore")

    text: str = ""
    is_final: bool = False


class FillerWordInstance(_ValueModel):
    """A filler occurrence at a 0-based index into the token sequence."""
    word: str
    position: int = Field(ge=0)


class FillerWords(_ValueModel):
    count: int = Field(ge=0)
    rate_per_minute: float = Field(ge=0.0)
    instances: Tuple[FillerWordInstance, ...] = ()


class PacingMetrics(_ValueModel):
    """
    Speaking pace.

    Pause fields are reserved for timestamped input; plain text chunks
    carry no timing, so they are always ``None`` here.
    """
    words_per_minute: int = Field(ge=0)
    average_pause_duration: Optional[float] = None
    longest_pause: Optional[float] = None


class RepeatedWord(_ValueModel):
    word: str
    count: int = Field(ge=0)


class RepeatedPhrase(_ValueModel):
    phrase: str
    count: int = Field(ge=0)


class Repetitions(_ValueModel):
    repeated_words: Tuple[RepeatedWord, ...] = ()
    repeated_phrases: Tuple[RepeatedPhrase, ...] = ()


class WeakStarter(_ValueModel):
    word: str
    count: int = Field(ge=0)


class SentenceStarters(_ValueModel):
    total: int = Field(ge=0)
    weak: Tuple[WeakStarter, ...] = ()


class WeakWordInstance(_ValueModel):
    word: str
    sentence: str
    suggestion: Optional[str] = None


class AnalyticsScores(_ValueModel):
    clarity: int = Field(ge=0, le=100)
    conciseness: int = Field(ge=0, le=100)
    confidence: int = Field(ge=0, le=100)

    def bands(self) -> Dict[str, str]:
        """Map each score to its band (``good``, ``fair`` or ``poor``)."""
        return {
            "clarity": score_band(self.clarity),
            "conciseness": score_band(self.conciseness),
            "confidence": score_band(self.confidence),
        }


class SpeechAnalytics(_ValueModel):
    """
    Complete analytics report for one transcript.

    Created once per analysis call by ``AnalyticsEngine.analyze``.
    """
    filler_words: FillerWords
    pacing: PacingMetrics
    repetitions: Repetitions
    sentence_starters: SentenceStarters
    weak_words: Tuple[WeakWordInstance, ...] = ()
    scores: AnalyticsScores

    @property
    def summary(self) -> str:
        """Short human-readable summary of the scores and headline metrics."""
        return (
            f"Clarity: {self.scores.clarity}/100\n"
            f"Conciseness: {self.scores.conciseness}/100\n"
            f"Confidence: {self.scores.confidence}/100\n"
            "\n"
            f"Filler words: {self.filler_words.count} "
            f"({self.filler_words.rate_per_minute:.1f}/min)\n"
            f"Speaking pace: {self.pacing.words_per_minute} words/min"
        )

    def to_dict(self) -> dict:
        """Convert to a camelCase dictionary for JSON serialization."""
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, data: str) -> "SpeechAnalytics":
        return cls.model_validate_json(data)
