"""
Configuration management for Speech Analytics.

Two layers:

- ``AnalysisConfig`` -- the immutable word lists and thresholds consumed by
  the analytics engine. Built once and injected; never mutated.
- ``Settings`` -- process settings (logging, where to find word-list
  overrides) with environment variable support via pydantic-settings.

Word lists can be overridden from a ``speech_analytics.yaml`` file (under an
``analysis:`` key) or from a standalone YAML file named by
``SPEECH_ANALYTICS_WORD_LISTS_PATH``.
"""

from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from speech_analytics.errors import ConfigError


PROJECT_YAML_NAME = "speech_analytics.yaml"


# Default English word lists.
DEFAULT_FILLER_WORDS = (
    "um", "uh", "like", "you know", "basically", "actually", "literally",
    "sort of", "kind of", "i mean", "right", "okay", "so", "well",
)

DEFAULT_WEAK_STARTERS = ("and", "but", "like", "so", "well", "um", "uh")

DEFAULT_WEAK_WORDS = (
    "thing", "stuff", "just", "really", "very", "quite", "pretty",
    "kind of", "sort of", "a bit", "maybe", "probably",
)

DEFAULT_STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at",
    "to", "for", "of", "with", "is", "was", "are", "were",
})


def _normalize_entries(entries: Iterable[str], unique: bool = True) -> Tuple[str, ...]:
    """Lower-case and strip list entries, dropping blanks but keeping order."""
    normalized = []
    for entry in entries:
        word = str(entry).strip().lower()
        if word and not (unique and word in normalized):
            normalized.append(word)
    return tuple(normalized)


class AnalysisConfig(BaseModel):
    """
    Word lists and thresholds for transcript analysis.

    Instances are frozen; build a new one (or use ``model_copy(update=...)``)
    to change a value. Entries are stored lower-case because detection runs
    against lower-cased tokens.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    filler_words: Tuple[str, ...] = DEFAULT_FILLER_WORDS
    weak_starters: Tuple[str, ...] = DEFAULT_WEAK_STARTERS
    weak_words: Tuple[str, ...] = DEFAULT_WEAK_WORDS
    stop_words: FrozenSet[str] = DEFAULT_STOP_WORDS

    min_word_length: int = Field(default=3, ge=1)
    min_repetition_count: int = Field(default=3, ge=1)
    min_phrase_repetition_count: int = Field(default=2, ge=1)
    min_duration_minutes: float = Field(default=0.1, gt=0.0)

    max_filler_instances: int = Field(default=20, ge=0)
    max_repeated_words: int = Field(default=10, ge=0)
    max_repeated_phrases: int = Field(default=5, ge=0)
    max_weak_word_instances: int = Field(default=10, ge=0)

    # Off by default: multi-word fillers ("you know") cannot match a single
    # whitespace token.
    match_multiword_fillers: bool = False

    @field_validator("filler_words", "weak_starters", mode="before")
    @classmethod
    def _normalize_word_list(cls, v: Any) -> Tuple[str, ...]:
        if isinstance(v, str):
            raise ValueError("expected a list of words, got a string")
        return _normalize_entries(v)

    @field_validator("weak_words", mode="before")
    @classmethod
    def _normalize_weak_words(cls, v: Any) -> Tuple[str, ...]:
        # Every entry is checked per sentence, so repeats are kept.
        if isinstance(v, str):
            raise ValueError("expected a list of words, got a string")
        return _normalize_entries(v, unique=False)

    @field_validator("stop_words", mode="before")
    @classmethod
    def _normalize_stop_words(cls, v: Any) -> FrozenSet[str]:
        if isinstance(v, str):
            raise ValueError("expected a list of words, got a string")
        return frozenset(_normalize_entries(v))

    @classmethod
    def from_mapping(cls, data: Optional[Dict[str, Any]]) -> "AnalysisConfig":
        """
        Build a config from a plain mapping, e.g. parsed YAML.

        Keys not present keep their defaults.

        Raises:
            ConfigError: If the mapping has unknown keys or invalid values
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(
                f"Analysis config must be a mapping, got {type(data).__name__}"
            )
        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid analysis config: {exc}") from exc

    @classmethod
    def from_yaml(cls, path: Path) -> "AnalysisConfig":
        """
        Load word lists and thresholds from a YAML file.

        Args:
            path: YAML file whose top-level keys are ``AnalysisConfig`` fields

        Returns:
            AnalysisConfig with the file's values over the defaults

        Raises:
            ConfigError: If the file cannot be read or holds invalid values
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as exc:
            raise ConfigError(f"Cannot read word lists from {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"Malformed YAML in {path}: {exc}") from exc
        return cls.from_mapping(data)

    def to_mapping(self) -> Dict[str, Any]:
        """Plain-data view suitable for YAML/JSON dumping."""
        data = self.model_dump()
        data["filler_words"] = list(self.filler_words)
        data["weak_starters"] = list(self.weak_starters)
        data["weak_words"] = list(self.weak_words)
        data["stop_words"] = sorted(self.stop_words)
        return data


def load_analytics_yaml(search_dir: Optional[Path] = None) -> dict:
    """
    Load the project ``speech_analytics.yaml`` file.

    Searches for the file starting from search_dir (or the current working
    directory) and walking up to 3 parent directories.

    Args:
        search_dir: Directory to start searching from

    Returns:
        Dictionary with the file contents, or empty dict if not found

    Raises:
        ConfigError: If a file is found but cannot be read, is not valid
            YAML, or does not hold a mapping
    """
    start = search_dir or Path.cwd()
    for parent in [start] + list(start.parents)[:3]:
        candidate = parent / PROJECT_YAML_NAME
        if not candidate.exists():
            continue
        try:
            with open(candidate, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as exc:
            raise ConfigError(f"Cannot read {candidate}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"Malformed YAML in {candidate}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"{candidate} must hold a mapping, got {type(data).__name__}"
            )
        return data
    return {}


class Settings(BaseSettings):
    """
    Process settings with environment variable support.

    Configuration can be provided via:
    1. Environment variables (prefixed with SPEECH_ANALYTICS_)
    2. .env file
    3. Default values

    Example:
        export SPEECH_ANALYTICS_LOG_LEVEL="DEBUG"
        export SPEECH_ANALYTICS_WORD_LISTS_PATH="/etc/speech/words.yaml"
    """

    model_config = SettingsConfigDict(
        env_prefix="SPEECH_ANALYTICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for the CLI (DEBUG/INFO/WARNING/ERROR)"
    )
    word_lists_path: Optional[Path] = Field(
        default=None,
        description="YAML file overriding the default word lists and thresholds"
    )
    match_multiword_fillers: bool = Field(
        default=False,
        description="Match multi-word filler entries against consecutive tokens"
    )


def get_analysis_config(
    settings: Optional[Settings] = None,
    search_dir: Optional[Path] = None,
) -> AnalysisConfig:
    """
    Build the active ``AnalysisConfig``.

    An explicit ``word_lists_path`` wins over the project
    ``speech_analytics.yaml``; the ``match_multiword_fillers`` setting is
    applied on top when enabled.

    Returns:
        AnalysisConfig: Frozen analysis configuration
    """
    settings = settings or Settings()

    if settings.word_lists_path is not None:
        config = AnalysisConfig.from_yaml(settings.word_lists_path)
    else:
        project = load_analytics_yaml(search_dir)
        config = AnalysisConfig.from_mapping(project.get("analysis"))

    if settings.match_multiword_fillers and not config.match_multiword_fillers:
        config = config.model_copy(update={"match_multiword_fillers": True})
    return config
