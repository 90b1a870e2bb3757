"""
Transcript file loading.

Reads transcript chunks from JSON, either a bare list of chunk objects or
an object with a ``chunks`` key:

    [{"text": "So, um, hello.", "isFinal": true}, ...]
    {"chunks": [{"text": "...", "isFinal": false}]}
"""

import json
import logging
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError

from speech_analytics.errors import TranscriptError
from speech_analytics.models.entities import TranscriptChunk

logger = logging.getLogger(__name__)


def parse_chunks(data: Any) -> List[TranscriptChunk]:
    """
    Validate decoded JSON into transcript chunks.

    Raises:
        TranscriptError: If the structure is not a list of chunk objects
    """
    if isinstance(data, dict):
        if "chunks" not in data:
            raise TranscriptError("Transcript object has no 'chunks' key")
        data = data["chunks"]
    if not isinstance(data, list):
        raise TranscriptError(
            f"Transcript must be a list of chunks, got {type(data).__name__}"
        )

    chunks: List[TranscriptChunk] = []
    for i, item in enumerate(data):
        try:
            chunks.append(TranscriptChunk.model_validate(item))
        except ValidationError as exc:
            raise TranscriptError(f"Invalid chunk at index {i}: {exc}") from exc
    return chunks


def load_transcript(path: Path) -> List[TranscriptChunk]:
    """
    Load transcript chunks from a JSON file.

    Raises:
        TranscriptError: If the file cannot be read, is not JSON, or has
            the wrong structure
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise TranscriptError(f"Cannot read transcript {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise TranscriptError(f"Transcript {path} is not valid JSON: {exc}") from exc

    chunks = parse_chunks(data)
    logger.debug("Loaded %d chunks from %s", len(chunks), path)
    return chunks
