"""Transcript package: line classification and speaker-turn parsing."""

from transcript_crawler.transcript.models import SpeakerTurn
from transcript_crawler.transcript.parser import (
    classify_line,
    consolidate,
    parse_transcript,
    turns_to_json,
)

__all__ = ["SpeakerTurn", "classify_line", "consolidate", "parse_transcript", "turns_to_json"]
