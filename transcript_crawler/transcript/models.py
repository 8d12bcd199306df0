"""Data models for transcript parsing."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Union


@dataclass(frozen=True)
class SpeakerTurn:
    """One attributed span of dialogue."""

    speaker: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Line classification variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Annotation:
    """A parenthesised, fully upper-case stage direction such as ``(APPLAUSE)``."""

    text: str


@dataclass(frozen=True)
class SpeakerLine:
    """A line opening with a ``LABEL:`` prefix."""

    label: str
    rest: str


@dataclass(frozen=True)
class Continuation:
    """A line with no speaker prefix; it belongs to whoever spoke last."""

    text: str


ClassifiedLine = Union[Annotation, SpeakerLine, Continuation]
