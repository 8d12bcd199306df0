"""Turn raw transcript markup into consolidated speaker turns.

Parsing runs in two passes:

    split on <br> → classify each line → fold into raw turns → consolidate

Nothing here can fail: a line that does not look like ``SPEAKER: text`` is
attributed to the current speaker.
"""

from __future__ import annotations

import json
import re
from functools import reduce
from typing import Iterable, List, NamedTuple

from transcript_crawler.transcript.models import (
    Annotation,
    ClassifiedLine,
    Continuation,
    SpeakerLine,
    SpeakerTurn,
)

LINE_BREAK = "<br>"
DEFAULT_SPEAKER = "system"
HOST_SPEAKER = "assistant"
HOST_MARKER = "KING"

_LINE_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_LABEL_PUNCTUATION = frozenset("'\",.")
# Characters a single-line remainder may not contain.
_LINE_TERMINATORS = frozenset("\n\r\u2028\u2029")


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def _is_label_char(char: str) -> bool:
    if char.isascii() and (char.isalnum() or char == "_"):
        return True
    return char in _LABEL_PUNCTUATION or char.isspace()


def split_lines(raw_content: str) -> List[str]:
    """Split *raw_content* on line-break markers, trimming and dropping blanks."""
    lines = (fragment.strip() for fragment in _LINE_BREAK_RE.split(raw_content))
    return [line for line in lines if line]


def classify_line(line: str) -> ClassifiedLine:
    """Classify one trimmed, non-empty line."""
    if line.startswith("(") and line.endswith(")") and line.upper() == line:
        return Annotation(line)

    end = 0
    while end < len(line) and _is_label_char(line[end]):
        end += 1

    if end and end < len(line) and line[end] == ":":
        rest = line[end + 1:].lstrip()
        if not _LINE_TERMINATORS.intersection(rest):
            return SpeakerLine(label=line[:end], rest=rest.strip())

    return Continuation(line)


# ---------------------------------------------------------------------------
# Phase A: attribute every line to a speaker
# ---------------------------------------------------------------------------

class _ParseState(NamedTuple):
    current_speaker: str
    turns: tuple


def _attribute(state: _ParseState, line: ClassifiedLine) -> _ParseState:
    if isinstance(line, Annotation):
        turn = SpeakerTurn(DEFAULT_SPEAKER, line.text)
        return _ParseState(state.current_speaker, state.turns + (turn,))

    if isinstance(line, SpeakerLine):
        speaker = HOST_SPEAKER if HOST_MARKER in line.label else line.label
        return _ParseState(speaker, state.turns + (SpeakerTurn(speaker, line.rest),))

    turn = SpeakerTurn(state.current_speaker, line.text)
    return _ParseState(state.current_speaker, state.turns + (turn,))


def attribute_lines(lines: Iterable[str]) -> List[SpeakerTurn]:
    """Return one raw :class:`SpeakerTurn` per line, in order."""
    initial = _ParseState(DEFAULT_SPEAKER, ())
    final = reduce(_attribute, (classify_line(line) for line in lines), initial)
    return list(final.turns)


# ---------------------------------------------------------------------------
# Phase B: merge adjacent turns by the same speaker
# ---------------------------------------------------------------------------

def _merge(merged: List[SpeakerTurn], turn: SpeakerTurn) -> List[SpeakerTurn]:
    if merged and merged[-1].speaker == turn.speaker:
        last = merged[-1]
        merged[-1] = SpeakerTurn(last.speaker, f"{last.value} {turn.value}")
    else:
        merged.append(turn)
    return merged


def consolidate(turns: Iterable[SpeakerTurn]) -> List[SpeakerTurn]:
    """Merge runs of same-speaker turns, joining their values with one space.

    The result never has two adjacent turns with the same speaker, and
    consolidating it again returns an equal list.
    """
    return reduce(_merge, turns, [])


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_transcript(raw_content: str) -> List[SpeakerTurn]:
    """Parse raw ``<br>``-separated transcript text into consolidated turns."""
    return consolidate(attribute_lines(split_lines(raw_content)))


def turns_to_json(turns: Iterable[SpeakerTurn]) -> str:
    """Serialise *turns* as pretty-printed JSON (a list of speaker/value objects)."""
    return json.dumps([turn.to_dict() for turn in turns], indent=2, ensure_ascii=False)
