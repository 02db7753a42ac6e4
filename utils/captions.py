"""Utility functions to turn raw caption files into a clean transcript.

Caption files downloaded by ``yt-dlp`` are full of noise: inline word
timing tags (``<00:00:01.520><c> word</c>``), positioning directives
such as ``align:start position:0%`` and, for auto-generated tracks,
the same sentence repeated across several overlapping cue windows
(the "rolling caption" effect).  This module strips that noise and
produces one ``[timestamp] text`` line per distinct caption.

Functions:
    clean_caption_line(line: str) -> str:
        Remove markup and positioning tokens from a single line.

    build_transcript_lines(content: str) -> List[TranscriptLine]:
        Parse caption file content into deduplicated transcript lines.

    build_transcript(content: str) -> str:
        Same as above, rendered as newline separated text.
"""

from __future__ import annotations

import re
from typing import List, NamedTuple, Optional

# Cue timing line, e.g. ``00:00:01.000 --> 00:00:03.000 align:start``
TIMESTAMP_LINE_RE = re.compile(r"^\d{2}:\d{2}:\d{2}\.\d{3} --> \d{2}:\d{2}:\d{2}\.\d{3}")

POSITION_TOKEN = "align:start position:0%"

_LINE_BREAK_RE = re.compile(r"\r?\n")

# Applied in order, repeatedly, until the text no longer changes.
_NORMALIZATION_RULES = (
    (re.compile(r"<[^>]*>"), ""),
    (re.compile(re.escape(POSITION_TOKEN)), ""),
    (re.compile(r"\s+"), " "),
)


class TranscriptLine(NamedTuple):
    """A single caption with the start time of the cue it came from."""

    timestamp: str
    text: str

    def render(self) -> str:
        return f"[{self.timestamp}] {self.text}"


def clean_caption_line(line: str) -> str:
    """Strip markup tags and positioning metadata from a caption line.

    Args:
        line: One raw line of caption text.

    Returns:
        The cleaned text with whitespace collapsed and trimmed.  May be
        an empty string if the line held nothing but markup.

    Examples::

        >>> clean_caption_line("<00:00:01.520><c> hello</c><c>  world</c>")
        'hello world'
        >>> clean_caption_line("align:start position:0%")
        ''
    """
    text = line
    previous: Optional[str] = None
    # Removing a token can splice a new one together, so loop to a fixed point.
    while text != previous:
        previous = text
        for pattern, replacement in _NORMALIZATION_RULES:
            text = pattern.sub(replacement, text)
    return text.strip()


def _cue_start(line: str) -> str:
    return line.split(" -->", 1)[0].strip()


def build_transcript_lines(content: str) -> List[TranscriptLine]:
    """Parse caption file content into an ordered list of transcript lines.

    Timing lines set the "current" timestamp and produce no output.
    Every other non-blank line is cleaned and emitted with that
    timestamp, unless the cleaned text is empty or identical to the
    text emitted immediately before it.  Only the previous line is
    compared, so a phrase repeated later in the video is kept.

    Lines the parser does not recognise (headers, cue numbers, file
    banners) are treated as ordinary text.  A text line seen before
    any timing line gets an empty timestamp.

    Args:
        content: The full text of one or more concatenated caption files.

    Returns:
        Transcript lines in chronological order.
    """
    lines: List[TranscriptLine] = []
    current_timestamp = ""
    previous_text: Optional[str] = None
    for raw_line in _LINE_BREAK_RE.split(content):
        if not raw_line.strip():
            continue
        if TIMESTAMP_LINE_RE.match(raw_line):
            current_timestamp = _cue_start(raw_line)
            continue
        text = clean_caption_line(raw_line)
        if not text or text == previous_text:
            continue
        lines.append(TranscriptLine(current_timestamp, text))
        previous_text = text
    return lines


def build_transcript(content: str) -> str:
    """Return the deduplicated transcript as ``[timestamp] text`` lines."""
    return "\n".join(line.render() for line in build_transcript_lines(content))
