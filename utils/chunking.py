"""Split a rendered transcript into word-bounded chunks.

A full transcript for an hour-long video easily runs to tens of
thousands of words, far more than a client wants in a single tool
result.  The transcript is therefore packed greedily into chunks of at
most ``max_words`` words which can be requested page by page.
Timestamps are not counted as words.
"""

from __future__ import annotations

import re
from typing import List

_LEADING_TIMESTAMP_RE = re.compile(r"^\[\d{2}:\d{2}:\d{2}\.\d{3}\]")


def count_words(line: str) -> int:
    """Count the words in a transcript line, ignoring its timestamp.

    Examples::

        >>> count_words("[00:00:01.000] Hello there world")
        3
    """
    return len(_LEADING_TIMESTAMP_RE.sub("", line, count=1).split())


def chunk_transcript(transcript: str, max_words: int) -> List[str]:
    """Pack transcript lines into chunks of at most ``max_words`` words.

    Lines are never split.  A line that does not fit into the chunk
    under construction starts the next chunk, and a single line longer
    than the limit becomes a chunk of its own.  Joining the returned
    chunks with newlines reproduces ``transcript`` exactly.

    Args:
        transcript: Newline separated ``[timestamp] text`` lines.
        max_words: Word limit per chunk.  Must be positive.

    Returns:
        The chunks in order; an empty list for an empty transcript.

    Raises:
        ValueError: If ``max_words`` is not positive.
    """
    if max_words <= 0:
        raise ValueError(f"max_words must be positive, got {max_words}")
    if not transcript:
        return []
    chunks: List[str] = []
    current: List[str] = []
    current_words = 0
    for line in transcript.split("\n"):
        words = count_words(line)
        if current and current_words + words > max_words:
            chunks.append("\n".join(current))
            current = []
            current_words = 0
        current.append(line)
        current_words += words
    if current:
        chunks.append("\n".join(current))
    return chunks
