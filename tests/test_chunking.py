"""
Tests for transcript chunking.
"""

import pytest

from utils.captions import build_transcript
from utils.chunking import chunk_transcript, count_words


def test_count_words_ignores_timestamp():
    assert count_words("[00:00:01.000] Hello there world") == 3
    assert count_words("[00:00:01.000]") == 0
    assert count_words("no timestamp here") == 3
    # Only a leading timestamp is stripped.
    assert count_words("at [00:00:01.000] mark") == 3


def test_three_single_word_lines_with_limit_two():
    transcript = "[00:00:01.000] line1\n[00:00:02.000] line2\n[00:00:03.000] line3"
    assert chunk_transcript(transcript, 2) == [
        "[00:00:01.000] line1\n[00:00:02.000] line2",
        "[00:00:03.000] line3",
    ]


def test_oversized_line_forms_its_own_chunk():
    transcript = "[00:00:01.000] a\n[00:00:02.000] b c d e f\n[00:00:03.000] g"
    assert chunk_transcript(transcript, 3) == [
        "[00:00:01.000] a",
        "[00:00:02.000] b c d e f",
        "[00:00:03.000] g",
    ]


def test_exact_fit_stays_in_one_chunk():
    transcript = "[00:00:01.000] a b\n[00:00:02.000] c d"
    assert chunk_transcript(transcript, 4) == [transcript]


def test_empty_transcript_has_no_chunks():
    assert chunk_transcript("", 5000) == []


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        chunk_transcript("[00:00:01.000] a", 0)


def test_chunks_rejoin_to_transcript_and_respect_limit(make_caption_file):
    transcript = build_transcript(make_caption_file(40, 7))
    limit = 30
    chunks = chunk_transcript(transcript, limit)

    assert "\n".join(chunks) == transcript
    assert all(chunks)
    for chunk in chunks:
        assert sum(count_words(line) for line in chunk.split("\n")) <= limit
    # Each new chunk starts with the line that overflowed the previous one.
    for prev, nxt in zip(chunks, chunks[1:]):
        prev_words = sum(count_words(line) for line in prev.split("\n"))
        first_line = nxt.split("\n")[0]
        assert prev_words + count_words(first_line) > limit
