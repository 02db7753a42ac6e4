"""Shared fixtures for the subtitle server test suite."""

import pytest

# Trimmed from a real yt-dlp auto-generated English track: inline word
# timings, positioning directives and rolling duplicate cues.
AUTO_CAPTIONS_VTT = """WEBVTT
Kind: captions
Language: en

00:00:00.000 --> 00:00:02.310 align:start position:0%

hello<00:00:00.480><c> everyone</c><00:00:00.960><c> and</c><00:00:01.199><c> welcome</c>

00:00:02.310 --> 00:00:02.320 align:start position:0%
hello everyone and welcome


00:00:02.320 --> 00:00:05.150 align:start position:0%
hello everyone and welcome
to<00:00:02.639><c> the</c><00:00:03.000><c> show</c>

00:00:05.150 --> 00:00:05.160 align:start position:0%
to the show

"""

AUTO_CAPTIONS_TRANSCRIPT = "\n".join([
    "[] WEBVTT",
    "[] Kind: captions",
    "[] Language: en",
    "[00:00:00.000] hello everyone and welcome",
    "[00:00:02.320] to the show",
])

SIMPLE_CAPTIONS = (
    "00:00:01.000 --> 00:00:03.000\nHello world\n\n"
    "00:00:03.000 --> 00:00:05.000\nHello world\n\n"
    "00:00:05.000 --> 00:00:07.000\nGoodbye\n"
)


@pytest.fixture
def auto_captions():
    return AUTO_CAPTIONS_VTT


@pytest.fixture
def simple_captions():
    return SIMPLE_CAPTIONS


def _make_caption_file(num_cues: int, words_per_cue: int) -> str:
    blocks = []
    for i in range(num_cues):
        start = f"00:{i // 60:02d}:{i % 60:02d}.000"
        end = f"00:{(i + 1) // 60:02d}:{(i + 1) % 60:02d}.000"
        words = " ".join(f"w{i}x{j}" for j in range(words_per_cue))
        blocks.append(f"{start} --> {end}\n{words}\n")
    return "\n".join(blocks)


@pytest.fixture
def make_caption_file():
    """Factory for caption content with distinct cues of a fixed word count."""
    return _make_caption_file


@pytest.fixture
def auto_captions_transcript():
    return AUTO_CAPTIONS_TRANSCRIPT
