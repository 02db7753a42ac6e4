"""Exceptions raised while fetching and paging subtitles.

All of them carry a message meant to be shown to the end user as is.
The tool layer converts them into MCP tool errors.
"""

from __future__ import annotations


class SubtitleError(Exception):
    """Base class for every subtitle related failure."""


class UnsupportedUrlError(SubtitleError):
    """The URL does not look like a YouTube video link."""


class SubtitleFetchError(SubtitleError):
    """``yt-dlp`` could not be run, failed, or timed out."""


class NoSubtitlesError(SubtitleError):
    """The video has no subtitles in the configured language."""


class InvalidChunkIndexError(SubtitleError, ValueError):
    """The requested chunk does not exist."""

    def __init__(self, total_chunks: int) -> None:
        self.total_chunks = total_chunks
        super().__init__(f"Invalid chunk index. Available chunks: 0-{total_chunks - 1}")
