"""MCP tool for retrieving YouTube subtitles in pages.

This module exposes a single tool, ``download_youtube_subtitles``, that
accepts a YouTube URL, downloads the video's subtitles with ``yt-dlp``
and returns them as cleaned, timestamped text.  Long transcripts are
split into chunks of a configurable number of words so the language
model can read them a page at a time.

The returned text starts with a short configuration block followed by
the selected chunks:

.. code-block:: text

    Subtitle configuration:
    - Chunk size: 5000 words
    - Starting chunk: 1
    - Chunks requested: 1
    - Total chunks available: 3
    ------------------------------------------------------------
    [Chunk 1/3]
    [00:00:01.000] Hello and welcome back to the channel
    ...

Example call:

.. code-block:: json

    {
      "url": "https://www.youtube.com/watch?v=DFlm3_EIbko",
      "chunk_index": 1
    }
"""

from __future__ import annotations

import logging
from typing import Optional

from mcp.server.fastmcp.exceptions import ToolError

from server import mcp  # Shared FastMCP instance
from utils.downloader import fetch_subtitle_text, is_supported_url
from utils.errors import SubtitleError, UnsupportedUrlError
from utils.paging import SubtitleOptions, render_subtitles

logger = logging.getLogger(__name__)


async def get_subtitle_report(url: str, options: SubtitleOptions) -> str:
    """Fetch the subtitles for ``url`` and render the requested chunks.

    Raises:
        SubtitleError: For an unsupported URL, a failed download, a
            video without subtitles or an invalid chunk index.
    """
    if not is_supported_url(url):
        raise UnsupportedUrlError(
            "Invalid YouTube URL. Please provide a youtube.com/watch, youtu.be, "
            "shorts, live or embed link."
        )
    logger.info("Fetching subtitles for %s", url)
    content = await fetch_subtitle_text(url)
    return render_subtitles(content, options)


@mcp.tool()
async def download_youtube_subtitles(
    url: str,
    chunk_size: Optional[int] = None,
    chunk_index: Optional[int] = None,
    num_chunks: Optional[int] = None,
) -> str:  # type: ignore[override]
    """Download a YouTube video's subtitles as timestamped text chunks.

    Args:
        url: The full YouTube URL (``youtube.com/watch?v=``,
            ``youtu.be``, ``youtube.com/shorts``, ``youtube.com/live``
            or ``youtube.com/embed`` format).
        chunk_size: Maximum number of words per chunk.  Defaults to
            5000 and is kept between 5000 and 20000.
        chunk_index: Zero-based index of the first chunk to return.
            Defaults to 0.  The response reports how many chunks are
            available, so request the next page with the next index.
        num_chunks: How many consecutive chunks to return, at most 5.
            Defaults to 1.

    Returns:
        A configuration summary followed by the selected chunks, each
        headed ``[Chunk i/total]``.  Every transcript line has the form
        ``[HH:MM:SS.mmm] text`` with the start time of its caption.

    Notes:
        Consecutive repeated captions (common in auto-generated
        subtitles) are collapsed, and inline timing tags are removed.
    """
    options = SubtitleOptions(
        chunk_size=chunk_size, chunk_index=chunk_index, num_chunks=num_chunks
    )
    try:
        return await get_subtitle_report(url, options)
    except SubtitleError as e:
        logger.warning("Subtitle request for %s failed: %s", url, e)
        raise ToolError(str(e)) from e
