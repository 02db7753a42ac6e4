"""Resolve paging options and render a window of transcript chunks.

Requests arrive with up to three optional numbers: the chunk size in
words, the index of the first chunk to return and how many chunks to
return.  ``resolve_config`` applies defaults and bounds to these,
``format_chunks`` validates the index against the real chunk list and
renders the report that is handed back to the client.

The chunk index is deliberately left unclamped when the options are
resolved.  It can only be checked once the transcript has been chunked,
and an out-of-range index is reported instead of silently moved.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from utils.captions import build_transcript
from utils.chunking import chunk_transcript
from utils.errors import InvalidChunkIndexError, NoSubtitlesError

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 5000
MIN_CHUNK_SIZE = 5000
MAX_CHUNK_SIZE = 20000
DEFAULT_CHUNK_INDEX = 0
DEFAULT_NUM_CHUNKS = 1
MAX_NUM_CHUNKS = 5

DIVIDER = "-" * 60


class SubtitleOptions(BaseModel):
    """Raw paging options as supplied by the caller.

    Accepts both the snake_case field names and the camelCase names used
    by MCP clients (``chunkSize``, ``chunkIndex``, ``numChunks``).
    Unknown keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    chunk_size: Optional[int] = Field(default=None, alias="chunkSize")
    chunk_index: Optional[int] = Field(default=None, alias="chunkIndex")
    num_chunks: Optional[int] = Field(default=None, alias="numChunks")


class SubtitleConfig(BaseModel):
    """Paging configuration for one request.  Immutable."""

    model_config = ConfigDict(frozen=True)

    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunk_index: int = DEFAULT_CHUNK_INDEX
    num_chunks: int = DEFAULT_NUM_CHUNKS


def resolve_config(
    options: Union[SubtitleOptions, Mapping[str, Any], None] = None,
) -> SubtitleConfig:
    """Apply defaults and bounds to caller supplied paging options.

    * ``chunk_size`` defaults to 5000 and is clamped to [5000, 20000].
    * ``chunk_index`` defaults to 0 and is not clamped here.
    * ``num_chunks`` defaults to 1 and is capped at 5.  Zero or negative
      values are passed through.

    Args:
        options: A ``SubtitleOptions`` instance, a plain mapping, or None.

    Returns:
        The resolved ``SubtitleConfig``.
    """
    if options is None:
        opts = SubtitleOptions()
    elif isinstance(options, SubtitleOptions):
        opts = options
    else:
        opts = SubtitleOptions.model_validate(dict(options))

    chunk_size = DEFAULT_CHUNK_SIZE if opts.chunk_size is None else opts.chunk_size
    chunk_size = max(MIN_CHUNK_SIZE, min(chunk_size, MAX_CHUNK_SIZE))
    chunk_index = DEFAULT_CHUNK_INDEX if opts.chunk_index is None else opts.chunk_index
    num_chunks = DEFAULT_NUM_CHUNKS if opts.num_chunks is None else opts.num_chunks
    num_chunks = min(num_chunks, MAX_NUM_CHUNKS)
    return SubtitleConfig(chunk_size=chunk_size, chunk_index=chunk_index, num_chunks=num_chunks)


def format_chunks(config: SubtitleConfig, chunks: List[str]) -> str:
    """Render the chunks selected by ``config`` as a text report.

    Args:
        config: Resolved paging configuration.
        chunks: Every chunk of the transcript, in order.

    Returns:
        A configuration summary followed by the selected chunks, each
        headed ``[Chunk i/total]`` and separated by a divider line.

    Raises:
        InvalidChunkIndexError: If ``config.chunk_index`` is outside
            ``[0, len(chunks) - 1]``.

    Example output::

        Subtitle configuration:
        - Chunk size: 5000 words
        - Starting chunk: 1
        - Chunks requested: 1
        - Total chunks available: 3
        ------------------------------------------------------------
        [Chunk 1/3]
        [00:00:01.000] Hello world
    """
    total = len(chunks)
    if config.chunk_index < 0 or config.chunk_index >= total:
        raise InvalidChunkIndexError(total)
    end = min(config.chunk_index + config.num_chunks, total)
    blocks = [
        "\n".join([
            "Subtitle configuration:",
            f"- Chunk size: {config.chunk_size} words",
            f"- Starting chunk: {config.chunk_index + 1}",
            f"- Chunks requested: {config.num_chunks}",
            f"- Total chunks available: {total}",
        ])
    ]
    for i in range(config.chunk_index, end):
        blocks.append(f"[Chunk {i + 1}/{total}]\n{chunks[i]}")
    return f"\n{DIVIDER}\n".join(blocks)


def render_subtitles(
    content: str,
    options: Union[SubtitleOptions, Mapping[str, Any], None] = None,
) -> str:
    """Run the whole text pipeline over raw caption file content.

    Cleans and deduplicates the captions, chunks the transcript with
    the resolved chunk size and renders the requested window.

    Raises:
        NoSubtitlesError: If the captions contain no text at all.
        InvalidChunkIndexError: If the requested chunk does not exist.
    """
    config = resolve_config(options)
    transcript = build_transcript(content)
    if not transcript:
        raise NoSubtitlesError("The subtitle file contained no caption text.")
    chunks = chunk_transcript(transcript, config.chunk_size)
    logger.info(
        "Transcript split into %d chunk(s) of up to %d words; returning from chunk %d",
        len(chunks), config.chunk_size, config.chunk_index,
    )
    return format_chunks(config, chunks)
