"""
Reusable prompts to guide the language model when reading subtitles.

These prompts explain how the subtitle tool pages through long
transcripts and how to interpret its output.  They are registered with
FastMCP via the ``@mcp.prompt()`` decorator.  When queried, the client
can consult this guidance before calling the tool.
"""

from __future__ import annotations

# Absolute import so this works whether the project root is on the
# path as a script directory or as an installed distribution.
from server import mcp  # type: ignore


@mcp.prompt()
def subtitle_paging_guidance() -> str:
    """
    Guidance on reading long YouTube transcripts page by page.

    ``download_youtube_subtitles`` returns one "page" of the
    transcript at a time.  The first block of the response is a
    configuration summary:

    - ``Chunk size`` – the word limit per chunk (5000 to 20000).
    - ``Starting chunk`` – the 1-based number of the first chunk
      returned.
    - ``Chunks requested`` – how many chunks were asked for (max 5).
    - ``Total chunks available`` – how many chunks the whole
      transcript was split into.

    Each chunk then follows under a ``[Chunk i/total]`` heading.  To
    read further, call the tool again with ``chunk_index`` set to the
    next zero-based index.  Note that ``chunk_index`` is zero-based
    while the ``[Chunk i/total]`` headings are one-based: after reading
    ``[Chunk 1/3]`` the next request uses ``chunk_index`` 1.

    Example calls:

    .. code-block:: json

        {"url": "https://www.youtube.com/watch?v=DFlm3_EIbko"}

        {
          "url": "https://www.youtube.com/watch?v=DFlm3_EIbko",
          "chunk_index": 1,
          "num_chunks": 2
        }

    Keep the same ``chunk_size`` across calls for one video, otherwise
    the chunk boundaries move and indices no longer line up.
    """
    return (
        "Use `download_youtube_subtitles` with the full video URL. The response starts with a "
        "configuration summary that states the total number of chunks, followed by chunks headed "
        "'[Chunk i/total]' (one-based). To read the next part, call the tool again with "
        "`chunk_index` set to the next zero-based index, keeping the same `chunk_size`. Use "
        "`num_chunks` (at most 5) to fetch several consecutive chunks at once and a larger "
        "`chunk_size` (up to 20000 words) for fewer, longer pages. Each transcript line is "
        "'[HH:MM:SS.mmm] text', so you can cite where in the video something was said."
    )
