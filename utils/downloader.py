"""Download YouTube subtitle files with ``yt-dlp``.

``yt-dlp`` is run as a separate process inside a temporary directory
that is removed once the caption files have been read.  Only the
subtitle track for the configured language is requested (manual
subtitles if present, otherwise auto-generated ones); the video itself
is never downloaded.

Functions:
    extract_video_id(url: str) -> Optional[str]:
        Parse a YouTube URL and return the video ID if present.

    is_supported_url(url: str) -> bool:
        Whether the URL looks like a YouTube video link.

    fetch_subtitle_text(url, language=None, timeout=None) -> str:
        Run ``yt-dlp`` and return the text of every caption file it
        wrote, each prefixed with a file name banner.
"""

from __future__ import annotations

import asyncio
import logging
import re
import tempfile
from pathlib import Path
from typing import List, Optional

from utils.errors import NoSubtitlesError, SubtitleFetchError
from utils.settings import get_settings

logger = logging.getLogger(__name__)

FILE_BANNER_RULE = "=" * 20

_VIDEO_ID_PATTERNS = [
    r"youtube\.com/watch\?(?:.*&)?v=([\w-]{11})",
    r"youtu\.be/([\w-]{11})",
    r"youtube\.com/embed/([\w-]{11})",
    r"youtube\.com/shorts/([\w-]{11})",
    r"youtube\.com/live/([\w-]{11})",
]


def extract_video_id(url: str) -> Optional[str]:
    """Extract the YouTube video ID from a full or shortened URL.

    Args:
        url: A YouTube watch, short, embed, shorts or live URL.

    Returns:
        The 11-character video ID if found, otherwise ``None``.

    Examples::

        >>> extract_video_id("https://www.youtube.com/watch?v=abc123def45")
        'abc123def45'
        >>> extract_video_id("https://youtu.be/abc123def45")
        'abc123def45'
    """
    for pat in _VIDEO_ID_PATTERNS:
        match = re.search(pat, url)
        if match:
            return match.group(1)
    return None


def is_supported_url(url: str) -> bool:
    return extract_video_id(url) is not None


def build_ytdlp_command(ytdlp_path: str, url: str, language: str, output_dir: str) -> List[str]:
    """Return the argument list used to fetch subtitles into ``output_dir``."""
    return [
        ytdlp_path,
        "--write-sub",
        "--write-auto-sub",
        "--sub-lang", language,
        "--skip-download",
        "--sub-format", "vtt",
        "--no-playlist",
        "-o", str(Path(output_dir) / "%(id)s.%(ext)s"),
        url,
    ]


def _tail(stderr: bytes, lines: int = 5) -> str:
    text = stderr.decode("utf-8", errors="replace").strip()
    return "\n".join(text.splitlines()[-lines:])


def _read_caption_files(output_dir: str) -> str:
    files = sorted(Path(output_dir).glob("*.vtt"))
    parts = []
    for path in files:
        text = path.read_text(encoding="utf-8", errors="replace")
        parts.append(f"{path.name}\n{FILE_BANNER_RULE}\n{text}")
    return "\n".join(parts)


async def fetch_subtitle_text(
    url: str,
    language: Optional[str] = None,
    timeout: Optional[float] = None,
) -> str:
    """Download the subtitles for ``url`` and return their raw text.

    Args:
        url: A YouTube video URL.
        language: Subtitle language code.  Defaults to the configured
            language.
        timeout: Seconds to allow ``yt-dlp`` before it is killed.
            Defaults to the configured timeout.

    Returns:
        The concatenated content of every caption file written, each
        preceded by ``"<filename>\\n====================\\n"``.

    Raises:
        SubtitleFetchError: If ``yt-dlp`` is missing, fails or times out.
        NoSubtitlesError: If no caption file was produced.
    """
    settings = get_settings()
    language = language or settings.language
    timeout = settings.timeout_s if timeout is None else timeout

    with tempfile.TemporaryDirectory(prefix="yt-subtitles-") as output_dir:
        cmd = build_ytdlp_command(settings.ytdlp_path, url, language, output_dir)
        logger.debug("Running %s", " ".join(cmd))
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise SubtitleFetchError(
                f"Could not run '{settings.ytdlp_path}'. Make sure yt-dlp is installed and on PATH."
            ) from e

        try:
            _, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.warning("yt-dlp timed out after %ss for %s", timeout, url)
            raise SubtitleFetchError(
                f"Timed out after {timeout:g} seconds while downloading subtitles."
            ) from e
        finally:
            # Also reached on cancellation; the temp dir must not vanish under a live yt-dlp.
            if proc.returncode is None:
                proc.kill()
                await proc.wait()

        if proc.returncode != 0:
            detail = _tail(stderr)
            logger.warning("yt-dlp exited with %s for %s: %s", proc.returncode, url, detail)
            raise SubtitleFetchError(
                f"yt-dlp failed with exit code {proc.returncode}: {detail}"
            )

        content = _read_caption_files(output_dir)

    if not content:
        raise NoSubtitlesError(f"No '{language}' subtitles are available for this video.")
    return content
