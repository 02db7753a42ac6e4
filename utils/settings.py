"""Server settings read from environment variables.

Override keys (all optional):
  YT_SUBTITLES_LANGUAGE    subtitle language passed to yt-dlp (default ``en``)
  YT_SUBTITLES_TIMEOUT     seconds allowed for a download (default ``60``)
  YT_SUBTITLES_YTDLP       yt-dlp executable name or path (default ``yt-dlp``)
  YT_SUBTITLES_LOG_LEVEL   logging level (default ``INFO``)
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: str = "en"
    timeout_s: float = 60.0
    ytdlp_path: str = "yt-dlp"
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build a ``Settings`` instance from the current environment."""
    env = os.environ
    raw = {}
    if env.get("YT_SUBTITLES_LANGUAGE"):
        raw["language"] = env["YT_SUBTITLES_LANGUAGE"]
    if env.get("YT_SUBTITLES_TIMEOUT"):
        raw["timeout_s"] = env["YT_SUBTITLES_TIMEOUT"]
    if env.get("YT_SUBTITLES_YTDLP"):
        raw["ytdlp_path"] = env["YT_SUBTITLES_YTDLP"]
    if env.get("YT_SUBTITLES_LOG_LEVEL"):
        raw["log_level"] = env["YT_SUBTITLES_LOG_LEVEL"].upper()
    return Settings.model_validate(raw)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process wide settings, loaded on first use."""
    return load_settings()
