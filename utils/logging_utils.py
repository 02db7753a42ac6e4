from __future__ import annotations

import logging
import sys

from utils.settings import get_settings


def setup_logging(name: str = "youtube_subtitles") -> logging.Logger:
    # stdout carries the MCP stdio stream, so logs must go to stderr.
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )
    return logging.getLogger(name)
