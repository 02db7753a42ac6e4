"""
Configure the FastMCP server instance.

This module creates a shared `FastMCP` server named
``youtube_subtitles``, sets up logging and imports tool modules so
that their decorated functions are registered.

You typically do not run this module directly. Instead, use
``python main.py`` which imports the server and calls ``mcp.run()``.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from utils.logging_utils import setup_logging


setup_logging()

# Create the shared MCP server instance.
mcp = FastMCP("youtube_subtitles")


# Import tool modules so their decorated functions register with the server.
# Use absolute imports rather than package-relative ones so that the code
# works when run from the project root.
# pylint: disable=unused-import
from tools import subtitle_tools  # noqa: F401,E402
from tools import prompts  # noqa: F401,E402
