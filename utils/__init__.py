"""Subtitle processing helpers and yt-dlp glue."""
