"""MCP tools and prompts registered on the shared server."""
