"""Request assembly: body loading, field merging and MCP URL helpers."""
