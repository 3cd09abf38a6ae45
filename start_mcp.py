#!/usr/bin/env python3
"""
Simple startup script for the Spotify MCP server (stdio transport).

Run with uv to ensure all dependencies are available:
    uv run python start_mcp.py

Or use the FastMCP CLI directly:
    uv run fastmcp run mcp_server/server.py

Credentials are read from SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET
(a .env file in the working directory is honoured).
"""

import sys

# Add current directory to Python path
sys.path.append(".")

from mcp_server.logger import logger
from mcp_server.server import mcp

if __name__ == "__main__":
    logger.info("Spotify MCP server running on stdio")
    mcp.run()
