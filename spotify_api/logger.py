"""
Logging for the Spotify API layer.

This module re-exports the logger from mcp_server.logger for consistency.
"""

from mcp_server.logger import logger

__all__ = ["logger"]
