#!/usr/bin/env python3
"""
Start the Spotify MCP server in HTTP mode for debugging.

This script serves the MCP server over FastMCP's streamable HTTP transport,
which allows you to:
- Debug the server using standard HTTP debugging tools
- Connect editors or agents to the server via HTTP transport

Usage:
    uv run python start_mcp_http.py [--port PORT] [--host HOST]

Environment variables:
    PORT: Port for the MCP HTTP server (CloudRun compatible, default: 8080)
    MCP_HTTP_PORT: Port for the MCP HTTP server (alternative to PORT, default: 8080)
    API_KEY: Optional X-API-KEY required from clients
"""

import argparse
import os
import sys

import uvicorn

# Add current directory to Python path
sys.path.append(".")

from mcp_server.logger import logger


def main():
    parser = argparse.ArgumentParser(description="Start the Spotify MCP server in HTTP mode")
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("PORT", os.environ.get("MCP_HTTP_PORT", 8080))),
        help="Port for the MCP HTTP server (default: 8080, supports PORT env var for CloudRun)",
    )
    parser.add_argument(
        "--host", type=str, default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)"
    )

    args = parser.parse_args()

    # Imported here so the API key middleware reads the final environment
    from app import app

    logger.info(f"Starting Spotify MCP server in HTTP mode on {args.host}:{args.port}...")
    logger.info(f"Connect clients to: http://{args.host}:{args.port}/mcp")
    logger.info("Press Ctrl+C to stop the server")

    uvicorn.run(app, host=args.host, port=args.port, log_level="info")


if __name__ == "__main__":
    main()
