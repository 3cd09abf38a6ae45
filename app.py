"""
ASGI application entrypoint for the Spotify MCP server.

This module provides the HTTP server setup for the MCP server with:
- Health check endpoint (/health) via @mcp.custom_route()
- X-API-KEY header authentication middleware

Run with: uvicorn app:app --host 0.0.0.0 --port 8080 --forwarded-allow-ips=*
"""

import os

from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp_server.logger import logger
from mcp_server.server import mcp


class APIKeyMiddleware(BaseHTTPMiddleware):
    """Middleware to validate X-API-KEY header."""

    def __init__(self, app, api_key: str):
        super().__init__(app)
        self.api_key = api_key

    async def dispatch(self, request: Request, call_next):
        # Skip API key check for health endpoint
        if request.url.path == "/health":
            return await call_next(request)

        # Starlette headers are case-insensitive
        provided_key = request.headers.get("X-API-KEY")
        client_host = request.client.host if request.client else "unknown"

        if not provided_key:
            logger.warning(f"API key missing for request to {request.url.path} from {client_host}")
            return JSONResponse({"error": "Missing X-API-KEY header"}, status_code=401)

        if provided_key != self.api_key:
            logger.warning(f"Invalid API key for request to {request.url.path} from {client_host}")
            return JSONResponse({"error": "Invalid API key"}, status_code=403)

        return await call_next(request)


def create_app(api_key: str | None = None):
    """Build the HTTP app, enabling X-API-KEY authentication when a key is given."""
    if api_key:
        logger.info("X-API-KEY authentication enabled")
        return mcp.http_app(middleware=[Middleware(APIKeyMiddleware, api_key=api_key)])

    logger.warning("API_KEY environment variable not set - authentication disabled")
    return mcp.http_app()


app = create_app(os.environ.get("API_KEY"))
