import asyncio

from fastmcp import FastMCP
from mcp import types
from mcp.types import INTERNAL_ERROR
from starlette.responses import JSONResponse

from mcp_server.dispatcher import ToolCallError, ToolDispatcher
from mcp_server.logger import logger
from mcp_server.wireup_config import container
from spotify_api.errors import SpotifyError

mcp = FastMCP("mcp-spotify")


def get_dispatcher() -> ToolDispatcher:
    try:
        return container.dispatcher
    except SpotifyError as e:
        logger.error(f"Could not initialize Spotify services: {e}")
        raise ToolCallError(INTERNAL_ERROR, str(e), kind=e.kind) from e


async def list_tools(request: types.ListToolsRequest) -> types.ServerResult:
    tools = [
        types.Tool(
            name=definition.name,
            description=definition.description,
            inputSchema=definition.input_schema,
        )
        for definition in get_dispatcher().list_tools()
    ]
    return types.ServerResult(types.ListToolsResult(tools=tools))


async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
    """
    Answer tools/call through the dispatcher.

    ToolCallError is an McpError, so it leaves here as a JSON-RPC error
    response carrying its protocol code instead of an error result.
    """
    dispatcher = get_dispatcher()
    # Blocking HTTP runs in a worker thread so other calls keep flowing
    text = await asyncio.to_thread(
        dispatcher.dispatch, request.params.name, request.params.arguments
    )
    return types.ServerResult(
        types.CallToolResult(content=[types.TextContent(type="text", text=text)], isError=False)
    )


# Replace FastMCP's tool handlers: its tool manager reports every failure,
# unknown names included, as a successful response flagged isError.
mcp._mcp_server.request_handlers[types.ListToolsRequest] = list_tools
mcp._mcp_server.request_handlers[types.CallToolRequest] = call_tool

logger.info("Spotify MCP server initialized")


@mcp.custom_route("/health", methods=["GET"])
async def health_check(request):
    """Health check endpoint for monitoring and load balancers."""
    return JSONResponse({"status": "healthy", "service": "spotify-mcp"})


# Server can be run using: fastmcp run mcp_server/server.py
# FastMCP CLI automatically detects the 'mcp' object and runs it
