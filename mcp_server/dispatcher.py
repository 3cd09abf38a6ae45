"""
Tool dispatcher.

Validates incoming tool calls, routes them to the resource handlers and
serializes the result. This is the only place where Spotify layer failures
are translated into MCP protocol error codes.
"""

import json
from typing import Any, Iterable

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData
from pydantic import ValidationError

from mcp_server.catalog import TOOL_CATALOG, ToolDefinition
from mcp_server.logger import logger
from spotify_api.errors import ArgumentValidationError, SpotifyError
from spotify_api.handlers import SpotifyHandlers
from spotify_api.models import ToolArguments


class ToolCallError(McpError):
    """Protocol-level failure of a tool call."""

    def __init__(self, code: int, message: str, kind: str, status: int | None = None):
        super().__init__(ErrorData(code=code, message=message, data={"kind": kind, "status": status}))
        self.code = code
        self.kind = kind
        self.status = status


def describe_validation_error(error: ValidationError) -> str:
    """Turn a pydantic ValidationError into a short, client facing message."""
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "arguments"
        if detail["type"] == "missing":
            messages.append(f"Missing required field: {location}")
        else:
            messages.append(f"Invalid value for {location}: {detail['msg']}")
    return "; ".join(messages)


def serialize_result(definition: ToolDefinition, result: Any) -> str:
    if definition.plain_text:
        return str(result)
    return json.dumps(result, indent=2, ensure_ascii=False)


class ToolDispatcher:
    """Routes validated tool calls to the Spotify resource handlers."""

    def __init__(self, handlers: SpotifyHandlers, catalog: Iterable[ToolDefinition] = TOOL_CATALOG):
        """
        Initialize the dispatcher.

        Args:
            handlers: Resource handlers the catalog routes to
            catalog: Tool declarations, defaults to the full Spotify catalog
        """
        self.handlers = handlers
        self._tools = {definition.name: definition for definition in catalog}

    def list_tools(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def get_tool(self, name: str) -> ToolDefinition:
        """
        Look up a tool by name.

        Raises:
            ToolCallError: METHOD_NOT_FOUND if the name is not in the catalog
        """
        definition = self._tools.get(name)
        if definition is None:
            raise ToolCallError(METHOD_NOT_FOUND, f"Unknown tool: {name}", kind="unknown_tool")
        return definition

    def validate(self, definition: ToolDefinition, arguments: dict[str, Any] | None) -> ToolArguments:
        """
        Validate raw arguments into the tool's argument model.

        Required fields are checked for presence first, in declaration order,
        then the full model (types, ranges, enums, item counts) is validated.

        Raises:
            ArgumentValidationError: If arguments are absent, incomplete or malformed
        """
        required = definition.required_fields

        if arguments is None:
            if required:
                raise ArgumentValidationError("Arguments are required")
            arguments = {}

        if not isinstance(arguments, dict):
            raise ArgumentValidationError("Arguments must be an object")

        for field in required:
            if field not in arguments:
                raise ArgumentValidationError(f"Missing required field: {field}")

        try:
            return definition.arguments.model_validate(arguments)
        except ValidationError as e:
            raise ArgumentValidationError(describe_validation_error(e)) from e

    def dispatch(self, name: str, arguments: dict[str, Any] | None = None) -> str:
        """
        Run a tool call to completion.

        Args:
            name: Tool name from the catalog
            arguments: Raw argument object as received from the client

        Returns:
            The text payload of the tool result

        Raises:
            ToolCallError: INVALID_PARAMS for validation failures,
                           METHOD_NOT_FOUND for unknown tools,
                           INTERNAL_ERROR for everything else
        """
        definition = self.get_tool(name)

        try:
            args = self.validate(definition, arguments)
            logger.info(f"Dispatching tool call: {name}")
            result = definition.route(self.handlers, args)
        except ArgumentValidationError as e:
            logger.info(f"Rejected {name} call: {e.message}")
            raise ToolCallError(INVALID_PARAMS, e.message, kind=e.kind) from e
        except SpotifyError as e:
            logger.warning(f"Tool {name} failed ({e.kind}): {e}")
            raise ToolCallError(INTERNAL_ERROR, str(e), kind=e.kind, status=e.status) from e
        except Exception as e:
            logger.error(f"Unexpected error in tool {name}: {e}", exc_info=True)
            raise ToolCallError(INTERNAL_ERROR, f"Unexpected error: {e}", kind="unexpected") from e

        return serialize_result(definition, result)
