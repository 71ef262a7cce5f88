"""Protocol-level errors raised by the tool layer."""

from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


class InvalidParamsError(McpError):
    """Raised when tool arguments do not match the tool's input shape."""

    def __init__(self, message: str, field: str | None = None) -> None:
        data: dict[str, Any] | None = {"field": field} if field else None
        super().__init__(ErrorData(code=INVALID_PARAMS, message=message, data=data))
        self.field = field


class UnknownToolError(McpError):
    """Raised when a call names a tool outside the catalog."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(
            ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {tool_name}")
        )
        self.tool_name = tool_name
