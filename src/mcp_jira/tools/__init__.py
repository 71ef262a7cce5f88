"""Tool catalog, argument validation and dispatch for the Jira MCP server."""

from .catalog import TOOL_DEFINITIONS, TOOL_NAMES, WRITE_TOOLS, list_tools
from .dispatcher import JiraToolDispatcher, ToolDefaults
from .errors import InvalidParamsError, UnknownToolError

__all__ = [
    "InvalidParamsError",
    "JiraToolDispatcher",
    "TOOL_DEFINITIONS",
    "TOOL_NAMES",
    "ToolDefaults",
    "UnknownToolError",
    "WRITE_TOOLS",
    "list_tools",
]
