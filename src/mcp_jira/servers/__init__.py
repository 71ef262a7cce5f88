"""Server implementations for MCP Jira."""

from .main import JiraMCP, main_mcp

__all__ = ["JiraMCP", "main_mcp"]
