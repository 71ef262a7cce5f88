"""
Utility functions for the MCP Jira server.
"""

from .env import get_enabled_tools, is_read_only_mode, should_include_tool
from .logging import mask_sensitive, setup_logging

__all__ = [
    "get_enabled_tools",
    "is_read_only_mode",
    "mask_sensitive",
    "setup_logging",
    "should_include_tool",
]
