"""Exception types raised by the MCP Jira server."""


class MCPJiraError(Exception):
    """Base class for errors raised by the Jira client binding."""


class MCPJiraAuthenticationError(MCPJiraError):
    """Raised when Jira rejects the configured credentials (401/403)."""
