"""Base client module for Jira API interactions."""

import logging
from typing import NoReturn

from atlassian import Jira
from requests.exceptions import HTTPError

from mcp_jira.exceptions import MCPJiraAuthenticationError

from .config import JiraConfig

# Configure logging
logger = logging.getLogger("mcp-jira")


class JiraClient:
    """Base client for Jira API interactions."""

    config: JiraConfig

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            ValueError: If required configuration is missing
        """
        self.config = config or JiraConfig.from_env()

        self.jira = Jira(
            url=self.config.url,
            username=self.config.email,
            password=self.config.api_token,
            cloud=True,
            verify_ssl=self.config.ssl_verify,
            api_version=self.config.api_version,
        )

    def _api_path(self, resource: str) -> str:
        """Build a REST path for the configured API version."""
        return f"rest/api/{self.config.api_version}/{resource}"

    def _raise_http_error(self, http_err: HTTPError, action: str) -> NoReturn:
        """Log an HTTP error from Jira and re-raise it.

        401 and 403 responses become MCPJiraAuthenticationError; any other
        status is re-raised unchanged so its message reaches the caller as is.
        """
        if http_err.response is not None and http_err.response.status_code in [
            401,
            403,
        ]:
            error_msg = (
                f"Authentication failed for Jira API "
                f"({http_err.response.status_code}). "
                f"Token may be expired or invalid. Please verify credentials: {http_err}"
            )
            logger.error(error_msg)
            raise MCPJiraAuthenticationError(error_msg) from http_err
        logger.error(f"HTTP error while {action}: {http_err}")
        raise http_err
