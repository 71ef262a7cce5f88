"""Configuration module for Jira API interactions."""

import logging
import os
from dataclasses import dataclass

from ..utils.env import get_enabled_tools, is_read_only_mode
from ..utils.logging import log_config_param

logger = logging.getLogger("mcp-jira.jira.config")

REQUIRED_ENV_VARS = ("JIRA_HOST", "JIRA_EMAIL", "JIRA_API_TOKEN")


@dataclass
class JiraConfig:
    """Jira API configuration.

    Authentication is basic auth with an account e-mail and an API token
    (https://id.atlassian.com/manage-profile/security/api-tokens).
    """

    host: str  # Jira hostname, e.g. "your-domain.atlassian.net"
    email: str  # Account e-mail used for basic auth
    api_token: str  # API token used as the basic auth password
    default_project_key: str | None = None  # Fallback project for create_issue
    default_assignee: str | None = None  # Fallback assignee account ID for create_issue
    ssl_verify: bool = True  # Whether to verify SSL certificates
    api_version: str = "3"  # REST API version; v3 accepts ADF descriptions
    read_only: bool = False  # Hide and reject write tools
    enabled_tools: list[str] | None = None  # Restrict the catalog to these tools

    @property
    def url(self) -> str:
        """Base URL of the Jira instance.

        A bare hostname is prefixed with ``https://``; a host given with a
        scheme is used as is.
        """
        host = self.host.rstrip("/")
        if host.startswith(("http://", "https://")):
            return host
        return f"https://{host}"

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If any of JIRA_HOST, JIRA_EMAIL or JIRA_API_TOKEN is missing
        """
        missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(name)]
        if missing:
            error_msg = (
                f"Missing required environment variables: {', '.join(missing)}. "
                "JIRA_HOST, JIRA_EMAIL, and JIRA_API_TOKEN are required"
            )
            raise ValueError(error_msg)

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        return cls(
            host=os.environ["JIRA_HOST"],
            email=os.environ["JIRA_EMAIL"],
            api_token=os.environ["JIRA_API_TOKEN"],
            default_project_key=os.getenv("JIRA_DEFAULT_PROJECT_KEY") or None,
            default_assignee=os.getenv("JIRA_DEFAULT_ASSIGNEE") or None,
            ssl_verify=ssl_verify,
            read_only=is_read_only_mode(),
            enabled_tools=get_enabled_tools(),
        )

    def log_summary(self) -> None:
        """Log the loaded configuration with secrets masked."""
        log_config_param(logger, "URL", self.url)
        log_config_param(logger, "email", self.email)
        log_config_param(logger, "API token", self.api_token, sensitive=True)
        log_config_param(logger, "default project", self.default_project_key)
        log_config_param(logger, "default assignee", self.default_assignee)
        if not self.ssl_verify:
            logger.warning("SSL verification is disabled for Jira requests.")
