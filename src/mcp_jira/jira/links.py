"""Module for Jira issue link operations."""

import logging
from typing import Any

from requests.exceptions import HTTPError

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class LinksMixin(JiraClient):
    """Mixin for Jira issue link operations."""

    def get_issue_link_types(self) -> dict[str, Any]:
        """
        Get all available issue link types.

        Returns:
            The raw Jira response, a dictionary holding an ``issueLinkTypes`` list

        Raises:
            MCPJiraAuthenticationError: If authentication fails (401/403)
            HTTPError: For any other HTTP failure
        """
        try:
            link_types_response = self.jira.get(self._api_path("issueLinkType"))
        except HTTPError as http_err:
            self._raise_http_error(http_err, "listing issue link types")

        if not isinstance(link_types_response, dict):
            msg = f"Unexpected return value type from `jira.get`: {type(link_types_response)}"
            logger.error(msg)
            raise TypeError(msg)

        return link_types_response

    def create_issue_link(self, data: dict[str, Any]) -> None:
        """
        Create a link between two issues.

        Args:
            data: A dictionary containing the link data with the following structure:
                {
                    "type": {"name": "Blocks"},
                    "inwardIssue": {"key": "ISSUE-1"},
                    "outwardIssue": {"key": "ISSUE-2"},
                }

        Raises:
            ValueError: If required fields are missing
            MCPJiraAuthenticationError: If authentication fails (401/403)
            HTTPError: For any other HTTP failure
        """
        if not data.get("type"):
            raise ValueError("Link type is required")
        if not data.get("inwardIssue") or not data["inwardIssue"].get("key"):
            raise ValueError("Inward issue key is required")
        if not data.get("outwardIssue") or not data["outwardIssue"].get("key"):
            raise ValueError("Outward issue key is required")

        try:
            self.jira.create_issue_link(data)
        except HTTPError as http_err:
            self._raise_http_error(http_err, "creating issue link")

        logger.info(
            f"Linked {data['inwardIssue']['key']} and {data['outwardIssue']['key']} "
            f"with '{data['type']['name']}'"
        )
