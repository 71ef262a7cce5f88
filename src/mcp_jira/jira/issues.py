"""Module for Jira issue operations."""

import logging
from typing import Any

from requests.exceptions import HTTPError

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue create, update and delete operations."""

    def create_issue(self, fields: dict[str, Any]) -> dict[str, Any]:
        """
        Create a new issue.

        Args:
            fields: The ``fields`` object of the create request, already in
                Jira's wire format (e.g. ``{"project": {"key": "PROJ"}, ...}``)

        Returns:
            The Jira response holding ``id``, ``key`` and ``self``

        Raises:
            MCPJiraAuthenticationError: If authentication fails (401/403)
            HTTPError: For any other HTTP failure
        """
        try:
            response = self.jira.create_issue(fields=fields)
        except HTTPError as http_err:
            self._raise_http_error(http_err, "creating issue")

        if not isinstance(response, dict):
            msg = f"Unexpected return value type from `jira.create_issue`: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        logger.info(f"Created issue {response.get('key')}")
        return response

    def update_issue(self, issue_key: str, fields: dict[str, Any]) -> None:
        """
        Update fields of an existing issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            fields: Field values in Jira's wire format

        Raises:
            MCPJiraAuthenticationError: If authentication fails (401/403)
            HTTPError: For any other HTTP failure
        """
        try:
            self.jira.update_issue_field(issue_key, fields)
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"updating {issue_key}")

        logger.info(f"Updated fields {sorted(fields)} on {issue_key}")

    def delete_issue(self, issue_key: str) -> bool:
        """
        Delete an existing issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            True once the issue is deleted

        Raises:
            MCPJiraAuthenticationError: If authentication fails (401/403)
            HTTPError: For any other HTTP failure
        """
        try:
            self.jira.delete_issue(issue_key)
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"deleting {issue_key}")

        logger.info(f"Deleted issue {issue_key}")
        return True
