"""Module for Jira field and issue type metadata."""

import logging
from typing import Any

from requests.exceptions import HTTPError

from ..models.jira import JiraIssueType
from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class FieldsMixin(JiraClient):
    """Mixin for Jira field and issue type operations."""

    def get_fields(self) -> list[dict[str, Any]]:
        """
        Get all available field definitions from Jira.

        Returns:
            List of field definitions exactly as returned by Jira

        Raises:
            MCPJiraAuthenticationError: If authentication fails (401/403)
            HTTPError: For any other HTTP failure
        """
        try:
            fields = self.jira.get_all_fields()
        except HTTPError as http_err:
            self._raise_http_error(http_err, "listing fields")

        if not isinstance(fields, list):
            msg = f"Unexpected return value type from `jira.get_all_fields`: {type(fields)}"
            logger.error(msg)
            raise TypeError(msg)

        logger.debug(f"Retrieved {len(fields)} fields from Jira")
        return fields

    def get_issue_types(self) -> list[JiraIssueType]:
        """
        Get all issue types visible to the configured user.

        Returns:
            List of JiraIssueType models

        Raises:
            MCPJiraAuthenticationError: If authentication fails (401/403)
            HTTPError: For any other HTTP failure
        """
        try:
            issue_types = self.jira.get_issue_types()
        except HTTPError as http_err:
            self._raise_http_error(http_err, "listing issue types")

        if not isinstance(issue_types, list):
            msg = f"Unexpected return value type from `jira.get_issue_types`: {type(issue_types)}"
            logger.error(msg)
            raise TypeError(msg)

        return [JiraIssueType.from_api_response(item) for item in issue_types]
