"""Module for Jira search operations."""

import logging
from typing import Any

from requests.exceptions import HTTPError

from .client import JiraClient
from .constants import ISSUE_LIST_FIELDS, ISSUE_LIST_LIMIT

logger = logging.getLogger("mcp-jira")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self,
        jql: str,
        fields: list[str] | tuple[str, ...] | None = None,
        limit: int = ISSUE_LIST_LIMIT,
    ) -> list[dict[str, Any]]:
        """
        Search for issues using JQL (Jira Query Language).

        Only the first page is fetched; no pagination beyond ``limit`` is done.

        Args:
            jql: JQL query string
            fields: Fields to return for each issue
            limit: Maximum issues to return

        Returns:
            List of raw issue dictionaries

        Raises:
            MCPJiraAuthenticationError: If authentication fails (401/403)
            HTTPError: For any other HTTP failure
        """
        fields_param = ",".join(fields if fields is not None else ISSUE_LIST_FIELDS)
        logger.debug(f"Searching issues with JQL '{jql}' (limit {limit})")

        try:
            issues = self.jira.enhanced_jql_get_list_of_tickets(
                jql, fields=fields_param, limit=limit
            )
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"searching issues with JQL '{jql}'")

        if not isinstance(issues, list):
            msg = f"Unexpected return value type from `jira.enhanced_jql_get_list_of_tickets`: {type(issues)}"
            logger.error(msg)
            raise TypeError(msg)

        return issues
