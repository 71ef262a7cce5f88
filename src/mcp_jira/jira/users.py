"""Module for Jira user operations."""

import logging
from typing import Any

from requests.exceptions import HTTPError

from .client import JiraClient
from .constants import USER_LOOKUP_LIMIT

logger = logging.getLogger("mcp-jira")


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def search_users(
        self, query: str, limit: int = USER_LOOKUP_LIMIT
    ) -> list[dict[str, Any]]:
        """
        Search active users matching a query string (e-mail, name or account ID).

        Args:
            query: The text to match against user attributes
            limit: Maximum number of users to return

        Returns:
            List of raw user dictionaries, possibly empty

        Raises:
            MCPJiraAuthenticationError: If authentication fails (401/403)
            HTTPError: For any other HTTP failure
        """
        try:
            response = self.jira.user_find_by_user_string(
                query=query,
                start=0,
                limit=limit,
                include_active_users=True,
                include_inactive_users=False,
            )
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"searching users for '{query}'")

        if not isinstance(response, list):
            msg = f"Unexpected return value type from `jira.user_find_by_user_string`: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        logger.debug(f"User search for '{query}' returned {len(response)} result(s)")
        return response
