"""Module for Jira transition operations."""

import logging
from typing import Any

from requests.exceptions import HTTPError

from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    def get_transitions(self, issue_key: str) -> list[dict[str, Any]]:
        """
        Get the transitions available to an issue in its current status.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of transitions, each with at least ``id`` and ``name``

        Raises:
            MCPJiraAuthenticationError: If authentication fails (401/403)
            HTTPError: For any other HTTP failure
        """
        try:
            transitions_data = self.jira.get_issue_transitions(issue_key)
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"getting transitions for {issue_key}")

        # The API might return transitions inside a 'transitions' key
        # or directly as a list.
        transitions: list[Any] = []
        if isinstance(transitions_data, dict) and "transitions" in transitions_data:
            transitions = transitions_data["transitions"]
        elif isinstance(transitions_data, list):
            transitions = transitions_data

        return [
            transition
            for transition in transitions
            if isinstance(transition, dict) and "id" in transition
        ]

    def transition_issue(self, issue_key: str, transition_id: str | int) -> None:
        """
        Move an issue through a workflow transition.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            transition_id: ID of a transition returned by get_transitions

        Raises:
            MCPJiraAuthenticationError: If authentication fails (401/403)
            HTTPError: For any other HTTP failure
        """
        try:
            self.jira.set_issue_status_by_transition_id(issue_key, transition_id)
        except HTTPError as http_err:
            self._raise_http_error(http_err, f"transitioning {issue_key}")

        logger.info(f"Applied transition {transition_id} to {issue_key}")
