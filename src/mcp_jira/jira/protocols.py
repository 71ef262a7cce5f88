"""Module for Jira protocol definitions."""

from abc import abstractmethod
from typing import Any, Protocol, runtime_checkable

from ..models.jira import JiraIssueType


@runtime_checkable
class JiraOperations(Protocol):
    """Issue-tracker operations consumed by the tool dispatcher.

    JiraFetcher implements this protocol on top of ``atlassian-python-api``;
    tests and alternative bindings can supply any object with these methods.
    """

    @abstractmethod
    def get_issue_types(self) -> list[JiraIssueType]:
        """List all issue types."""

    @abstractmethod
    def get_issue_link_types(self) -> dict[str, Any]:
        """List all issue link types as returned by Jira."""

    @abstractmethod
    def get_fields(self) -> list[dict[str, Any]]:
        """List all field definitions as returned by Jira."""

    @abstractmethod
    def get_transitions(self, issue_key: str) -> list[dict[str, Any]]:
        """List the transitions available to an issue."""

    @abstractmethod
    def search_issues(
        self,
        jql: str,
        fields: list[str] | tuple[str, ...] | None = None,
        limit: int = 100,
    ) -> list[dict[str, Any]]:
        """Search issues with JQL."""

    @abstractmethod
    def search_users(self, query: str, limit: int = 1) -> list[dict[str, Any]]:
        """Search active users matching a query."""

    @abstractmethod
    def create_issue(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Create an issue from wire-format fields."""

    @abstractmethod
    def update_issue(self, issue_key: str, fields: dict[str, Any]) -> None:
        """Update wire-format fields of an issue."""

    @abstractmethod
    def transition_issue(self, issue_key: str, transition_id: str | int) -> None:
        """Apply a transition to an issue."""

    @abstractmethod
    def delete_issue(self, issue_key: str) -> bool:
        """Delete an issue."""

    @abstractmethod
    def create_issue_link(self, data: dict[str, Any]) -> None:
        """Link two issues."""
