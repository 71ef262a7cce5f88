"""
Jira entity models returned by the tools.
"""

from typing import Any

from .base import ApiModel


class JiraIssueType(ApiModel):
    """
    Model representing a Jira issue type.
    """

    id: str
    name: str
    description: str | None = None
    subtask: bool = False

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueType":
        """
        Create a JiraIssueType from an entry of the issuetype API response.

        Args:
            data: The issue type data from the Jira API

        Returns:
            A JiraIssueType instance
        """
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            description=data.get("description"),
            subtask=bool(data.get("subtask", False)),
        )


class JiraUser(ApiModel):
    """
    Model representing the public identity of a Jira user.

    Field names follow Jira's camelCase so the simplified dictionary can be
    handed back to clients that pass ``accountId`` on to other calls.
    """

    accountId: str  # noqa: N815
    displayName: str | None = None  # noqa: N815
    emailAddress: str | None = None  # noqa: N815

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        """
        Create a JiraUser from a user search result entry.

        Args:
            data: The user data from the Jira API

        Returns:
            A JiraUser instance
        """
        return cls(
            accountId=str(data.get("accountId", "")),
            displayName=data.get("displayName"),
            emailAddress=data.get("emailAddress"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the user to its tool response form.

        All three fields are always present; a hidden e-mail stays ``None``.
        """
        return self.model_dump()


class JiraCreatedIssue(ApiModel):
    """
    Model representing the identity of a newly created issue.
    """

    id: str
    key: str
    url: str

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraCreatedIssue":
        """
        Create a JiraCreatedIssue from the create-issue API response.

        Args:
            data: The create response (``id``, ``key``, ``self``)
            **kwargs: ``base_url`` of the Jira instance, used for the browse URL

        Returns:
            A JiraCreatedIssue instance
        """
        base_url = kwargs.get("base_url", "")
        key = str(data.get("key", ""))
        return cls(
            id=str(data.get("id", "")),
            key=key,
            url=issue_browse_url(base_url, key),
        )


def issue_browse_url(base_url: str, issue_key: str) -> str:
    """Build the browser URL of an issue."""
    return f"{base_url.rstrip('/')}/browse/{issue_key}"
