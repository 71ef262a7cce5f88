"""
Typed argument records for the Jira tools.

Each record is produced by the matching validator in
``mcp_jira.tools.validation`` from the loosely typed argument mapping that
arrives with a tool call.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateIssueArgs:
    """Arguments for creating a new Jira issue or subtask.

    ``assignee`` is an account ID; ``parent`` is the key of the parent issue
    and is required when ``issue_type`` is a subtask type.
    """

    project_key: str
    summary: str
    issue_type: str
    description: str | None = None
    assignee: str | None = None
    labels: list[str] | None = None
    components: list[str] | None = None
    priority: str | None = None
    parent: str | None = None


@dataclass(frozen=True)
class UpdateIssueArgs:
    """Arguments for updating an existing issue.

    ``assignee`` is looked up as a user query (usually an e-mail) and
    ``status`` is matched against the names of the available transitions.
    """

    issue_key: str
    summary: str | None = None
    description: str | None = None
    assignee: str | None = None
    status: str | None = None
    priority: str | None = None


@dataclass(frozen=True)
class DeleteIssueArgs:
    issue_key: str


@dataclass(frozen=True)
class CreateIssueLinkArgs:
    inward_issue_key: str
    outward_issue_key: str
    link_type: str


@dataclass(frozen=True)
class GetUserArgs:
    email: str


@dataclass(frozen=True)
class GetIssuesArgs:
    project_key: str
    jql: str | None = None
