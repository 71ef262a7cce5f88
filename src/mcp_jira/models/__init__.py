"""
Pydantic models for Jira API responses, tool arguments and rich-text documents.
"""

from .arguments import (
    CreateIssueArgs,
    CreateIssueLinkArgs,
    DeleteIssueArgs,
    GetIssuesArgs,
    GetUserArgs,
    UpdateIssueArgs,
)
from .base import ApiModel
from .document import Document, Heading, ListItem, ListNode, Paragraph
from .jira import JiraCreatedIssue, JiraIssueType, JiraUser, issue_browse_url

__all__ = [
    "ApiModel",
    "CreateIssueArgs",
    "CreateIssueLinkArgs",
    "DeleteIssueArgs",
    "Document",
    "GetIssuesArgs",
    "GetUserArgs",
    "Heading",
    "JiraCreatedIssue",
    "JiraIssueType",
    "JiraUser",
    "ListItem",
    "ListNode",
    "Paragraph",
    "UpdateIssueArgs",
    "issue_browse_url",
]
