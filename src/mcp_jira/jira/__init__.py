"""Jira API module for mcp_jira.

This module binds the issue-tracker operations used by the tools to
``atlassian-python-api``.
"""

from .client import JiraClient
from .config import JiraConfig
from .fields import FieldsMixin
from .formatting import text_to_adf, text_to_document
from .issues import IssuesMixin
from .links import LinksMixin
from .protocols import JiraOperations
from .search import SearchMixin
from .transitions import TransitionsMixin
from .users import UsersMixin


class JiraFetcher(
    FieldsMixin,
    TransitionsMixin,
    SearchMixin,
    IssuesMixin,
    UsersMixin,
    LinksMixin,
):
    """
    The Jira client class providing every operation the tools need.

    This class inherits from mixins that each cover one area:
    - FieldsMixin: Field and issue type metadata
    - TransitionsMixin: Issue transition operations
    - SearchMixin: JQL search
    - IssuesMixin: Issue create, update and delete
    - UsersMixin: User search
    - LinksMixin: Issue link types and link creation
    """

    pass


__all__ = [
    "JiraClient",
    "JiraConfig",
    "JiraFetcher",
    "JiraOperations",
    "text_to_adf",
    "text_to_document",
]
