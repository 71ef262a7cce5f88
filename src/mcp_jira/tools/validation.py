"""Argument validators for the Jira tools.

Each validator takes the raw ``arguments`` mapping of a tool call, checks
that every required field is a non-empty string and returns the typed
argument record. Optional array fields must be lists; other optional fields
are passed through as supplied. Validators never touch Jira, so a failed
validation has no side effects.
"""

from collections.abc import Mapping
from typing import Any

from ..models.arguments import (
    CreateIssueArgs,
    CreateIssueLinkArgs,
    DeleteIssueArgs,
    GetIssuesArgs,
    GetUserArgs,
    UpdateIssueArgs,
)
from .errors import InvalidParamsError


def _require_mapping(arguments: Any) -> Mapping[str, Any]:
    if arguments is None:
        raise InvalidParamsError("Arguments are required")
    if not isinstance(arguments, Mapping):
        raise InvalidParamsError("Arguments must be an object")
    return arguments


def _require_string(arguments: Mapping[str, Any], field: str, label: str) -> str:
    value = arguments.get(field)
    if not isinstance(value, str) or len(value) == 0:
        raise InvalidParamsError(
            f"{label} is required and must be a string", field=field
        )
    return value


def _optional_list(
    arguments: Mapping[str, Any], field: str, label: str
) -> list[Any] | None:
    value = arguments.get(field)
    if value is not None and not isinstance(value, list):
        raise InvalidParamsError(f"{label} must be an array", field=field)
    return value


def validate_create_issue_args(arguments: Any) -> CreateIssueArgs:
    args = _require_mapping(arguments)
    return CreateIssueArgs(
        project_key=_require_string(args, "projectKey", "Project key"),
        summary=_require_string(args, "summary", "Summary"),
        issue_type=_require_string(args, "issueType", "Issue type"),
        description=args.get("description"),
        assignee=args.get("assignee"),
        labels=_optional_list(args, "labels", "Labels"),
        components=_optional_list(args, "components", "Components"),
        priority=args.get("priority"),
        parent=args.get("parent"),
    )


def validate_update_issue_args(arguments: Any) -> UpdateIssueArgs:
    args = _require_mapping(arguments)
    return UpdateIssueArgs(
        issue_key=_require_string(args, "issueKey", "Issue key"),
        summary=args.get("summary"),
        description=args.get("description"),
        assignee=args.get("assignee"),
        status=args.get("status"),
        priority=args.get("priority"),
    )


def validate_delete_issue_args(arguments: Any) -> DeleteIssueArgs:
    args = _require_mapping(arguments)
    return DeleteIssueArgs(issue_key=_require_string(args, "issueKey", "Issue key"))


def validate_create_issue_link_args(arguments: Any) -> CreateIssueLinkArgs:
    args = _require_mapping(arguments)
    return CreateIssueLinkArgs(
        inward_issue_key=_require_string(args, "inwardIssueKey", "Inward issue key"),
        outward_issue_key=_require_string(
            args, "outwardIssueKey", "Outward issue key"
        ),
        link_type=_require_string(args, "linkType", "Link type"),
    )


def validate_get_user_args(arguments: Any) -> GetUserArgs:
    args = _require_mapping(arguments)
    return GetUserArgs(email=_require_string(args, "email", "Email"))


def validate_get_issues_args(arguments: Any) -> GetIssuesArgs:
    args = _require_mapping(arguments)
    return GetIssuesArgs(
        project_key=_require_string(args, "projectKey", "Project key"),
        jql=args.get("jql"),
    )
