"""Dispatch of tool calls to Jira workflows.

Every call goes through ``JiraToolDispatcher.dispatch``: the tool name picks a
workflow, the workflow validates its arguments, performs its Jira calls and
returns a ``CallToolResult``. Any exception raised inside a workflow is turned
into an error-flagged envelope by a single boundary, so the client always gets
a well-formed response. Unknown tool names are the exception: they raise
``UnknownToolError`` for the protocol layer to report.
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mcp.types import CallToolResult, TextContent, Tool

from ..jira.constants import ISSUE_LIST_FIELDS, ISSUE_LIST_LIMIT, USER_LOOKUP_LIMIT
from ..jira.formatting import text_to_adf
from ..jira.protocols import JiraOperations
from ..models.arguments import UpdateIssueArgs
from ..models.jira import JiraCreatedIssue, JiraUser, issue_browse_url
from ..utils.env import should_include_tool
from .catalog import WRITE_TOOLS, list_tools
from .errors import UnknownToolError
from .validation import (
    validate_create_issue_args,
    validate_create_issue_link_args,
    validate_delete_issue_args,
    validate_get_issues_args,
    validate_get_user_args,
    validate_update_issue_args,
)

logger = logging.getLogger("mcp-jira.tools.dispatcher")

Arguments = dict[str, Any] | None
Workflow = Callable[[Arguments], CallToolResult]
FieldContribution = dict[str, Any] | None


@dataclass(frozen=True)
class ToolDefaults:
    """Values substituted when a create_issue call omits them."""

    project_key: str | None = None
    assignee: str | None = None  # account ID


def text_result(text: str, is_error: bool = False) -> CallToolResult:
    """Wrap plain text in a single-element tool result envelope."""
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        isError=is_error,
    )


def json_result(payload: Any) -> CallToolResult:
    """Wrap a JSON-serialisable payload in a tool result envelope."""
    return text_result(json.dumps(payload, indent=2, ensure_ascii=False))


def build_issue_list_jql(project_key: str, jql: str | None = None) -> str:
    """Scope an optional JQL filter to a single project.

    Examples:
        build_issue_list_jql("X") -> "project = X"
        build_issue_list_jql("X", "status = Done") -> "project = X AND status = Done"
    """
    if jql:
        return f"project = {project_key} AND {jql}"
    return f"project = {project_key}"


class JiraToolDispatcher:
    """Maps tool calls onto Jira workflows and wraps their results."""

    def __init__(
        self,
        jira: JiraOperations,
        base_url: str,
        defaults: ToolDefaults | None = None,
        read_only: bool = False,
        enabled_tools: list[str] | None = None,
    ) -> None:
        self.jira = jira
        self.base_url = base_url
        self.defaults = defaults or ToolDefaults()
        self.read_only = read_only
        self.enabled_tools = enabled_tools
        self._workflows: dict[str, Workflow] = {
            "list_issue_types": self._list_issue_types,
            "list_link_types": self._list_link_types,
            "list_fields": self._list_fields,
            "get_user": self._get_user,
            "get_issues": self._get_issues,
            "create_issue": self._create_issue,
            "update_issue": self._update_issue,
            "delete_issue": self._delete_issue,
            "create_issue_link": self._create_issue_link,
        }

    def list_tools(self) -> list[Tool]:
        """Return the catalog entries this dispatcher serves."""
        return list_tools(read_only=self.read_only, enabled_tools=self.enabled_tools)

    def dispatch(self, name: str, arguments: Arguments) -> CallToolResult:
        """Run the workflow of a tool and return its result envelope.

        Args:
            name: Tool name from the catalog
            arguments: Raw argument mapping from the tool call

        Returns:
            The result envelope; failures are flagged with ``isError``

        Raises:
            UnknownToolError: If the name matches no enabled tool
        """
        workflow = self._workflows.get(name)
        if workflow is None or not should_include_tool(name, self.enabled_tools):
            logger.warning(f"Call to unknown tool '{name}'")
            raise UnknownToolError(name)

        logger.debug(f"Dispatching tool '{name}'")
        return self._run_workflow(name, workflow, arguments)

    def _run_workflow(
        self, name: str, workflow: Workflow, arguments: Arguments
    ) -> CallToolResult:
        try:
            if self.read_only and name in WRITE_TOOLS:
                action_description = name.replace("_", " ")
                logger.warning(f"Attempted to call tool '{name}' in read-only mode.")
                raise ValueError(f"Cannot {action_description} in read-only mode.")
            return workflow(arguments)
        except Exception as e:
            error_message = str(e) or "Unknown error occurred"
            logger.error(f"Tool '{name}' failed: {error_message}")
            logger.debug(f"Traceback for failed tool '{name}'", exc_info=True)
            return text_result(f"Operation failed: {error_message}", is_error=True)

    # Read workflows

    def _list_issue_types(self, arguments: Arguments) -> CallToolResult:
        issue_types = self.jira.get_issue_types()
        return json_result([issue_type.to_simplified_dict() for issue_type in issue_types])

    def _list_link_types(self, arguments: Arguments) -> CallToolResult:
        return json_result(self.jira.get_issue_link_types())

    def _list_fields(self, arguments: Arguments) -> CallToolResult:
        return json_result(self.jira.get_fields())

    def _get_user(self, arguments: Arguments) -> CallToolResult:
        args = validate_get_user_args(arguments)
        users = self.jira.search_users(args.email, limit=USER_LOOKUP_LIMIT)
        if not users:
            return text_result(f"No user found with email: {args.email}", is_error=True)
        return json_result(JiraUser.from_api_response(users[0]).to_simplified_dict())

    def _get_issues(self, arguments: Arguments) -> CallToolResult:
        args = validate_get_issues_args(arguments)
        jql = build_issue_list_jql(args.project_key, args.jql)
        issues = self.jira.search_issues(
            jql, fields=list(ISSUE_LIST_FIELDS), limit=ISSUE_LIST_LIMIT
        )
        return json_result(issues)

    # Write workflows

    def _create_issue(self, arguments: Arguments) -> CallToolResult:
        args = validate_create_issue_args(arguments)

        project_key = args.project_key or self.defaults.project_key
        assignee = args.assignee or self.defaults.assignee

        fields: dict[str, Any] = {
            "project": {"key": project_key},
            "summary": args.summary,
            "issuetype": {"name": args.issue_type},
        }
        if args.description:
            fields["description"] = text_to_adf(args.description)
        if assignee:
            fields["assignee"] = {"accountId": assignee}
        if args.labels is not None:
            fields["labels"] = args.labels
        if args.components is not None:
            fields["components"] = [{"name": name} for name in args.components]
        if args.priority:
            fields["priority"] = {"name": args.priority}
        if args.parent:
            fields["parent"] = {"key": args.parent}

        response = self.jira.create_issue(fields)
        issue = JiraCreatedIssue.from_api_response(response, base_url=self.base_url)
        return json_result(
            {"message": "Issue created successfully", "issue": issue.to_simplified_dict()}
        )

    def _update_issue(self, arguments: Arguments) -> CallToolResult:
        args = validate_update_issue_args(arguments)

        steps: tuple[Callable[[UpdateIssueArgs], FieldContribution], ...] = (
            self._summary_update,
            self._description_update,
            self._assignee_update,
            self._status_update,
            self._priority_update,
        )
        fields: dict[str, Any] = {}
        for step in steps:
            contribution = step(args)
            if contribution:
                fields.update(contribution)

        if fields:
            self.jira.update_issue(args.issue_key, fields)
        else:
            logger.debug(f"No field changes to send for {args.issue_key}")

        return json_result(
            {
                "message": "Issue updated successfully",
                "issue": {
                    "key": args.issue_key,
                    "url": issue_browse_url(self.base_url, args.issue_key),
                },
            }
        )

    def _summary_update(self, args: UpdateIssueArgs) -> FieldContribution:
        if not args.summary:
            return None
        return {"summary": args.summary}

    def _description_update(self, args: UpdateIssueArgs) -> FieldContribution:
        if not args.description:
            return None
        return {"description": text_to_adf(args.description)}

    def _assignee_update(self, args: UpdateIssueArgs) -> FieldContribution:
        if not args.assignee:
            return None
        users = self.jira.search_users(args.assignee, limit=USER_LOOKUP_LIMIT)
        if not users:
            logger.info(f"No user matches '{args.assignee}'; assignee left unchanged")
            return None
        return {"assignee": {"accountId": users[0]["accountId"]}}

    def _status_update(self, args: UpdateIssueArgs) -> FieldContribution:
        """Apply the transition named by ``status``; contributes no fields."""
        if not args.status:
            return None
        wanted = args.status.lower()
        transitions = self.jira.get_transitions(args.issue_key)
        transition = next(
            (t for t in transitions if str(t.get("name", "")).lower() == wanted),
            None,
        )
        if transition is None:
            logger.info(
                f"No transition named '{args.status}' available for {args.issue_key}"
            )
            return None
        self.jira.transition_issue(args.issue_key, transition["id"])
        return None

    def _priority_update(self, args: UpdateIssueArgs) -> FieldContribution:
        if not args.priority:
            return None
        return {"priority": {"name": args.priority}}

    def _delete_issue(self, arguments: Arguments) -> CallToolResult:
        args = validate_delete_issue_args(arguments)
        self.jira.delete_issue(args.issue_key)
        return json_result(
            {"message": "Issue deleted successfully", "issueKey": args.issue_key}
        )

    def _create_issue_link(self, arguments: Arguments) -> CallToolResult:
        args = validate_create_issue_link_args(arguments)
        self.jira.create_issue_link(
            {
                "inwardIssue": {"key": args.inward_issue_key},
                "outwardIssue": {"key": args.outward_issue_key},
                "type": {"name": args.link_type},
            }
        )
        return json_result(
            {
                "message": "Issue link created successfully",
                "link": {
                    "inward": args.inward_issue_key,
                    "outward": args.outward_issue_key,
                    "type": args.link_type,
                },
            }
        )
