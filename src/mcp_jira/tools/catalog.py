"""Static catalog of the Jira tools and their input schemas."""

from typing import Any

from mcp.types import Tool

from ..utils.env import should_include_tool


def _object_schema(
    properties: dict[str, dict[str, Any]], required: list[str]
) -> dict[str, Any]:
    return {"type": "object", "properties": properties, "required": required}


def _string(description: str) -> dict[str, Any]:
    return {"type": "string", "description": description}


def _string_array(description: str) -> dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description}


TOOL_DEFINITIONS: tuple[Tool, ...] = (
    Tool(
        name="delete_issue",
        description="Delete a Jira issue or subtask",
        inputSchema=_object_schema(
            {"issueKey": _string("Key of the issue to delete")},
            ["issueKey"],
        ),
    ),
    Tool(
        name="get_issues",
        description="Get all issues and subtasks for a project",
        inputSchema=_object_schema(
            {
                "projectKey": _string('Project key (e.g., "PP")'),
                "jql": _string("Optional JQL to filter issues"),
            },
            ["projectKey"],
        ),
    ),
    Tool(
        name="update_issue",
        description="Update an existing Jira issue",
        inputSchema=_object_schema(
            {
                "issueKey": _string("Key of the issue to update"),
                "summary": _string("New summary/title"),
                "description": _string("New description"),
                "assignee": _string("Email of new assignee"),
                "status": _string("New status"),
                "priority": _string("New priority"),
            },
            ["issueKey"],
        ),
    ),
    Tool(
        name="list_fields",
        description="List all available Jira fields",
        inputSchema=_object_schema({}, []),
    ),
    Tool(
        name="list_issue_types",
        description="List all available issue types",
        inputSchema=_object_schema({}, []),
    ),
    Tool(
        name="list_link_types",
        description="List all available issue link types",
        inputSchema=_object_schema({}, []),
    ),
    Tool(
        name="get_user",
        description="Get a user's account ID by email address",
        inputSchema=_object_schema(
            {"email": _string("User's email address")},
            ["email"],
        ),
    ),
    Tool(
        name="create_issue",
        description="Create a new Jira issue",
        inputSchema=_object_schema(
            {
                "projectKey": _string('Project key (e.g., "PP")'),
                "summary": _string("Issue summary/title"),
                "issueType": _string('Type of issue (e.g., "Task", "Bug", "Story")'),
                "description": _string("Detailed description of the issue"),
                "assignee": _string("Account ID of the assignee"),
                "labels": _string_array("Array of labels to apply"),
                "components": _string_array("Array of component names"),
                "priority": _string("Issue priority"),
                "parent": _string("Parent issue key (required for subtasks)"),
            },
            ["projectKey", "summary", "issueType"],
        ),
    ),
    Tool(
        name="create_issue_link",
        description="Create a link between two issues",
        inputSchema=_object_schema(
            {
                "inwardIssueKey": _string(
                    "Key of the inward issue (e.g., blocked issue)"
                ),
                "outwardIssueKey": _string(
                    "Key of the outward issue (e.g., blocking issue)"
                ),
                "linkType": _string("Type of link (e.g., 'blocks')"),
            },
            ["inwardIssueKey", "outwardIssueKey", "linkType"],
        ),
    ),
)

# Tools that change data in Jira; hidden and rejected in read-only mode.
WRITE_TOOLS: frozenset[str] = frozenset(
    {"create_issue", "update_issue", "delete_issue", "create_issue_link"}
)

TOOL_NAMES: frozenset[str] = frozenset(tool.name for tool in TOOL_DEFINITIONS)


def list_tools(
    read_only: bool = False, enabled_tools: list[str] | None = None
) -> list[Tool]:
    """Return the catalog entries visible under the given filters.

    Args:
        read_only: Drop write tools when True.
        enabled_tools: Keep only these tool names; None keeps every tool.

    Returns:
        Tool definitions in catalog order.
    """
    return [
        tool
        for tool in TOOL_DEFINITIONS
        if not (read_only and tool.name in WRITE_TOOLS)
        and should_include_tool(tool.name, enabled_tools)
    ]
