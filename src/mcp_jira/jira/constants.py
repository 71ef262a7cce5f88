"""Constants specific to Jira operations."""

# Fields returned for every issue listed by the get_issues tool, in request order.
ISSUE_LIST_FIELDS: tuple[str, ...] = (
    "summary",
    "description",
    "status",
    "priority",
    "assignee",
    "issuetype",
    "parent",
    "subtasks",
)

# Upper bound on issues returned by a single get_issues call.
ISSUE_LIST_LIMIT = 100

# Upper bound on users returned by an e-mail lookup.
USER_LOOKUP_LIMIT = 1
