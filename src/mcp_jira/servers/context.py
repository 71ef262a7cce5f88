from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_jira.jira.config import JiraConfig
    from mcp_jira.tools.dispatcher import JiraToolDispatcher


@dataclass(frozen=True)
class MainAppContext:
    """
    Context holding the Jira configuration loaded from environment variables
    at server startup and the dispatcher that serves every tool call.
    """

    jira_config: JiraConfig | None = None
    dispatcher: JiraToolDispatcher | None = None
