"""Main FastMCP server setup for the Jira tools."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from mcp import types
from mcp.shared.exceptions import McpError
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp_jira.jira import JiraFetcher
from mcp_jira.jira.config import JiraConfig
from mcp_jira.tools.dispatcher import JiraToolDispatcher, ToolDefaults

from .context import MainAppContext

logger = logging.getLogger("mcp-jira.server.main")


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def build_dispatcher(config: JiraConfig) -> JiraToolDispatcher:
    """Create the dispatcher for a loaded configuration."""
    return JiraToolDispatcher(
        jira=JiraFetcher(config=config),
        base_url=config.url,
        defaults=ToolDefaults(
            project_key=config.default_project_key,
            assignee=config.default_assignee,
        ),
        read_only=config.read_only,
        enabled_tools=config.enabled_tools,
    )


@asynccontextmanager
async def main_lifespan(app: FastMCP[Any]) -> AsyncIterator[dict]:
    logger.info("Jira MCP server lifespan starting...")
    jira_config = JiraConfig.from_env()
    jira_config.log_summary()

    app_context = MainAppContext(
        jira_config=jira_config,
        dispatcher=build_dispatcher(jira_config),
    )
    logger.info(f"Read-only mode: {'ENABLED' if jira_config.read_only else 'DISABLED'}")
    logger.info(
        f"Enabled tools filter: {jira_config.enabled_tools or 'All tools enabled'}"
    )
    yield {"app_lifespan_context": app_context}
    logger.info("Jira MCP server lifespan shutting down.")


class JiraMCP(FastMCP[dict]):
    """FastMCP server that serves the static Jira tool catalog.

    The ``tools/list`` and ``tools/call`` requests are answered by the
    JiraToolDispatcher held in the lifespan context instead of FastMCP's
    decorator-based tool registry, so result envelopes and protocol errors
    reach the client exactly as the dispatcher builds them.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        handlers = self._mcp_server.request_handlers
        handlers[types.ListToolsRequest] = self._handle_list_tools
        handlers[types.CallToolRequest] = self._handle_call_tool

    def _get_dispatcher(self) -> JiraToolDispatcher:
        lifespan_ctx_dict = self._mcp_server.request_context.lifespan_context
        app_lifespan_state: MainAppContext | None = (
            lifespan_ctx_dict.get("app_lifespan_context")
            if isinstance(lifespan_ctx_dict, dict)
            else None
        )
        if app_lifespan_state is None or app_lifespan_state.dispatcher is None:
            logger.error("Jira dispatcher not available in lifespan context.")
            raise McpError(
                types.ErrorData(
                    code=types.INTERNAL_ERROR,
                    message="Jira client is not configured or available.",
                )
            )
        return app_lifespan_state.dispatcher

    async def _handle_list_tools(
        self, request: types.ListToolsRequest
    ) -> types.ServerResult:
        tools = self._get_dispatcher().list_tools()
        logger.debug(f"Listing {len(tools)} tools: {[tool.name for tool in tools]}")
        return types.ServerResult(types.ListToolsResult(tools=tools))

    async def _handle_call_tool(
        self, request: types.CallToolRequest
    ) -> types.ServerResult:
        dispatcher = self._get_dispatcher()
        result = dispatcher.dispatch(request.params.name, request.params.arguments)
        return types.ServerResult(result)


main_mcp = JiraMCP(name="Jira MCP", lifespan=main_lifespan)


@main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def _health_check_route(request: Request) -> JSONResponse:
    return await health_check(request)
