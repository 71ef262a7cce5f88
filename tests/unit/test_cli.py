"""Tests for the mcp-jira command line entry point."""

import os
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from mcp_jira import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_server():
    with (
        patch("mcp_jira.servers.main_mcp.run_async", new_callable=AsyncMock) as run,
        patch("mcp_jira.load_dotenv"),
    ):
        yield run


def test_missing_configuration_exits(runner, mock_server):
    with patch.dict(os.environ, {}, clear=True):
        result = runner.invoke(main, [])

    assert result.exit_code == 1
    mock_server.assert_not_called()


def test_stdio_transport(runner, mock_server):
    env = {
        "JIRA_HOST": "test.atlassian.net",
        "JIRA_EMAIL": "test@example.com",
        "JIRA_API_TOKEN": "test_token",
    }
    with patch.dict(os.environ, env, clear=True):
        result = runner.invoke(main, [])

    assert result.exit_code == 0, result.output
    mock_server.assert_called_once_with(transport="stdio")


def test_options_set_environment(runner, mock_server):
    with patch.dict(os.environ, {}, clear=True):
        result = runner.invoke(
            main,
            [
                "--jira-host",
                "cli.atlassian.net",
                "--jira-email",
                "cli@example.com",
                "--jira-token",
                "cli_token",
                "--read-only",
                "--enabled-tools",
                "get_user,get_issues",
            ],
        )

        assert result.exit_code == 0, result.output
        assert os.environ["JIRA_HOST"] == "cli.atlassian.net"
        assert os.environ["JIRA_EMAIL"] == "cli@example.com"
        assert os.environ["JIRA_API_TOKEN"] == "cli_token"
        assert os.environ["READ_ONLY_MODE"] == "true"
        assert os.environ["ENABLED_TOOLS"] == "get_user,get_issues"


def test_http_transport(runner, mock_server):
    env = {
        "JIRA_HOST": "test.atlassian.net",
        "JIRA_EMAIL": "test@example.com",
        "JIRA_API_TOKEN": "test_token",
    }
    with patch.dict(os.environ, env, clear=True):
        result = runner.invoke(
            main,
            ["--transport", "streamable-http", "--port", "9000", "--host", "127.0.0.1"],
        )

    assert result.exit_code == 0, result.output
    mock_server.assert_called_once_with(
        transport="streamable-http",
        host="127.0.0.1",
        port=9000,
        log_level="warning",
    )
