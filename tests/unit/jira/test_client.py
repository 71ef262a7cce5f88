"""Tests for the Jira client module."""

from unittest.mock import MagicMock, patch

import pytest
from requests.exceptions import HTTPError

from mcp_jira.exceptions import MCPJiraAuthenticationError
from mcp_jira.jira.client import JiraClient
from mcp_jira.jira.config import JiraConfig


def test_init_with_basic_auth():
    """Test initializing the client with e-mail and API token."""
    with patch("mcp_jira.jira.client.Jira") as mock_jira:
        config = JiraConfig(
            host="test.atlassian.net",
            email="test@example.com",
            api_token="test_token",
        )

        client = JiraClient(config=config)

        mock_jira.assert_called_once_with(
            url="https://test.atlassian.net",
            username="test@example.com",
            password="test_token",
            cloud=True,
            verify_ssl=True,
            api_version="3",
        )
        assert client.config == config
        assert client.jira == mock_jira.return_value


def test_init_passes_ssl_setting():
    """Test that a disabled SSL verification reaches the Jira client."""
    with patch("mcp_jira.jira.client.Jira") as mock_jira:
        config = JiraConfig(
            host="test.atlassian.net",
            email="test@example.com",
            api_token="test_token",
            ssl_verify=False,
        )

        JiraClient(config=config)

        assert mock_jira.call_args.kwargs["verify_ssl"] is False


def test_init_from_env(mock_env_vars):
    """Test that the client falls back to environment configuration."""
    with patch("mcp_jira.jira.client.Jira") as mock_jira:
        client = JiraClient()

        assert client.config.email == "test@example.com"
        mock_jira.assert_called_once()


def test_init_from_env_missing(clean_env):
    """Test that missing environment configuration is an error."""
    with patch("mcp_jira.jira.client.Jira"):
        with pytest.raises(ValueError, match="Missing required environment variables"):
            JiraClient()


def test_api_path(jira_client):
    """Test REST paths follow the configured API version."""
    assert jira_client._api_path("issueLinkType") == "rest/api/3/issueLinkType"


@pytest.mark.parametrize("status_code", [401, 403])
def test_raise_http_error_authentication(jira_client, status_code):
    """Test that 401 and 403 responses become authentication errors."""
    http_err = HTTPError(response=MagicMock(status_code=status_code))

    with pytest.raises(MCPJiraAuthenticationError) as excinfo:
        jira_client._raise_http_error(http_err, "testing")

    assert f"Authentication failed for Jira API ({status_code})" in str(excinfo.value)
    assert excinfo.value.__cause__ is http_err


def test_raise_http_error_other_status(jira_client):
    """Test that other HTTP errors are re-raised unchanged."""
    http_err = HTTPError("404 Client Error", response=MagicMock(status_code=404))

    with pytest.raises(HTTPError) as excinfo:
        jira_client._raise_http_error(http_err, "testing")

    assert excinfo.value is http_err


def test_raise_http_error_without_response(jira_client):
    """Test that an HTTP error without a response is re-raised unchanged."""
    http_err = HTTPError("Connection reset")

    with pytest.raises(HTTPError, match="Connection reset"):
        jira_client._raise_http_error(http_err, "testing")
