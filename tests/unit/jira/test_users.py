"""Tests for the Jira Users mixin."""

from unittest.mock import MagicMock

import pytest
from requests.exceptions import HTTPError

from mcp_jira.exceptions import MCPJiraAuthenticationError
from mcp_jira.jira import JiraFetcher


class TestUsersMixin:
    """Tests for the UsersMixin class."""

    def test_search_users(self, jira_fetcher: JiraFetcher):
        """Test search_users asks for a single active user by default."""
        users = [{"accountId": "acc-1", "displayName": "Test User"}]
        jira_fetcher.jira.user_find_by_user_string.return_value = users

        result = jira_fetcher.search_users("test@example.com")

        assert result == users
        jira_fetcher.jira.user_find_by_user_string.assert_called_once_with(
            query="test@example.com",
            start=0,
            limit=1,
            include_active_users=True,
            include_inactive_users=False,
        )

    def test_search_users_custom_limit(self, jira_fetcher: JiraFetcher):
        """Test the limit is passed through."""
        jira_fetcher.jira.user_find_by_user_string.return_value = []

        jira_fetcher.search_users("test", limit=5)

        call_kwargs = jira_fetcher.jira.user_find_by_user_string.call_args.kwargs
        assert call_kwargs["limit"] == 5

    def test_search_users_no_match(self, jira_fetcher: JiraFetcher):
        """Test an empty result is returned as an empty list."""
        jira_fetcher.jira.user_find_by_user_string.return_value = []

        assert jira_fetcher.search_users("nobody@example.com") == []

    def test_search_users_unexpected_type(self, jira_fetcher: JiraFetcher):
        """Test a non-list response is rejected."""
        jira_fetcher.jira.user_find_by_user_string.return_value = "not a list"

        with pytest.raises(TypeError):
            jira_fetcher.search_users("test@example.com")

    def test_search_users_authentication_error(self, jira_fetcher: JiraFetcher):
        """Test a 401 response becomes an authentication error."""
        jira_fetcher.jira.user_find_by_user_string.side_effect = HTTPError(
            response=MagicMock(status_code=401)
        )

        with pytest.raises(MCPJiraAuthenticationError):
            jira_fetcher.search_users("test@example.com")
