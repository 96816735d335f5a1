"""
Pytest configuration and shared fixtures.

This module provides test fixtures for the entire test suite, including
settings, test clients, mock HTTP clients and sample GitHub event data.
"""

from typing import Any, Dict, Generator, List
from unittest.mock import AsyncMock, MagicMock, Mock

import pytest
from fastapi.testclient import TestClient

from activity_relay.core.config import Settings
from activity_relay.main import app
from activity_relay.models.activity import Activity
from activity_relay.services.activity import ActivityFetcher


# =============================================================================
# Test Settings
# =============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """
    Provide test settings configuration without a GitHub token.

    Returns:
        Settings object with test configuration
    """
    return Settings(
        app_name="GitHub Activity Relay Test",
        app_version="1.0.0-test",
        log_level="DEBUG",
        github_api_url="https://api.github.com",
        github_token=None,
    )


@pytest.fixture
def token_settings(test_settings: Settings) -> Settings:
    """Provide test settings with a GitHub token configured."""
    return test_settings.model_copy(update={"github_token": "ghp_test_token_1234567890"})


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def fetcher(test_settings: Settings) -> ActivityFetcher:
    """ActivityFetcher using unauthenticated test settings."""
    return ActivityFetcher(test_settings)


@pytest.fixture
def token_fetcher(token_settings: Settings) -> ActivityFetcher:
    """ActivityFetcher using test settings with a token."""
    return ActivityFetcher(token_settings)


@pytest.fixture
def mock_activity_fetcher(sample_activities: List[Activity]) -> Mock:
    """
    Provide a mock ActivityFetcher.

    Returns:
        Mock whose fetch_activity returns the sample activities
    """
    service = Mock(spec=ActivityFetcher)
    service.fetch_activity = AsyncMock(return_value=sample_activities)
    return service


# =============================================================================
# HTTP Client Fixtures
# =============================================================================

@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Get test client for API requests; clears dependency overrides afterwards."""
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def mock_httpx_client() -> AsyncMock:
    """
    Provide a mock httpx AsyncClient.

    Returns:
        Mocked AsyncClient
    """
    client_mock = AsyncMock()
    client_mock.get = AsyncMock()
    client_mock.is_closed = False
    client_mock.aclose = AsyncMock()
    return client_mock


@pytest.fixture
def make_response():
    """
    Factory for mocked httpx responses.

    Usage:
        make_response(200, [...]) or make_response(200, json_error=ValueError("bad"))
    """

    def _make(status_code: int = 200, body: Any = None, json_error: Exception = None) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = body
        return response

    return _make


# =============================================================================
# Test Data Fixtures
# =============================================================================

@pytest.fixture
def sample_github_events() -> List[Dict[str, Any]]:
    """
    Provide sample GitHub events data, newest first as GitHub returns them.

    Returns:
        List of event dicts
    """
    return [
        {
            "id": "40001",
            "type": "PushEvent",
            "actor": {
                "id": 583231,
                "login": "octocat",
                "avatar_url": "https://avatars.githubusercontent.com/u/583231"
            },
            "repo": {
                "id": 1296269,
                "name": "octocat/hello-world",
                "url": "https://api.github.com/repos/octocat/hello-world"
            },
            "payload": {
                "push_id": 9876543,
                "size": 3,
                "ref": "refs/heads/main",
                "commits": [
                    {"sha": "abc123", "message": "First"},
                    {"sha": "def456", "message": "Second"},
                    {"sha": "789abc", "message": "Third"}
                ]
            },
            "public": True,
            "created_at": "2024-01-16T12:00:00Z"
        },
        {
            "id": "40002",
            "type": "IssuesEvent",
            "repo": {"id": 1296269, "name": "octocat/hello-world"},
            "payload": {
                "action": "opened",
                "issue": {"number": 42, "title": "Found a bug"}
            },
            "public": True,
            "created_at": "2024-01-16T11:00:00Z"
        },
        {
            "id": "40003",
            "type": "WatchEvent",
            "repo": {"id": 1300192, "name": "octocat/Spoon-Knife"},
            "payload": {"action": "started"},
            "public": True,
            "created_at": "2024-01-15T09:00:00Z"
        },
        {
            "id": "40004",
            "type": "ForkEvent",
            "repo": {"id": 1300192, "name": "octocat/Spoon-Knife"},
            "payload": {"forkee": {"full_name": "octocat/Spoon-Knife-fork"}},
            "public": True,
            "created_at": "2024-01-14T08:00:00Z"
        },
        {
            "id": "40005",
            "type": "PushEvent",
            "repo": {"id": 1296269, "name": "octocat/linguist"},
            "payload": {"commits": [{"sha": "fff000"}]},
            "public": True,
            "created_at": "2024-01-13T07:00:00Z"
        }
    ]


@pytest.fixture
def sample_activities() -> List[Activity]:
    """Activities matching sample_github_events after translation."""
    return [
        Activity(type="PushEvent", message="Pushed 3 commits", repo_name="octocat/hello-world"),
        Activity(type="IssuesEvent", message="opened an issue", repo_name="octocat/hello-world"),
        Activity(type="WatchEvent", message="Starred repository", repo_name="octocat/Spoon-Knife"),
        Activity(type="ForkEvent", message="ForkEvent", repo_name="octocat/Spoon-Knife"),
        Activity(type="PushEvent", message="Pushed 1 commits", repo_name="octocat/linguist"),
    ]
