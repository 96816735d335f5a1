"""GitHub events fetcher.

This module queries the GitHub events API for a single user and reshapes the
returned events into simplified activity records. Each fetch performs exactly
one request; there is no retry, pagination or caching.
"""

import logging
from contextlib import asynccontextmanager
from enum import Enum
from typing import AsyncGenerator, Dict, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from activity_relay.core.config import Settings, get_settings
from activity_relay.models.activity import (
    ISSUES_EVENT,
    PUSH_EVENT,
    WATCH_EVENT,
    Activity,
    UpstreamEvent,
)

# Initialize logger
logger = logging.getLogger(__name__)

_EVENTS_ADAPTER = TypeAdapter(List[UpstreamEvent])


class FetchErrorKind(str, Enum):
    """Kinds of fetch failure, kept distinct for diagnostics."""

    NETWORK = "network_error"
    UPSTREAM_STATUS = "upstream_status"
    DECODE = "decode_error"


class ActivityFetchError(Exception):
    """Base exception for failures while fetching GitHub activity."""

    kind: FetchErrorKind

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class UpstreamNetworkError(ActivityFetchError):
    """Raised when the request to GitHub could not be sent or completed."""

    kind = FetchErrorKind.NETWORK


class UpstreamStatusError(ActivityFetchError):
    """Raised when GitHub answers with a status other than 200."""

    kind = FetchErrorKind.UPSTREAM_STATUS


class UpstreamDecodeError(ActivityFetchError):
    """Raised when the response body is not a list of events."""

    kind = FetchErrorKind.DECODE


def build_message(event: UpstreamEvent) -> str:
    """Synthesize the human-readable message for an event.

    Args:
        event: Decoded upstream event

    Returns:
        str: Message text for the activity record

    Example:
        >>> event = UpstreamEvent(type="WatchEvent", repo={"name": "a/b"})
        >>> build_message(event)
        'Starred repository'
    """
    if event.type == PUSH_EVENT:
        return f"Pushed {len(event.payload.commits)} commits"
    if event.type == ISSUES_EVENT:
        return f"{event.payload.action} an issue"
    if event.type == WATCH_EVENT:
        return "Starred repository"
    return event.type


def to_activity(event: UpstreamEvent) -> Activity:
    """Translate one upstream event into an activity record."""
    return Activity(
        type=event.type,
        message=build_message(event),
        repo_name=event.repo_name,
    )


def translate_events(events: List[UpstreamEvent], event_type: str = "") -> List[Activity]:
    """Translate events in order, keeping only those matching ``event_type``.

    An empty ``event_type`` keeps every event. Matching is exact and
    case-sensitive.
    """
    return [
        to_activity(event)
        for event in events
        if not event_type or event.type == event_type
    ]


class ActivityFetcher:
    """Fetches and translates public GitHub activity for a user.

    Attributes:
        DEFAULT_HEADERS: Headers sent with every upstream request
    """

    DEFAULT_HEADERS: Dict[str, str] = {
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": "GitHub-Activity-Relay/1.0",
    }

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()

    @asynccontextmanager
    async def _get_client(self) -> AsyncGenerator[httpx.AsyncClient, None]:
        """Context manager for a per-fetch HTTP client.

        The client is closed on every exit path, which also releases the
        connection and response body.

        Yields:
            httpx.AsyncClient: Async HTTP client with the default headers
        """
        client = httpx.AsyncClient(
            follow_redirects=True,
            headers=self.DEFAULT_HEADERS,
        )
        try:
            yield client
        finally:
            await client.aclose()

    def _build_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self._settings.github_token:
            headers["Authorization"] = f"token {self._settings.github_token}"
        return headers

    def events_url(self, username: str) -> str:
        """Return the upstream events URL for ``username``, unescaped."""
        return f"{self._settings.github_api_url}/users/{username}/events"

    @staticmethod
    def _decode_events(response: httpx.Response) -> List[UpstreamEvent]:
        try:
            return _EVENTS_ADAPTER.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamDecodeError(f"failed to parse JSON: {e}") from e

    async def fetch_activity(self, username: str, event_type: str = "") -> List[Activity]:
        """Fetch recent activity for a GitHub user.

        Args:
            username: GitHub username, embedded into the URL as given
            event_type: Optional exact event type filter (empty keeps all)

        Returns:
            List[Activity]: Activities in upstream order, possibly empty

        Raises:
            UpstreamNetworkError: If the request could not be sent
            UpstreamStatusError: If GitHub returns a status other than 200
            UpstreamDecodeError: If the body is not a list of events

        Example:
            >>> fetcher = ActivityFetcher()
            >>> activities = await fetcher.fetch_activity("octocat", "PushEvent")
            >>> print(activities[0].message)
            Pushed 3 commits
        """
        url = self.events_url(username)
        logger.debug(f"Fetching events for user: {username} (filter={event_type or '*'})")

        async with self._get_client() as client:
            try:
                response = await client.get(url, headers=self._build_headers())
            except (httpx.RequestError, httpx.InvalidURL) as e:
                raise UpstreamNetworkError(f"failed to fetch data: {e}") from e

            if response.status_code != 200:
                raise UpstreamStatusError(
                    f"API returned status code {response.status_code}",
                    status_code=response.status_code,
                )

            events = self._decode_events(response)

        activities = translate_events(events, event_type)
        logger.debug(
            f"Translated {len(activities)} of {len(events)} events for {username}"
        )
        return activities
