"""Services module for the GitHub Activity Relay.

This module contains the service layer that talks to the GitHub API and
translates its events.
"""

from activity_relay.services.activity import (
    ActivityFetcher,
    ActivityFetchError,
    FetchErrorKind,
    UpstreamDecodeError,
    UpstreamNetworkError,
    UpstreamStatusError,
)

__all__ = [
    "ActivityFetcher",
    "ActivityFetchError",
    "FetchErrorKind",
    "UpstreamNetworkError",
    "UpstreamStatusError",
    "UpstreamDecodeError",
]
