"""
FastAPI route dependencies.

This module provides reusable dependencies that can be injected into
route handlers.
"""

from fastapi import Depends

from activity_relay.core.config import Settings, get_settings
from activity_relay.services.activity import ActivityFetcher


def get_activity_fetcher(settings: Settings = Depends(get_settings)) -> ActivityFetcher:
    """
    Dependency providing an ActivityFetcher bound to the current settings.

    Tests override this with ``app.dependency_overrides`` to stub the
    upstream call or supply their own configuration.
    """
    return ActivityFetcher(settings)
