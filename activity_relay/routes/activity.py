"""
GitHub activity route.

This module provides the relay endpoint that fetches a user's recent GitHub
events and returns them as simplified activity records.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import PlainTextResponse

from activity_relay.models.activity import ActivityResponse
from activity_relay.routes.dependencies import get_activity_fetcher
from activity_relay.services.activity import ActivityFetcher, ActivityFetchError

# Configure logging
logger = logging.getLogger(__name__)

# Router configuration
activity_router = APIRouter(tags=["Activity"])

MISSING_USERNAME_MESSAGE = "username parameter is required"


@activity_router.get(
    "/activity",
    response_model=ActivityResponse,
    summary="Get user activity",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "username parameter missing"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "GitHub fetch failed"},
    },
)
async def get_activity(
    request: Request,
    usernames: List[str] = Query([], alias="username"),
    event_types: List[str] = Query([], alias="type"),
    fetcher: ActivityFetcher = Depends(get_activity_fetcher),
):
    """
    Retrieve recent public activity for a GitHub user.

    Args:
        request: FastAPI request object
        usernames: Values of the ``username`` parameter; the first is used
        event_types: Values of the ``type`` filter, e.g. ``PushEvent``; the first is used
        fetcher: Activity fetcher from dependency

    Returns:
        ActivityResponse containing the translated activities

    Errors:
        - 400 (text/plain) if username is missing or empty
        - 500 (text/plain) for any failure talking to GitHub

    Example:
        ```python
        response = await client.get("/api/activity?username=octocat&type=PushEvent")
        ```
    """
    username = usernames[0] if usernames else ""
    event_type = event_types[0] if event_types else ""

    if not username:
        return PlainTextResponse(
            MISSING_USERNAME_MESSAGE,
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    try:
        activities = await fetcher.fetch_activity(username, event_type)
    except ActivityFetchError as e:
        logger.warning(
            f"Activity fetch failed for user {username}: kind={e.kind.value}, "
            f"upstream_status={e.status_code}, "
            f"request_id={getattr(request.state, 'request_id', None)}, error={e.message}"
        )
        return PlainTextResponse(
            e.message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return ActivityResponse(activities=activities)
