"""Data models for the application."""

from activity_relay.models.activity import (
    Activity,
    ActivityResponse,
    EventPayload,
    EventRepo,
    UpstreamEvent,
)

__all__ = [
    # Upstream models
    "UpstreamEvent",
    "EventRepo",
    "EventPayload",
    # Response models
    "Activity",
    "ActivityResponse",
]
