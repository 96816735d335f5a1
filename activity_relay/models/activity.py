"""
GitHub activity-related Pydantic models.

This module contains the upstream event models decoded from the GitHub
events API and the simplified activity records returned by the relay.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

PUSH_EVENT = "PushEvent"
ISSUES_EVENT = "IssuesEvent"
WATCH_EVENT = "WatchEvent"


class EventRepo(BaseModel):
    """Repository reference attached to an upstream event."""

    name: str

    model_config = ConfigDict(extra="ignore", frozen=True)


class EventPayload(BaseModel):
    """Subset of the event payload the relay reads."""

    action: Optional[str] = None
    commits: Optional[List[Any]] = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class UpstreamEvent(BaseModel):
    """
    A single event from ``GET /users/{username}/events``.

    Unknown fields are ignored. ``type`` and ``repo.name`` are always required;
    ``payload.commits`` is required for push events and ``payload.action`` for
    issue events, since those are the fields their messages are built from.
    """

    type: str
    repo: EventRepo
    payload: EventPayload = Field(default_factory=EventPayload)

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("payload", mode="before")
    @classmethod
    def null_payload_as_empty(cls, v: Any) -> Any:
        """Treat ``"payload": null`` like an absent payload."""
        return {} if v is None else v

    @model_validator(mode="after")
    def check_payload_for_type(self) -> "UpstreamEvent":
        """Reject events whose payload lacks the fields their type needs."""
        if self.type == PUSH_EVENT and self.payload.commits is None:
            raise ValueError("PushEvent payload is missing 'commits'")
        if self.type == ISSUES_EVENT and self.payload.action is None:
            raise ValueError("IssuesEvent payload is missing 'action'")
        return self

    @property
    def repo_name(self) -> str:
        return self.repo.name


class Activity(BaseModel):
    """Simplified activity record derived from one upstream event."""

    type: str = Field(..., description="GitHub event type")
    message: str = Field(..., description="Human-readable summary of the event")
    repo_name: str = Field(..., description="Full name of the repository")

    model_config = ConfigDict(frozen=True)


class ActivityResponse(BaseModel):
    """Response model for the activity endpoint."""

    activities: List[Activity] = Field(
        ...,
        description="Activities in the order returned by GitHub",
        examples=[
            [
                {
                    "type": "PushEvent",
                    "message": "Pushed 3 commits",
                    "repo_name": "octocat/hello-world",
                },
                {
                    "type": "WatchEvent",
                    "message": "Starred repository",
                    "repo_name": "octocat/spoon-knife",
                },
            ]
        ],
    )
