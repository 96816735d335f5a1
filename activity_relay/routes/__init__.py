"""
API Routes Module

This module exports the API routers for the GitHub Activity Relay.
Routes are mounted under the configured API prefix (``/api`` by default).
"""

from activity_relay.routes.activity import activity_router

__all__ = [
    "activity_router",
]
