"""Event helper utilities.

Thin publishing helpers over the global event bus so core modules do not
build payload dicts inline.

Quick import:
    from famealy.events.event_helpers import (
        publish_auth_changed, publish_user_updated, publish_daily_reset,
        publish_members_refreshed, publish_meal_rated
    )
"""
from __future__ import annotations
from typing import Any, Iterable, Optional
from .Event_Bus import (
    crea,
    AUTH_CHANGED, USER_UPDATED, STATUS_DAILY_RESET, MEMBERS_REFRESHED,
    MEAL_RATED, MEAL_ADDED, MEAL_REMOVED
)

__all__ = [
    'publish_auth_changed', 'publish_user_updated', 'publish_daily_reset',
    'publish_members_refreshed', 'publish_meal_rated', 'publish_meal_added',
    'publish_meal_removed'
]


def publish_auth_changed(user: Optional[Any], is_authenticated: bool):
    crea(AUTH_CHANGED, {'user': user, 'is_authenticated': is_authenticated})


def publish_user_updated(user: Any, previous: Optional[Any] = None):
    """Publish a user.updated event (status, family or profile change)."""
    crea(USER_UPDATED, {'user': user, 'previous': previous})


def publish_daily_reset(date_marker: str, count: int):
    crea(STATUS_DAILY_RESET, {'date': date_marker, 'count': count})


def publish_members_refreshed(family_id: str, members: Iterable[Any]):
    """Publish the latest member snapshot read by a dashboard poll."""
    crea(MEMBERS_REFRESHED, {'family_id': family_id, 'members': list(members)})


def publish_meal_rated(meal: Any, rating: Any):
    crea(MEAL_RATED, {'meal': meal, 'rating': rating})


def publish_meal_added(meal: Any):
    crea(MEAL_ADDED, {'meal': meal})


def publish_meal_removed(meal_id: str, family_id: str):
    crea(MEAL_REMOVED, {'meal_id': meal_id, 'family_id': family_id})
