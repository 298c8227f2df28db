"""Web-facing observers for household activity.

This module subscribes to the GLOBAL_EVENT_BUS for:
  - user.updated (status / family changes)
  - meal.added, meal.rated
  - status.daily_reset

and keeps a small in-memory ring buffer of recent activity that the web layer
serves from /api/activity, so clients can poll with since=<last_id_seen> and
only receive newer entries.

Thread-safety: the dashboard poller publishes from its own thread, so
access is guarded with a Lock. MAX_ACTIVITY_EVENTS caps memory.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone
import logging

from famealy.utilities.constants import MAX_ACTIVITY_EVENTS
from .Event_Bus import (
    GLOBAL_EVENT_BUS, USER_UPDATED, MEAL_ADDED, MEAL_RATED, STATUS_DAILY_RESET
)

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
_started = False

_OBSERVED = (USER_UPDATED, MEAL_ADDED, MEAL_RATED, STATUS_DAILY_RESET)


def _normalize(event_name: str, payload: Any) -> Dict[str, Any]:
    evt: Dict[str, Any] = {'type': event_name}
    if not isinstance(payload, dict):
        return evt
    user = payload.get('user')
    if user is not None and hasattr(user, 'id'):
        evt['user_id'] = user.id
        evt['name'] = getattr(user, 'name', '')
        evt['family_id'] = getattr(user, 'family_id', None)
        status = getattr(user, 'current_status', None)
        evt['status'] = getattr(status, 'value', status)
    meal = payload.get('meal')
    if meal is not None and hasattr(meal, 'id'):
        evt['meal_id'] = meal.id
        evt['meal'] = getattr(meal, 'name', '')
        evt['family_id'] = getattr(meal, 'family_id', None)
    rating = payload.get('rating')
    if rating is not None and hasattr(rating, 'score'):
        evt['score'] = rating.score
        evt['name'] = getattr(rating, 'user_name', '')
    for k in ('date', 'count'):
        if k in payload:
            evt[k] = payload[k]
    return evt


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    evt = _normalize(event_name, payload)
    with _lock:
        evt['id'] = _next_id
        evt['ts'] = datetime.now(timezone.utc).isoformat()
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_ACTIVITY_EVENTS:
            del _events[: len(_events) - MAX_ACTIVITY_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in _OBSERVED:
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True
    logger.info("Activity observers subscribed")


def stop():
    global _started
    for name in _OBSERVED:
        GLOBAL_EVENT_BUS.unsubscribe(name, _record)
    _started = False


def get_events(since: Optional[int] = None, family_id: Optional[str] = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive), optionally for one family.

    Daily reset events carry no family and are returned to everyone.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        data = list(_events) if since is None else [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    if family_id is not None:
        data = [e for e in data if e.get('family_id') in (family_id, None)]
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'stop', 'get_events']
