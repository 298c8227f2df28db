"""Simple Event Bus / Observer implementation for household activity.

Event names used so far:
  auth.changed -> payload {"user": User | None, "is_authenticated": bool}
  user.updated -> payload {"user": User, "previous": User | None}
  status.daily_reset -> payload {"date": str, "count": int}
  family.members_refreshed -> payload {"family_id": str, "members": [User, ...]}
  meal.rated -> payload {"meal": Meal, "rating": MealRating}
  meal.added -> payload {"meal": Meal}
  meal.removed -> payload {"meal_id": str, "family_id": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
AUTH_CHANGED = "auth.changed"
USER_UPDATED = "user.updated"
STATUS_DAILY_RESET = "status.daily_reset"
MEMBERS_REFRESHED = "family.members_refreshed"
MEAL_RATED = "meal.rated"
MEAL_ADDED = "meal.added"
MEAL_REMOVED = "meal.removed"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception(f"Error delivering {event_name} to {cb}")


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def crea(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus (sugar function)."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'crea',
	'AUTH_CHANGED', 'USER_UPDATED', 'STATUS_DAILY_RESET', 'MEMBERS_REFRESHED',
	'MEAL_RATED', 'MEAL_ADDED', 'MEAL_REMOVED'
]
