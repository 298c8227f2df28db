"""Once-a-day status reset.

The marker is the local calendar date formatted with RESET_DATE_FORMAT, so
the rollover happens at local midnight rather than at a UTC boundary.
"""
from __future__ import annotations
from datetime import datetime
import logging
from typing import List, Optional, Tuple

from famealy.domain.User import User, Status
from famealy.events.event_helpers import publish_daily_reset
from famealy.infra.User_Repository import UserRepository
from famealy.infra.Reset_Repository import ResetRepository
from famealy.utilities.config import RESET_DATE_FORMAT

logger = logging.getLogger(__name__)

__all__ = ["today_marker", "maybe_reset", "run_daily_reset"]


def today_marker(now: Optional[datetime] = None) -> str:
    """Local calendar date of ``now`` (default: current local time) as a marker string."""
    now = now or datetime.now()
    return now.strftime(RESET_DATE_FORMAT)


def maybe_reset(all_users: List[User], current_user: Optional[User], last_reset_date: Optional[str],
                today: str) -> Tuple[List[User], Optional[User], str]:
    """Return (users, current_user, marker) with every status UNSET when the day changed.

    When ``last_reset_date == today`` the inputs come back untouched, which makes a
    second call on the same day a no-op.
    """
    if last_reset_date == today:
        return all_users, current_user, last_reset_date
    reset_users = [u.copy_with(current_status=Status.UNSET) for u in all_users]
    reset_current = current_user.copy_with(current_status=Status.UNSET) if current_user else None
    return reset_users, reset_current, today


def run_daily_reset(users: UserRepository, marker: ResetRepository, today: Optional[str] = None) -> bool:
    """Apply maybe_reset against the persisted collections and commit the result.

    Must run once per start, before anything else reads users.
    Returns True when a reset was written.
    """
    today = today or today_marker()
    last = marker.get_last_reset()
    all_users = users.list_all()
    current = users.get_current()
    reset_users, reset_current, new_marker = maybe_reset(all_users, current, last, today)
    if new_marker == last:
        logger.debug(f"Statuses already reset for {today}")
        return False
    users.replace_all(reset_users)
    if reset_current is not None:
        users.save_current(reset_current)
    marker.set_last_reset(new_marker)
    logger.info(f"Daily reset for {new_marker}: {len(reset_users)} statuses cleared (previous marker: {last})")
    publish_daily_reset(new_marker, len(reset_users))
    return True
