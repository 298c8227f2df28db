"""Dashboard view model: family header, member statuses and the refresh loop bound to the view."""
from __future__ import annotations
import logging
from threading import Lock
from typing import List, Optional

from famealy.domain.Family import Family
from famealy.domain.User import User, Status
from famealy.events.Event_Bus import AUTH_CHANGED, USER_UPDATED
from famealy.events.event_helpers import publish_members_refreshed
from famealy.logic.family.directory import FamilyDirectory
from famealy.logic.polling.member_poller import MemberPoller
from famealy.session.Session_Store import SessionStore
from famealy.utilities.config import POLL_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


class DashboardView:
    def __init__(self, session: SessionStore, directory: FamilyDirectory, interval: float = POLL_INTERVAL_SECONDS):
        self.session = session
        self.directory = directory
        self.interval = interval
        self.family: Optional[Family] = None
        self._members: List[User] = []
        self._lock = Lock()
        self._poller: Optional[MemberPoller] = None
        self._family_id: Optional[str] = None
        self._user_id: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self._poller is not None

    @property
    def members(self) -> List[User]:
        with self._lock:
            return list(self._members)

    def _fetch(self) -> List[User]:
        return self.directory.members_of(self._family_id)

    def _apply(self, members: List[User]):
        with self._lock:
            self._members = list(members)
        publish_members_refreshed(self._family_id, members)

    def _on_session_changed(self, _event_name, auth_state):
        # Bound to one user and one family; any other session state tears it down
        user = auth_state.user if auth_state.is_authenticated else None
        if user is None or user.id != self._user_id or user.family_id != self._family_id:
            self.close()

    def open(self):
        """Show the dashboard for the signed-in user's family and start refreshing members."""
        user = self.session.user
        if user is None or not user.family_id:
            raise RuntimeError("Dashboard requires a user with a family")
        if self.is_open and self._family_id == user.family_id and self._user_id == user.id:
            return
        self.close()
        self._family_id = user.family_id
        self._user_id = user.id
        self.family = self.directory.get(user.family_id)
        self._poller = MemberPoller(self._fetch, self._apply, interval=self.interval, name=f"members-{user.family_id}")
        for event_name in (AUTH_CHANGED, USER_UPDATED):
            self.session.bus.subscribe(event_name, self._on_session_changed)
        self._poller.start()

    def close(self):
        """Tear the view down; no further member reads happen after this returns."""
        poller, self._poller = self._poller, None
        for event_name in (AUTH_CHANGED, USER_UPDATED):
            self.session.bus.unsubscribe(event_name, self._on_session_changed)
        if poller is not None:
            poller.stop()

    def refresh(self):
        if self._family_id:
            self._apply(self._fetch())

    def set_status(self, status: Status) -> User:
        user = self.session.set_status(status)
        self.refresh()
        return user
