"""Process-wide session state: who is signed in and which screen they belong on.

Every change to the signed-in user goes through ``update_user`` so the
current-session record and the global roster never disagree.
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import Callable, Optional

from famealy.auth.provider import IdentityProvider
from famealy.domain.AuthState import AuthState
from famealy.domain.Family import Family
from famealy.domain.Identity import ExternalIdentity
from famealy.domain.User import User, Status
from famealy.events.Event_Bus import EventBus, AUTH_CHANGED, USER_UPDATED
from famealy.events.event_helpers import publish_auth_changed, publish_user_updated
from famealy.infra.User_Repository import UserRepository
from famealy.logic.identity.resolver import is_usable, resolve, pick_cached_profile

logger = logging.getLogger(__name__)


class Screen(str, Enum):
    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    ONBOARDING = "onboarding"
    MAIN = "main"


class SessionStore:
    def __init__(self, users: UserRepository, provider: IdentityProvider):
        self.users = users
        self.provider = provider
        self.auth_state = AuthState.signed_out()
        # Session-local bus (views bound to this session listen here)
        self.bus = EventBus()
        self._started = False
        self._unsubscribe: Optional[Callable[[], None]] = None

    # --- derived state ----------------------------------------------------
    @property
    def user(self) -> Optional[User]:
        return self.auth_state.user

    @property
    def is_authenticated(self) -> bool:
        return self.auth_state.is_authenticated

    @property
    def is_onboarded(self) -> bool:
        return self.is_authenticated and bool(self.user.family_id)

    @property
    def screen(self) -> Screen:
        if not self._started:
            return Screen.LOADING
        if not self.is_authenticated:
            return Screen.UNAUTHENTICATED
        if not self.is_onboarded:
            return Screen.ONBOARDING
        return Screen.MAIN

    # --- lifecycle --------------------------------------------------------
    def start(self):
        """Derive the session from the provider once and follow its changes until shutdown()."""
        if self._started:
            return
        self.handle_identity(self.provider.get_current_session())
        self._unsubscribe = self.provider.on_identity_change(self.handle_identity)
        self._started = True
        logger.info(f"Session ready on screen '{self.screen.value}'")

    def shutdown(self):
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def handle_identity(self, identity: Optional[ExternalIdentity]):
        """Re-derive AuthState from the latest identity and cached profile. Safe to call repeatedly."""
        if not is_usable(identity):
            self._clear()
            return
        cached = pick_cached_profile(identity.id, self.users.get_current(), self.users.list_all())
        self.login(resolve(identity, cached))

    # --- operations -------------------------------------------------------
    def login(self, user: User):
        self.auth_state = AuthState(user, True)
        self.users.save_current(user)
        if not self.users.add_if_missing(user):
            self.users.replace(user)
        self._announce(AUTH_CHANGED, publish_auth_changed, user, True)

    def logout(self):
        self.provider.sign_out()
        self._clear()

    def update_user(self, updated: User):
        previous = self._require_user()
        if previous.id != updated.id:
            raise ValueError(f"Cannot replace session user {previous.id} with {updated.id}")
        self.auth_state = AuthState(updated, True)
        self.users.save_current(updated)
        self.users.replace(updated)
        self._announce(USER_UPDATED, publish_user_updated, updated, previous)

    def set_status(self, status: Status) -> User:
        user = self._require_user()
        updated = user.copy_with(current_status=Status(status))
        self.update_user(updated)
        return updated

    def assign_family(self, family: Family) -> User:
        user = self._require_user()
        updated = user.copy_with(family_id=family.id)
        self.update_user(updated)
        logger.info(f"User {user.id} joined family {family.id}")
        return updated

    # --- helpers ----------------------------------------------------------
    def _require_user(self) -> User:
        if not self.is_authenticated:
            raise RuntimeError("No signed-in user")
        return self.user

    def _clear(self):
        was_authenticated = self.auth_state.is_authenticated
        self.auth_state = AuthState.signed_out()
        self.users.clear_current()
        if was_authenticated:
            self._announce(AUTH_CHANGED, publish_auth_changed, None, False)

    def _announce(self, event_name, publisher, *args):
        publisher(*args)
        self.bus.publish(event_name, self.auth_state)
