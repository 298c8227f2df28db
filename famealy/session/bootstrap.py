"""Start sequence: daily reset first, then the session, then everything screens need."""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from famealy.auth.local_provider import LocalIdentityProvider
from famealy.auth.provider import IdentityProvider
from famealy.infra.Family_Repository import FamilyRepository
from famealy.infra.Meal_Repository import MealRepository
from famealy.infra.Reset_Repository import ResetRepository
from famealy.infra.Store import KeyValueStore, JsonFileStore
from famealy.infra.User_Repository import UserRepository
from famealy.infra.paths import STORE_DIR
from famealy.logic.family.directory import FamilyDirectory
from famealy.logic.meals.board import MealBoard
from famealy.logic.reset.daily import run_daily_reset
from famealy.session.Dashboard_View import DashboardView
from famealy.session.Session_Store import SessionStore
from famealy.utilities.config import POLL_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


class AppContext:
    """Everything one running client holds: repositories, core services and the session."""

    def __init__(self, store: KeyValueStore, provider: IdentityProvider, poll_interval: float = POLL_INTERVAL_SECONDS):
        self.store = store
        self.provider = provider
        self.users = UserRepository(store)
        self.families = FamilyRepository(store)
        self.meals = MealRepository(store)
        self.reset_marker = ResetRepository(store)
        self.directory = FamilyDirectory(self.families, self.users)
        self.board = MealBoard(self.meals)
        self.session = SessionStore(self.users, provider)
        self.dashboard = DashboardView(self.session, self.directory, interval=poll_interval)
        self.reset_applied = False

    def shutdown(self):
        self.dashboard.close()
        self.session.shutdown()
        logger.info("Context shut down")


def boot(store: Optional[KeyValueStore] = None, provider: Optional[IdentityProvider] = None,
         today: Optional[str] = None, poll_interval: float = POLL_INTERVAL_SECONDS,
         data_dir: Optional[Path] = None) -> AppContext:
    """Run the start sequence once and return the ready context.

    The daily reset commits before the session reads any user record.
    """
    if store is None:
        store = JsonFileStore(data_dir or STORE_DIR)
    if provider is None:
        provider = LocalIdentityProvider(store)
    ctx = AppContext(store, provider, poll_interval=poll_interval)
    ctx.reset_applied = run_daily_reset(ctx.users, ctx.reset_marker, today=today)
    ctx.session.start()
    return ctx
