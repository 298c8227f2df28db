"""Persisted marker of the last local calendar date on which statuses were reset."""
from typing import Optional

from famealy.infra.Store import KeyValueStore
from famealy.utilities.constants import LAST_RESET_KEY


class ResetRepository:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def get_last_reset(self) -> Optional[str]:
        value = self.store.get(LAST_RESET_KEY)
        return value if isinstance(value, str) else None

    def set_last_reset(self, marker: str) -> None:
        self.store.set(LAST_RESET_KEY, marker)
