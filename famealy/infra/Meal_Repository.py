"""Meal persistence.

All families share one ``meals`` blob; every read filters by family and every
write rewrites the caller's family slice on top of whatever the other
families currently have stored. Concurrent writers to the same family race
and the later write wins.
"""
from typing import List

from famealy.domain.Meal import Meal
from famealy.infra.Store import KeyValueStore
from famealy.utilities.constants import MEALS_KEY


class MealRepository:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def list_all(self) -> List[Meal]:
        meals = [Meal.from_dict(entry) for entry in self.store.get_list(MEALS_KEY)]
        return [m for m in meals if m is not None]

    def replace_all(self, meals: List[Meal]) -> None:
        self.store.set(MEALS_KEY, [m.to_dict() for m in meals])

    def for_family(self, family_id: str) -> List[Meal]:
        return [m for m in self.list_all() if m.family_id == family_id]

    def save_for_family(self, family_id: str, meals: List[Meal]) -> None:
        others = [m for m in self.list_all() if m.family_id != family_id]
        self.replace_all(others + [m for m in meals if m.family_id == family_id])
