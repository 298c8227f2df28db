"""The family meal board: list, add, rate and remove a family's meals."""
from __future__ import annotations
import logging
from typing import List, Optional, Union
from uuid import uuid4

from famealy.domain.Meal import Meal, now_ms
from famealy.domain.Results import NotFound
from famealy.domain.User import User
from famealy.events.event_helpers import publish_meal_added, publish_meal_rated, publish_meal_removed
from famealy.infra.Meal_Repository import MealRepository
from famealy.logic.ratings.aggregator import sort_meals, upsert_rating

logger = logging.getLogger(__name__)

__all__ = ["MealBoard"]


class MealBoard:
    def __init__(self, meals: MealRepository):
        self.meals = meals

    def list_for_family(self, family_id: str) -> List[Meal]:
        """Family meals, lowest average first."""
        return sort_meals(self.meals.for_family(family_id))

    def get(self, family_id: str, meal_id: str) -> Optional[Meal]:
        for meal in self.meals.for_family(family_id):
            if meal.id == meal_id:
                return meal
        return None

    def add(self, family_id: str, name: str, now: Optional[int] = None) -> Meal:
        clean = (name or "").strip()
        if not clean:
            raise ValueError("Meal name cannot be empty")
        meal = Meal(uuid4().hex, family_id, clean, [], now if now is not None else now_ms())
        current = self.meals.for_family(family_id)
        self.meals.save_for_family(family_id, current + [meal])
        logger.info(f"Added meal '{meal.name}' to family {family_id}")
        publish_meal_added(meal)
        return meal

    def rate(self, family_id: str, meal_id: str, user: User, score: int, comment: str = "",
             now: Optional[int] = None) -> Union[Meal, NotFound]:
        """Upsert user's rating on a meal; NotFound when the meal is gone (deleted by someone else)."""
        current = self.meals.for_family(family_id)
        for idx, meal in enumerate(current):
            if meal.id == meal_id:
                updated = upsert_rating(meal, user.id, user.name, score, comment, now=now)
                current[idx] = updated
                self.meals.save_for_family(family_id, current)
                publish_meal_rated(updated, updated.rating_by(user.id))
                return updated
        return NotFound("Meal not found")

    def remove(self, family_id: str, meal_id: str) -> bool:
        """Hard delete; False if the meal was not on the board."""
        current = self.meals.for_family(family_id)
        remaining = [m for m in current if m.id != meal_id]
        if len(remaining) == len(current):
            return False
        self.meals.save_for_family(family_id, remaining)
        logger.info(f"Removed meal {meal_id} from family {family_id}")
        publish_meal_removed(meal_id, family_id)
        return True
