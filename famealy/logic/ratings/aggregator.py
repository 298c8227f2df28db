"""Rating aggregation helpers: pure functions over a meal's ratings."""
from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

from famealy.domain.Meal import Meal, MealRating, now_ms
from famealy.utilities.constants import MIN_SCORE, MAX_SCORE, RATING_LABELS

__all__ = ["average_score", "upsert_rating", "sort_meals", "rating_label", "validate_score"]


def average_score(ratings: Iterable[MealRating]) -> float:
    """Mean score rounded to one decimal (half away from zero); 0 when unrated."""
    scores = [r.score for r in ratings]
    if not scores:
        return 0.0
    mean = Decimal(sum(scores)) / Decimal(len(scores))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def validate_score(score) -> int:
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {score!r}")
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise ValueError(f"Score must be between {MIN_SCORE} and {MAX_SCORE}: {score}")
    return score


def upsert_rating(meal: Meal, user_id: str, user_name: str, score: int,
                  comment: Optional[str] = "", now: Optional[int] = None) -> Meal:
    """Return a copy of meal where user_id's rating is replaced by the new one."""
    validate_score(score)
    others = [r for r in meal.ratings if r.user_id != user_id]
    rating = MealRating(
        user_id=user_id,
        user_name=user_name,
        score=score,
        comment=(comment or "").strip(),
        timestamp=now if now is not None else now_ms(),
    )
    return Meal(meal.id, meal.family_id, meal.name, others + [rating], meal.created_at)


def sort_meals(meals: Iterable[Meal]) -> List[Meal]:
    """Lowest average first (unrated meals lead); ties by creation time, then input order."""
    return sorted(meals, key=lambda m: (average_score(m.ratings), m.created_at))


def rating_label(score: int) -> str:
    return RATING_LABELS.get(score, "")
