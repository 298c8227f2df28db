"""Meal domain entities: a family's meal and the per-member ratings attached to it."""
from datetime import datetime
from typing import List, Optional


def now_ms() -> int:
    """Current wall clock time as epoch milliseconds (persisted timestamp unit)."""
    return int(datetime.now().timestamp() * 1000)


def _as_int(value, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class MealRating:
    def __init__(self, user_id: str, user_name: str, score: int, comment: str = "",
                 timestamp: Optional[int] = None):
        self.user_id = user_id
        self.user_name = user_name
        self.score = score
        self.comment = comment or ""
        self.timestamp = timestamp if timestamp is not None else now_ms()

    def __str__(self) -> str:
        return f"{self.user_name}: {self.score}" + (f" - {self.comment}" if self.comment else "")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        return MealRating(
            user_id=str(d.get("userId", "")),
            user_name=d.get("userName") or "",
            score=_as_int(d.get("score")),
            comment=d.get("comment") or "",
            timestamp=_as_int(d.get("timestamp")),
        )

    def to_dict(self):
        return {
            "userId": self.user_id,
            "userName": self.user_name,
            "score": self.score,
            "comment": self.comment,
            "timestamp": self.timestamp,
        }


class Meal:
    def __init__(self, id: str, family_id: str, name: str,
                 ratings: Optional[List[MealRating]] = None, created_at: Optional[int] = None):
        self.id = id
        self.family_id = family_id
        self.name = name
        self.ratings = ratings[:] if ratings else []
        self.created_at = created_at if created_at is not None else now_ms()

    def __str__(self) -> str:
        return f"{self.name} - {len(self.ratings)} ratings"

    __repr__ = __str__

    def rating_by(self, user_id: str) -> Optional[MealRating]:
        for rating in self.ratings:
            if rating.user_id == user_id:
                return rating
        return None

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        if not d.get("id"):
            return None
        return Meal(
            id=str(d["id"]),
            family_id=str(d.get("familyId", "")),
            name=d.get("name") or "",
            ratings=[MealRating.from_dict(r) for r in d.get("ratings") or [] if isinstance(r, dict)],
            created_at=_as_int(d.get("createdAt")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "familyId": self.family_id,
            "name": self.name,
            "ratings": [r.to_dict() for r in self.ratings],
            "createdAt": self.created_at,
        }
