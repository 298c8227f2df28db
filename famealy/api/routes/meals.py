"""Meals screen endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from famealy.api.deps import get_context, require_family
from famealy.domain.Meal import Meal
from famealy.domain.Results import NotFound
from famealy.domain.User import User
from famealy.infra.pdf_utils import generate_pdf_for_meals
from famealy.logic.ratings.aggregator import average_score, rating_label
from famealy.session.bootstrap import AppContext
from famealy.utilities.validators import MealCreateInput, RatingInput

router = APIRouter(tags=["meals"])


def meal_payload(meal: Meal, user: User) -> dict:
    data = meal.to_dict()
    data["average"] = average_score(meal.ratings)
    mine = meal.rating_by(user.id)
    data["myRating"] = mine.to_dict() if mine else None
    for rating in data["ratings"]:
        rating["label"] = rating_label(rating["score"])
    return data


@router.get("/api/meals")
def list_meals(user: User = Depends(require_family), ctx: AppContext = Depends(get_context)):
    """Family meals, lowest average first."""
    meals = ctx.board.list_for_family(user.family_id)
    return {"count": len(meals), "meals": [meal_payload(m, user) for m in meals]}


@router.post("/api/meals", status_code=status.HTTP_201_CREATED)
def add_meal(payload: MealCreateInput, user: User = Depends(require_family),
             ctx: AppContext = Depends(get_context)):
    meal = ctx.board.add(user.family_id, payload.name)
    return meal_payload(meal, user)


@router.post("/api/meals/{meal_id}/ratings")
def rate_meal(meal_id: str, payload: RatingInput, user: User = Depends(require_family),
              ctx: AppContext = Depends(get_context)):
    result = ctx.board.rate(user.family_id, meal_id, user, payload.score, payload.comment)
    if isinstance(result, NotFound):
        raise HTTPException(status_code=404, detail=result.message)
    return meal_payload(result, user)


@router.delete("/api/meals/{meal_id}")
def delete_meal(meal_id: str, user: User = Depends(require_family), ctx: AppContext = Depends(get_context)):
    if not ctx.board.remove(user.family_id, meal_id):
        raise HTTPException(status_code=404, detail="Meal not found")
    return {"status": "deleted", "id": meal_id}


@router.get("/api/meals/export.pdf")
def export_meals_pdf(user: User = Depends(require_family), ctx: AppContext = Depends(get_context)):
    family = ctx.directory.get(user.family_id)
    meals = ctx.board.list_for_family(user.family_id)
    pdf_bytes = generate_pdf_for_meals(family.name if family else "My Family", meals)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="famealy-meals.pdf"'},
    )
