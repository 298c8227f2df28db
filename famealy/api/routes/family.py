"""Onboarding and family endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status

from famealy.api.deps import get_context, require_family, require_onboarding
from famealy.domain.Results import NotFound
from famealy.domain.User import User
from famealy.session.bootstrap import AppContext
from famealy.utilities.validators import FamilyCreateInput, JoinFamilyInput

router = APIRouter(tags=["family"])


def family_payload(ctx: AppContext, family) -> dict:
    return {
        "family": family.to_dict() if family else None,
        "members": [m.to_dict() for m in ctx.directory.members_of(family.id if family else None)],
        "user": ctx.session.user.to_dict() if ctx.session.user else None,
        "screen": ctx.session.screen.value,
    }


@router.post("/api/family", status_code=status.HTTP_201_CREATED)
def create_family(payload: FamilyCreateInput, user: User = Depends(require_onboarding),
                  ctx: AppContext = Depends(get_context)):
    family = ctx.directory.create(payload.name)
    ctx.session.assign_family(family)
    return family_payload(ctx, family)


@router.post("/api/family/join")
def join_family(payload: JoinFamilyInput, user: User = Depends(require_onboarding),
                ctx: AppContext = Depends(get_context)):
    result = ctx.directory.join(payload.invite_code)
    if isinstance(result, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    ctx.session.assign_family(result)
    return family_payload(ctx, result)


@router.get("/api/family")
def get_family(user: User = Depends(require_family), ctx: AppContext = Depends(get_context)):
    """Get family info with all members."""
    family = ctx.directory.get(user.family_id)
    if not family:
        raise HTTPException(status_code=404, detail="Family not found")
    return family_payload(ctx, family)
