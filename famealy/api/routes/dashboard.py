"""Dashboard endpoints: member statuses (served from the polled snapshot) and own status."""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from famealy.api.deps import get_context, require_family
from famealy.domain.User import User
from famealy.events.web_observers import get_events
from famealy.session.bootstrap import AppContext
from famealy.utilities.validators import StatusUpdateInput

router = APIRouter(tags=["dashboard"])


def dashboard_payload(ctx: AppContext) -> dict:
    view = ctx.dashboard
    return {
        "family": view.family.to_dict() if view.family else None,
        "members": [m.to_dict() for m in view.members],
        "user": ctx.session.user.to_dict(),
    }


@router.get("/api/dashboard")
def get_dashboard(user: User = Depends(require_family), ctx: AppContext = Depends(get_context)):
    # Opening is idempotent; the poller keeps the member snapshot fresh while signed in
    ctx.dashboard.open()
    return dashboard_payload(ctx)


@router.put("/api/status")
def update_status(payload: StatusUpdateInput, user: User = Depends(require_family),
                  ctx: AppContext = Depends(get_context)):
    ctx.dashboard.open()
    ctx.dashboard.set_status(payload.status)
    return dashboard_payload(ctx)


@router.get("/api/activity")
def activity(since: Optional[int] = Query(default=None), user: User = Depends(require_family)):
    """Incremental feed of family activity; poll with since=<next_cursor>."""
    return get_events(since, family_id=user.family_id)
