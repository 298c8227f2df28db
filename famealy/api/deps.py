"""Common API dependencies: the running context, signed-in user and onboarding checks."""
from typing import Optional

from fastapi import Depends, HTTPException, status

from famealy.domain.User import User
from famealy.session.bootstrap import AppContext, boot

_context: Optional[AppContext] = None


def get_context() -> AppContext:
    """Return the process context, booting it on first use."""
    global _context
    if _context is None:
        _context = boot()
    return _context


def reset_context() -> None:
    """Shut down and forget the process context (app shutdown)."""
    global _context
    if _context is not None:
        _context.shutdown()
        _context = None


def require_user(ctx: AppContext = Depends(get_context)) -> User:
    """Require a signed-in user."""
    if not ctx.session.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not signed in",
        )
    return ctx.session.user


def require_family(user: User = Depends(require_user)) -> User:
    """Require the signed-in user to have finished onboarding."""
    if not user.family_id:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Create or join a family first",
        )
    return user


def require_onboarding(user: User = Depends(require_user)) -> User:
    """Require a signed-in user who has not joined a family yet."""
    if user.family_id:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Already in a family",
        )
    return user
