"""Merge a provider identity with the locally cached profile into one canonical User.

The provider owns *who* someone is (id, email); the local cache owns what the
app knows about them (status, family). The display name prefers the provider,
then the cache, then a placeholder.
"""
from __future__ import annotations
from typing import Iterable, Optional

from famealy.domain.Identity import ExternalIdentity
from famealy.domain.User import User, Status
from famealy.utilities.constants import FALLBACK_USER_NAME

__all__ = ["is_usable", "resolve", "pick_cached_profile"]


def is_usable(identity: Optional[ExternalIdentity]) -> bool:
    """False for a missing identity or one without a usable id (treated as signed out)."""
    if identity is None:
        return False
    return isinstance(identity.id, str) and bool(identity.id.strip())


def resolve(identity: ExternalIdentity, cached: Optional[User]) -> User:
    name = (identity.name or "").strip() or (cached.name if cached and cached.name else "") or FALLBACK_USER_NAME
    return User(
        id=identity.id,
        name=name,
        email=identity.email or "",
        family_id=cached.family_id if cached else None,
        current_status=cached.current_status if cached else Status.UNSET,
    )


def pick_cached_profile(user_id: str, current: Optional[User], roster: Iterable[User]) -> Optional[User]:
    """The session record when it belongs to user_id, otherwise that user's roster entry."""
    if current is not None and current.id == user_id:
        return current
    for user in roster:
        if user.id == user_id:
            return user
    return None
