"""AuthState: who is signed in for this process. Derived each session, never persisted on its own."""
from typing import Optional
from famealy.domain.User import User


class AuthState:
    def __init__(self, user: Optional[User] = None, is_authenticated: bool = False):
        self.user = user
        self.is_authenticated = bool(is_authenticated and user is not None)

    @classmethod
    def signed_out(cls) -> "AuthState":
        return cls(None, False)

    def __repr__(self) -> str:
        return f"AuthState(user={self.user!r}, is_authenticated={self.is_authenticated})"

    def to_dict(self):
        return {
            "user": self.user.to_dict() if self.user else None,
            "isAuthenticated": self.is_authenticated,
        }
