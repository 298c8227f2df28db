"""Discriminated failure results returned (not raised) by core operations.

Callers check ``isinstance(result, Failure)`` and render ``result.message``.
"""


class Failure:
    kind = "failure"

    def __init__(self, message: str = ""):
        self.message = message

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def to_dict(self):
        return {"error": self.kind, "message": self.message}


class NotFound(Failure):
    """Invite code or account email that matches nothing."""
    kind = "not_found"


class AuthError(Failure):
    """Credentials rejected, or the provider returned an ambiguous session."""
    kind = "auth_error"


class Unconfirmed(Failure):
    """Sign-up accepted but no usable identity yet (pending email confirmation)."""
    kind = "unconfirmed"
