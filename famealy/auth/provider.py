"""Abstract base class for identity providers."""
from abc import ABC, abstractmethod
from typing import Callable, Optional, Union

from famealy.domain.Identity import ExternalIdentity
from famealy.domain.Results import AuthError, NotFound, Unconfirmed

IdentityCallback = Callable[[Optional[ExternalIdentity]], None]


class IdentityProvider(ABC):
    """
    Identity provider interface consumed by the session layer.

    This abstraction allows swapping the bundled local provider for a hosted
    one without changing the session or route code.
    """

    @abstractmethod
    def get_current_session(self) -> Optional[ExternalIdentity]:
        """
        Return the identity of a still-valid session, if any.

        Queried once at start.
        """
        pass

    @abstractmethod
    def on_identity_change(self, callback: IdentityCallback) -> Callable[[], None]:
        """
        Register callback for sign-in, sign-out and expiry.

        The callback receives the current identity, or None when signed out.
        Returns a function that detaches the subscription.
        """
        pass

    @abstractmethod
    def sign_up(self, email: str, password: str, display_name: str) -> Union[ExternalIdentity, AuthError, Unconfirmed]:
        """
        Register an account.

        Returns the new identity (and signs it in), or Unconfirmed when the
        account exists but cannot be used yet.
        """
        pass

    @abstractmethod
    def sign_in(self, email: str, password: str) -> Union[ExternalIdentity, AuthError, NotFound]:
        """
        Authenticate with email and password.
        """
        pass

    @abstractmethod
    def sign_out(self) -> None:
        """
        End the current session and notify subscribers with None.
        """
        pass
