"""Local password-based identity provider."""
import logging
from typing import Callable, Optional, Union
from uuid import uuid4

import bcrypt

from famealy.auth.provider import IdentityProvider, IdentityCallback
from famealy.domain.Identity import ExternalIdentity
from famealy.domain.Results import AuthError, NotFound, Unconfirmed
from famealy.events.Event_Bus import EventBus
from famealy.infra.Store import KeyValueStore
from famealy.utilities.config import BCRYPT_ROUNDS, REQUIRE_EMAIL_CONFIRMATION
from famealy.utilities.constants import AUTH_ACCOUNTS_KEY, AUTH_SESSION_KEY

logger = logging.getLogger(__name__)

IDENTITY_CHANGED = "identity.changed"


class LocalIdentityProvider(IdentityProvider):
    """
    Identity provider keeping accounts in the key/value store.

    Passwords are hashed with bcrypt. The signed-in identity is persisted
    under ``auth_session`` so it survives a restart. Subscribers are notified
    through a private EventBus.
    """

    def __init__(self, store: KeyValueStore, rounds: int = BCRYPT_ROUNDS,
                 require_confirmation: bool = REQUIRE_EMAIL_CONFIRMATION):
        self.store = store
        self.rounds = rounds
        self.require_confirmation = require_confirmation
        self._bus = EventBus()

    def _hash_password(self, password: str) -> str:
        """Hash a password using bcrypt."""
        return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=self.rounds)).decode('utf-8')

    def _verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        try:
            return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
        except ValueError:
            logger.warning("Stored password hash is malformed")
            return False

    def _accounts(self) -> list:
        return [a for a in self.store.get_list(AUTH_ACCOUNTS_KEY) if isinstance(a, dict)]

    def _find_account(self, email: str) -> Optional[dict]:
        needle = email.strip().lower()
        for account in self._accounts():
            if account.get('email', '').lower() == needle:
                return account
        return None

    @staticmethod
    def _identity(account: dict) -> ExternalIdentity:
        return ExternalIdentity(account['id'], account.get('email'), account.get('name') or None)

    def _notify(self, identity: Optional[ExternalIdentity]):
        self._bus.publish(IDENTITY_CHANGED, identity)

    def _start_session(self, identity: ExternalIdentity):
        self.store.set(AUTH_SESSION_KEY, identity.to_dict())
        logger.info(f"Session started for {identity.id}")
        self._notify(identity)

    def _end_session(self, reason: str):
        had_session = self.store.get(AUTH_SESSION_KEY) is not None
        self.store.remove(AUTH_SESSION_KEY)
        if had_session:
            logger.info(f"Session ended ({reason})")
        self._notify(None)

    # --- IdentityProvider -------------------------------------------------
    def get_current_session(self) -> Optional[ExternalIdentity]:
        return ExternalIdentity.from_dict(self.store.get(AUTH_SESSION_KEY))

    def on_identity_change(self, callback: IdentityCallback) -> Callable[[], None]:
        def _deliver(_event_name, identity):
            callback(identity)

        self._bus.subscribe(IDENTITY_CHANGED, _deliver)
        return lambda: self._bus.unsubscribe(IDENTITY_CHANGED, _deliver)

    def sign_up(self, email: str, password: str, display_name: str) -> Union[ExternalIdentity, AuthError, Unconfirmed]:
        email = (email or '').strip().lower()
        if not email or not password:
            return AuthError("Email and password are required")
        if self._find_account(email) is not None:
            return AuthError("User already registered")
        account = {
            'id': uuid4().hex,
            'email': email,
            'name': (display_name or '').strip(),
            'password_hash': self._hash_password(password),
            'confirmed': not self.require_confirmation,
        }
        self.store.set(AUTH_ACCOUNTS_KEY, self._accounts() + [account])
        logger.info(f"Registered account {account['id']}")
        if not account['confirmed']:
            return Unconfirmed("Check your email to confirm your account, then log in.")
        identity = self._identity(account)
        self._start_session(identity)
        return identity

    def sign_in(self, email: str, password: str) -> Union[ExternalIdentity, AuthError, NotFound]:
        account = self._find_account(email or '')
        if account is None:
            return NotFound("User not found. Try signing up!")
        if not self._verify_password(password or '', account.get('password_hash', '')):
            return AuthError("Invalid login credentials")
        if not account.get('confirmed', True):
            return AuthError("Email not confirmed")
        identity = self._identity(account)
        self._start_session(identity)
        return identity

    def sign_out(self) -> None:
        self._end_session("sign out")

    # --- local extras -----------------------------------------------------
    def confirm(self, email: str) -> bool:
        """Mark a pending account as confirmed (stands in for the email link)."""
        accounts = self._accounts()
        needle = (email or '').strip().lower()
        for account in accounts:
            if account.get('email', '').lower() == needle:
                account['confirmed'] = True
                self.store.set(AUTH_ACCOUNTS_KEY, accounts)
                return True
        return False

    def expire_session(self) -> None:
        """Invalidate the session out of band, as a token expiry would."""
        self._end_session("expired")
