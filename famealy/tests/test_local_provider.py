import unittest
from famealy.auth.local_provider import LocalIdentityProvider
from famealy.domain.Identity import ExternalIdentity
from famealy.domain.Results import AuthError, NotFound, Unconfirmed
from famealy.infra.Store import MemoryStore


class TestLocalIdentityProvider(unittest.TestCase):

    def setUp(self):
        self.store = MemoryStore()
        self.provider = LocalIdentityProvider(self.store, rounds=4, require_confirmation=False)
        self.seen = []
        self.detach = self.provider.on_identity_change(self.seen.append)

    def test_sign_up_signs_in_and_notifies(self):
        identity = self.provider.sign_up("Alice@Example.com ", "pw", "Alice")
        self.assertIsInstance(identity, ExternalIdentity)
        self.assertEqual(identity.email, "alice@example.com")
        self.assertEqual(identity.name, "Alice")
        self.assertEqual(self.seen, [identity])
        self.assertEqual(self.provider.get_current_session(), identity)

    def test_password_is_not_stored_in_clear(self):
        self.provider.sign_up("a@x.com", "secret-pw", "A")
        account = self.store.get("auth_accounts")[0]
        self.assertNotIn("secret-pw", account["password_hash"])

    def test_duplicate_sign_up(self):
        self.provider.sign_up("a@x.com", "pw", "A")
        self.assertIsInstance(self.provider.sign_up("A@X.com", "pw2", "A2"), AuthError)

    def test_sign_in_results(self):
        self.provider.sign_up("a@x.com", "pw", "A")
        self.provider.sign_out()
        self.assertIsInstance(self.provider.sign_in("nobody@x.com", "pw"), NotFound)
        self.assertIsInstance(self.provider.sign_in("a@x.com", "wrong"), AuthError)
        identity = self.provider.sign_in("A@x.com", "pw")
        self.assertEqual(identity.email, "a@x.com")
        self.assertEqual(self.seen[-1], identity)

    def test_sign_out_and_expiry_notify_none(self):
        self.provider.sign_up("a@x.com", "pw", "A")
        self.provider.expire_session()
        self.assertIsNone(self.seen[-1])
        self.assertIsNone(self.provider.get_current_session())

    def test_session_survives_restart(self):
        identity = self.provider.sign_up("a@x.com", "pw", "A")
        restarted = LocalIdentityProvider(self.store, rounds=4)
        self.assertEqual(restarted.get_current_session(), identity)

    def test_unsubscribe(self):
        self.detach()
        self.provider.sign_up("a@x.com", "pw", "A")
        self.assertEqual(self.seen, [])

    def test_confirmation_required(self):
        provider = LocalIdentityProvider(MemoryStore(), rounds=4, require_confirmation=True)
        seen = []
        provider.on_identity_change(seen.append)
        result = provider.sign_up("a@x.com", "pw", "A")
        self.assertIsInstance(result, Unconfirmed)
        self.assertIsNone(provider.get_current_session())
        self.assertEqual(seen, [])
        self.assertIsInstance(provider.sign_in("a@x.com", "pw"), AuthError)
        self.assertTrue(provider.confirm("a@x.com"))
        self.assertIsInstance(provider.sign_in("a@x.com", "pw"), ExternalIdentity)


if __name__ == '__main__':
    unittest.main()
