import unittest
from famealy.auth.local_provider import LocalIdentityProvider
from famealy.domain.Family import Family
from famealy.domain.Identity import ExternalIdentity
from famealy.domain.User import User, Status
from famealy.infra.Store import MemoryStore
from famealy.infra.User_Repository import UserRepository
from famealy.session.Session_Store import SessionStore, Screen


class TestSessionStore(unittest.TestCase):

    def setUp(self):
        self.store = MemoryStore()
        self.users = UserRepository(self.store)
        self.provider = LocalIdentityProvider(self.store, rounds=4, require_confirmation=False)
        self.session = SessionStore(self.users, self.provider)

    def tearDown(self):
        self.session.shutdown()

    def test_loading_until_started(self):
        self.assertEqual(self.session.screen, Screen.LOADING)
        self.session.start()
        self.assertEqual(self.session.screen, Screen.UNAUTHENTICATED)

    def test_sign_up_routes_to_onboarding_then_main(self):
        self.session.start()
        identity = self.provider.sign_up("a@x.com", "pw", "Alice")
        self.assertEqual(self.session.screen, Screen.ONBOARDING)
        self.assertEqual(self.session.user.id, identity.id)
        self.assertEqual(self.session.user.current_status, Status.UNSET)
        # Enrolled in the roster exactly once
        self.assertEqual([u.id for u in self.users.list_all()], [identity.id])

        self.session.assign_family(Family("f1", "Smiths", "ABC123"))
        self.assertEqual(self.session.screen, Screen.MAIN)
        self.assertEqual(self.users.get_current().family_id, "f1")
        self.assertEqual(self.users.find(identity.id).family_id, "f1")

    def test_update_user_leaves_other_roster_entries(self):
        self.users.replace_all([User("other", "Bob", "b@x.com", "f1", Status.AWAY)])
        self.session.start()
        self.provider.sign_up("a@x.com", "pw", "Alice")
        self.session.set_status(Status.HOME)
        roster = {u.id: u for u in self.users.list_all()}
        self.assertEqual(roster["other"].current_status, Status.AWAY)
        self.assertEqual(roster[self.session.user.id].current_status, Status.HOME)
        self.assertEqual(self.users.get_current().current_status, Status.HOME)

    def test_update_user_cannot_change_id(self):
        self.session.start()
        self.provider.sign_up("a@x.com", "pw", "Alice")
        with self.assertRaises(ValueError):
            self.session.update_user(User("someone-else", "X"))

    def test_update_user_requires_signed_in_user(self):
        self.users.replace_all([User("u1", "Alice", "a@x.com")])
        self.session.start()
        with self.assertRaises(RuntimeError):
            self.session.update_user(User("u1", "Alice", "a@x.com", "f1", Status.HOME))
        self.assertFalse(self.session.is_authenticated)
        self.assertEqual(self.session.screen, Screen.UNAUTHENTICATED)
        self.assertIsNone(self.users.get_current())
        self.assertIsNone(self.users.find("u1").family_id)

    def test_out_of_band_expiry_signs_out(self):
        self.session.start()
        self.provider.sign_up("a@x.com", "pw", "Alice")
        self.provider.expire_session()
        self.assertFalse(self.session.is_authenticated)
        self.assertEqual(self.session.screen, Screen.UNAUTHENTICATED)
        self.assertIsNone(self.users.get_current())

    def test_returning_user_keeps_family_and_status(self):
        self.session.start()
        self.provider.sign_up("a@x.com", "pw", "Alice")
        self.session.assign_family(Family("f1", "Smiths", "ABC123"))
        self.session.set_status(Status.AWAY)
        self.session.logout()
        self.assertEqual(self.session.screen, Screen.UNAUTHENTICATED)

        self.provider.sign_in("a@x.com", "pw")
        self.assertEqual(self.session.screen, Screen.MAIN)
        self.assertEqual(self.session.user.family_id, "f1")
        self.assertEqual(self.session.user.current_status, Status.AWAY)
        self.assertEqual(len(self.users.list_all()), 1)

    def test_handle_identity_is_idempotent(self):
        self.session.start()
        identity = ExternalIdentity("u1", "a@x.com", None)
        self.users.replace_all([User("u1", "Alice", "a@x.com", "f1", Status.HOME)])
        self.session.handle_identity(identity)
        first = self.session.user
        self.session.handle_identity(identity)
        self.assertEqual(self.session.user, first)
        self.assertEqual(first.name, "Alice")
        self.assertEqual(len(self.users.list_all()), 1)

    def test_ambiguous_identity_is_signed_out(self):
        self.session.start()
        self.session.handle_identity(ExternalIdentity("u1"))
        self.session.handle_identity(ExternalIdentity(""))
        self.assertFalse(self.session.is_authenticated)

    def test_existing_session_restored_on_start(self):
        identity = self.provider.sign_up("a@x.com", "pw", "Alice")
        fresh = SessionStore(self.users, LocalIdentityProvider(self.store, rounds=4))
        fresh.start()
        self.assertEqual(fresh.user.id, identity.id)
        self.assertEqual(fresh.screen, Screen.ONBOARDING)
        fresh.shutdown()

    def test_shutdown_detaches(self):
        self.session.start()
        self.session.shutdown()
        self.provider.sign_up("a@x.com", "pw", "Alice")
        self.assertFalse(self.session.is_authenticated)


if __name__ == '__main__':
    unittest.main()
