import unittest
from famealy.domain.Identity import ExternalIdentity
from famealy.domain.User import User, Status
from famealy.logic.identity.resolver import resolve, is_usable, pick_cached_profile


class TestResolve(unittest.TestCase):

    def test_merges_identity_with_cached_profile(self):
        cached = User("u1", "Alice", "old@b.com", "f1", Status.HOME)
        user = resolve(ExternalIdentity("u1", "a@b.com", None), cached)
        self.assertEqual(user.to_dict(), {
            "id": "u1", "email": "a@b.com", "name": "Alice", "familyId": "f1", "currentStatus": "HOME",
        })

    def test_provider_name_wins(self):
        cached = User("u1", "Alice", "", None, Status.AWAY)
        self.assertEqual(resolve(ExternalIdentity("u1", "a@b.com", "Ali"), cached).name, "Ali")

    def test_defaults_without_cache(self):
        user = resolve(ExternalIdentity("u9"), None)
        self.assertEqual(user.name, "User")
        self.assertEqual(user.email, "")
        self.assertIsNone(user.family_id)
        self.assertEqual(user.current_status, Status.UNSET)

    def test_blank_names_fall_through(self):
        cached = User("u1", "", "", None)
        self.assertEqual(resolve(ExternalIdentity("u1", None, "   "), cached).name, "User")

    def test_usable_identities(self):
        self.assertFalse(is_usable(None))
        self.assertFalse(is_usable(ExternalIdentity("")))
        self.assertFalse(is_usable(ExternalIdentity("  ")))
        self.assertTrue(is_usable(ExternalIdentity("u1")))

    def test_cached_profile_prefers_matching_session_record(self):
        current = User("u1", "Session", "", "f1")
        roster = [User("u1", "Roster", "", "f2"), User("u2", "Bob", "", "f3")]
        self.assertEqual(pick_cached_profile("u1", current, roster).name, "Session")
        self.assertEqual(pick_cached_profile("u2", current, roster).name, "Bob")
        self.assertIsNone(pick_cached_profile("u3", current, roster))


if __name__ == '__main__':
    unittest.main()
