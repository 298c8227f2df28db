import string
import unittest
from unittest.mock import patch
from famealy.domain.Family import Family
from famealy.domain.Results import NotFound
from famealy.domain.User import User
from famealy.infra.Store import MemoryStore
from famealy.infra.Family_Repository import FamilyRepository
from famealy.infra.User_Repository import UserRepository
from famealy.logic.family.directory import FamilyDirectory


class TestFamilyDirectory(unittest.TestCase):

    def setUp(self):
        self.store = MemoryStore()
        self.families = FamilyRepository(self.store)
        self.users = UserRepository(self.store)
        self.directory = FamilyDirectory(self.families, self.users)

    def test_create_generates_code_and_persists(self):
        family = self.directory.create("  Smiths ")
        self.assertEqual(family.name, "Smiths")
        self.assertEqual(len(family.invite_code), 6)
        allowed = set(string.ascii_uppercase + string.digits)
        self.assertTrue(set(family.invite_code) <= allowed)
        self.assertEqual([f.id for f in self.families.list_all()], [family.id])

    def test_create_allows_duplicate_names(self):
        a = self.directory.create("Smiths")
        b = self.directory.create("Smiths")
        self.assertNotEqual(a.id, b.id)
        self.assertNotEqual(a.invite_code, b.invite_code)

    def test_create_rejects_empty_name(self):
        with self.assertRaises(ValueError):
            self.directory.create("   ")
        self.assertEqual(self.families.list_all(), [])

    def test_join_is_case_insensitive(self):
        self.families.append(Family("f1", "Smiths", "A1B2C3"))
        joined = self.directory.join("a1b2c3")
        self.assertEqual(joined.id, "f1")
        self.assertEqual(self.directory.join(" A1b2C3 ").id, "f1")

    def test_join_unknown_code(self):
        self.families.append(Family("f1", "Smiths", "A1B2C3"))
        result = self.directory.join("zzzzzz")
        self.assertIsInstance(result, NotFound)
        self.assertTrue(result.message)
        self.assertIsInstance(self.directory.join(""), NotFound)

    def test_code_collision_is_regenerated(self):
        self.families.append(Family("f1", "Smiths", "AAAAAA"))
        with patch("famealy.logic.family.directory.generate_invite_code", side_effect=["AAAAAA", "AAAAAA", "BBBBBB"]):
            family = self.directory.create("Joneses")
        self.assertEqual(family.invite_code, "BBBBBB")

    def test_code_space_exhausted(self):
        self.families.append(Family("f1", "Smiths", "AAAAAA"))
        with patch("famealy.logic.family.directory.generate_invite_code", return_value="AAAAAA"):
            with self.assertRaises(RuntimeError):
                self.directory.create("Joneses")

    def test_members_of(self):
        self.users.replace_all([
            User("u1", "Alice", "", "f1"),
            User("u2", "Bob", "", "f2"),
            User("u3", "Cara", "", "f1"),
            User("u4", "Dan", "", None),
        ])
        self.assertEqual([u.id for u in self.directory.members_of("f1")], ["u1", "u3"])
        self.assertEqual(self.directory.members_of(None), [])

    def test_create_then_join_shares_family(self):
        family = self.directory.create("Smiths")
        self.users.replace_all([User("u1", "Alice", "", family.id), User("u2", "Bob", "", None)])
        joined = self.directory.join(family.invite_code.lower())
        self.users.replace(self.users.find("u2").copy_with(family_id=joined.id))
        self.assertEqual({u.id for u in self.directory.members_of(family.id)}, {"u1", "u2"})


if __name__ == '__main__':
    unittest.main()
