import unittest
from datetime import datetime
from famealy.domain.User import User, Status
from famealy.infra.Store import MemoryStore
from famealy.infra.User_Repository import UserRepository
from famealy.infra.Reset_Repository import ResetRepository
from famealy.logic.reset.daily import maybe_reset, run_daily_reset, today_marker


class TestMaybeReset(unittest.TestCase):

    def setUp(self):
        self.users = [
            User("u1", "Alice", "a@x.com", "f1", Status.HOME),
            User("u2", "Bob", "b@x.com", "f1", Status.AWAY),
            User("u3", "Cara", "c@x.com", None, Status.UNSET),
        ]
        self.current = User("u1", "Alice", "a@x.com", "f1", Status.HOME)

    def test_new_day_resets_everyone(self):
        users, current, marker = maybe_reset(self.users, self.current, "01-01-2026", "02-01-2026")
        self.assertTrue(all(u.current_status == Status.UNSET for u in users))
        self.assertEqual(current.current_status, Status.UNSET)
        self.assertEqual(marker, "02-01-2026")
        # Nothing else about the users changes
        self.assertEqual([(u.id, u.family_id) for u in users], [("u1", "f1"), ("u2", "f1"), ("u3", None)])

    def test_inputs_not_mutated(self):
        maybe_reset(self.users, self.current, None, "02-01-2026")
        self.assertEqual(self.users[0].current_status, Status.HOME)
        self.assertEqual(self.current.current_status, Status.HOME)

    def test_same_day_is_noop(self):
        users, current, marker = maybe_reset(self.users, self.current, "02-01-2026", "02-01-2026")
        self.assertIs(users, self.users)
        self.assertIs(current, self.current)
        self.assertEqual(marker, "02-01-2026")

    def test_second_run_same_day_changes_nothing(self):
        first = maybe_reset(self.users, self.current, "01-01-2026", "02-01-2026")
        # Someone goes home after the reset
        users = [first[0][0].copy_with(current_status=Status.HOME)] + first[0][1:]
        second = maybe_reset(users, first[1], first[2], "02-01-2026")
        self.assertEqual(second[0][0].current_status, Status.HOME)

    def test_without_current_user(self):
        _, current, _ = maybe_reset(self.users, None, None, "02-01-2026")
        self.assertIsNone(current)

    def test_marker_is_local_calendar_date(self):
        self.assertEqual(today_marker(datetime(2026, 1, 2, 23, 59)), "02-01-2026")
        self.assertEqual(today_marker(datetime(2026, 1, 3, 0, 0)), "03-01-2026")


class TestRunDailyReset(unittest.TestCase):

    def setUp(self):
        self.store = MemoryStore()
        self.users = UserRepository(self.store)
        self.marker = ResetRepository(self.store)
        self.users.replace_all([
            User("u1", "Alice", "a@x.com", "f1", Status.HOME),
            User("u2", "Bob", "b@x.com", "f1", Status.AWAY),
        ])
        self.users.save_current(User("u1", "Alice", "a@x.com", "f1", Status.HOME))
        self.marker.set_last_reset("01-01-2026")

    def test_commits_roster_session_record_and_marker(self):
        self.assertTrue(run_daily_reset(self.users, self.marker, today="02-01-2026"))
        self.assertTrue(all(u.current_status == Status.UNSET for u in self.users.list_all()))
        self.assertEqual(self.users.get_current().current_status, Status.UNSET)
        self.assertEqual(self.marker.get_last_reset(), "02-01-2026")

    def test_same_day_does_not_write(self):
        run_daily_reset(self.users, self.marker, today="02-01-2026")
        self.users.replace_all([User("u1", "Alice", "a@x.com", "f1", Status.HOME)])
        self.assertFalse(run_daily_reset(self.users, self.marker, today="02-01-2026"))
        self.assertEqual(self.users.list_all()[0].current_status, Status.HOME)

    def test_first_run_without_marker(self):
        self.store.remove("last_reset_date")
        self.store.remove("current_user")
        self.assertTrue(run_daily_reset(self.users, self.marker, today="05-01-2026"))
        self.assertIsNone(self.users.get_current())
        self.assertEqual(self.marker.get_last_reset(), "05-01-2026")


if __name__ == '__main__':
    unittest.main()
