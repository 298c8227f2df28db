"""User persistence: the global roster plus the single current-session record."""
import logging
from typing import List, Optional

from famealy.domain.User import User
from famealy.infra.Store import KeyValueStore
from famealy.utilities.constants import USERS_KEY, CURRENT_USER_KEY

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, store: KeyValueStore):
        self.store = store

    # --- roster (users_list) ----------------------------------------------
    def list_all(self) -> List[User]:
        users = [User.from_dict(entry) for entry in self.store.get_list(USERS_KEY)]
        return [u for u in users if u is not None]

    def replace_all(self, users: List[User]) -> None:
        self.store.set(USERS_KEY, [u.to_dict() for u in users])

    def find(self, user_id: str) -> Optional[User]:
        for user in self.list_all():
            if user.id == user_id:
                return user
        return None

    def replace(self, updated: User) -> bool:
        '''Swap the roster entry with the same id, leaving every other entry untouched.'''
        users = self.list_all()
        found = False
        for idx, user in enumerate(users):
            if user.id == updated.id:
                users[idx] = updated
                found = True
        if found:
            self.replace_all(users)
        return found

    def add_if_missing(self, user: User) -> bool:
        users = self.list_all()
        if any(u.id == user.id for u in users):
            return False
        users.append(user)
        self.replace_all(users)
        logger.info(f"Enrolled user {user.id} in roster")
        return True

    # --- session record (current_user) ------------------------------------
    def get_current(self) -> Optional[User]:
        return User.from_dict(self.store.get(CURRENT_USER_KEY))

    def save_current(self, user: User) -> None:
        self.store.set(CURRENT_USER_KEY, user.to_dict())

    def clear_current(self) -> None:
        self.store.remove(CURRENT_USER_KEY)
