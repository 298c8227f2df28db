"""User domain entity: identity, display name, email, family membership and daily status."""
from enum import Enum
from typing import Optional


class Status(str, Enum):
    HOME = "HOME"
    AWAY = "AWAY"
    UNSET = "UNSET"

    @staticmethod
    def parse(value) -> "Status":
        '''Lenient parse for persisted values; anything unknown becomes UNSET.'''
        if isinstance(value, Status):
            return value
        try:
            return Status(str(value).upper())
        except ValueError:
            return Status.UNSET


class User:
    def __init__(self, id: str, name: str = "", email: str = "",
                 family_id: Optional[str] = None, current_status: Status = Status.UNSET):
        self.id = id
        self.name = name
        self.email = email
        self.family_id = family_id or None
        self.current_status = Status.parse(current_status)

    def __str__(self) -> str:
        return f"{self.name} <{self.email}> - {self.current_status.value} - Family: {self.family_id or '-'}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def copy_with(self, **changes) -> "User":
        '''Return a new User with the given attributes replaced; the id never changes.'''
        data = {
            "name": self.name,
            "email": self.email,
            "family_id": self.family_id,
            "current_status": self.current_status,
        }
        data.update(changes)
        return User(self.id, **data)

    @staticmethod
    def from_dict(data):
        '''Creates a User from its persisted (camelCase) form. Returns None without an id.'''
        d = data if isinstance(data, dict) else {}
        if not d.get("id"):
            return None
        return User(
            id=str(d["id"]),
            name=d.get("name") or "",
            email=d.get("email") or "",
            family_id=d.get("familyId"),
            current_status=d.get("currentStatus", Status.UNSET.value),
        )

    def to_dict(self):
        data = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "currentStatus": self.current_status.value,
        }
        if self.family_id:
            data["familyId"] = self.family_id
        return data
