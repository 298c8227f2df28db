"""ExternalIdentity: what the identity provider knows about a signed-in person."""
from typing import Optional


class ExternalIdentity:
    def __init__(self, id: str, email: Optional[str] = None, name: Optional[str] = None):
        self.id = id
        self.email = email
        self.name = name

    def __repr__(self) -> str:
        return f"ExternalIdentity(id={self.id!r}, email={self.email!r}, name={self.name!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ExternalIdentity):
            return NotImplemented
        return (self.id, self.email, self.name) == (other.id, other.email, other.name)

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        if not d.get("id"):
            return None
        return ExternalIdentity(str(d["id"]), d.get("email"), d.get("name"))

    def to_dict(self):
        return {"id": self.id, "email": self.email, "name": self.name}
