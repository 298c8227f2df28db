"""Family domain entity: a named group joined by a shared invite code."""


class Family:
    def __init__(self, id: str, name: str, invite_code: str):
        self.id = id
        self.name = name
        self.invite_code = invite_code

    def __str__(self) -> str:
        return f"{self.name} ({self.invite_code})"

    __repr__ = __str__

    def matches_code(self, code: str) -> bool:
        if not isinstance(code, str) or not self.invite_code:
            return False
        return self.invite_code.upper() == code.strip().upper()

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        if not d.get("id"):
            return None
        return Family(str(d["id"]), d.get("name") or "", d.get("inviteCode") or "")

    def to_dict(self):
        return {"id": self.id, "name": self.name, "inviteCode": self.invite_code}
