"""Family directory: create a family, join one by invite code, list its members."""
from __future__ import annotations
import logging
import secrets
from typing import List, Optional, Union
from uuid import uuid4

from famealy.domain.Family import Family
from famealy.domain.Results import NotFound
from famealy.domain.User import User
from famealy.infra.Family_Repository import FamilyRepository
from famealy.infra.User_Repository import UserRepository
from famealy.utilities.config import INVITE_CODE_LENGTH
from famealy.utilities.constants import INVITE_CODE_ALPHABET, MAX_INVITE_CODE_ATTEMPTS

logger = logging.getLogger(__name__)

__all__ = ["FamilyDirectory", "generate_invite_code"]


def generate_invite_code(length: int = INVITE_CODE_LENGTH) -> str:
    return ''.join(secrets.choice(INVITE_CODE_ALPHABET) for _ in range(length))


class FamilyDirectory:
    def __init__(self, families: FamilyRepository, users: UserRepository, code_length: int = INVITE_CODE_LENGTH):
        self.families = families
        self.users = users
        self.code_length = code_length

    def _unique_code(self, existing: List[Family]) -> str:
        taken = {f.invite_code.upper() for f in existing}
        for _ in range(MAX_INVITE_CODE_ATTEMPTS):
            code = generate_invite_code(self.code_length)
            if code not in taken:
                return code
        raise RuntimeError(f"Could not generate a free invite code after {MAX_INVITE_CODE_ATTEMPTS} attempts")

    def create(self, name: str) -> Family:
        """Create and persist a family with a fresh id and invite code. Duplicate names are allowed."""
        clean = (name or "").strip()
        if not clean:
            raise ValueError("Family name cannot be empty")
        existing = self.families.list_all()
        family = Family(uuid4().hex, clean, self._unique_code(existing))
        self.families.replace_all(existing + [family])
        logger.info(f"Created family {family.id} '{family.name}'")
        return family

    def join(self, invite_code: str) -> Union[Family, NotFound]:
        """Case-insensitive exact match on invite code."""
        code = (invite_code or "").strip()
        if code:
            for family in self.families.list_all():
                if family.matches_code(code):
                    return family
        logger.info(f"No family matches invite code '{code}'")
        return NotFound("Invalid invitation code. Please check with your family!")

    def get(self, family_id: Optional[str]) -> Optional[Family]:
        if not family_id:
            return None
        return self.families.get(family_id)

    def members_of(self, family_id: Optional[str]) -> List[User]:
        if not family_id:
            return []
        return [u for u in self.users.list_all() if u.family_id == family_id]
