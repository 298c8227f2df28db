"""Family persistence (shared, multi-writer, last write wins)."""
from typing import List, Optional

from famealy.domain.Family import Family
from famealy.infra.Store import KeyValueStore
from famealy.utilities.constants import FAMILIES_KEY


class FamilyRepository:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def list_all(self) -> List[Family]:
        families = [Family.from_dict(entry) for entry in self.store.get_list(FAMILIES_KEY)]
        return [f for f in families if f is not None]

    def replace_all(self, families: List[Family]) -> None:
        self.store.set(FAMILIES_KEY, [f.to_dict() for f in families])

    def append(self, family: Family) -> None:
        families = self.list_all()
        families.append(family)
        self.replace_all(families)

    def get(self, family_id: str) -> Optional[Family]:
        for family in self.list_all():
            if family.id == family_id:
                return family
        return None
