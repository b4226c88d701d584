from __future__ import annotations

from typing import Sequence

from ..core.constants import STUDENTS_KEY
from ..storage.store import KeyValueStore, load_json, save_json
from .model import Student
from .repository import RosterRepository


class KeyValueRosterRepository(RosterRepository):
    def __init__(self, store: KeyValueStore, *, key: str = STUDENTS_KEY):
        self._store = store
        self._key = key

    def list_all(self) -> Sequence[Student]:
        return [Student.from_dict(d) for d in load_json(self._store, self._key, [])]

    def _save(self, students: Sequence[Student]) -> None:
        save_json(self._store, self._key, [s.to_dict() for s in students])

    def replace_class(self, class_name: str, students: Sequence[Student]) -> None:
        others = [s for s in self.list_all() if s.class_name != class_name]
        self._save([*others, *students])

    def remove_class(self, class_name: str) -> int:
        current = self.list_all()
        kept = [s for s in current if s.class_name != class_name]
        self._save(kept)
        return len(current) - len(kept)
