from __future__ import annotations

from typing import Sequence

from ..core.constants import SUBJECTS_KEY
from ..storage.store import KeyValueStore, load_json, save_json
from .model import Subject
from .repository import SubjectRepository


class KeyValueSubjectRepository(SubjectRepository):
    def __init__(self, store: KeyValueStore, *, key: str = SUBJECTS_KEY):
        self._store = store
        self._key = key

    def list_all(self) -> Sequence[Subject]:
        return [Subject.from_dict(d) for d in load_json(self._store, self._key, [])]

    def _save(self, subjects: Sequence[Subject]) -> None:
        save_json(self._store, self._key, [s.to_dict() for s in subjects])

    def add(self, subject: Subject) -> None:
        self._save([*self.list_all(), subject])

    def delete(self, subject_id: int) -> bool:
        current = self.list_all()
        kept = [s for s in current if s.id != subject_id]
        if len(kept) == len(current):
            return False
        self._save(kept)
        return True
