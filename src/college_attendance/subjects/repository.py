from __future__ import annotations

from typing import Protocol, Sequence

from .model import Subject


class SubjectRepository(Protocol):
    def list_all(self) -> Sequence[Subject]:
        raise NotImplementedError

    def add(self, subject: Subject) -> None:
        raise NotImplementedError

    def delete(self, subject_id: int) -> bool:
        raise NotImplementedError
