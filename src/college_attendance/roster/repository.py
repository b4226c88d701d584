from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class RosterRepository(Protocol):
    """Roster store interface.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def replace_class(self, class_name: str, students: Sequence[Student]) -> None:
        """Discard every student of ``class_name`` and store ``students`` in one write."""

        raise NotImplementedError

    def remove_class(self, class_name: str) -> int:
        raise NotImplementedError
