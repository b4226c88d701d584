from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..common.validators import is_blank
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import RowError, Student, roll_sort_key
from .parser import parse_roster
from .repository import RosterRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RosterImportResult:
    class_name: str
    students: tuple[Student, ...]
    errors: tuple[RowError, ...]

    @property
    def applied(self) -> bool:
        return not self.errors


class RosterService:
    """Use case: admin maintains class rosters."""

    def __init__(self, roster: RosterRepository):
        self._roster = roster

    @staticmethod
    def _require_admin(current_role: Role) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to manage students.")

    def import_roster(self, *, current_role: Role, class_name: str, text: str, has_header: bool = False) -> RosterImportResult:
        """Replace the roster of ``class_name`` with the parsed file.

        Rows with errors reject the whole file; nothing is written then.
        """
        self._require_admin(current_role)
        if is_blank(class_name):
            raise ValidationError("Please select a class before uploading the student file.")
        class_name = str(class_name).strip()

        parsed = parse_roster(text, class_name, has_header=has_header)
        if not parsed.ok:
            logger.warning("roster import for class %s rejected: %d bad rows", class_name, len(parsed.errors))
            return RosterImportResult(class_name=class_name, students=parsed.students, errors=parsed.errors)

        self._roster.replace_class(class_name, parsed.students)
        logger.info("roster for class %s replaced with %d students", class_name, len(parsed.students))
        return RosterImportResult(class_name=class_name, students=parsed.students, errors=())

    def clear_roster(self, *, current_role: Role, class_name: str) -> int:
        self._require_admin(current_role)
        if is_blank(class_name):
            raise ValidationError("Please select a class to clear its students.")

        class_name = str(class_name).strip()
        removed = self._roster.remove_class(class_name)
        logger.info("cleared %d students from class %s", removed, class_name)
        return removed

    def list_students(self) -> list[Student]:
        return sorted(self._roster.list_all(), key=lambda s: (s.class_name, roll_sort_key(s.roll_no)))

    def students_for_class(self, class_name: str) -> list[Student]:
        return sorted(
            (s for s in self._roster.list_all() if s.class_name == class_name),
            key=lambda s: roll_sort_key(s.roll_no),
        )

    def count_by_class(self, students: Sequence[Student] | None = None) -> dict[str, int]:
        counts: dict[str, int] = {}
        for s in students if students is not None else self._roster.list_all():
            counts[s.class_name] = counts.get(s.class_name, 0) + 1
        return counts
