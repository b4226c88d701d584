from __future__ import annotations

from typing import Iterable, Sequence

from ..roster.model import Student


class AttendanceSheet:
    """Present/absent toggles for one class while attendance is being taken.

    Every student starts present. The sheet is never persisted.
    """

    def __init__(self, class_name: str, students: Sequence[Student]):
        self.class_name = class_name
        self._students = list(students)
        self._present = {s.id: True for s in self._students}

    @property
    def students(self) -> list[Student]:
        return list(self._students)

    def toggle(self, student_id: str) -> bool:
        if student_id not in self._present:
            return False
        self._present[student_id] = not self._present[student_id]
        return self._present[student_id]

    def mark_absent(self, student_ids: Iterable[str]) -> None:
        # ids outside this class are ignored
        for sid in student_ids:
            if sid in self._present:
                self._present[sid] = False

    def absentees(self) -> list[Student]:
        return [s for s in self._students if not self._present[s.id]]

    def present(self) -> list[Student]:
        return [s for s in self._students if self._present[s.id]]

    def to_rows(self) -> list[dict]:
        return [{**s.to_dict(), "present": self._present[s.id]} for s in self._students]
