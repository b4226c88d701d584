"""Roster file parsing.

One student per line, three comma separated fields:
roll number, admission number, full name. Fields may be quoted the usual CSV
way when a name contains a comma; a quoted field cannot span lines.
"""
from __future__ import annotations

import csv

from ..core.constants import ROSTER_DELIMITER
from .model import RosterParseResult, RowError, Student, make_student_id

FIELD_COUNT = 3
HEADER_HINTS = {"roll", "rollno", "roll_no", "roll no", "roll number"}


def _looks_like_header(fields: list[str]) -> bool:
    return bool(fields) and fields[0].strip().lower() in HEADER_HINTS


def parse_roster(text: str, class_name: str, *, has_header: bool = False) -> RosterParseResult:
    students: list[Student] = []
    errors: list[RowError] = []
    seen_rolls: dict[str, int] = {}

    first = True
    for line_no, raw in enumerate((text or "").splitlines(), start=1):
        fields = next(csv.reader([raw], delimiter=ROSTER_DELIMITER, skipinitialspace=True), [])
        values = [f.strip() for f in fields]
        if not any(values):
            continue

        if first:
            first = False
            if has_header or _looks_like_header(values):
                continue

        if len(values) < FIELD_COUNT:
            errors.append(RowError(line_no, f"expected {FIELD_COUNT} fields, got {len(values)}", raw))
            continue
        if len(values) > FIELD_COUNT:
            errors.append(RowError(line_no, f"too many fields ({len(values)}); quote names containing commas", raw))
            continue

        roll_no, ad_number, name = values
        if not roll_no:
            errors.append(RowError(line_no, "roll number is empty", raw))
            continue
        if not roll_no.isdigit():
            errors.append(RowError(line_no, f"roll number {roll_no!r} is not numeric", raw))
            continue
        if not name:
            errors.append(RowError(line_no, "name is empty", raw))
            continue

        # "01" and "1" are the same roll number
        roll_no = str(int(roll_no))
        if roll_no in seen_rolls:
            errors.append(RowError(line_no, f"roll number {roll_no} already used on line {seen_rolls[roll_no]}", raw))
            continue
        seen_rolls[roll_no] = line_no

        students.append(
            Student(
                id=make_student_id(class_name, roll_no),
                roll_no=roll_no,
                ad_number=ad_number,
                name=name,
                class_name=class_name,
            )
        )

    return RosterParseResult(students=tuple(students), errors=tuple(errors))
