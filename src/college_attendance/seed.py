"""Demo data for local runs (class 5 roster and a few subjects)."""
from __future__ import annotations

import logging

from .core.enums import Role
from .roster.service import RosterService
from .subjects.service import SubjectService

logger = logging.getLogger(__name__)

DEMO_CLASS = "5"
DEMO_ROSTER = "1,A01,Alice\n2,A02,Bob\n3,A03,Chitra\n4,A04,Dev\n"
DEMO_SUBJECTS = ("Math", "Physics", "English")


def seed_demo_data(roster: RosterService, subjects: SubjectService) -> None:
    if roster.students_for_class(DEMO_CLASS):
        logger.info("demo data already present, skipping seed")
        return

    roster.import_roster(current_role=Role.ADMIN, class_name=DEMO_CLASS, text=DEMO_ROSTER)
    existing = {s.subject_name for s in subjects.subjects_for_class(DEMO_CLASS)}
    for name in DEMO_SUBJECTS:
        if name not in existing:
            subjects.add_subject(current_role=Role.ADMIN, class_name=DEMO_CLASS, subject_name=name)
    logger.info("demo data seeded for class %s", DEMO_CLASS)
