from __future__ import annotations

import logging
from typing import Optional

from ..common.ids import MillisecondIdSource
from ..common.validators import is_blank
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import Subject
from .repository import SubjectRepository

logger = logging.getLogger(__name__)


class SubjectService:
    """Use case: admin maintains the subject catalog."""

    def __init__(self, subjects: SubjectRepository, *, ids: Optional[MillisecondIdSource] = None):
        self._subjects = subjects
        self._ids = ids or MillisecondIdSource()

    def add_subject(self, *, current_role: Role, class_name: str, subject_name: str) -> Subject:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to manage subjects.")
        if is_blank(class_name) or is_blank(subject_name):
            raise ValidationError("Please select a class and enter a subject name.")

        subject = Subject(
            id=self._ids.next_id(),
            class_name=str(class_name).strip(),
            subject_name=str(subject_name).strip(),
        )
        self._subjects.add(subject)
        logger.info("subject %s added for class %s (id=%s)", subject.subject_name, subject.class_name, subject.id)
        return subject

    def delete_subject(self, *, current_role: Role, subject_id: int) -> bool:
        """Remove a subject; unknown ids are a no-op returning ``False``."""
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to manage subjects.")

        deleted = self._subjects.delete(int(subject_id))
        if deleted:
            logger.info("subject %s deleted", subject_id)
        return deleted

    def list_subjects(self) -> list[Subject]:
        return sorted(self._subjects.list_all(), key=lambda s: (s.class_name, s.subject_name))

    def subjects_for_class(self, class_name: str) -> list[Subject]:
        return [s for s in self.list_subjects() if s.class_name == class_name]

    def available_classes(self) -> list[str]:
        return sorted({s.class_name for s in self._subjects.list_all()})
