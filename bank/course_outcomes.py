"""
Course Outcome list

Ordered list of course outcome labels. Position matters: labels without a
"CO<n>" prefix get their code from their 1-based position (see co_mapper).
Deleting a label cascades to the question repository.
"""

import logging
from typing import Iterator, List, Optional

from bank.repository import QuestionRepository
from generation.exceptions import (
    CourseOutcomeError, DuplicateCourseOutcomeError, UnknownCourseOutcomeError,
)

log = logging.getLogger("bank")


class CourseOutcomeList:

    def __init__(self, labels: Optional[List[str]] = None):
        self._labels: List[str] = []
        for label in labels or []:
            self.add(label)

    @property
    def labels(self) -> List[str]:
        return list(self._labels)

    def add(self, label: str) -> str:
        label = (label or "").strip()
        if not label:
            raise CourseOutcomeError(message="Please enter a course outcome")
        if label in self._labels:
            raise DuplicateCourseOutcomeError(
                message=f'Course outcome "{label}" already exists'
            )
        self._labels.append(label)
        log.info(f"[BANK] Course outcome added: '{label}'")
        return label

    def remove(self, label: str, repository: QuestionRepository) -> int:
        """
        Delete `label` and every question that references it.

        Returns the number of questions removed.
        """
        if label not in self._labels:
            raise UnknownCourseOutcomeError(message=f'Course outcome "{label}" not found')
        self._labels.remove(label)
        return repository.remove_by_course_outcome(label)

    def __contains__(self, label: object) -> bool:
        return label in self._labels

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._labels))

    def __len__(self) -> int:
        return len(self._labels)
