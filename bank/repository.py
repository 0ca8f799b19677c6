"""
Question Repository

In-memory collection of Question records. Insertion order is preserved by
every query; ids are handed out monotonically and never reused.

No indexing: each operation is a linear scan over the bank.
"""

import logging
from typing import Dict, Iterator, List, Optional

from generation.exceptions import QuestionNotFoundError
from generation.schemas import ALLOWED_MARKS, CognitiveLevel, Question

log = logging.getLogger("bank")


class QuestionRepository:
    """Owns the question pool. Pass it explicitly to the generation pipeline."""

    def __init__(self, questions: Optional[List[Question]] = None):
        self._questions: List[Question] = []
        self._next_id = 1
        for q in questions or []:
            self.add(q)

    # ─── Mutation ──────────────────────────────────────────────────────────

    @property
    def next_id(self) -> int:
        return self._next_id

    def create(
        self,
        text: str,
        course_outcome: str,
        marks: int,
        cognitive_level: CognitiveLevel = CognitiveLevel.L2,
        is_alternative: bool = False,
    ) -> Question:
        """Build a Question with the next free id and add it."""
        question = Question(
            id=self._next_id,
            text=text,
            course_outcome=course_outcome,
            marks=marks,
            cognitive_level=cognitive_level,
            is_alternative=is_alternative,
        )
        return self.add(question)

    def add(self, question: Question) -> Question:
        if any(q.id == question.id for q in self._questions):
            raise ValueError(f"Duplicate question id {question.id}")
        self._questions.append(question)
        self._next_id = max(self._next_id, question.id + 1)
        return question

    def update(self, question: Question) -> Question:
        """Replace the stored question with the same id, keeping its position."""
        for idx, existing in enumerate(self._questions):
            if existing.id == question.id:
                self._questions[idx] = question
                return question
        raise QuestionNotFoundError(question.id)

    def remove(self, question_id: int) -> Question:
        for idx, existing in enumerate(self._questions):
            if existing.id == question_id:
                return self._questions.pop(idx)
        raise QuestionNotFoundError(question_id)

    def remove_by_course_outcome(self, course_outcome: str) -> int:
        """Cascade delete every question tagged with `course_outcome`."""
        before = len(self._questions)
        self._questions = [q for q in self._questions if q.course_outcome != course_outcome]
        removed = before - len(self._questions)
        if removed:
            log.info(f"[BANK] Removed {removed} question(s) of '{course_outcome}'")
        return removed

    def clear(self) -> None:
        # _next_id is kept so cleared ids are never handed out again
        self._questions = []

    # ─── Queries ───────────────────────────────────────────────────────────

    def get(self, question_id: int) -> Question:
        for q in self._questions:
            if q.id == question_id:
                return q
        raise QuestionNotFoundError(question_id)

    def filter(
        self,
        course_outcome: Optional[str] = None,
        marks: Optional[int] = None,
        include_alternatives: bool = True,
    ) -> List[Question]:
        return [
            q for q in self._questions
            if (course_outcome is None or q.course_outcome == course_outcome)
            and (marks is None or q.marks == marks)
            and (include_alternatives or not q.is_alternative)
        ]

    def count_by(
        self,
        course_outcome: Optional[str],
        marks: int,
        include_alternatives: bool = True,
    ) -> int:
        return len(self.filter(course_outcome, marks, include_alternatives))

    def group_by_outcome_then_marks(self) -> Dict[str, Dict[int, List[Question]]]:
        """
        Group questions as {course_outcome: {marks: [questions]}}.

        Outcomes appear in first-seen order; every allowed mark-value has a
        (possibly empty) list.
        """
        grouped: Dict[str, Dict[int, List[Question]]] = {}
        for q in self._questions:
            by_marks = grouped.setdefault(q.course_outcome, {m: [] for m in ALLOWED_MARKS})
            by_marks[q.marks].append(q)
        return grouped

    def counts_by_marks(self) -> Dict[int, int]:
        counts = {m: 0 for m in ALLOWED_MARKS}
        for q in self._questions:
            counts[q.marks] += 1
        return counts

    def snapshot(self) -> List[Question]:
        """Shallow copy of the pool, safe for a selector to consume."""
        return list(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(list(self._questions))
