"""
Question Intake

Turns instructor input into Question records:
  - a multi-line entry becomes one question per non-blank line
  - each line gets its cognitive level from the keyword classifier,
    unless the instructor picked one explicitly
"""

import logging
import re
from typing import List, Optional

from bank.course_outcomes import CourseOutcomeList
from bank.repository import QuestionRepository
from generation.exceptions import GenerationValidationError, UnknownCourseOutcomeError
from generation.schemas import CognitiveLevel, Question
from ingestion.level_classifier import classify

log = logging.getLogger("ingestion")

_LINE_BREAK = re.compile(r"\r?\n")


def split_question_lines(text: str) -> List[str]:
    """Split a bulk entry on line breaks, dropping blank lines."""
    lines = (line.strip() for line in _LINE_BREAK.split(text or ""))
    return [line for line in lines if line]


def _require_outcome(outcomes: CourseOutcomeList, course_outcome: str) -> None:
    if course_outcome not in outcomes:
        raise UnknownCourseOutcomeError(
            message=f'Course outcome "{course_outcome}" not found'
        )


def add_questions(
    repository: QuestionRepository,
    outcomes: CourseOutcomeList,
    text: str,
    course_outcome: str,
    marks: int,
    level: Optional[CognitiveLevel] = None,
    is_alternative: bool = False,
) -> List[Question]:
    """
    Add every line of `text` as a separate question.

    Args:
        repository: Bank to add to
        outcomes: Known course outcomes (the label must exist)
        text: One question per line
        course_outcome: Label shared by all lines
        marks: Mark-value shared by all lines
        level: Explicit level for all lines; None → classify each line
        is_alternative: OR-type flag shared by all lines

    Returns:
        The created questions, in input order
    """
    _require_outcome(outcomes, course_outcome)
    lines = split_question_lines(text)
    if not lines:
        raise GenerationValidationError(message="Please enter at least one valid question")

    created = [
        repository.create(
            text=line,
            course_outcome=course_outcome,
            marks=marks,
            cognitive_level=level or classify(line),
            is_alternative=is_alternative,
        )
        for line in lines
    ]
    log.info(f"[INTAKE] {len(created)} question(s) added to '{course_outcome}' ({marks} marks)")
    return created


def edit_question(
    repository: QuestionRepository,
    outcomes: CourseOutcomeList,
    question_id: int,
    text: str,
    course_outcome: str,
    marks: int,
    level: Optional[CognitiveLevel] = None,
    is_alternative: bool = False,
) -> Question:
    """Replace a question in place; the id and bank position are kept."""
    repository.get(question_id)
    _require_outcome(outcomes, course_outcome)
    text = (text or "").strip()
    if not text:
        raise GenerationValidationError(message="Question text must not be empty")

    updated = Question(
        id=question_id,
        text=text,
        course_outcome=course_outcome,
        marks=marks,
        cognitive_level=level or classify(text),
        is_alternative=is_alternative,
    )
    return repository.update(updated)
