"""
Generation Pipeline

generate_paper() runs the whole flow for one request:
  0. Validate request: non-zero total, known outcomes, no conflicting cells
  1. Availability: fail fast with the first Shortage
  2. Selection: per-outcome or balanced draw for each cell
  3. Assembly: shuffle per mark-value, lay out Part A / Part B
"""

import logging
from typing import Dict, List, Optional, Sequence, Set, Tuple

import settings
from bank.repository import QuestionRepository
from generation.availability import check
from generation.exceptions import GenerationValidationError, ShortageError
from generation.paper_assembler import assemble_paper
from generation.schemas import GenerationRequest, Paper, PaperHeader, Question
from generation.selector import select_balanced, select_for_outcome

log = logging.getLogger("generation.pipeline")


def validate_request(request: GenerationRequest, outcomes: Sequence[str]) -> None:
    """
    Step 0: Reject requests that cannot be evaluated at all.

    Raises:
        GenerationValidationError
    """
    if request.total_requested == 0:
        raise GenerationValidationError(
            message="Please specify at least one question to generate a paper"
        )

    seen: Set[Tuple[Optional[str], int]] = set()
    balanced_marks: Set[int] = set()
    per_outcome_marks: Set[int] = set()
    for cell in request.cells:
        if cell.count == 0:
            continue
        key = (cell.course_outcome, cell.marks)
        if key in seen:
            raise GenerationValidationError(
                message=f"Duplicate request for {cell.course_outcome or 'all outcomes'} "
                        f"at {cell.marks} marks"
            )
        seen.add(key)

        if cell.is_balanced:
            balanced_marks.add(cell.marks)
        else:
            if cell.course_outcome not in outcomes:
                raise GenerationValidationError(
                    message=f'Course outcome "{cell.course_outcome}" not found'
                )
            per_outcome_marks.add(cell.marks)

    conflicting = balanced_marks & per_outcome_marks
    if conflicting:
        marks = ", ".join(str(m) for m in sorted(conflicting))
        raise GenerationValidationError(
            message=f"{marks}-mark questions requested both per course outcome and balanced"
        )


def resolve_header(header: Optional[PaperHeader]) -> Optional[PaperHeader]:
    """Fill blank header fields with the configured defaults."""
    if header is None:
        return None
    college = header.college.model_copy(update={
        "exam_type": header.college.exam_type or settings.DEFAULT_EXAM_TYPE,
    })
    subject = header.subject.model_copy(update={
        "duration": header.subject.duration or settings.DEFAULT_DURATION,
    })
    return header.model_copy(update={
        "college": college,
        "subject": subject,
        "max_marks": header.max_marks or settings.DEFAULT_MAX_MARKS,
    })


def select_questions(
    request: GenerationRequest, pool: Sequence[Question]
) -> Dict[int, List[Question]]:
    """Step 2: marks → selected questions, combining every cell of that mark-value."""
    selections: Dict[int, List[Question]] = {}
    for cell in request.cells:
        if cell.count == 0:
            continue
        if cell.is_balanced:
            picked = select_balanced(pool, cell.marks, cell.count, request.include_alternatives)
        else:
            picked = select_for_outcome(
                pool, cell.course_outcome, cell.marks, cell.count, request.include_alternatives
            )
        selections.setdefault(cell.marks, []).extend(picked)
        log.info(
            f"[SELECT] {cell.course_outcome or 'balanced'}/{cell.marks}m → {len(picked)} picked"
        )
    return selections


def generate_paper(
    request: GenerationRequest,
    repository: QuestionRepository,
    outcomes: Sequence[str],
) -> Paper:
    """
    Generate one paper.

    Args:
        request: Quota cells, OR-question flag and optional header
        repository: Question bank (read only)
        outcomes: Ordered course outcome labels

    Returns:
        Assembled Paper

    Raises:
        GenerationValidationError: request is empty or malformed
        ShortageError: a cell asks for more questions than the bank holds
    """
    outcomes = list(outcomes)
    validate_request(request, outcomes)

    availability = check(request, repository)
    if not availability.ok:
        raise ShortageError(availability.shortage)

    selections = select_questions(request, repository.snapshot())
    return assemble_paper(selections, outcomes, resolve_header(request.header))
