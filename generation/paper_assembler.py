"""
Step 3: Paper Assembly Engine

Lays selected questions out as a Paper:
  - each mark-value's selection is shuffled on its own
  - 2-mark questions form Part A; all other mark-values, ascending, form Part B
  - question numbers run from 1 through Part A and continue into Part B
  - an [OR] row goes between two adjacent OR-type questions
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from generation.co_mapper import resolve_co_code
from generation.schemas import (
    PART_A_MARKS, NumberedQuestion, Paper, PaperHeader, PaperRow, PaperSection, Question,
)
from generation.selector import shuffle

log = logging.getLogger("generation.pipeline")


def _layout_rows(entries: List[NumberedQuestion]) -> List[PaperRow]:
    """
    Question rows with [OR] markers.

    The marker depends only on adjacency in the final order: two OR-type
    questions that end up next to each other are paired even if they come
    from different course outcomes.
    """
    rows: List[PaperRow] = []
    for idx, entry in enumerate(entries):
        rows.append(PaperRow(kind="question", entry=entry))
        nxt = entries[idx + 1] if idx + 1 < len(entries) else None
        if entry.question.is_alternative and nxt is not None and nxt.question.is_alternative:
            rows.append(PaperRow(kind="or"))
    return rows


def _heading(part: str, questions: Sequence[Question], mark_values: Sequence[int]) -> str:
    total = sum(q.marks for q in questions)
    marks_label = "/".join(str(m) for m in mark_values)
    return f"Part-{part} ({len(questions)} x {marks_label} = {total} Marks)"


def _build_section(
    part: str,
    questions: List[Question],
    mark_values: List[int],
    start_number: int,
    outcomes: Sequence[str],
) -> PaperSection:
    entries = [
        NumberedQuestion(
            number=start_number + idx,
            co_code=resolve_co_code(q.course_outcome, outcomes),
            question=q,
        )
        for idx, q in enumerate(questions)
    ]
    return PaperSection(
        label=f"Part {part}",
        heading=_heading(part, questions, mark_values),
        questions=tuple(entries),
        rows=tuple(_layout_rows(entries)),
        total_marks=sum(q.marks for q in questions),
    )


def assemble_paper(
    selections: Mapping[int, Sequence[Question]],
    outcomes: Sequence[str],
    header: Optional[PaperHeader] = None,
) -> Paper:
    """
    Step 3: Assemble a Paper from per-mark-value selections.

    Args:
        selections: marks → selected questions of that mark-value
        outcomes: Ordered course outcome labels (for CO codes)
        header: Optional printed header

    Returns:
        Paper with Part A and/or Part B (empty parts are omitted)
    """
    shuffled: Dict[int, List[Question]] = {
        marks: shuffle(questions)
        for marks, questions in sorted(selections.items())
        if questions
    }

    sections: List[PaperSection] = []
    next_number = 1

    part_a = shuffled.get(PART_A_MARKS, [])
    if part_a:
        sections.append(_build_section("A", part_a, [PART_A_MARKS], next_number, outcomes))
        next_number += len(part_a)

    higher_marks = [m for m in shuffled if m != PART_A_MARKS]
    if higher_marks:
        part_b = [q for m in higher_marks for q in shuffled[m]]
        sections.append(_build_section("B", part_b, higher_marks, next_number, outcomes))

    log.info(
        f"[ASSEMBLE] {sum(len(s.questions) for s in sections)} question(s) in "
        f"{len(sections)} section(s)"
    )
    return Paper(header=header, sections=tuple(sections))
