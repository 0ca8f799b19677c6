"""
Step 1: Availability Checker

Verifies the bank holds enough questions for every requested cell
before any selection happens. This is the only gate: the selector downstream
never fails on under-supply.
"""

import logging

from bank.repository import QuestionRepository
from generation.schemas import AvailabilityResult, GenerationRequest, Shortage

log = logging.getLogger("generation.pipeline")


def check(request: GenerationRequest, repository: QuestionRepository) -> AvailabilityResult:
    """
    Step 1: Check every non-zero cell against the bank, in request order.

    A balanced cell (no course outcome) counts questions of its mark-value
    across all outcomes. OR-type questions always count, even when the
    request leaves them out; the selector then returns fewer questions.

    Returns:
        ok=True, or ok=False with the first Shortage found (later cells are
        not examined)
    """
    for cell in request.cells:
        if cell.count == 0:
            continue
        available = repository.count_by(cell.course_outcome, cell.marks)
        if cell.count > available:
            shortage = Shortage(
                course_outcome=cell.course_outcome,
                marks=cell.marks,
                available=available,
                requested=cell.count,
            )
            log.warning(f"[CHECK] {shortage.describe()}")
            return AvailabilityResult(ok=False, shortage=shortage)

    log.info(f"[CHECK] OK: {request.total_requested} question(s) satisfiable")
    return AvailabilityResult(ok=True)
