"""
Generation Router: /generation

  POST /generation/check: availability check only
  POST /generation/generate-paper: validate → check → select → assemble
"""

import logging

from fastapi import APIRouter, Depends

from bank import CourseOutcomeList, QuestionRepository
from generation.availability import check
from generation.exceptions import PaperGeneratorError
from generation.pipeline import generate_paper, validate_request
from generation.schemas import AvailabilityResult, GenerationRequest, Paper
from routers.deps import get_outcomes, get_repository, to_http_error

router = APIRouter(prefix="/generation", tags=["generation"])

log = logging.getLogger("generation.pipeline")


@router.post("/check", response_model=AvailabilityResult)
def check_availability(
    request: GenerationRequest,
    repository: QuestionRepository = Depends(get_repository),
    outcomes: CourseOutcomeList = Depends(get_outcomes),
):
    """
    Report whether the bank can satisfy `request`, with the first shortage if not.
    Malformed requests fail with 422, as in /generate-paper.
    """
    try:
        validate_request(request, outcomes.labels)
    except PaperGeneratorError as e:
        log.warning(f"[CHECK] Rejected: {e.message}")
        raise to_http_error(e)
    return check(request, repository)


@router.post("/generate-paper", response_model=Paper)
def generate(
    request: GenerationRequest,
    repository: QuestionRepository = Depends(get_repository),
    outcomes: CourseOutcomeList = Depends(get_outcomes),
):
    """
    **Generate a question paper.**

    Each cell asks for `count` questions of `marks`, either from one
    `course_outcome` or (with `course_outcome` omitted) balanced across all
    outcomes. A request running the bank short fails with 409 and the
    offending cell; nothing is partially generated.
    """
    log.info(
        f"[GENERATE] {request.total_requested} question(s) in {len(request.cells)} cell(s), "
        f"include_alternatives={request.include_alternatives}"
    )
    try:
        return generate_paper(request, repository, outcomes.labels)
    except PaperGeneratorError as e:
        log.warning(f"[GENERATE] Rejected: {e.message}")
        raise to_http_error(e)
