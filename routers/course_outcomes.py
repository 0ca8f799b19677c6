"""
Course Outcome API endpoints
List / add / delete course outcomes. Deleting one deletes its questions too.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from bank import CourseOutcomeList, QuestionRepository
from generation.co_mapper import build_co_map
from generation.exceptions import CourseOutcomeError
from generation.schemas import CourseOutcomeCreate, CourseOutcomeOut
from routers.deps import get_outcomes, get_repository, to_http_error

router = APIRouter(prefix="/course-outcomes", tags=["course-outcomes"])

log = logging.getLogger("bank")


@router.get("/", response_model=List[CourseOutcomeOut])
def list_course_outcomes(
    outcomes: CourseOutcomeList = Depends(get_outcomes),
    repository: QuestionRepository = Depends(get_repository),
):
    """
    List course outcomes in order, with their CO codes and question counts
    """
    co_map = build_co_map(outcomes.labels)
    return [
        CourseOutcomeOut(
            label=label,
            code=co_map[label],
            question_count=len(repository.filter(course_outcome=label)),
        )
        for label in outcomes
    ]


@router.post("/", response_model=CourseOutcomeOut, status_code=status.HTTP_201_CREATED)
def create_course_outcome(
    payload: CourseOutcomeCreate,
    outcomes: CourseOutcomeList = Depends(get_outcomes),
):
    """
    Add a course outcome at the end of the list
    """
    try:
        label = outcomes.add(payload.label)
    except CourseOutcomeError as e:
        raise to_http_error(e)
    return CourseOutcomeOut(label=label, code=build_co_map(outcomes.labels)[label])


@router.delete("/{label:path}")
def delete_course_outcome(
    label: str,
    outcomes: CourseOutcomeList = Depends(get_outcomes),
    repository: QuestionRepository = Depends(get_repository),
):
    """
    Delete a course outcome and every question tagged with it
    """
    try:
        removed = outcomes.remove(label, repository)
    except CourseOutcomeError as e:
        raise to_http_error(e)
    log.info(f"[BANK] Course outcome deleted: '{label}' ({removed} question(s) removed)")
    return {"label": label, "questions_removed": removed}
