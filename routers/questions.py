"""
Question bank API endpoints

  GET    /questions: list (filter by course_outcome / marks)
  POST   /questions: add one question per line of text
  GET    /questions/stats: counts per mark-value
  GET    /questions/grouped: course outcome → marks → questions
  POST   /questions/classify: detected level + confidence for draft text
  PUT    /questions/{id}: edit in place
  DELETE /questions/{id}: delete one
  DELETE /questions: clear the bank
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from bank import CourseOutcomeList, QuestionRepository
from generation.exceptions import PaperGeneratorError, QuestionNotFoundError
from generation.schemas import (
    BankStats, ClassifyRequest, ClassifyResponse, Question, QuestionCreate, QuestionUpdate,
)
from ingestion import add_questions, classify, confidence, edit_question
from routers.deps import get_outcomes, get_repository, to_http_error

router = APIRouter(prefix="/questions", tags=["questions"])


@router.get("/", response_model=List[Question])
def list_questions(
    course_outcome: Optional[str] = Query(None),
    marks: Optional[int] = Query(None),
    repository: QuestionRepository = Depends(get_repository),
):
    return repository.filter(course_outcome=course_outcome, marks=marks)


@router.post("/", response_model=List[Question], status_code=status.HTTP_201_CREATED)
def create_questions(
    payload: QuestionCreate,
    repository: QuestionRepository = Depends(get_repository),
    outcomes: CourseOutcomeList = Depends(get_outcomes),
):
    """
    Add questions in bulk: every non-blank line of `text` becomes a question.
    Levels are auto-detected unless `cognitive_level` is given.
    """
    try:
        return add_questions(
            repository,
            outcomes,
            text=payload.text,
            course_outcome=payload.course_outcome,
            marks=payload.marks,
            level=payload.cognitive_level,
            is_alternative=payload.is_alternative,
        )
    except PaperGeneratorError as e:
        raise to_http_error(e)


@router.get("/stats", response_model=BankStats)
def question_stats(
    repository: QuestionRepository = Depends(get_repository),
    outcomes: CourseOutcomeList = Depends(get_outcomes),
):
    return BankStats(
        by_marks=repository.counts_by_marks(),
        total=len(repository),
        course_outcomes=len(outcomes),
    )


@router.get("/grouped", response_model=Dict[str, Dict[int, List[Question]]])
def grouped_questions(repository: QuestionRepository = Depends(get_repository)):
    return repository.group_by_outcome_then_marks()


@router.post("/classify", response_model=ClassifyResponse)
def classify_text(payload: ClassifyRequest):
    level = classify(payload.text)
    return ClassifyResponse(
        cognitive_level=level,
        display_name=level.display_name,
        confidence=confidence(payload.text, level),
    )


@router.put("/{question_id}", response_model=Question)
def update_question(
    question_id: int,
    payload: QuestionUpdate,
    repository: QuestionRepository = Depends(get_repository),
    outcomes: CourseOutcomeList = Depends(get_outcomes),
):
    try:
        return edit_question(
            repository,
            outcomes,
            question_id,
            text=payload.text,
            course_outcome=payload.course_outcome,
            marks=payload.marks,
            level=payload.cognitive_level,
            is_alternative=payload.is_alternative,
        )
    except PaperGeneratorError as e:
        raise to_http_error(e)


@router.delete("/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_question(
    question_id: int,
    repository: QuestionRepository = Depends(get_repository),
):
    try:
        repository.remove(question_id)
    except QuestionNotFoundError as e:
        raise to_http_error(e)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
def clear_questions(repository: QuestionRepository = Depends(get_repository)):
    repository.clear()
