"""
Shared router dependencies

The question bank lives on app.state (one per app instance) and is handed to
endpoints through FastAPI dependencies, the same way a DB session would be.
"""

from fastapi import HTTPException, Request

from bank import CourseOutcomeList, QuestionRepository
from generation.exceptions import PaperGeneratorError


def get_repository(request: Request) -> QuestionRepository:
    return request.app.state.repository


def get_outcomes(request: Request) -> CourseOutcomeList:
    return request.app.state.outcomes


def to_http_error(exc: PaperGeneratorError) -> HTTPException:
    """Map a bank/generator error onto an HTTPException with its payload."""
    return HTTPException(status_code=exc.status_code, detail=exc.to_dict())
