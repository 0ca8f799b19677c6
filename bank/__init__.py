"""
Question bank: in-memory question repository and the ordered course outcome list.
"""

from .repository import QuestionRepository
from .course_outcomes import CourseOutcomeList

__all__ = ["QuestionRepository", "CourseOutcomeList"]
