"""
Exception classes for the question bank and paper generator.
Each error carries a user-facing message and a recovery suggestion.
"""

from typing import Optional, Dict, Any

from generation.schemas import Shortage


class PaperGeneratorError(Exception):
    """Base exception class for all question bank / generator errors"""

    default_message = "An error occurred in the paper generator"
    default_user_message = "Something went wrong. Please try again."
    default_recovery_action = "Check the request and try again"
    default_error_code = "GENERAL_ERROR"
    status_code = 400

    def __init__(
        self,
        message: Optional[str] = None,
        user_message: Optional[str] = None,
        recovery_action: Optional[str] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message or self.default_message
        self.user_message = user_message or message or self.default_user_message
        self.recovery_action = recovery_action or self.default_recovery_action
        self.error_code = error_code or self.default_error_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API responses"""
        return {
            "error_code": self.error_code,
            "message": self.user_message,
            "recovery_action": self.recovery_action,
        }


# ─── Generation errors ─────────────────────────────────────────────────────────

class GenerationValidationError(PaperGeneratorError):
    """Request is malformed: zero questions, unknown outcome, conflicting cells"""
    default_message = "Invalid generation request"
    default_user_message = "Please specify at least one question to generate a paper."
    default_recovery_action = "Fix the requested counts and submit again"
    default_error_code = "INVALID_REQUEST"
    status_code = 422


class ShortageError(PaperGeneratorError):
    """The bank cannot satisfy one of the requested cells"""
    default_error_code = "INSUFFICIENT_QUESTIONS"
    default_recovery_action = "Add more questions or reduce the requested count"
    status_code = 409

    def __init__(self, shortage: Shortage):
        self.shortage = shortage
        super().__init__(message=shortage.describe())

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["shortage"] = self.shortage.model_dump()
        return data


# ─── Bank errors ───────────────────────────────────────────────────────────────

class CourseOutcomeError(PaperGeneratorError):
    default_message = "Course outcome error"
    default_error_code = "COURSE_OUTCOME_ERROR"
    status_code = 422


class DuplicateCourseOutcomeError(CourseOutcomeError):
    default_message = "This course outcome already exists"
    default_recovery_action = "Use a different label"
    default_error_code = "DUPLICATE_COURSE_OUTCOME"
    status_code = 409


class UnknownCourseOutcomeError(CourseOutcomeError):
    default_message = "Course outcome not found"
    default_recovery_action = "Add the course outcome first"
    default_error_code = "UNKNOWN_COURSE_OUTCOME"
    status_code = 404


class QuestionNotFoundError(PaperGeneratorError):
    default_message = "Question not found"
    default_recovery_action = "Refresh the question bank and try again"
    default_error_code = "QUESTION_NOT_FOUND"
    status_code = 404

    def __init__(self, question_id: int):
        self.question_id = question_id
        super().__init__(message=f"Question {question_id} not found")
