"""
Ingestion

1. Intake: split bulk entries into one question per line
2. Classify: keyword-scored Bloom's level for each question
"""

from .level_classifier import classify, confidence, score_levels, LEVEL_KEYWORDS
from .question_intake import add_questions, edit_question, split_question_lines

__all__ = [
    # Step 1: Intake
    "split_question_lines",
    "add_questions",
    "edit_question",

    # Step 2: Classify
    "classify",
    "confidence",
    "score_levels",
    "LEVEL_KEYWORDS",
]
