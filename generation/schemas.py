"""
Pydantic schemas for the question bank and the paper generation pipeline.

Layer 1: Bank records: Question, CognitiveLevel, course outcome payloads
Layer 2: Generation input: RequestCell, GenerationRequest, PaperHeader
Layer 3: Generation output: Shortage, AvailabilityResult, Paper
"""

from enum import Enum
from typing import List, Optional, Dict, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


# ─── Fixed vocabularies ────────────────────────────────────────────────────────

ALLOWED_MARKS: Tuple[int, ...] = (2, 4, 8, 13, 14, 15, 16)

# Mark-value that forms Part A on its own; everything else goes to Part B
PART_A_MARKS = 2


class CognitiveLevel(str, Enum):
    """Bloom's taxonomy level, L1 (lowest) to L6 (highest)."""
    L1 = "L1"
    L2 = "L2"
    L3 = "L3"
    L4 = "L4"
    L5 = "L5"
    L6 = "L6"

    @property
    def display_name(self) -> str:
        return LEVEL_NAMES[self]


LEVEL_NAMES: Dict[CognitiveLevel, str] = {
    CognitiveLevel.L1: "Remember",
    CognitiveLevel.L2: "Understand",
    CognitiveLevel.L3: "Apply",
    CognitiveLevel.L4: "Analyze",
    CognitiveLevel.L5: "Evaluate",
    CognitiveLevel.L6: "Create",
}

LEVEL_LEGEND = ", ".join(f"{lvl.value} – {name}" for lvl, name in LEVEL_NAMES.items())


def _check_marks(value: int) -> int:
    if value not in ALLOWED_MARKS:
        allowed = ", ".join(str(m) for m in ALLOWED_MARKS)
        raise ValueError(f"marks must be one of {allowed} (got {value})")
    return value


# ─── Layer 1: Bank records ─────────────────────────────────────────────────────

class Question(BaseModel):
    """One question in the bank. Ids are assigned by the repository."""
    id: int = Field(..., ge=1)
    text: str = Field(..., min_length=1)
    course_outcome: str = Field(..., min_length=1)
    marks: int
    cognitive_level: CognitiveLevel = CognitiveLevel.L2
    is_alternative: bool = False          # may appear as an OR-alternative

    @field_validator("text", "course_outcome")
    @classmethod
    def _strip_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("marks")
    @classmethod
    def _marks_allowed(cls, v: int) -> int:
        return _check_marks(v)


class QuestionCreate(BaseModel):
    """API payload for adding one or more questions (one per line of `text`)."""
    text: str = Field(..., min_length=1)
    course_outcome: str = Field(..., min_length=1)
    marks: int
    cognitive_level: Optional[CognitiveLevel] = None   # None → auto-detect
    is_alternative: bool = False

    @field_validator("marks")
    @classmethod
    def _marks_allowed(cls, v: int) -> int:
        return _check_marks(v)


class QuestionUpdate(QuestionCreate):
    """API payload for editing a single question in place."""


class ClassifyRequest(BaseModel):
    text: str


class ClassifyResponse(BaseModel):
    cognitive_level: CognitiveLevel
    display_name: str
    confidence: int = Field(..., ge=0, le=100)


class CourseOutcomeCreate(BaseModel):
    label: str = Field(..., min_length=1)


class CourseOutcomeOut(BaseModel):
    label: str
    code: str
    question_count: int = 0


class BankStats(BaseModel):
    """Counts shown next to the question bank."""
    by_marks: Dict[int, int]
    total: int
    course_outcomes: int


# ─── Layer 2: Generation input ─────────────────────────────────────────────────

class CollegeInfo(BaseModel):
    name: str = ""
    location: str = ""
    department: str = ""
    exam_type: str = ""


class SubjectInfo(BaseModel):
    code: str = ""
    name: str = ""
    year_sem_branch: str = ""
    duration: str = ""


class PaperHeader(BaseModel):
    """Printed header block of the paper. Blank fields take settings defaults."""
    model_config = ConfigDict(frozen=True)

    college: CollegeInfo = Field(default_factory=CollegeInfo)
    subject: SubjectInfo = Field(default_factory=SubjectInfo)
    exam_date: str = ""
    max_marks: str = ""


class RequestCell(BaseModel):
    """
    One quota cell of a generation request.

    course_outcome=None asks for `count` questions of `marks` balanced
    round-robin across every course outcome that has any.
    """
    course_outcome: Optional[str] = None
    marks: int
    count: int = Field(0, ge=0)

    @field_validator("marks")
    @classmethod
    def _marks_allowed(cls, v: int) -> int:
        return _check_marks(v)

    @property
    def is_balanced(self) -> bool:
        return self.course_outcome is None


class GenerationRequest(BaseModel):
    """Quota per (course outcome, marks) cell plus the OR-question flag."""
    cells: List[RequestCell] = Field(default_factory=list)
    include_alternatives: bool = True
    header: Optional[PaperHeader] = None

    @property
    def total_requested(self) -> int:
        return sum(c.count for c in self.cells)

    @classmethod
    def balanced(cls, counts_by_marks: Dict[int, int], include_alternatives: bool = True,
                 header: Optional[PaperHeader] = None) -> "GenerationRequest":
        """Build a request with one cross-outcome cell per mark-value."""
        return cls(
            cells=[RequestCell(marks=m, count=n) for m, n in counts_by_marks.items()],
            include_alternatives=include_alternatives,
            header=header,
        )


# ─── Layer 3: Generation output ────────────────────────────────────────────────

class Shortage(BaseModel):
    """First cell of a request that the bank cannot satisfy."""
    course_outcome: Optional[str]         # None for a balanced cell
    marks: int
    available: int
    requested: int

    def describe(self) -> str:
        scope = f" for {self.course_outcome}" if self.course_outcome else ""
        return (
            f"Not enough {self.marks}-mark questions{scope}. "
            f"Available: {self.available}, Required: {self.requested}"
        )


class AvailabilityResult(BaseModel):
    ok: bool
    shortage: Optional[Shortage] = None


class NumberedQuestion(BaseModel):
    """A selected question with its display number and resolved CO code."""
    model_config = ConfigDict(frozen=True)

    number: int
    co_code: str
    question: Question


class PaperRow(BaseModel):
    """Layout row: either a numbered question or an `[OR]` marker."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["question", "or"]
    entry: Optional[NumberedQuestion] = None

    @property
    def is_or_marker(self) -> bool:
        return self.kind == "or"


class PaperSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str                            # "Part A" | "Part B"
    heading: str                          # e.g. "Part-A (5 x 2 = 10 Marks)"
    questions: Tuple[NumberedQuestion, ...]
    rows: Tuple[PaperRow, ...]
    total_marks: int


class Paper(BaseModel):
    """Complete generated paper. Immutable once assembled."""
    model_config = ConfigDict(frozen=True)

    header: Optional[PaperHeader] = None
    sections: Tuple[PaperSection, ...]
    level_legend: str = LEVEL_LEGEND

    @computed_field
    @property
    def total_marks(self) -> int:
        return sum(s.total_marks for s in self.sections)

    @property
    def questions(self) -> List[NumberedQuestion]:
        return [q for s in self.sections for q in s.questions]
