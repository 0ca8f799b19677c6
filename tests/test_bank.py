import pytest
from pydantic import ValidationError

from bank import CourseOutcomeList, QuestionRepository
from generation.exceptions import (
    CourseOutcomeError, DuplicateCourseOutcomeError, QuestionNotFoundError,
    UnknownCourseOutcomeError,
)
from generation.schemas import ALLOWED_MARKS, Question


def test_ids_are_monotonic_and_never_reused(repository):
    first = repository.create("Define a set", "CO1", 2)
    second = repository.create("Define a map", "CO1", 2)
    assert (first.id, second.id) == (1, 2)

    repository.remove(second.id)
    assert repository.create("Define a list", "CO1", 2).id == 3

    repository.clear()
    assert len(repository) == 0
    assert repository.create("Define a tree", "CO1", 2).id == 4


def test_add_rejects_duplicate_id(repository):
    repository.add(Question(id=5, text="Define X", course_outcome="CO1", marks=2))
    with pytest.raises(ValueError):
        repository.add(Question(id=5, text="Define Y", course_outcome="CO1", marks=2))
    assert repository.next_id == 6


def test_question_rejects_bad_marks_and_blank_text():
    with pytest.raises(ValidationError):
        Question(id=1, text="Define X", course_outcome="CO1", marks=3)
    with pytest.raises(ValidationError):
        Question(id=1, text="   ", course_outcome="CO1", marks=2)


def test_filter_preserves_insertion_order(stocked_repository):
    texts = [q.text for q in stocked_repository.filter(marks=2)]
    assert texts == ["Define term 0", "Define term 1", "Define term 2",
                     "State rule 0", "State rule 1"]


def test_filter_by_outcome_and_marks(stocked_repository):
    assert len(stocked_repository.filter(course_outcome="CO2: Processes")) == 3
    assert len(stocked_repository.filter(course_outcome="CO2: Processes", marks=2)) == 2
    assert stocked_repository.filter(course_outcome="CO9") == []


def test_filter_excludes_alternatives_on_request(repository):
    repository.create("Define A", "CO1", 2, is_alternative=True)
    repository.create("Define B", "CO1", 2)
    assert repository.count_by("CO1", 2) == 2
    assert repository.count_by("CO1", 2, include_alternatives=False) == 1


def test_count_by_all_outcomes(stocked_repository):
    assert stocked_repository.count_by(None, 2) == 5
    assert stocked_repository.count_by("CO1: Fundamentals", 2) == 3
    assert stocked_repository.count_by("CO1: Fundamentals", 8) == 0


def test_group_by_outcome_then_marks(stocked_repository):
    grouped = stocked_repository.group_by_outcome_then_marks()
    assert list(grouped) == ["CO1: Fundamentals", "CO2: Processes", "Memory Management"]
    assert set(grouped["CO1: Fundamentals"]) == set(ALLOWED_MARKS)
    assert len(grouped["CO2: Processes"][2]) == 2
    assert len(grouped["CO2: Processes"][16]) == 1
    assert grouped["Memory Management"][2] == []


def test_counts_by_marks(stocked_repository):
    counts = stocked_repository.counts_by_marks()
    assert counts[2] == 5
    assert counts[8] == 2
    assert counts[16] == 1
    assert counts[13] == 0


def test_update_keeps_position(stocked_repository):
    original = stocked_repository.get(2)
    stocked_repository.update(original.model_copy(update={"text": "Define term X"}))
    assert [q.id for q in stocked_repository][:3] == [1, 2, 3]
    assert stocked_repository.get(2).text == "Define term X"


def test_missing_question_raises(repository):
    with pytest.raises(QuestionNotFoundError):
        repository.get(42)
    with pytest.raises(QuestionNotFoundError):
        repository.remove(42)


def test_snapshot_is_a_copy(stocked_repository):
    snap = stocked_repository.snapshot()
    snap.clear()
    assert len(stocked_repository) == 8


# ─── Course outcomes ───────────────────────────────────────────────────────────

def test_outcome_add_strips_and_rejects_duplicates():
    outcomes = CourseOutcomeList()
    assert outcomes.add("  CO1: Basics ") == "CO1: Basics"
    with pytest.raises(DuplicateCourseOutcomeError):
        outcomes.add("CO1: Basics")
    with pytest.raises(CourseOutcomeError):
        outcomes.add("   ")
    assert outcomes.labels == ["CO1: Basics"]


def test_deleting_outcome_cascades(stocked_repository, outcomes):
    removed = outcomes.remove("CO2: Processes", stocked_repository)
    assert removed == 3
    assert "CO2: Processes" not in outcomes
    assert stocked_repository.filter(course_outcome="CO2: Processes") == []
    assert len(stocked_repository) == 5


def test_deleting_unknown_outcome(repository, outcomes):
    with pytest.raises(UnknownCourseOutcomeError):
        outcomes.remove("CO7", repository)
