import pytest
from fastapi.testclient import TestClient

from bank import CourseOutcomeList, QuestionRepository
from generation.schemas import CognitiveLevel
from main import create_app


@pytest.fixture
def outcomes():
    return CourseOutcomeList(["CO1: Fundamentals", "CO2: Processes", "Memory Management"])


@pytest.fixture
def repository():
    return QuestionRepository()


@pytest.fixture
def stocked_repository(repository):
    """3×2m for CO1, 2×2m for CO2, plus a few higher-mark questions."""
    for i in range(3):
        repository.create(f"Define term {i}", "CO1: Fundamentals", 2, CognitiveLevel.L1)
    for i in range(2):
        repository.create(f"State rule {i}", "CO2: Processes", 2, CognitiveLevel.L1)
    repository.create("Explain paging", "Memory Management", 8, CognitiveLevel.L2)
    repository.create("Explain segmentation", "Memory Management", 8, CognitiveLevel.L2)
    repository.create("Design a scheduler", "CO2: Processes", 16, CognitiveLevel.L6)
    return repository


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c
