# tests/conftest.py

import pytest

import cli.colors as colors
from models.assignment import Assignment
from models.gradebook import Gradebook
from models.student import Student


@pytest.fixture(autouse=True)
def plain_output():
    colors.set_color_enabled(False)
    yield
    colors.set_color_enabled(True)


@pytest.fixture
def sample_gradebook():
    return Gradebook()


@pytest.fixture
def sample_student():
    return Student("12345678", "Jane", "Doe")


@pytest.fixture
def sample_assignment():
    return Assignment("Quiz1", 10, "Quizzes")


@pytest.fixture
def gradebook_with_jane(sample_gradebook):
    gb = sample_gradebook
    gb.add_student("Doe", "Jane", "12345678")
    gb.add_assignment("Quiz1", 10, ["12345678"], "quizzes")
    gb.enter_grade("12345678", "Quiz1", 8)
    return gb


@pytest.fixture
def sample_student_roster(sample_gradebook):
    gb = sample_gradebook
    gb.add_student("Doe", "Jane", "12345678")
    gb.add_student("Smith", "John", "87654321")
    gb.add_student("Atreides", "Paul", "10191019")
    return gb


@pytest.fixture
def scripted_input(monkeypatch):
    """Feeds the given responses to successive `input()` calls."""

    def feed(*responses):
        answers = iter(responses)
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))

    return feed
