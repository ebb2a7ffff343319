"""
Pytest Configuration and Fixtures.

Shared quiz definitions for scoring, analytics and endpoint tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from models.question import Question
from models.score_range import ScoreRange


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "endpoints: FastAPI endpoint tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "endpoints" in str(item.fspath):
            item.add_marker(pytest.mark.endpoints)


@pytest.fixture
def yes_no_question():
    return Question(
        question_id="1",
        text="Do you feel rested?",
        type="multiple-choice",
        options=["Yes", "No"],
        score_mapping={"Yes": 5, "No": 0},
    )


@pytest.fixture
def mood_scale_question():
    return Question(
        question_id="2",
        text="How is your mood today?",
        type="scale",
        scale_min=1,
        scale_max=10,
    )


@pytest.fixture
def journal_question():
    return Question(question_id="3", text="Anything else on your mind?", type="text")


@pytest.fixture
def check_in_questions(yes_no_question, mood_scale_question):
    return [yes_no_question, mood_scale_question]


@pytest.fixture
def overlapping_ranges():
    return [
        ScoreRange(min=0, max=5, status="Low", description="Low desc", color="green"),
        ScoreRange(min=3, max=10, status="High", description="High desc", color="orange"),
    ]


@pytest.fixture
def check_in_quiz_payload():
    """Quiz definition as sent to the API"""
    return {
        "title": "Daily Check-in",
        "slug": "daily-check-in",
        "description": "A short wellness check-in",
        "questions": [
            {
                "id": "1",
                "text": "Do you feel rested?",
                "type": "multiple-choice",
                "options": ["Yes", "No"],
                "score_mapping": {"Yes": 5, "No": 0},
            },
            {
                "id": "2",
                "text": "How is your mood today?",
                "type": "scale",
                "scale_min": 1,
                "scale_max": 10,
            },
        ],
        "score_ranges": [],
        "scoring_direction": "higher-is-better",
    }
