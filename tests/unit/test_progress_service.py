"""
Unit tests for ProgressService.

Run: pytest tests/unit/test_progress_service.py -v
"""

from datetime import datetime, timedelta

import pytest

from models.progress_stats import ProgressStats
from models.question import Question
from models.quiz import Quiz
from models.quiz_result import QuizResult
from services.progress_service import ProgressService


class TestCalculateTrend:
    """Test ProgressService.calculate_trend."""

    @pytest.mark.parametrize("scores,expected", [
        ([10, 15], "improving"),
        ([15, 10], "declining"),
        ([10, 11], "stable"),
        ([10, 12], "stable"),
        ([10, 13], "improving"),
        ([], "stable"),
        ([42], "stable"),
    ])
    def test_higher_is_better(self, scores, expected):
        assert ProgressService.calculate_trend(scores) == expected

    @pytest.mark.parametrize("scores,expected", [
        ([15, 10], "improving"),
        ([10, 15], "declining"),
        ([10, 8], "stable"),
    ])
    def test_lower_is_better(self, scores, expected):
        assert ProgressService.calculate_trend(scores, "lower-is-better") == expected

    def test_only_endpoints_matter(self):
        """A spike in the middle does not change a flat history."""
        assert ProgressService.calculate_trend([10, 30, 0, 11]) == "stable"

    def test_unknown_direction_reads_as_higher_is_better(self):
        assert ProgressService.calculate_trend([10, 15], "sideways") == "improving"


class TestAverageScore:
    """Test ProgressService.get_average_score."""

    def test_empty(self):
        assert ProgressService.get_average_score([]) == 0

    def test_whole_average(self):
        assert ProgressService.get_average_score([10, 20]) == 15

    def test_rounds_to_one_decimal(self):
        assert ProgressService.get_average_score([3, 3, 4]) == 3.3

    def test_rounds_half_up(self):
        # mean 1.25 -> 1.3
        assert ProgressService.get_average_score([1, 1.5]) == 1.3


class TestScoreChange:
    """Test ProgressService.get_score_change."""

    def test_change(self):
        assert ProgressService.get_score_change([10, 12, 11, 15]) == 5

    def test_negative_change(self):
        assert ProgressService.get_score_change([15, 9]) == -6

    @pytest.mark.parametrize("scores", [[], [7]])
    def test_short_history(self, scores):
        assert ProgressService.get_score_change(scores) == 0


class TestBestWorst:
    """Test ProgressService.get_best_score / get_worst_score."""

    def test_best_higher_is_better(self):
        assert ProgressService.get_best_score([10, 5, 20, 15], "higher-is-better") == 20

    def test_best_lower_is_better(self):
        assert ProgressService.get_best_score([10, 5, 20, 15], "lower-is-better") == 5

    def test_worst_higher_is_better(self):
        assert ProgressService.get_worst_score([10, 5, 20, 15]) == 5

    def test_worst_lower_is_better(self):
        assert ProgressService.get_worst_score([10, 5, 20, 15], "lower-is-better") == 20

    def test_empty(self):
        assert ProgressService.get_best_score([]) == 0
        assert ProgressService.get_worst_score([], "lower-is-better") == 0


class TestProgressStats:
    """Test ProgressService.calculate_progress_stats."""

    def test_full_history(self):
        start = datetime(2024, 1, 1)
        dates = [start + timedelta(days=i) for i in range(4)]

        stats = ProgressService.calculate_progress_stats([10, 12, 11, 15], dates, "higher-is-better")

        assert stats == ProgressStats(
            attempts=4,
            trend="improving",
            average=12,
            best=15,
            worst=10,
            latest=15,
            change=5,
        )

    def test_dates_do_not_affect_result(self):
        with_dates = ProgressService.calculate_progress_stats([3, 9], [datetime(2024, 5, 1)] * 2)
        without_dates = ProgressService.calculate_progress_stats([3, 9])
        assert with_dates == without_dates

    def test_lower_is_better(self):
        stats = ProgressService.calculate_progress_stats([20, 14, 12], None, "lower-is-better")

        assert stats.trend == "improving"
        assert stats.best == 12
        assert stats.worst == 20
        assert stats.latest == 12
        assert stats.change == -8

    def test_empty_history(self):
        assert ProgressService.calculate_progress_stats([]) == ProgressStats()

    def test_single_attempt(self):
        stats = ProgressService.calculate_progress_stats([7])
        assert stats.attempts == 1
        assert stats.trend == "stable"
        assert stats.latest == 7
        assert stats.change == 0


def _result(quiz_id, score, day):
    return QuizResult(
        user_id="u1",
        quiz_id=quiz_id,
        score=score,
        completed_at=datetime(2024, 1, day),
    )


class TestSummarizeByQuiz:
    """Test ProgressService.summarize_by_quiz."""

    def test_most_recent_quiz_first(self):
        grouped = {
            "mood": [_result("mood", 4, 1), _result("mood", 8, 3)],
            "sleep": [_result("sleep", 6, 5)],
        }
        quizzes = {
            "mood": Quiz(quiz_id="mood", title="Mood", questions=[
                Question(question_id="1", type="scale", scale_max=10),
            ]),
            "sleep": Quiz(quiz_id="sleep", title="Sleep"),
        }

        overview = ProgressService.summarize_by_quiz(grouped, quizzes)

        assert [entry.quiz_id for entry in overview] == ["sleep", "mood"]
        mood = overview[1]
        assert mood.quiz_title == "Mood"
        assert mood.max_score == 10
        assert mood.scores == [4, 8]
        assert mood.dates == [datetime(2024, 1, 1), datetime(2024, 1, 3)]
        assert mood.stats.trend == "improving"
        assert mood.stats.attempts == 2

    def test_uses_quiz_scoring_direction(self):
        grouped = {"dass": [_result("dass", 20, 1), _result("dass", 12, 2)]}
        quizzes = {
            "dass": Quiz(quiz_id="dass", title="DASS-21", scoring_direction="lower-is-better"),
        }

        stats = ProgressService.summarize_by_quiz(grouped, quizzes)[0].stats

        assert stats.trend == "improving"
        assert stats.best == 12

    def test_unknown_quiz_defaults(self):
        grouped = {"gone": [_result("gone", 3, 1), _result("gone", 9, 2)]}

        entry = ProgressService.summarize_by_quiz(grouped)[0]

        assert entry.quiz_title == "Unknown Quiz"
        assert entry.max_score == 10
        assert entry.stats.trend == "improving"

    def test_empty_groups_are_skipped(self):
        assert ProgressService.summarize_by_quiz({"q1": []}, {}) == []
        assert ProgressService.summarize_by_quiz({}) == []
