"""
Progress Service - Trend and summary statistics over a score history
"""

from typing import List, Mapping, Optional, Sequence
import numpy as np
from loguru import logger
from models.progress_stats import ProgressStats, QuizProgress, IMPROVING, DECLINING, STABLE
from models.quiz import Quiz, HIGHER_IS_BETTER, LOWER_IS_BETTER
from models.quiz_result import QuizResult
from services.number_utils import Number, round_half_up
from services.scoring_service import ScoringService

# Absolute score change needed before a history counts as a trend
TREND_THRESHOLD = 2

# Overview defaults for results whose quiz no longer exists
UNKNOWN_QUIZ_TITLE = "Unknown Quiz"
UNKNOWN_QUIZ_MAX_SCORE = 10

class ProgressService:
    """
    Service to summarize a user's scores for one quiz.

    Every method takes scores in chronological order (oldest first) and
    returns 0 / 'stable' for empty input instead of raising.
    """

    @staticmethod
    def calculate_trend(scores: Sequence[Number],
                        scoring_direction: str = HIGHER_IS_BETTER) -> str:
        """
        Classify a history as improving, declining or stable

        Only the first and last scores are compared; fluctuation in
        between is ignored.

        Args:
            scores: Scores, oldest first
            scoring_direction: 'higher-is-better' or 'lower-is-better'

        Returns:
            'improving', 'declining' or 'stable'
        """
        if len(scores) < 2:
            return STABLE

        change = scores[-1] - scores[0]

        if scoring_direction == LOWER_IS_BETTER:
            if change < -TREND_THRESHOLD:
                return IMPROVING
            if change > TREND_THRESHOLD:
                return DECLINING
        else:
            if change > TREND_THRESHOLD:
                return IMPROVING
            if change < -TREND_THRESHOLD:
                return DECLINING

        return STABLE

    @staticmethod
    def get_average_score(scores: Sequence[Number]) -> Number:
        """Mean score rounded to one decimal place"""
        if len(scores) == 0:
            return 0
        return round_half_up(float(np.mean(scores)), 1)

    @staticmethod
    def get_score_change(scores: Sequence[Number]) -> Number:
        """Last score minus first score"""
        if len(scores) < 2:
            return 0
        return scores[-1] - scores[0]

    @staticmethod
    def get_best_score(scores: Sequence[Number],
                       scoring_direction: str = HIGHER_IS_BETTER) -> Number:
        """Highest score, or lowest for lower-is-better quizzes"""
        if len(scores) == 0:
            return 0
        return min(scores) if scoring_direction == LOWER_IS_BETTER else max(scores)

    @staticmethod
    def get_worst_score(scores: Sequence[Number],
                        scoring_direction: str = HIGHER_IS_BETTER) -> Number:
        """Lowest score, or highest for lower-is-better quizzes"""
        if len(scores) == 0:
            return 0
        return max(scores) if scoring_direction == LOWER_IS_BETTER else min(scores)

    @staticmethod
    def calculate_progress_stats(scores: Sequence[Number],
                                 dates: Optional[List] = None,
                                 scoring_direction: str = HIGHER_IS_BETTER) -> ProgressStats:
        """
        Full summary of a score history

        Args:
            scores: Scores, oldest first
            dates: Completion dates matching `scores`; currently unused by
                any calculation
            scoring_direction: 'higher-is-better' or 'lower-is-better'

        Returns:
            ProgressStats
        """
        stats = ProgressStats(
            attempts=len(scores),
            trend=ProgressService.calculate_trend(scores, scoring_direction),
            average=ProgressService.get_average_score(scores),
            best=ProgressService.get_best_score(scores, scoring_direction),
            worst=ProgressService.get_worst_score(scores, scoring_direction),
            latest=scores[-1] if len(scores) > 0 else 0,
            change=ProgressService.get_score_change(scores)
        )

        logger.debug(f"Progress over {stats.attempts} attempts: trend={stats.trend}, change={stats.change}")
        return stats

    @staticmethod
    def summarize_by_quiz(results_by_quiz: Mapping[str, List[QuizResult]],
                          quizzes: Optional[Mapping[str, Quiz]] = None) -> List[QuizProgress]:
        """
        Progress of every quiz a user has taken

        Args:
            results_by_quiz: quiz_id -> results, oldest first
                (see `QuizLoaderService.group_results_by_quiz`)
            quizzes: quiz_id -> Quiz for the quizzes still available

        Returns:
            One QuizProgress per quiz, most recently taken first. A quiz
            missing from `quizzes` is titled 'Unknown Quiz', has a max
            score of 10 and is read as higher-is-better.
        """
        quizzes = quizzes or {}
        overview: List[QuizProgress] = []

        for quiz_id, results in results_by_quiz.items():
            if not results:
                continue

            quiz = quizzes.get(quiz_id)
            scores = [r.score for r in results]
            dates = [r.completed_at for r in results]

            if quiz is not None:
                title = quiz.title or UNKNOWN_QUIZ_TITLE
                max_score = ScoringService.calculate_max_score(quiz.questions, quiz.score_multiplier)
                direction = quiz.scoring_direction
            else:
                title = UNKNOWN_QUIZ_TITLE
                max_score = UNKNOWN_QUIZ_MAX_SCORE
                direction = HIGHER_IS_BETTER

            overview.append(QuizProgress(
                quiz_id=quiz_id,
                quiz_title=title,
                max_score=max_score,
                scores=scores,
                dates=dates,
                stats=ProgressService.calculate_progress_stats(scores, dates, direction)
            ))

        overview.sort(key=lambda p: p.dates[-1], reverse=True)
        return overview
