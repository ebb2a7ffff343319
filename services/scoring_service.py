"""
Scoring Service - Turn one quiz submission into a score
"""

from typing import Dict, List, Mapping, Optional
from loguru import logger
from models.question import Question, MULTIPLE_CHOICE, SCALE
from models.quiz import HIGHER_IS_BETTER, LOWER_IS_BETTER
from models.quiz_result import Answer, AnswerValue, ScoreResult
from models.score_range import ScoreRange, ScoreInterpretation
from services.number_utils import Number, to_number, round_half_up

# Fallback interpretation assumes every question is worth up to this many points
FALLBACK_POINTS_PER_QUESTION = 10
DEFAULT_SCALE_MAX = 10

class ScoringService:
    """
    Service to score quiz submissions and interpret the resulting totals.

    Scoring never raises on malformed submissions: missing answers are
    skipped, and non-numeric or unmapped answers contribute 0.
    """

    @staticmethod
    def calculate_score(submitted_answers: Mapping[str, AnswerValue],
                        questions: List[Question],
                        score_ranges: Optional[List[ScoreRange]] = None,
                        score_multiplier: Optional[float] = None) -> ScoreResult:
        """
        Score one submission

        Args:
            submitted_answers: question_id -> submitted value
            questions: The quiz's questions, in display order
            score_ranges: Accepted for interface compatibility; range matching
                happens at interpretation time (see `interpret_score`)
            score_multiplier: Applied to the total and sub-scores when > 0

        Returns:
            ScoreResult with total, per-category sub-scores (None when no
            question has a category) and the answers to persist
        """
        total_score: Number = 0
        sub_scores: Dict[str, Number] = {}
        answers: List[Answer] = []

        for question in questions:
            raw_value = submitted_answers.get(question.question_id)
            if raw_value is None or raw_value == "":
                continue

            if question.type == SCALE:
                answer_value = to_number(raw_value)
                points = answer_value
            else:
                answer_value = str(raw_value)
                points = 0
                if question.type == MULTIPLE_CHOICE:
                    points = ScoringService.option_points(question, answer_value)

            answers.append(Answer(question_id=question.question_id, answer=answer_value))
            total_score += points

            if question.category:
                sub_scores[question.category] = sub_scores.get(question.category, 0) + points

        if score_multiplier and score_multiplier > 0:
            total_score = total_score * score_multiplier
            sub_scores = {
                category: value * score_multiplier
                for category, value in sub_scores.items()
            }

        logger.debug(
            f"Scored {len(answers)}/{len(questions)} answered questions, total={total_score}"
        )

        return ScoreResult(
            total_score=total_score,
            sub_scores=sub_scores or None,
            answers=answers
        )

    @staticmethod
    def option_points(question: Question, option: str) -> Number:
        """
        Points for a multiple-choice option.

        A score mapping takes precedence, even when empty. Without one,
        the points list is read by the option's position.
        """
        if question.score_mapping is not None:
            return to_number(question.score_mapping.get(option, 0))

        if question.points and question.options:
            if option in question.options:
                index = question.options.index(option)
                if index < len(question.points):
                    return to_number(question.points[index])

        return 0

    @staticmethod
    def calculate_max_score(questions: List[Question],
                            score_multiplier: Optional[float] = None) -> Number:
        """
        Highest total a submission can reach

        Scale questions count their upper bound (10 when unset); choice
        questions count their best option; text questions count nothing.
        """
        max_score: Number = 0
        for question in questions:
            max_score += ScoringService.question_max_points(question)

        if score_multiplier and score_multiplier > 0:
            max_score = max_score * score_multiplier

        return max_score

    @staticmethod
    def question_max_points(question: Question) -> Number:
        if question.type == SCALE:
            return to_number(question.scale_max) or DEFAULT_SCALE_MAX

        if question.type == MULTIPLE_CHOICE:
            if question.score_mapping is not None:
                values = [to_number(v) for v in question.score_mapping.values()]
            else:
                values = [to_number(v) for v in question.points or []]
            return max(values) if values else 0

        return 0

    @staticmethod
    def match_score_range(score: float,
                          score_ranges: Optional[List[ScoreRange]]) -> Optional[ScoreRange]:
        """
        First range containing the score, in list order

        Overlapping ranges are allowed; the earliest one wins.
        """
        for score_range in score_ranges or []:
            if score_range.contains(score):
                return score_range
        return None

    @staticmethod
    def interpret_score(score: float,
                        question_count: int,
                        score_ranges: Optional[List[ScoreRange]] = None,
                        scoring_direction: str = HIGHER_IS_BETTER) -> ScoreInterpretation:
        """
        Turn a total score into a label, description and color

        Uses the first matching authored range. When no range is configured
        or none matches, falls back to a percentage of
        `question_count * 10` split into three bands; the "good" end of the
        bands flips for lower-is-better quizzes.

        Args:
            score: Total score of the attempt
            question_count: Number of questions in the quiz
            score_ranges: Authored ranges, in priority order
            scoring_direction: 'higher-is-better' or 'lower-is-better'

        Returns:
            ScoreInterpretation
        """
        matched_range = ScoringService.match_score_range(score, score_ranges)
        if matched_range is not None:
            return ScoreInterpretation(
                label=matched_range.status,
                description=matched_range.description,
                color=matched_range.color,
                matched_range=matched_range
            )

        max_score = question_count * FALLBACK_POINTS_PER_QUESTION
        percentage = round_half_up(to_number(score) / max_score * 100) if max_score > 0 else 0
        higher_is_better = scoring_direction != LOWER_IS_BETTER

        doing_well = ("Doing Well",
                      "Your responses indicate positive mental wellness.",
                      "green")
        needs_care = ("Needs Care",
                      "Your responses may indicate areas for improvement.",
                      "orange")

        if percentage >= 70:
            label, description, color = doing_well if higher_is_better else needs_care
        elif percentage >= 40:
            label = "Moderate"
            description = "Your responses suggest moderate wellness. Consider tracking your progress."
            color = "yellow"
        else:
            label, description, color = needs_care if higher_is_better else doing_well

        return ScoreInterpretation(
            label=label,
            description=description,
            color=color,
            percentage=percentage
        )
