"""
Quiz Validation Service - Authoring-time checks for quiz definitions
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from models.question import Question, MULTIPLE_CHOICE, SCALE
from models.score_range import ScoreRange

@dataclass
class ValidationResult:
    """Errors block saving a quiz; warnings are shown to the author only"""
    errors: Dict[str, str] = field(default_factory=dict)
    warnings: Dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _is_blank(value: Optional[str]) -> bool:
    return value is None or str(value).strip() == ""


class QuizValidationService:
    """
    Service to check a quiz before it is saved.

    Scoring does not depend on these checks passing; it tolerates
    malformed quizzes on its own.
    """

    @staticmethod
    def validate_quiz(title: Optional[str],
                      slug: Optional[str],
                      description: Optional[str],
                      questions: List[Question],
                      score_ranges: List[ScoreRange]) -> ValidationResult:
        """
        Validate a quiz definition

        Error keys are 'title', 'slug', 'description', 'questions',
        'question_<index>' and 'range_<index>'. Overlapping ranges are
        reported as warnings under 'range_<index>_overlap'.

        Returns:
            ValidationResult
        """
        result = ValidationResult()

        if _is_blank(title):
            result.errors["title"] = "Title is required"
        if _is_blank(slug):
            result.errors["slug"] = "Slug is required"
        if _is_blank(description):
            result.errors["description"] = "Description is required"

        if not questions:
            result.errors["questions"] = "At least one question is required"
        else:
            for index, question in enumerate(questions):
                message = QuizValidationService.validate_question(question, index)
                if message:
                    result.errors[f"question_{index}"] = message

        for index, score_range in enumerate(score_ranges or []):
            message = QuizValidationService.validate_score_range(score_range, index)
            if message:
                result.errors[f"range_{index}"] = message

        result.warnings.update(QuizValidationService.find_overlapping_ranges(score_ranges or []))

        return result

    @staticmethod
    def validate_question(question: Question, index: int) -> Optional[str]:
        """Last failing rule for a question, or None"""
        label = f"Question {index + 1}"
        message = None

        if _is_blank(question.text):
            message = f"{label} text is required"

        if question.type == MULTIPLE_CHOICE:
            options = question.options or []
            if len(options) < 2:
                message = f"{label} must have at least 2 options"
            if any(_is_blank(option) for option in options):
                message = f"{label} has empty options"

        if question.type == SCALE:
            if (question.scale_min or 0) >= (question.scale_max or 0):
                message = f"{label} scale min must be less than max"

        return message

    @staticmethod
    def validate_score_range(score_range: ScoreRange, index: int) -> Optional[str]:
        label = f"Range {index + 1}"
        message = None

        if score_range.min > score_range.max:
            message = f"{label} min must be less than or equal to max"
        if _is_blank(score_range.status):
            message = f"{label} status is required"

        return message

    @staticmethod
    def find_overlapping_ranges(score_ranges: List[ScoreRange]) -> Dict[str, str]:
        """
        Pairs of ranges sharing at least one score

        Each range is reported once, against the first later range it
        overlaps.
        """
        overlaps = {}
        for i, first in enumerate(score_ranges):
            for j in range(i + 1, len(score_ranges)):
                second = score_ranges[j]
                if first.min <= second.max and second.min <= first.max:
                    overlaps[f"range_{i}_overlap"] = (
                        f"Range {i + 1} overlaps with Range {j + 1}; "
                        f"Range {i + 1} takes priority"
                    )
                    break
        return overlaps
