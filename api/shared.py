"""
Shared utilities for all API routes: request -> model conversion and
service dependencies
"""

from typing import Dict, Optional
from api.schemas import (
    AnswerValue,
    QuestionSchema,
    QuizSchema,
    ScoreInterpretationSchema,
    ScoreRangeSchema,
)
from models.question import Question
from models.quiz import Quiz
from models.score_range import ScoreInterpretation, ScoreRange
from services.progress_service import ProgressService
from services.scoring_service import ScoringService

# Quiz forms name each answer field 'question_<question id>'
QUESTION_FIELD_PREFIX = "question_"


def extract_submitted_answers(form_data: Dict[str, str]) -> Dict[str, str]:
    """
    Map raw quiz form fields to question id -> submitted value.

    Fields without the 'question_' prefix are ignored.
    """
    submitted = {}
    for key, value in form_data.items():
        if key.startswith(QUESTION_FIELD_PREFIX):
            submitted[key[len(QUESTION_FIELD_PREFIX):]] = value
    return submitted


def resolve_submitted_answers(answers: Optional[Dict[str, AnswerValue]],
                              form_data: Optional[Dict[str, str]]) -> Dict[str, AnswerValue]:
    if form_data is not None:
        return extract_submitted_answers(form_data)
    return dict(answers or {})


def to_question(schema: QuestionSchema) -> Question:
    return Question(
        question_id=schema.id,
        text=schema.text,
        type=schema.type,
        options=schema.options,
        scale_min=schema.scale_min,
        scale_max=schema.scale_max,
        score_mapping=schema.score_mapping,
        points=schema.points,
        category=schema.category
    )


def to_score_range(schema: ScoreRangeSchema) -> ScoreRange:
    return ScoreRange(
        min=schema.min,
        max=schema.max,
        status=schema.status,
        description=schema.description,
        color=schema.color
    )


def to_quiz(schema: QuizSchema) -> Quiz:
    """Convert a request quiz into the model used by services"""
    return Quiz(
        quiz_id=schema.slug,
        title=schema.title,
        description=schema.description,
        slug=schema.slug,
        questions=[to_question(q) for q in schema.questions],
        score_ranges=[to_score_range(r) for r in schema.score_ranges],
        scoring_direction=schema.scoring_direction,
        score_multiplier=schema.score_multiplier
    )


def to_interpretation_schema(interpretation: ScoreInterpretation) -> ScoreInterpretationSchema:
    matched = interpretation.matched_range
    return ScoreInterpretationSchema(
        label=interpretation.label,
        description=interpretation.description,
        color=interpretation.color,
        percentage=interpretation.percentage,
        matched_range=ScoreRangeSchema(
            min=matched.min,
            max=matched.max,
            status=matched.status,
            description=matched.description,
            color=matched.color
        ) if matched is not None else None
    )


def get_scoring_service() -> ScoringService:
    """Dependency to create ScoringService"""
    return ScoringService()


def get_progress_service() -> ProgressService:
    """Dependency to create ProgressService"""
    return ProgressService()
