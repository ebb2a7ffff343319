"""
Quiz authoring API endpoints
"""

from fastapi import APIRouter, HTTPException
from loguru import logger
from api.schemas import (
    QuizAnalysisResponse,
    QuizSchema,
    ValidateQuizResponse,
)
from api.shared import to_quiz
from services.analysis_service import AnalysisService
from services.quiz_validation_service import QuizValidationService

router = APIRouter(prefix="/api/quizzes", tags=["Quiz Authoring"])


@router.post("/validate",
             response_model=ValidateQuizResponse,
             summary="Validate a quiz before saving it")
async def validate_quiz(request: QuizSchema):
    """
    Check a quiz definition

    **Errors** (quiz cannot be saved):
    - Missing title, slug or description
    - No questions, a question without text
    - Multiple-choice with fewer than 2 options or blank options
    - Scale with min >= max
    - Range with min > max or without a status

    **Warnings**:
    - Overlapping score ranges (the earlier range wins when scoring)
    """
    quiz = to_quiz(request)
    result = QuizValidationService.validate_quiz(
        quiz.title,
        quiz.slug,
        quiz.description,
        quiz.questions,
        quiz.score_ranges
    )

    if not result.is_valid:
        logger.info(f"Quiz '{quiz.title}' failed validation: {sorted(result.errors)}")

    return ValidateQuizResponse(
        is_valid=result.is_valid,
        errors=result.errors,
        warnings=result.warnings
    )


@router.post("/analysis",
             response_model=QuizAnalysisResponse,
             summary="Question mix and point statistics of a quiz")
async def analyze_quiz(request: QuizSchema):
    try:
        quiz = to_quiz(request)
        analysis = AnalysisService.analyze_quiz(quiz.questions, quiz.score_multiplier)
        return QuizAnalysisResponse(**analysis)

    except Exception as e:
        logger.exception("Quiz analysis failed")
        raise HTTPException(status_code=500, detail=f"Error analyzing quiz: {str(e)}")
