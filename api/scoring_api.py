"""
Scoring API endpoints
"""

from fastapi import APIRouter, HTTPException, Depends
from loguru import logger
from api.schemas import (
    AnswerSchema,
    InterpretScoreRequest,
    MaxScoreRequest,
    MaxScoreResponse,
    ScoreInterpretationSchema,
    ScoreRequest,
    ScoreResponse,
)
from api.shared import (
    get_scoring_service,
    resolve_submitted_answers,
    to_interpretation_schema,
    to_quiz,
)
from services.scoring_service import ScoringService

router = APIRouter(prefix="/api/scoring", tags=["Scoring"])


@router.post("/score",
             response_model=ScoreResponse,
             summary="Score one quiz submission")
async def score_submission(
    request: ScoreRequest,
    scoring: ScoringService = Depends(get_scoring_service)
):
    """
    Score a submission against the quiz definition sent with it

    Unanswered questions are skipped. Non-numeric scale answers and
    options missing from the score mapping count as 0, so a partially
    invalid submission still gets a score.

    Returns:
        Total score, per-category sub-scores, the answers to store and the
        interpretation of the total
    """
    try:
        quiz = to_quiz(request.quiz)
        submitted = resolve_submitted_answers(request.answers, request.form_data)

        result = scoring.calculate_score(
            submitted,
            quiz.questions,
            quiz.score_ranges,
            quiz.score_multiplier
        )
        interpretation = scoring.interpret_score(
            result.total_score,
            len(quiz.questions),
            quiz.score_ranges,
            quiz.scoring_direction
        )

        logger.info(
            f"Scored quiz '{quiz.title}': {len(result.answers)} answers, total={result.total_score}"
        )

        return ScoreResponse(
            total_score=result.total_score,
            sub_scores=result.sub_scores,
            answers=[
                AnswerSchema(question_id=a.question_id, answer=a.answer)
                for a in result.answers
            ],
            interpretation=to_interpretation_schema(interpretation),
            max_score=scoring.calculate_max_score(quiz.questions, quiz.score_multiplier)
        )

    except Exception as e:
        logger.exception("Scoring failed")
        raise HTTPException(status_code=500, detail=f"Error scoring submission: {str(e)}")


@router.post("/interpret",
             response_model=ScoreInterpretationSchema,
             summary="Interpret a total score")
async def interpret_score(
    request: InterpretScoreRequest,
    scoring: ScoringService = Depends(get_scoring_service)
):
    """
    Label a score with the first matching range of the quiz, or with the
    percentage bands when no range matches
    """
    try:
        quiz = to_quiz(request.quiz)
        interpretation = scoring.interpret_score(
            request.score,
            len(quiz.questions),
            quiz.score_ranges,
            quiz.scoring_direction
        )
        return to_interpretation_schema(interpretation)

    except Exception as e:
        logger.exception("Interpretation failed")
        raise HTTPException(status_code=500, detail=f"Error interpreting score: {str(e)}")


@router.post("/max-score",
             response_model=MaxScoreResponse,
             summary="Highest total a quiz can reach")
async def max_score(
    request: MaxScoreRequest,
    scoring: ScoringService = Depends(get_scoring_service)
):
    quiz = to_quiz(request.quiz)
    return MaxScoreResponse(
        max_score=scoring.calculate_max_score(quiz.questions, quiz.score_multiplier)
    )
