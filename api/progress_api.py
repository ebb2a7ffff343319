"""
Progress API endpoints
"""

from dataclasses import asdict
from fastapi import APIRouter, HTTPException, Depends
from loguru import logger
from api.schemas import (
    HistoryPoint,
    ProgressOverviewRequest,
    ProgressOverviewResponse,
    ProgressHistoryRequest,
    ProgressHistoryResponse,
    ProgressStatsRequest,
    ProgressStatsResponse,
    QuizProgressSchema,
)
from api.shared import get_progress_service, to_quiz
from services.progress_service import ProgressService
from services.quiz_loader_service import QuizLoaderService
from services.scoring_service import ScoringService

router = APIRouter(prefix="/api/progress", tags=["Progress"])


@router.post("/stats",
             response_model=ProgressStatsResponse,
             summary="Trend and statistics of a score history")
async def progress_stats(
    request: ProgressStatsRequest,
    progress: ProgressService = Depends(get_progress_service)
):
    """
    Summarize scores sent oldest first

    An empty history is not an error: all numbers are 0 and the trend is
    'stable'.
    """
    stats = progress.calculate_progress_stats(
        request.scores,
        request.dates,
        request.scoring_direction
    )
    return ProgressStatsResponse(**asdict(stats))


@router.post("/history",
             response_model=ProgressHistoryResponse,
             summary="Progress of one quiz from stored results")
async def progress_history(
    request: ProgressHistoryRequest,
    progress: ProgressService = Depends(get_progress_service)
):
    """
    Build the progress view of one quiz from the user's stored results

    Steps:
    1. Load result documents, skipping ones without a numeric score or date
    2. Order them oldest first
    3. Compute trend and statistics with the quiz's scoring direction

    Returns:
        Ordered history, statistics and the quiz's max score (for charts)
    """
    try:
        quiz = to_quiz(request.quiz)
        results = QuizLoaderService.load_results(request.results)
        scores, dates = QuizLoaderService.extract_score_history(results)

        stats = progress.calculate_progress_stats(scores, dates, quiz.scoring_direction)

        logger.info(
            f"Progress for quiz '{quiz.title}': {stats.attempts} of {len(request.results)} results usable"
        )

        return ProgressHistoryResponse(
            quiz_title=quiz.title,
            history=[HistoryPoint(date=d, score=s) for s, d in zip(scores, dates)],
            stats=ProgressStatsResponse(**asdict(stats)),
            max_score=ScoringService.calculate_max_score(quiz.questions, quiz.score_multiplier)
        )

    except Exception as e:
        logger.exception("Progress history failed")
        raise HTTPException(status_code=500, detail=f"Error building progress: {str(e)}")


@router.post("/overview",
             response_model=ProgressOverviewResponse,
             summary="Progress across every quiz a user has taken")
async def progress_overview(
    request: ProgressOverviewRequest,
    progress: ProgressService = Depends(get_progress_service)
):
    """
    Build the all-quizzes progress view from the user's stored results

    Results are grouped by `quizId` and each group is summarized with its
    quiz's scoring direction and max score. Quizzes are listed most
    recently taken first.
    """
    try:
        results = QuizLoaderService.load_results(request.results)
        grouped = QuizLoaderService.group_results_by_quiz(results)
        quizzes = {
            quiz_id: QuizLoaderService.load_quiz(document)
            for quiz_id, document in request.quizzes.items()
        }

        overview = progress.summarize_by_quiz(grouped, quizzes)

        logger.info(f"Progress overview: {len(results)} results across {len(overview)} quizzes")

        return ProgressOverviewResponse(quizzes=[
            QuizProgressSchema(
                quiz_id=entry.quiz_id,
                quiz_title=entry.quiz_title,
                max_score=entry.max_score,
                history=[HistoryPoint(date=d, score=s) for s, d in zip(entry.scores, entry.dates)],
                stats=ProgressStatsResponse(**asdict(entry.stats))
            )
            for entry in overview
        ])

    except Exception as e:
        logger.exception("Progress overview failed")
        raise HTTPException(status_code=500, detail=f"Error building progress overview: {str(e)}")
