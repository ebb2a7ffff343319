"""
Quiz Loader Service - Convert stored documents into models
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
from loguru import logger
from models.question import Question, MULTIPLE_CHOICE
from models.quiz import Quiz, HIGHER_IS_BETTER
from models.quiz_result import Answer, QuizResult
from models.score_range import ScoreRange
from services.number_utils import to_number

class QuizLoaderService:
    """
    Service to load quizzes and result history from the documents the
    application stores (camelCase keys, `_id` identifiers).
    """

    @staticmethod
    def _optional_number(value: Any) -> Optional[float]:
        return None if value is None else to_number(value)

    @staticmethod
    def load_question(document: Dict[str, Any]) -> Question:
        return Question(
            question_id=str(document.get('id', '')),
            text=document.get('text', '') or '',
            type=document.get('type', MULTIPLE_CHOICE) or MULTIPLE_CHOICE,
            options=document.get('options'),
            scale_min=QuizLoaderService._optional_number(document.get('scaleMin')),
            scale_max=QuizLoaderService._optional_number(document.get('scaleMax')),
            score_mapping=document.get('scoreMapping'),
            points=document.get('points'),
            category=document.get('category')
        )

    @staticmethod
    def load_score_range(document: Dict[str, Any]) -> ScoreRange:
        return ScoreRange(
            min=to_number(document.get('min')),
            max=to_number(document.get('max')),
            status=document.get('status', '') or '',
            description=document.get('description', '') or '',
            color=document.get('color', 'gray') or 'gray'
        )

    @staticmethod
    def load_quiz(document: Dict[str, Any]) -> Quiz:
        """
        Build a Quiz from a stored quiz document

        Args:
            document: Quiz document as persisted by the application

        Returns:
            Quiz with missing fields defaulted
        """
        questions = [
            QuizLoaderService.load_question(q)
            for q in document.get('questions') or []
            if isinstance(q, dict)
        ]
        score_ranges = [
            QuizLoaderService.load_score_range(r)
            for r in document.get('scoreRanges') or []
            if isinstance(r, dict)
        ]

        return Quiz(
            quiz_id=str(document.get('_id', '') or ''),
            title=document.get('title', '') or '',
            description=document.get('description', '') or '',
            slug=document.get('slug', '') or '',
            questions=questions,
            score_ranges=score_ranges,
            scoring_direction=document.get('scoringDirection') or HIGHER_IS_BETTER,
            score_multiplier=QuizLoaderService._optional_number(document.get('scoreMultiplier')),
            is_published=bool(document.get('isPublished', False))
        )

    @staticmethod
    def parse_datetime(value: Any) -> Optional[datetime]:
        """ISO-8601 string or datetime -> timezone-aware datetime (UTC if naive)"""
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, str) and value:
            try:
                parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
            except ValueError:
                return None
        else:
            return None

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    @staticmethod
    def load_results(documents: List[Dict[str, Any]]) -> List[QuizResult]:
        """
        Build QuizResults from stored result documents, oldest first

        Documents without a numeric score or a readable completion date
        are skipped.

        Args:
            documents: Result documents in any order (the store returns
                newest first)

        Returns:
            List of QuizResult sorted by completion date
        """
        results = []

        for document in documents:
            score = document.get('score')
            if isinstance(score, bool) or not isinstance(score, (int, float)):
                logger.warning(f"Skipping result {document.get('_id')}: score is not numeric")
                continue

            completed_at = QuizLoaderService.parse_datetime(document.get('completedAt'))
            if completed_at is None:
                logger.warning(f"Skipping result {document.get('_id')}: unreadable completedAt")
                continue

            answers = [
                Answer(question_id=str(a.get('questionId', '')), answer=a.get('answer'))
                for a in document.get('answers') or []
                if isinstance(a, dict)
            ]

            results.append(QuizResult(
                user_id=str(document.get('userId', '')),
                quiz_id=str(document.get('quizId', '')),
                score=score,
                completed_at=completed_at,
                answers=answers,
                sub_scores=document.get('subScores'),
                result_id=str(document['_id']) if document.get('_id') is not None else None,
                session_id=document.get('sessionId')
            ))

        results.sort(key=lambda r: r.completed_at)
        return results

    @staticmethod
    def extract_score_history(results: List[QuizResult]) -> Tuple[List[float], List[datetime]]:
        """
        Scores and dates in the order given

        Returns:
            (scores, dates)
        """
        scores = [r.score for r in results]
        dates = [r.completed_at for r in results]
        return scores, dates

    @staticmethod
    def group_results_by_quiz(results: List[QuizResult]) -> Dict[str, List[QuizResult]]:
        """
        Split a user's results per quiz, keeping each group in the order given

        Args:
            results: Results sorted oldest first (see `load_results`)

        Returns:
            quiz_id -> results for that quiz
        """
        grouped: Dict[str, List[QuizResult]] = {}
        for result in results:
            grouped.setdefault(result.quiz_id, []).append(result)
        return grouped
