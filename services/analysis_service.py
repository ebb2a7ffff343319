"""
Analysis Service - Structural statistics for a quiz
"""

from typing import Dict, List, Optional
from collections import defaultdict
import numpy as np
from models.question import Question, QUESTION_TYPES
from services.scoring_service import ScoringService

class AnalysisService:
    """
    Service to describe how a quiz is built: question mix, categories and
    how many points each question can contribute
    """

    @staticmethod
    def analyze_quiz(questions: List[Question],
                     score_multiplier: Optional[float] = None) -> Dict:
        """
        Analyze the questions of a quiz

        Args:
            questions: Quiz questions
            score_multiplier: Quiz-level multiplier, applied to the max score

        Returns:
            Dict with totals, per-question point statistics and distributions
        """
        if not questions:
            return {
                "total_questions": 0,
                "scored_questions": 0,
                "max_score": 0,
                "statistics": {
                    "max_points": {
                        "min": 0.0,
                        "max": 0.0,
                        "mean": 0.0,
                        "median": 0.0
                    }
                },
                "distributions": {
                    "by_type": {question_type: 0 for question_type in QUESTION_TYPES},
                    "by_category": {},
                    "total_categories": 0
                }
            }

        type_count = {question_type: 0 for question_type in QUESTION_TYPES}
        for q in questions:
            type_count[q.type] = type_count.get(q.type, 0) + 1

        category_count = defaultdict(int)
        for q in questions:
            if q.category:
                category_count[q.category] += 1

        scored = [q for q in questions if q.is_scored]
        max_points = np.array(
            [ScoringService.question_max_points(q) for q in scored],
            dtype=float
        )

        if max_points.size:
            max_points_stats = {
                "min": float(np.min(max_points)),
                "max": float(np.max(max_points)),
                "mean": float(np.mean(max_points)),
                "median": float(np.median(max_points))
            }
        else:
            max_points_stats = {"min": 0.0, "max": 0.0, "mean": 0.0, "median": 0.0}

        return {
            "total_questions": len(questions),
            "scored_questions": len(scored),
            "max_score": ScoringService.calculate_max_score(questions, score_multiplier),
            "statistics": {
                "max_points": max_points_stats
            },
            "distributions": {
                "by_type": type_count,
                "by_category": dict(category_count),
                "total_categories": len(category_count)
            }
        }
