"""
Models module - data definitions for quizzes, results and progress
"""

from .question import Question
from .score_range import ScoreRange, ScoreInterpretation
from .quiz import Quiz
from .quiz_result import Answer, ScoreResult, QuizResult
from .progress_stats import ProgressStats, QuizProgress

__all__ = [
    'Question',
    'ScoreRange',
    'ScoreInterpretation',
    'Quiz',
    'Answer',
    'ScoreResult',
    'QuizResult',
    'ProgressStats',
    'QuizProgress'
]
