"""
Services module - Business logic
"""

from .scoring_service import ScoringService
from .progress_service import ProgressService
from .quiz_validation_service import QuizValidationService, ValidationResult
from .quiz_loader_service import QuizLoaderService
from .analysis_service import AnalysisService

__all__ = [
    'ScoringService',
    'ProgressService',
    'QuizValidationService',
    'ValidationResult',
    'QuizLoaderService',
    'AnalysisService'
]
