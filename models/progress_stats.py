"""
Progress Stats Model
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

IMPROVING = "improving"
DECLINING = "declining"
STABLE = "stable"

@dataclass
class ProgressStats:
    """Summary of a user's score history for one quiz"""
    attempts: int = 0
    trend: str = STABLE
    average: float = 0
    best: float = 0
    worst: float = 0
    latest: float = 0
    change: float = 0

@dataclass
class QuizProgress:
    """One quiz's entry in the all-quizzes progress overview"""
    quiz_id: str
    quiz_title: str
    max_score: float
    scores: List[float] = field(default_factory=list)
    dates: List[datetime] = field(default_factory=list)
    stats: ProgressStats = field(default_factory=ProgressStats)
