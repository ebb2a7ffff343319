"""
Quiz Result Models
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Union

AnswerValue = Union[str, int, float]

@dataclass
class Answer:
    """One submitted response (str for choice/text, number for scale)"""
    question_id: str
    answer: AnswerValue


@dataclass
class ScoreResult:
    """Output of scoring one submission"""
    total_score: float = 0
    sub_scores: Optional[Dict[str, float]] = None
    answers: List[Answer] = field(default_factory=list)


@dataclass
class QuizResult:
    """Persisted outcome of one quiz attempt"""
    user_id: str
    quiz_id: str
    score: float
    completed_at: datetime
    answers: List[Answer] = field(default_factory=list)
    sub_scores: Optional[Dict[str, float]] = None
    result_id: Optional[str] = None
    session_id: Optional[str] = None
