"""
Score Range Model
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ScoreRange:
    """Interpretation bucket for a total score (bounds inclusive)"""
    min: float
    max: float
    status: str
    description: str = ""
    color: str = "gray"

    def contains(self, score: float) -> bool:
        return self.min <= score <= self.max


@dataclass
class ScoreInterpretation:
    """Label shown next to a result"""
    label: str
    description: str
    color: str
    percentage: Optional[int] = None
    matched_range: Optional[ScoreRange] = None
