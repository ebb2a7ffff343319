"""
Quiz Model
"""

from dataclasses import dataclass, field
from typing import List, Optional
from models.question import Question
from models.score_range import ScoreRange

HIGHER_IS_BETTER = "higher-is-better"
LOWER_IS_BETTER = "lower-is-better"

SCORING_DIRECTIONS = (HIGHER_IS_BETTER, LOWER_IS_BETTER)

@dataclass
class Quiz:
    """Authored quiz: questions plus scoring configuration"""
    quiz_id: str
    title: str
    description: str = ""
    slug: str = ""
    questions: List[Question] = field(default_factory=list)
    score_ranges: List[ScoreRange] = field(default_factory=list)
    scoring_direction: str = HIGHER_IS_BETTER
    score_multiplier: Optional[float] = None
    is_published: bool = False

    def __post_init__(self):
        if self.scoring_direction not in SCORING_DIRECTIONS:
            self.scoring_direction = HIGHER_IS_BETTER
