"""
Question Model
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

MULTIPLE_CHOICE = "multiple-choice"
SCALE = "scale"
TEXT = "text"

QUESTION_TYPES = (MULTIPLE_CHOICE, SCALE, TEXT)

@dataclass
class Question:
    """One quiz item"""
    question_id: str
    text: str = ""
    type: str = MULTIPLE_CHOICE
    options: Optional[List[str]] = None
    scale_min: Optional[float] = None
    scale_max: Optional[float] = None
    score_mapping: Optional[Dict[str, float]] = None
    points: Optional[List[float]] = None
    category: Optional[str] = None

    def __post_init__(self):
        """
        Ids are compared as strings everywhere (form keys, stored answers).
        Blank categories mean "no category". Stored documents are not
        trusted: a mapping or list of the wrong shape is dropped.
        """
        self.question_id = str(self.question_id)

        if self.category is not None:
            self.category = str(self.category).strip() or None

        if self.score_mapping is not None and not isinstance(self.score_mapping, dict):
            self.score_mapping = None
        if self.options is not None and not isinstance(self.options, list):
            self.options = None
        if self.points is not None and not isinstance(self.points, list):
            self.points = None

    @property
    def is_scored(self) -> bool:
        return self.type in (MULTIPLE_CHOICE, SCALE)
