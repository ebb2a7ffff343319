"""
API Schemas - Request/Response models
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field, model_validator

Number = Union[int, float]
AnswerValue = Union[str, int, float]

QuestionType = Literal["multiple-choice", "scale", "text"]
RangeColor = Literal["green", "yellow", "orange", "gray"]
ScoringDirection = Literal["higher-is-better", "lower-is-better"]
Trend = Literal["improving", "declining", "stable"]

# =============== Quiz definition ===============


class QuestionSchema(BaseModel):
    """One quiz question as authored"""
    id: str
    text: str = ""
    type: QuestionType = "multiple-choice"
    options: Optional[List[str]] = None
    scale_min: Optional[Number] = None
    scale_max: Optional[Number] = None
    score_mapping: Optional[Dict[str, Number]] = Field(
        default=None, description="Option -> score. Takes precedence over `points`"
    )
    points: Optional[List[Number]] = Field(
        default=None, description="Scores by option position, used when there is no score_mapping"
    )
    category: Optional[str] = Field(default=None, description="Sub-score category, e.g. 'Anxiety'")

    class Config:
        json_schema_extra = {
            "example": {
                "id": "1",
                "text": "Do you feel rested when you wake up?",
                "type": "multiple-choice",
                "options": ["Yes", "No"],
                "score_mapping": {"Yes": 5, "No": 0},
                "category": "Sleep"
            }
        }


class ScoreRangeSchema(BaseModel):
    """Interpretation bucket, bounds inclusive"""
    min: Number
    max: Number
    status: str
    description: str = ""
    color: RangeColor = "gray"


class QuizSchema(BaseModel):
    """Quiz definition sent along with a request (the API keeps no quiz store)"""
    title: str = ""
    slug: str = ""
    description: str = ""
    questions: List[QuestionSchema] = Field(default_factory=list)
    score_ranges: List[ScoreRangeSchema] = Field(default_factory=list)
    scoring_direction: ScoringDirection = "higher-is-better"
    score_multiplier: Optional[Number] = Field(
        default=None, description="Applied to summed scores when > 0 (e.g. 2 for DASS-21)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "title": "Daily Check-in",
                "slug": "daily-check-in",
                "description": "A short wellness check-in",
                "questions": [
                    {
                        "id": "1",
                        "text": "Do you feel rested?",
                        "type": "multiple-choice",
                        "options": ["Yes", "No"],
                        "score_mapping": {"Yes": 5, "No": 0}
                    },
                    {
                        "id": "2",
                        "text": "How is your mood today?",
                        "type": "scale",
                        "scale_min": 1,
                        "scale_max": 10
                    }
                ],
                "score_ranges": [
                    {"min": 0, "max": 7, "status": "Needs care", "description": "", "color": "orange"},
                    {"min": 8, "max": 15, "status": "Steady", "description": "", "color": "green"}
                ],
                "scoring_direction": "higher-is-better"
            }
        }

# =============== Scoring ===============


class AnswerSchema(BaseModel):
    """Answer record to persist with a result"""
    question_id: str
    answer: AnswerValue


class ScoreInterpretationSchema(BaseModel):
    """Label, description and color for a total score"""
    label: str
    description: str
    color: str
    percentage: Optional[int] = Field(
        default=None, description="Only set when no authored range matched"
    )
    matched_range: Optional[ScoreRangeSchema] = None


class ScoreRequest(BaseModel):
    """
    Request to score one submission.

    Answers are given either as `answers` (question id -> value) or as the
    raw `form_data` of the quiz form (keys 'question_<id>').
    """
    quiz: QuizSchema
    answers: Optional[Dict[str, AnswerValue]] = Field(
        default=None, description="question id -> submitted value"
    )
    form_data: Optional[Dict[str, str]] = Field(
        default=None, description="Raw form fields keyed 'question_<id>'"
    )

    @model_validator(mode='after')
    def validate_answers_or_form_data(self):
        """Only one of answers / form_data"""
        if self.answers is not None and self.form_data is not None:
            raise ValueError("Send either 'answers' or 'form_data', not both")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "quiz": {
                    "title": "Daily Check-in",
                    "questions": [
                        {
                            "id": "1",
                            "type": "multiple-choice",
                            "options": ["Yes", "No"],
                            "score_mapping": {"Yes": 5, "No": 0}
                        },
                        {"id": "2", "type": "scale", "scale_min": 1, "scale_max": 10}
                    ]
                },
                "form_data": {"question_1": "Yes", "question_2": "7"}
            }
        }


class ScoreResponse(BaseModel):
    """Scored submission, ready to be stored as a quiz result"""
    total_score: Number
    sub_scores: Optional[Dict[str, Number]] = None
    answers: List[AnswerSchema]
    interpretation: ScoreInterpretationSchema
    max_score: Number


class InterpretScoreRequest(BaseModel):
    """Request to interpret an existing score"""
    score: Number
    quiz: QuizSchema


class MaxScoreRequest(BaseModel):
    quiz: QuizSchema


class MaxScoreResponse(BaseModel):
    max_score: Number

# =============== Quiz authoring ===============


class ValidateQuizResponse(BaseModel):
    """Authoring-time validation outcome"""
    is_valid: bool
    errors: Dict[str, str] = Field(default_factory=dict)
    warnings: Dict[str, str] = Field(
        default_factory=dict, description="Non-blocking issues such as overlapping ranges"
    )


class MaxPointsStatistics(BaseModel):
    """Statistics of the points each scored question can contribute"""
    min: float
    max: float
    mean: float
    median: float


class QuizStatistics(BaseModel):
    max_points: MaxPointsStatistics


class QuizDistributions(BaseModel):
    by_type: Dict[str, int]
    by_category: Dict[str, int]
    total_categories: int


class QuizAnalysisResponse(BaseModel):
    """Structure of a quiz"""
    total_questions: int
    scored_questions: int
    max_score: Number
    statistics: QuizStatistics
    distributions: QuizDistributions

# =============== Progress ===============


class ProgressStatsRequest(BaseModel):
    """Request to summarize a score history"""
    scores: List[Number] = Field(default_factory=list, description="Scores, oldest first")
    dates: Optional[List[datetime]] = Field(
        default=None, description="Completion dates matching `scores`"
    )
    scoring_direction: ScoringDirection = "higher-is-better"

    @model_validator(mode='after')
    def validate_dates_length(self):
        """Dates, when sent, must line up with scores"""
        if self.dates is not None and len(self.dates) != len(self.scores):
            raise ValueError("'dates' must have the same length as 'scores'")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "scores": [10, 12, 11, 15],
                "scoring_direction": "higher-is-better"
            }
        }


class ProgressStatsResponse(BaseModel):
    """Trend and summary statistics"""
    attempts: int
    trend: Trend
    average: Number
    best: Number
    worst: Number
    latest: Number
    change: Number

    class Config:
        json_schema_extra = {
            "example": {
                "attempts": 4,
                "trend": "improving",
                "average": 12,
                "best": 15,
                "worst": 10,
                "latest": 15,
                "change": 5
            }
        }


class HistoryPoint(BaseModel):
    date: datetime
    score: Number


class ProgressHistoryRequest(BaseModel):
    """
    Request to build a user's progress for one quiz from stored results.

    `results` are result documents as stored by the application (camelCase:
    `_id`, `score`, `completedAt`, ...), in any order.
    """
    quiz: QuizSchema
    results: List[Dict[str, Any]] = Field(default_factory=list)


class ProgressHistoryResponse(BaseModel):
    quiz_title: str
    history: List[HistoryPoint] = Field(description="Oldest first")
    stats: ProgressStatsResponse
    max_score: Number


class ProgressOverviewRequest(BaseModel):
    """
    Request to build a user's progress across every quiz they have taken.

    `results` are stored result documents (any quiz, any order). `quizzes`
    maps each quiz `_id` to its stored quiz document; results whose quiz is
    missing are still summarized under 'Unknown Quiz'.
    """
    results: List[Dict[str, Any]] = Field(default_factory=list)
    quizzes: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    class Config:
        json_schema_extra = {
            "example": {
                "results": [
                    {"_id": "r1", "quizId": "q1", "score": 10, "completedAt": "2024-01-01T00:00:00Z"},
                    {"_id": "r2", "quizId": "q1", "score": 14, "completedAt": "2024-02-01T00:00:00Z"}
                ],
                "quizzes": {
                    "q1": {"_id": "q1", "title": "Daily Check-in", "questions": []}
                }
            }
        }


class QuizProgressSchema(BaseModel):
    quiz_id: str
    quiz_title: str
    max_score: Number
    history: List[HistoryPoint] = Field(description="Oldest first")
    stats: ProgressStatsResponse


class ProgressOverviewResponse(BaseModel):
    quizzes: List[QuizProgressSchema] = Field(description="Most recently taken first")
