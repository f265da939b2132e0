from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DifficultyLevel = Literal["beginner", "intermediate", "advanced"]
InterviewFormat = Literal["verbal", "coding"]
InteractionMode = Literal["speech", "text"]
SessionStatus = Literal["in-progress", "completed", "cancelled"]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON (the front-end's field names)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InterviewConfig(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    domain: str = Field(min_length=1)
    difficulty: DifficultyLevel
    topics: List[str] = Field(min_length=1)
    format: InterviewFormat
    interaction_mode: Optional[InteractionMode] = None
    duration: Optional[int] = None  # minutes
    interview_type: Optional[Literal["specific", "general"]] = None
    custom_domain: Optional[str] = None
    specific_area: Optional[str] = None


class TestCase(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True)

    input: str
    expected_output: str
    is_hidden: bool = False


class Question(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True)

    id: str = ""
    question: str = Field(min_length=1)
    type: InterviewFormat
    difficulty: DifficultyLevel
    topic: str
    expected_answer: Optional[str] = None  # verbal only
    test_cases: Optional[List[TestCase]] = None  # coding only
    constraints: Optional[List[str]] = None

    @property
    def visible_test_cases(self) -> List[TestCase]:
        return [tc for tc in self.test_cases or [] if not tc.is_hidden]


class Evaluation(CamelModel):
    score: float = Field(ge=0, le=100)
    feedback: str
    strengths: List[str] = []
    weaknesses: List[str] = []
    suggestions: List[str] = []


class Answer(CamelModel):
    question_id: str
    answer: str = ""
    code: Optional[str] = None
    timestamp: datetime = Field(default_factory=utcnow)
    evaluation: Optional[Evaluation] = None


class OverallEvaluation(CamelModel):
    overall_score: float = Field(ge=0, le=100)
    topic_wise_scores: Dict[str, float] = {}
    strengths: List[str] = []
    weaknesses: List[str] = []
    recommendations: List[str] = []
    performance_summary: str


class InterviewSession(CamelModel):
    id: str
    user_id: str
    config: InterviewConfig
    questions: List[Question]
    answers: List[Answer] = []
    start_time: datetime
    end_time: Optional[datetime] = None
    overall_evaluation: Optional[OverallEvaluation] = None
    status: SessionStatus = "in-progress"


class UserProfile(CamelModel):
    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")
    created_at: datetime
    interview_history: List[str] = []


class TestResult(CamelModel):
    passed: bool
    input: str
    expected_output: str
    actual_output: str
    error: Optional[str] = None


# Request / response bodies for the stateless AI routes

class GenerateQuestionsRequest(CamelModel):
    config: InterviewConfig


class GenerateQuestionsResponse(CamelModel):
    success: bool = True
    questions: List[Question]


class EvaluateAnswerRequest(CamelModel):
    answer: Answer
    question: Question


class EvaluationResponse(CamelModel):
    success: bool = True
    evaluation: Evaluation


class OverallEvaluationRequest(CamelModel):
    answers: List[Answer]
    questions: List[Question]


class OverallEvaluationResponse(CamelModel):
    success: bool = True
    evaluation: OverallEvaluation


class ExecuteCodeRequest(CamelModel):
    code: str
    language: str
    test_cases: List[TestCase]
    entry_point: str = "solution"


class ExecuteCodeResponse(CamelModel):
    success: bool = True
    results: List[TestResult]


class ChatRequest(CamelModel):
    # any JSON value; LLMService.chat rejects non-strings with a 400
    message: Optional[Any] = None


class ChatResponse(CamelModel):
    response: str
    success: bool = True


# Interview orchestration

class StartInterviewRequest(CamelModel):
    config: InterviewConfig


class AnswerSubmission(CamelModel):
    answer: Optional[str] = None
    code: Optional[str] = None


class InterviewState(CamelModel):
    stage: str
    session_id: Optional[str] = None
    status: Optional[SessionStatus] = None
    config: Optional[InterviewConfig] = None
    current_question_index: int = 0
    total_questions: int = 0
    current_question: Optional[Question] = None
    answers: List[Answer] = []
    overall_evaluation: Optional[OverallEvaluation] = None


# History and analytics

class SessionSummary(CamelModel):
    id: str
    domain: str
    difficulty: DifficultyLevel
    format: InterviewFormat
    status: SessionStatus
    question_count: int
    start_time: datetime
    overall_score: Optional[float] = None


class DomainStats(CamelModel):
    count: int
    avg_score: int


class AnalyticsSummary(CamelModel):
    total_interviews: int
    completed_interviews: int
    this_month: int
    average_score: float
    best_score: float
    domain_stats: Dict[str, DomainStats] = {}
    recent_sessions: List[SessionSummary] = []


# Static catalog

class DomainOption(CamelModel):
    id: str
    name: str
    topics: List[str]


class DifficultyOption(CamelModel):
    id: DifficultyLevel
    name: str
    description: str


class FormatOption(CamelModel):
    id: InterviewFormat
    name: str
    description: str
    icon: str


class LanguageOption(CamelModel):
    id: str
    name: str
    extension: str
