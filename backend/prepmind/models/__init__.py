from .database import Base, InterviewSessionRecord, UserProfileRecord, get_db
from .result import Ok, Err, ErrorKind, Result
from .schemas import (
    InterviewConfig,
    Question,
    TestCase,
    Answer,
    Evaluation,
    OverallEvaluation,
    InterviewSession,
    UserProfile,
    TestResult,
)

__all__ = [
    "Base",
    "InterviewSessionRecord",
    "UserProfileRecord",
    "get_db",
    "Ok",
    "Err",
    "ErrorKind",
    "Result",
    "InterviewConfig",
    "Question",
    "TestCase",
    "Answer",
    "Evaluation",
    "OverallEvaluation",
    "InterviewSession",
    "UserProfile",
    "TestResult",
]
