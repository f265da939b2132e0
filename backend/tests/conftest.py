import os

# Must be set before prepmind.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.orm import sessionmaker

from prepmind.models.database import Base, create_db_engine
from prepmind.models.schemas import InterviewConfig
from prepmind.services.auth import AuthContext
from prepmind.services.llm import LLMService
from prepmind.services.store import SessionStore


@pytest.fixture
def verbal_config():
    return InterviewConfig(
        domain="Python Programming",
        difficulty="beginner",
        topics=["Python Basics"],
        format="verbal",
    )


@pytest.fixture
def coding_config():
    return InterviewConfig(
        domain="Data Structures & Algorithms",
        difficulty="beginner",
        topics=["Arrays & Strings"],
        format="coding",
    )


@pytest.fixture
def auth():
    return AuthContext(uid="user-1", email="candidate@example.com", display_name="Candidate")


@pytest.fixture
def store():
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield SessionStore(sessionmaker(autocommit=False, autoflush=False, bind=engine))
    engine.dispose()


@pytest.fixture
def gateway():
    """Stand-in for the Gemini client; tests queue responses on generate."""
    fake = AsyncMock()
    fake.configured = True
    return fake


@pytest.fixture
def llm(gateway):
    return LLMService(gateway)
