from sqlalchemy import create_engine, Column, String, DateTime, JSON
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from datetime import datetime, timezone
from prepmind.config import settings

Base = declarative_base()

def create_db_engine(url: str):
    """Build an engine; in-memory SQLite shares one connection so every session sees the same tables."""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    if url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(url, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(url, connect_args=connect_args)

engine = create_db_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def _utcnow():
    return datetime.now(timezone.utc)

class InterviewSessionRecord(Base):
    __tablename__ = "interview_sessions"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    config = Column(JSON, nullable=False)
    questions = Column(JSON, nullable=False, default=list)
    answers = Column(JSON, nullable=False, default=list)
    overall_evaluation = Column(JSON, nullable=True)
    status = Column(String, default="in-progress")  # in-progress, completed, cancelled
    start_time = Column(DateTime(timezone=True), default=_utcnow, index=True)
    end_time = Column(DateTime(timezone=True), nullable=True)

class UserProfileRecord(Base):
    __tablename__ = "user_profiles"

    uid = Column(String, primary_key=True, index=True)
    email = Column(String, nullable=True)
    display_name = Column(String, nullable=True)
    photo_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    interview_history = Column(JSON, nullable=False, default=list)  # session ids, oldest first

# Create tables
Base.metadata.create_all(bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
