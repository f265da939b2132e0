import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import sessionmaker

from prepmind.models.database import InterviewSessionRecord, SessionLocal, UserProfileRecord
from prepmind.models.schemas import Answer, InterviewSession, OverallEvaluation, SessionStatus, UserProfile
from prepmind.services.auth import AuthContext

logger = logging.getLogger(__name__)


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands datetimes back without tzinfo
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SessionStore:
    """Persistence for interview sessions and user profiles."""

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self.session_factory = session_factory

    def create_session(self, session: InterviewSession) -> None:
        data = session.model_dump(mode="json", by_alias=True)
        with self.session_factory() as db:
            db.add(InterviewSessionRecord(
                id=session.id,
                user_id=session.user_id,
                config=data["config"],
                questions=data["questions"],
                answers=data["answers"],
                overall_evaluation=data["overallEvaluation"],
                status=session.status,
                start_time=session.start_time,
                end_time=session.end_time,
            ))
            db.commit()
        logger.info("Created interview session %s for user %s", session.id, session.user_id)

    def update_session(
        self,
        session_id: str,
        *,
        answers: Optional[List[Answer]] = None,
        overall_evaluation: Optional[OverallEvaluation] = None,
        end_time: Optional[datetime] = None,
        status: Optional[SessionStatus] = None,
    ) -> None:
        with self.session_factory() as db:
            record = db.get(InterviewSessionRecord, session_id)
            if record is None:
                raise LookupError(f"Session {session_id} not found")

            if answers is not None:
                record.answers = [a.model_dump(mode="json", by_alias=True) for a in answers]
            if overall_evaluation is not None:
                record.overall_evaluation = overall_evaluation.model_dump(mode="json", by_alias=True)
            if end_time is not None:
                record.end_time = end_time
            if status is not None:
                record.status = status
            db.commit()

    def get_session(self, session_id: str) -> Optional[InterviewSession]:
        with self.session_factory() as db:
            record = db.get(InterviewSessionRecord, session_id)
            return self._to_session(record) if record else None

    def list_sessions(self, user_id: str) -> List[InterviewSession]:
        """All sessions for a user, newest first"""
        with self.session_factory() as db:
            records = (
                db.query(InterviewSessionRecord)
                .filter(InterviewSessionRecord.user_id == user_id)
                .order_by(InterviewSessionRecord.start_time.desc())
                .all()
            )
            return [self._to_session(r) for r in records]

    def ensure_profile(self, auth: AuthContext) -> UserProfile:
        """Return the user's profile, creating an empty one on first sight."""
        with self.session_factory() as db:
            record = db.get(UserProfileRecord, auth.uid)
            if record is None:
                record = UserProfileRecord(
                    uid=auth.uid,
                    email=auth.email,
                    display_name=auth.display_name,
                    created_at=datetime.now(timezone.utc),
                    interview_history=[],
                )
                db.add(record)
                db.commit()
                db.refresh(record)
                logger.info("Created profile for user %s", auth.uid)
            return self._to_profile(record)

    def get_profile(self, uid: str) -> Optional[UserProfile]:
        with self.session_factory() as db:
            record = db.get(UserProfileRecord, uid)
            return self._to_profile(record) if record else None

    def append_history(self, uid: str, session_id: str) -> None:
        """Add a session id to the user's history unless it is already there."""
        with self.session_factory() as db:
            record = db.get(UserProfileRecord, uid)
            if record is None:
                raise LookupError(f"Profile {uid} not found")
            history = list(record.interview_history or [])
            if session_id not in history:
                record.interview_history = history + [session_id]
                db.commit()

    @staticmethod
    def _to_session(record: InterviewSessionRecord) -> InterviewSession:
        return InterviewSession(
            id=record.id,
            user_id=record.user_id,
            config=record.config,
            questions=record.questions or [],
            answers=record.answers or [],
            start_time=_aware(record.start_time),
            end_time=_aware(record.end_time),
            overall_evaluation=record.overall_evaluation,
            status=record.status,
        )

    @staticmethod
    def _to_profile(record: UserProfileRecord) -> UserProfile:
        return UserProfile(
            uid=record.uid,
            email=record.email,
            display_name=record.display_name,
            photo_url=record.photo_url,
            created_at=_aware(record.created_at),
            interview_history=list(record.interview_history or []),
        )


# Global instance
session_store = SessionStore()
