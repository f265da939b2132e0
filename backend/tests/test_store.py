from datetime import datetime, timedelta, timezone

import pytest

from prepmind.models.schemas import Answer, Evaluation, InterviewSession, OverallEvaluation, Question
from prepmind.services.auth import AuthContext


def make_session(config, session_id="session_1", user_id="user-1", start=None):
    return InterviewSession(
        id=session_id,
        user_id=user_id,
        config=config,
        questions=[Question(id="q1", question="What is PEP 8?", type="verbal", difficulty="beginner", topic="Python Basics")],
        start_time=start or datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc),
    )


def test_created_session_reads_back(store, verbal_config):
    store.create_session(make_session(verbal_config))

    loaded = store.get_session("session_1")

    assert loaded.user_id == "user-1"
    assert loaded.config.model_dump() == verbal_config.model_dump()
    assert loaded.questions[0].id == "q1"
    assert loaded.status == "in-progress"
    assert loaded.start_time == datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
    assert loaded.end_time is None


def test_unknown_session_is_none(store):
    assert store.get_session("missing") is None


def test_update_session_writes_only_given_fields(store, verbal_config):
    store.create_session(make_session(verbal_config))
    answer = Answer(
        question_id="q1",
        answer="A style guide",
        evaluation=Evaluation(score=60, feedback="ok"),
    )

    store.update_session("session_1", answers=[answer])
    loaded = store.get_session("session_1")
    assert loaded.answers[0].evaluation.score == 60
    assert loaded.status == "in-progress"

    ended = datetime(2026, 3, 1, 12, 30, tzinfo=timezone.utc)
    overall = OverallEvaluation(overall_score=60, performance_summary="Fine")
    store.update_session("session_1", overall_evaluation=overall, end_time=ended, status="completed")
    loaded = store.get_session("session_1")
    assert loaded.answers[0].answer == "A style guide"
    assert loaded.overall_evaluation.overall_score == 60
    assert loaded.end_time == ended
    assert loaded.status == "completed"


def test_update_missing_session_raises(store):
    with pytest.raises(LookupError):
        store.update_session("missing", status="completed")


def test_list_sessions_is_per_user_and_newest_first(store, verbal_config):
    base = datetime(2026, 3, 1, tzinfo=timezone.utc)
    store.create_session(make_session(verbal_config, "old", start=base))
    store.create_session(make_session(verbal_config, "new", start=base + timedelta(days=2)))
    store.create_session(make_session(verbal_config, "other", user_id="user-2", start=base + timedelta(days=1)))

    assert [s.id for s in store.list_sessions("user-1")] == ["new", "old"]
    assert [s.id for s in store.list_sessions("user-2")] == ["other"]
    assert store.list_sessions("nobody") == []


def test_ensure_profile_creates_once(store, auth):
    first = store.ensure_profile(auth)
    store.append_history(auth.uid, "session_1")
    second = store.ensure_profile(AuthContext(uid=auth.uid, email="changed@example.com"))

    assert first.email == "candidate@example.com"
    assert first.interview_history == []
    assert second.email == "candidate@example.com"
    assert second.interview_history == ["session_1"]


def test_append_history_is_a_set_union(store, auth):
    store.ensure_profile(auth)

    store.append_history(auth.uid, "session_1")
    store.append_history(auth.uid, "session_2")
    store.append_history(auth.uid, "session_1")

    assert store.get_profile(auth.uid).interview_history == ["session_1", "session_2"]


def test_append_history_without_profile_raises(store):
    with pytest.raises(LookupError):
        store.append_history("ghost", "session_1")


def test_profile_serializes_photo_url_alias(store, auth):
    profile = store.ensure_profile(auth)

    assert "photoURL" in profile.model_dump(by_alias=True)
