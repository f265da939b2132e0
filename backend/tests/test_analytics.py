from datetime import datetime, timedelta, timezone

from prepmind.models.schemas import InterviewConfig, InterviewSession, OverallEvaluation
from prepmind.services.analytics import summarize_history, summarize_session

NOW = datetime(2026, 5, 20, tzinfo=timezone.utc)


def session(session_id, domain, score=None, start=NOW, custom_domain=None):
    return InterviewSession(
        id=session_id,
        user_id="user-1",
        config=InterviewConfig(
            domain=domain,
            difficulty="intermediate",
            topics=["Anything"],
            format="verbal",
            custom_domain=custom_domain,
        ),
        questions=[],
        start_time=start,
        status="completed" if score is not None else "in-progress",
        overall_evaluation=OverallEvaluation(overall_score=score, performance_summary="s") if score is not None else None,
    )


def test_empty_history():
    summary = summarize_history([], now=NOW)

    assert summary.total_interviews == 0
    assert summary.completed_interviews == 0
    assert summary.average_score == 0
    assert summary.best_score == 0
    assert summary.domain_stats == {}
    assert summary.recent_sessions == []


def test_scores_only_count_completed_sessions():
    sessions = [
        session("a", "Python Programming", score=80),
        session("b", "Python Programming", score=65),
        session("c", "Web Development", score=90, start=NOW - timedelta(days=40)),
        session("d", "Web Development"),
    ]

    summary = summarize_history(sessions, now=NOW)

    assert summary.total_interviews == 4
    assert summary.completed_interviews == 3
    assert summary.this_month == 3
    assert summary.average_score == (80 + 65 + 90) / 3
    assert summary.best_score == 90
    assert summary.domain_stats["Python Programming"].count == 2
    assert summary.domain_stats["Python Programming"].avg_score == 72
    assert "Web Development" in summary.domain_stats
    assert [s.id for s in summary.recent_sessions] == ["a", "b", "c"]


def test_custom_domain_wins_for_grouping():
    summary = summarize_history([session("a", "Custom", score=50, custom_domain="Rust")], now=NOW)

    assert list(summary.domain_stats) == ["Rust"]
    assert summary.recent_sessions[0].domain == "Rust"


def test_recent_sessions_are_capped_at_ten():
    sessions = [session(f"s{i}", "Python Programming", score=70) for i in range(12)]

    summary = summarize_history(sessions, now=NOW)

    assert len(summary.recent_sessions) == 10
    assert summary.recent_sessions[0].id == "s0"


def test_session_summary_serializes_camel_case():
    data = summarize_session(session("a", "Python Programming", score=88)).model_dump(by_alias=True)

    assert data["overallScore"] == 88
    assert data["questionCount"] == 0
    assert data["status"] == "completed"


def test_domain_average_rounds_half_up():
    sessions = [session("a", "Python Programming", score=80), session("b", "Python Programming", score=85)]

    summary = summarize_history(sessions, now=NOW)

    assert summary.domain_stats["Python Programming"].avg_score == 83
