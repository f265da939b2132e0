import math
from collections import defaultdict
from datetime import datetime
from typing import List, Optional

from prepmind.models.schemas import AnalyticsSummary, DomainStats, InterviewSession, SessionSummary, utcnow

RECENT_SESSION_LIMIT = 10


def summarize_session(session: InterviewSession) -> SessionSummary:
    return SessionSummary(
        id=session.id,
        domain=session.config.custom_domain or session.config.domain,
        difficulty=session.config.difficulty,
        format=session.config.format,
        status=session.status,
        question_count=len(session.questions),
        start_time=session.start_time,
        overall_score=session.overall_evaluation.overall_score if session.overall_evaluation else None,
    )


def _round_half_up(value: float) -> int:
    # round() would send 82.5 to 82
    return math.floor(value + 0.5)


def _score(session: InterviewSession) -> float:
    return session.overall_evaluation.overall_score if session.overall_evaluation else 0


def summarize_history(sessions: List[InterviewSession], now: Optional[datetime] = None) -> AnalyticsSummary:
    """Dashboard numbers for one user's sessions (expected newest first)."""
    now = now or utcnow()
    completed = [s for s in sessions if s.status == "completed"]

    totals = defaultdict(lambda: [0, 0.0])
    for session in completed:
        entry = totals[session.config.custom_domain or session.config.domain]
        entry[0] += 1
        entry[1] += _score(session)

    return AnalyticsSummary(
        total_interviews=len(sessions),
        completed_interviews=len(completed),
        this_month=sum(1 for s in sessions if (s.start_time.year, s.start_time.month) == (now.year, now.month)),
        average_score=sum(_score(s) for s in completed) / len(completed) if completed else 0,
        best_score=max((_score(s) for s in completed), default=0),
        domain_stats={
            domain: DomainStats(count=count, avg_score=_round_half_up(total / count))
            for domain, (count, total) in totals.items()
        },
        recent_sessions=[summarize_session(s) for s in completed[:RECENT_SESSION_LIMIT]],
    )
