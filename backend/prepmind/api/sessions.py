from typing import List

from fastapi import APIRouter, Depends, HTTPException

from prepmind.models.schemas import AnalyticsSummary, InterviewSession, SessionSummary
from prepmind.api.dependencies import get_auth_context, get_session_store
from prepmind.services.analytics import summarize_history, summarize_session
from prepmind.services.auth import AuthContext
from prepmind.services.store import SessionStore

router = APIRouter()


@router.get("/sessions", response_model=List[SessionSummary])
async def list_sessions(
    auth: AuthContext = Depends(get_auth_context),
    store: SessionStore = Depends(get_session_store),
):
    """Interview history for the current user, newest first"""
    return [summarize_session(s) for s in store.list_sessions(auth.uid)]


@router.get("/sessions/{session_id}", response_model=InterviewSession)
async def get_session(
    session_id: str,
    auth: AuthContext = Depends(get_auth_context),
    store: SessionStore = Depends(get_session_store),
):
    """Full record of one session"""
    session = store.get_session(session_id)
    if not session or session.user_id != auth.uid:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.get("/analytics", response_model=AnalyticsSummary)
async def get_analytics(
    auth: AuthContext = Depends(get_auth_context),
    store: SessionStore = Depends(get_session_store),
):
    """Aggregate performance numbers across the user's sessions"""
    return summarize_history(store.list_sessions(auth.uid))
