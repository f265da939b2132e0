from fastapi import APIRouter, Depends, HTTPException

from prepmind.models.result import Err, ErrorKind
from prepmind.models.schemas import AnswerSubmission, InterviewState, StartInterviewRequest
from prepmind.api.dependencies import get_orchestrator
from prepmind.services.llm import describe_failure
from prepmind.services.orchestrator import InterviewOrchestrator

router = APIRouter()

_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.STATE: 409,
}


def raise_for_error(error: Err, default: str):
    status = _STATUS_BY_KIND.get(error.kind, 500)
    detail = error.message if status != 500 else describe_failure(error, default)
    raise HTTPException(status_code=status, detail=detail)


@router.get("/state", response_model=InterviewState)
async def get_state(orchestrator: InterviewOrchestrator = Depends(get_orchestrator)):
    """Where the current user is in their interview"""
    return orchestrator.snapshot()


@router.post("/start", response_model=InterviewState)
async def start_interview(request: StartInterviewRequest, orchestrator: InterviewOrchestrator = Depends(get_orchestrator)):
    """Generate questions and open a new session"""
    result = await orchestrator.start(request.config)
    if not result.ok:
        raise_for_error(result, "Failed to generate questions")
    return orchestrator.snapshot()


@router.post("/answers", response_model=InterviewState)
async def submit_answer(submission: AnswerSubmission, orchestrator: InterviewOrchestrator = Depends(get_orchestrator)):
    """Answer the current question and advance"""
    result = await orchestrator.submit_answer(submission.answer, submission.code)
    if not result.ok:
        raise_for_error(result, "Failed to submit answer")
    return orchestrator.snapshot()


@router.post("/complete", response_model=InterviewState)
async def complete_interview(orchestrator: InterviewOrchestrator = Depends(get_orchestrator)):
    """Request the overall evaluation; may be retried while still evaluating"""
    result = await orchestrator.finish()
    if not result.ok:
        raise_for_error(result, "Failed to generate evaluation")
    return orchestrator.snapshot()


@router.post("/reset", response_model=InterviewState)
async def reset_interview(orchestrator: InterviewOrchestrator = Depends(get_orchestrator)):
    """Start over with a fresh configuration"""
    result = await orchestrator.reset()
    if not result.ok:
        raise_for_error(result, "Failed to reset interview")
    return orchestrator.snapshot()
