from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from prepmind.models.result import Err, ErrorKind
from prepmind.models.schemas import (
    ChatRequest,
    ChatResponse,
    EvaluateAnswerRequest,
    EvaluationResponse,
    GenerateQuestionsRequest,
    GenerateQuestionsResponse,
    OverallEvaluationRequest,
    OverallEvaluationResponse,
)
from prepmind.api.dependencies import get_llm_service
from prepmind.services.llm import LLMService, describe_failure

router = APIRouter()


def failure_response(error: Err, default: str) -> JSONResponse:
    if error.kind == ErrorKind.VALIDATION:
        return JSONResponse(status_code=400, content={"success": False, "error": error.message})
    return JSONResponse(status_code=500, content={"success": False, "error": describe_failure(error, default)})


@router.post("/generate-questions", response_model=GenerateQuestionsResponse)
async def generate_questions(request: GenerateQuestionsRequest, llm: LLMService = Depends(get_llm_service)):
    """Generate the question set for an interview configuration"""
    result = await llm.generate_questions(request.config)
    if not result.ok:
        return failure_response(result, "Failed to generate questions")
    return GenerateQuestionsResponse(questions=result.value)


@router.post("/evaluate-answer", response_model=EvaluationResponse)
async def evaluate_answer(request: EvaluateAnswerRequest, llm: LLMService = Depends(get_llm_service)):
    """Score one answer"""
    result = await llm.evaluate_answer(request.answer, request.question)
    if not result.ok:
        return failure_response(result, "Failed to evaluate answer")
    return EvaluationResponse(evaluation=result.value)


@router.post("/overall-evaluation", response_model=OverallEvaluationResponse)
async def overall_evaluation(request: OverallEvaluationRequest, llm: LLMService = Depends(get_llm_service)):
    """Aggregate evaluation over a finished interview"""
    result = await llm.overall_evaluation(request.answers, request.questions)
    if not result.ok:
        return failure_response(result, "Failed to generate evaluation")
    return OverallEvaluationResponse(evaluation=result.value)


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest, llm: LLMService = Depends(get_llm_service)):
    """Free-form interview-prep assistant"""
    result = await llm.chat(request.message)
    if not result.ok:
        return failure_response(result, "Failed to generate response. Please try again.")
    return ChatResponse(response=result.value)
