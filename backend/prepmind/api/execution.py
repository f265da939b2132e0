import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from prepmind.models.schemas import ExecuteCodeRequest, ExecuteCodeResponse
from prepmind.api.dependencies import get_sandbox
from prepmind.services.sandbox import SandboxService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/execute-code", response_model=ExecuteCodeResponse)
async def execute_code(request: ExecuteCodeRequest, sandbox: SandboxService = Depends(get_sandbox)):
    """Run submitted code against test cases"""
    try:
        results = await sandbox.run_test_cases(
            request.code,
            request.language,
            request.test_cases,
            entry_point=request.entry_point,
        )
    except Exception as e:
        logger.exception("Unexpected failure executing %s code", request.language)
        return JSONResponse(status_code=500, content={"success": False, "error": str(e) or "Failed to execute code"})
    return ExecuteCodeResponse(results=results)
