from .gateway import ai_gateway, AIGateway, AIGatewayError, GenerationParams
from .llm import llm_service, LLMService
from .orchestrator import orchestrator_registry, InterviewOrchestrator, InterviewStage, OrchestratorRegistry
from .sandbox import sandbox_service, SandboxService, NodeExecutor
from .store import session_store, SessionStore

__all__ = [
    "ai_gateway",
    "AIGateway",
    "AIGatewayError",
    "GenerationParams",
    "llm_service",
    "LLMService",
    "orchestrator_registry",
    "InterviewOrchestrator",
    "InterviewStage",
    "OrchestratorRegistry",
    "sandbox_service",
    "SandboxService",
    "NodeExecutor",
    "session_store",
    "SessionStore",
]
