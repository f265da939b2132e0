import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException

from prepmind.services.auth import AuthContext
from prepmind.services.llm import LLMService, llm_service
from prepmind.services.orchestrator import OrchestratorRegistry, orchestrator_registry
from prepmind.services.sandbox import SandboxService, sandbox_service
from prepmind.services.store import SessionStore, session_store

logger = logging.getLogger(__name__)


def get_llm_service() -> LLMService:
    return llm_service


def get_sandbox() -> SandboxService:
    return sandbox_service


def get_session_store() -> SessionStore:
    return session_store


def get_registry() -> OrchestratorRegistry:
    return orchestrator_registry


def get_auth_context(
    x_user_id: Optional[str] = Header(default=None),
    x_user_email: Optional[str] = Header(default=None),
    x_user_name: Optional[str] = Header(default=None),
    store: SessionStore = Depends(get_session_store),
) -> AuthContext:
    """
    Identity comes from the auth front-end, which forwards the verified user
    in request headers.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Not authenticated")

    auth = AuthContext(uid=x_user_id.strip(), email=x_user_email, display_name=x_user_name)
    try:
        store.ensure_profile(auth)
    except Exception:
        logger.exception("Could not load or create profile for user %s", auth.uid)
    return auth


def get_orchestrator(
    auth: AuthContext = Depends(get_auth_context),
    registry: OrchestratorRegistry = Depends(get_registry),
):
    orchestrator = registry.acquire(auth)
    try:
        yield orchestrator
    finally:
        registry.release(auth)
