"""
Interview orchestration.

One ``InterviewOrchestrator`` drives one user through
config -> loading -> interview -> evaluating -> feedback. Every remote call is
awaited before the next step can begin, and a per-orchestrator lock keeps two
requests from driving the same interview at once.

Persistence is best-effort: a failed write is logged and the interview carries
on with its in-memory state.
"""
import asyncio
import logging
import uuid
from enum import Enum
from typing import Callable, Dict, List, Optional

from prepmind.models.result import Err, ErrorKind, Ok, Result
from prepmind.models.schemas import (
    Answer,
    InterviewConfig,
    InterviewSession,
    InterviewState,
    OverallEvaluation,
    Question,
    utcnow,
)
from prepmind.services.auth import AuthContext
from prepmind.services.llm import LLMService, llm_service
from prepmind.services.store import SessionStore, session_store

logger = logging.getLogger(__name__)

CODE_ANSWER_TEXT = "Code submitted"


class InterviewStage(str, Enum):
    CONFIG = "config"
    LOADING = "loading"
    INTERVIEW = "interview"
    EVALUATING = "evaluating"
    FEEDBACK = "feedback"


def new_session_id() -> str:
    return f"session_{uuid.uuid4().hex}"


class InterviewOrchestrator:
    def __init__(self, auth: AuthContext, llm: LLMService, store: SessionStore):
        self.auth = auth
        self.llm = llm
        self.store = store
        self._lock = asyncio.Lock()
        self._clear()

    def _clear(self):
        self.stage = InterviewStage.CONFIG
        self.config: Optional[InterviewConfig] = None
        self.session: Optional[InterviewSession] = None
        self.questions: List[Question] = []
        self.answers: List[Answer] = []
        self.current_index = 0
        self.overall_evaluation: Optional[OverallEvaluation] = None

    @property
    def current_question(self) -> Optional[Question]:
        if self.stage != InterviewStage.INTERVIEW:
            return None
        return self.questions[self.current_index]

    async def start(self, config: InterviewConfig) -> Result[InterviewSession]:
        """Config -> Loading -> Interview, or back to Config if generation fails."""
        async with self._lock:
            if self.stage != InterviewStage.CONFIG:
                return self._wrong_stage("start an interview")

            self.config = config
            self.stage = InterviewStage.LOADING
            logger.info("User %s requested a %s %s interview on %s",
                        self.auth.uid, config.difficulty, config.format, config.domain)

            generated = await self.llm.generate_questions(config)
            if not generated.ok:
                logger.warning("Question generation failed for user %s; back to config", self.auth.uid)
                self._clear()
                return generated

            session = InterviewSession(
                id=new_session_id(),
                user_id=self.auth.uid,
                config=config,
                questions=generated.value,
                answers=[],
                start_time=utcnow(),
                status="in-progress",
            )
            self._persist("create session", self.store.create_session, session)

            self.session = session
            self.questions = list(session.questions)
            self.answers = []
            self.current_index = 0
            self.stage = InterviewStage.INTERVIEW
            return Ok(session)

    async def submit_answer(self, answer_text: Optional[str] = None, code: Optional[str] = None) -> Result[Answer]:
        """
        Record the answer to the current question and move on.

        The answer is kept even when its evaluation fails; it simply has no
        score. After the last question the orchestrator moves to Evaluating.
        """
        async with self._lock:
            if self.stage != InterviewStage.INTERVIEW:
                return self._wrong_stage("submit an answer")

            question = self.questions[self.current_index]
            if question.type == "coding":
                if not code or not code.strip():
                    return Err(ErrorKind.VALIDATION, "Please write some code")
                answer = Answer(question_id=question.id, answer=CODE_ANSWER_TEXT, code=code)
            else:
                if not answer_text or not answer_text.strip():
                    return Err(ErrorKind.VALIDATION, "Please provide an answer")
                answer = Answer(question_id=question.id, answer=answer_text.strip(), code=code)

            evaluated = await self.llm.evaluate_answer(answer, question)
            if evaluated.ok:
                answer = answer.model_copy(update={"evaluation": evaluated.value})
            else:
                logger.warning("Keeping unscored answer to %s: %s", question.id, evaluated.message)

            self.answers.append(answer)
            self.session = self.session.model_copy(update={"answers": list(self.answers)})
            self._persist("save answers", self.store.update_session, self.session.id, answers=list(self.answers))

            self.current_index += 1
            if self.current_index >= len(self.questions):
                self.stage = InterviewStage.EVALUATING
            return Ok(answer)

    async def finish(self) -> Result[OverallEvaluation]:
        """
        Evaluating -> Feedback.

        On failure the orchestrator stays in Evaluating so the caller can
        retry or reset.
        """
        async with self._lock:
            if self.stage != InterviewStage.EVALUATING:
                return self._wrong_stage("finish the interview")

            evaluated = await self.llm.overall_evaluation(self.answers, self.questions)
            if not evaluated.ok:
                logger.warning("Overall evaluation failed for session %s: %s", self.session.id, evaluated.message)
                return evaluated

            ended_at = utcnow()
            self.overall_evaluation = evaluated.value
            self.session = self.session.model_copy(update={
                "overall_evaluation": evaluated.value,
                "end_time": ended_at,
                "status": "completed",
            })
            self._persist(
                "complete session",
                self.store.update_session,
                self.session.id,
                overall_evaluation=evaluated.value,
                end_time=ended_at,
                status="completed",
            )
            self._persist("update history", self.store.append_history, self.auth.uid, self.session.id)

            self.stage = InterviewStage.FEEDBACK
            logger.info("Session %s completed with score %s", self.session.id, evaluated.value.overall_score)
            return Ok(evaluated.value)

    async def reset(self) -> Result[None]:
        """Drop in-memory state and return to Config. Persisted records are untouched."""
        async with self._lock:
            if self.stage in (InterviewStage.LOADING, InterviewStage.INTERVIEW):
                return self._wrong_stage("reset")
            self._clear()
            return Ok(None)

    def snapshot(self) -> InterviewState:
        return InterviewState(
            stage=self.stage.value,
            session_id=self.session.id if self.session else None,
            status=self.session.status if self.session else None,
            config=self.config,
            current_question_index=self.current_index,
            total_questions=len(self.questions),
            current_question=self.current_question,
            answers=list(self.answers),
            overall_evaluation=self.overall_evaluation,
        )

    def _wrong_stage(self, action: str) -> Err:
        return Err(ErrorKind.STATE, f"Cannot {action} while in the {self.stage.value} stage")

    def _persist(self, what: str, write: Callable, *args, **kwargs) -> None:
        try:
            write(*args, **kwargs)
        except Exception:
            # Known gap: the user is not told their progress wasn't saved
            logger.exception("Failed to %s for user %s", what, self.auth.uid)


class OrchestratorRegistry:
    """
    Live orchestrators for signed-in users, held in memory.

    Requests bracket their use with ``acquire``/``release``. An orchestrator
    back in the config stage carries no state, so it is dropped once the last
    request using it releases it.
    """

    def __init__(self, llm: LLMService, store: SessionStore):
        self.llm = llm
        self.store = store
        self._orchestrators: Dict[str, InterviewOrchestrator] = {}
        self._in_use: Dict[str, int] = {}

    def __len__(self):
        return len(self._orchestrators)

    def acquire(self, auth: AuthContext) -> InterviewOrchestrator:
        orchestrator = self._orchestrators.get(auth.uid)
        if orchestrator is None:
            orchestrator = InterviewOrchestrator(auth, self.llm, self.store)
            self._orchestrators[auth.uid] = orchestrator
        self._in_use[auth.uid] = self._in_use.get(auth.uid, 0) + 1
        return orchestrator

    def release(self, auth: AuthContext) -> None:
        remaining = self._in_use.get(auth.uid, 0) - 1
        if remaining > 0:
            self._in_use[auth.uid] = remaining
            return
        self._in_use.pop(auth.uid, None)
        orchestrator = self._orchestrators.get(auth.uid)
        if orchestrator is not None and orchestrator.stage == InterviewStage.CONFIG:
            del self._orchestrators[auth.uid]


# Global instance
orchestrator_registry = OrchestratorRegistry(llm_service, session_store)
