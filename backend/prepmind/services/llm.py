import logging
import uuid
from typing import Any, List

from prepmind.models.result import Err, ErrorKind, Ok, Result
from prepmind.models.schemas import Answer, Evaluation, InterviewConfig, OverallEvaluation, Question
from prepmind.services.decoder import (
    MalformedAIResponse,
    decode_evaluation,
    decode_overall_evaluation,
    decode_questions,
)
from prepmind.services.gateway import AIGateway, AIGatewayError, GenerationParams, ai_gateway
from prepmind.services.prompts import (
    build_chat_prompt,
    build_evaluation_prompt,
    build_overall_evaluation_prompt,
    build_question_prompt,
    expected_question_count,
)

logger = logging.getLogger(__name__)

QUESTION_PARAMS = GenerationParams()
EVALUATION_PARAMS = GenerationParams(temperature=0.5, max_output_tokens=1000)
OVERALL_PARAMS = GenerationParams(temperature=0.6, max_output_tokens=2000)
CHAT_PARAMS = GenerationParams(temperature=0.8, max_output_tokens=2048, top_p=0.95, top_k=40)

RATE_LIMIT_MESSAGE = "API rate limit exceeded. Please try again in a moment."
AUTH_ERROR_MESSAGE = "Authentication error. Please check your configuration."


def describe_failure(error: Err, default: str) -> str:
    """User-facing text for a failed AI call; the raw error stays in the logs."""
    text = error.message.lower()
    if "quota" in text or "rate limit" in text:
        return RATE_LIMIT_MESSAGE
    if "auth" in text or "api key" in text:
        return AUTH_ERROR_MESSAGE
    return default


class LLMService:
    def __init__(self, gateway: AIGateway):
        self.gateway = gateway

    async def generate_questions(self, config: InterviewConfig) -> Result[List[Question]]:
        """Generate the full, ordered question set for one interview"""
        try:
            text = await self.gateway.generate(build_question_prompt(config), QUESTION_PARAMS)
            questions = decode_questions(text)
        except AIGatewayError as e:
            logger.error("Question generation failed: %s", e)
            return Err(ErrorKind.GENERATION, str(e))
        except MalformedAIResponse as e:
            logger.error("Question generation returned unusable output: %s", e)
            return Err(ErrorKind.DECODE, str(e))

        expected = expected_question_count(config)
        if len(questions) != expected:
            logger.error("Expected %d %s questions, got %d", expected, config.format, len(questions))
            return Err(ErrorKind.DECODE, f"Expected {expected} questions, received {len(questions)}")

        mismatched = [q for q in questions if q.type != config.format]
        if mismatched:
            return Err(ErrorKind.DECODE, f"{len(mismatched)} question(s) do not match the {config.format} format")

        if config.format == "coding" and any(not q.test_cases for q in questions):
            return Err(ErrorKind.DECODE, "Coding question generated without test cases")

        return Ok(self._with_unique_ids(questions))

    async def evaluate_answer(self, answer: Answer, question: Question) -> Result[Evaluation]:
        """Score a single answer against its question"""
        if answer.question_id != question.id:
            return Err(ErrorKind.VALIDATION, "Answer does not belong to the given question")

        try:
            text = await self.gateway.generate(build_evaluation_prompt(answer, question), EVALUATION_PARAMS)
            return Ok(decode_evaluation(text))
        except AIGatewayError as e:
            logger.error("Answer evaluation failed for question %s: %s", question.id, e)
            return Err(ErrorKind.GENERATION, str(e))
        except MalformedAIResponse as e:
            logger.error("Answer evaluation for question %s returned unusable output: %s", question.id, e)
            return Err(ErrorKind.DECODE, str(e))

    async def overall_evaluation(self, answers: List[Answer], questions: List[Question]) -> Result[OverallEvaluation]:
        if not answers:
            return Err(ErrorKind.VALIDATION, "At least one answer is required")

        prompt = build_overall_evaluation_prompt(answers, questions)
        try:
            text = await self.gateway.generate(prompt, OVERALL_PARAMS)
            return Ok(decode_overall_evaluation(text))
        except AIGatewayError as e:
            logger.error("Overall evaluation failed: %s", e)
            return Err(ErrorKind.GENERATION, str(e))
        except MalformedAIResponse as e:
            logger.error("Overall evaluation returned unusable output: %s", e)
            return Err(ErrorKind.DECODE, str(e))

    async def chat(self, message: Any) -> Result[str]:
        if not isinstance(message, str) or not message.strip():
            return Err(ErrorKind.VALIDATION, "Valid message is required")

        try:
            return Ok(await self.gateway.generate(build_chat_prompt(message), CHAT_PARAMS))
        except AIGatewayError as e:
            logger.error("Chat generation failed: %s", e)
            return Err(ErrorKind.GENERATION, str(e))

    @staticmethod
    def _with_unique_ids(questions: List[Question]) -> List[Question]:
        # The model picks the ids; they must still be usable as join keys
        seen = set()
        result = []
        for index, question in enumerate(questions):
            qid = question.id.strip()
            if not qid or qid in seen:
                qid = f"q{index + 1}-{uuid.uuid4().hex[:8]}"
            if qid != question.id:
                question = question.model_copy(update={"id": qid})
            seen.add(qid)
            result.append(question)
        return result


# Global instance
llm_service = LLMService(ai_gateway)
