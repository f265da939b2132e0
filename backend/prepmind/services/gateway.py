"""
Gemini REST client used for every generation call.

One prompt in, raw text out. It never retries and never interprets the
text; schema handling lives in the decoder.
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, Optional

import httpx

from prepmind.config import settings

logger = logging.getLogger(__name__)


class AIGatewayError(Exception):
    """The remote model call failed or produced no usable text."""


@dataclass(frozen=True)
class GenerationParams:
    temperature: float = settings.AI_TEMPERATURE
    max_output_tokens: int = settings.AI_MAX_OUTPUT_TOKENS
    top_p: float = settings.AI_TOP_P
    top_k: int = settings.AI_TOP_K

    def to_generation_config(self) -> Dict[str, Any]:
        return {
            "temperature": float(self.temperature),
            "maxOutputTokens": int(self.max_output_tokens),
            "topP": float(self.top_p),
            "topK": int(self.top_k),
        }


class AIGateway:
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.base_url = (base_url or settings.GEMINI_BASE_URL).rstrip("/")
        self.model = model or settings.GEMINI_MODEL
        self.client = client or httpx.AsyncClient(timeout=settings.AI_TIMEOUT_SECONDS)

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, prompt: str, params: Optional[GenerationParams] = None) -> str:
        """Send one prompt and return the model's text."""
        url = f"{self.base_url}/models/{self.model}:generateContent"
        try:
            response = await self.client.post(url, headers=self._headers(), json=self._body(prompt, params))
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise AIGatewayError(f"Gemini API error {e.response.status_code}: {e.response.text}") from e
        except httpx.HTTPError as e:
            raise AIGatewayError(f"Gemini request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise AIGatewayError("Gemini returned a non-JSON body") from e

        text = self._extract_text(payload)
        if not text:
            raise AIGatewayError(f"Gemini response contained no text: {json.dumps(payload)[:300]}")
        return text

    async def stream(self, prompt: str, params: Optional[GenerationParams] = None) -> AsyncIterator[str]:
        """Yield text chunks as the model produces them (server-sent events)."""
        url = f"{self.base_url}/models/{self.model}:streamGenerateContent"
        try:
            async with self.client.stream(
                "POST", url, params={"alt": "sse"}, headers=self._headers(), json=self._body(prompt, params)
            ) as response:
                if response.status_code >= 400:
                    body = (await response.aread()).decode(errors="replace")
                    raise AIGatewayError(f"Gemini API error {response.status_code}: {body}")
                async for line in response.aiter_lines():
                    if not line.startswith("data:"):
                        continue
                    try:
                        chunk = json.loads(line[len("data:"):].strip())
                    except ValueError:
                        logger.debug("Skipping undecodable stream line: %r", line)
                        continue
                    text = self._extract_text(chunk)
                    if text:
                        yield text
        except httpx.HTTPError as e:
            raise AIGatewayError(f"Gemini streaming request failed: {e}") from e

    async def aclose(self):
        await self.client.aclose()

    def _headers(self) -> Dict[str, str]:
        if not self.api_key:
            raise AIGatewayError("Gemini API key is not configured")
        return {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}

    def _body(self, prompt: str, params: Optional[GenerationParams]) -> Dict[str, Any]:
        params = params or GenerationParams()
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": params.to_generation_config(),
        }

    @staticmethod
    def _extract_text(payload: Dict[str, Any]) -> str:
        # candidates[0].content.parts[*].text
        candidates = payload.get("candidates") or []
        if not candidates:
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str))


# Global instance
ai_gateway = AIGateway()
