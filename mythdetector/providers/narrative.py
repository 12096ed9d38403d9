"""
Gemini narrative provider - rewrites a myth with a user supplied twist.
"""
import logging
from typing import Optional

import httpx

from mythdetector.config import is_configured
from .base import BaseNarrativeProvider
from .exceptions import GenerationError, GenerationErrorKind

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "Rewrite the myth of the {subject} with this twist: {twist}. "
    "Keep the story short, engaging, and in a mythical style."
)


def build_prompt(subject: str, twist: str) -> str:
    return PROMPT_TEMPLATE.format(subject=subject, twist=twist)


class GeminiNarrativeClient(BaseNarrativeProvider):
    """Google Gemini generateContent client."""

    ENV_KEY = "GEMINI_API_KEY"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        from mythdetector.config import config
        providers = config.providers
        self._api_key = api_key if api_key is not None else providers.gemini_api_key
        self.model_name = model or providers.gemini_model
        self.api_url = api_url or providers.gemini_api_url
        super().__init__(timeout or providers.narrative_timeout, client)

        if not is_configured(self._api_key):
            logger.warning("[GEMINI] No Gemini API key - narrative generation disabled")

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def is_available(self) -> bool:
        return is_configured(self._api_key)

    async def weave(self, subject: str, twist: str) -> str:
        subject = (subject or "").strip()
        twist = (twist or "").strip()
        if not subject:
            raise ValueError("subject must not be empty")
        if not twist:
            raise ValueError("twist must not be empty")

        if not self.is_available:
            raise GenerationError(
                self.name,
                GenerationErrorKind.MISCONFIGURED,
                f"Gemini API key is missing. Set {self.ENV_KEY} in your .env file.",
            )

        url = f"{self.api_url}/{self.model_name}:generateContent"
        payload = {"contents": [{"parts": [{"text": build_prompt(subject, twist)}]}]}

        logger.info(f"[GEMINI] Weaving myth for '{subject}' with twist: {twist[:80]}")

        try:
            response = await self.client.post(
                url,
                params={"key": self._api_key},
                json=payload,
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            logger.error(f"[GEMINI] Transport error: {e}")
            raise GenerationError(self.name, GenerationErrorKind.PROVIDER, f"Request failed: {e}") from e

        if not response.is_success:
            message = self._error_message(response)
            logger.error(f"[GEMINI] API error {response.status_code}: {message}")
            raise GenerationError(self.name, GenerationErrorKind.PROVIDER, message)

        try:
            data = response.json()
        except ValueError as e:
            raise GenerationError(self.name, GenerationErrorKind.PROVIDER, "Unparseable response body") from e

        try:
            text = self._first_candidate_text(data)
        except (AttributeError, TypeError) as e:
            raise GenerationError(self.name, GenerationErrorKind.PROVIDER, "Unexpected response shape") from e
        if not text:
            logger.warning(f"[GEMINI] Empty story returned for '{subject}'")
        return text

    @staticmethod
    def _first_candidate_text(data) -> str:
        """Text of the first candidate's first part, "" when there is none."""
        candidates = data.get("candidates") if isinstance(data, dict) else None
        if not candidates:
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        if not parts:
            return ""
        return (parts[0].get("text") or "").strip()

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            message = response.json().get("error", {}).get("message")
        except (ValueError, AttributeError):
            message = None
        return message or f"Server error: {response.status_code}"
