import google.generativeai as genai
from google.generativeai.types import GenerationConfig
from typing import Any, Dict, Optional
import logging

from ecochem_slides.exceptions import GenerationServiceError

logger = logging.getLogger(__name__)


class GeminiClient:
    def __init__(self, api_key: str):
        if not api_key:
            raise GenerationServiceError("Gemini API key is not set (GEMINI_API_KEY)")
        genai.configure(api_key=api_key)
        self.client = genai

    def generate(
        self,
        prompt: str,
        model: str,
        system_instruction: Optional[str] = None,
        response_schema: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Single blocking request with structured JSON output.

        Returns the response text, or an empty string when the service
        answered without text (blocked or empty candidates). Any failure of
        the call itself raises GenerationServiceError with the service's
        message unchanged.
        """
        generation_config = GenerationConfig(
            response_mime_type="application/json",
            response_schema=response_schema
        )

        try:
            gen_model = self.client.GenerativeModel(model, system_instruction=system_instruction)
            response = gen_model.generate_content(prompt, generation_config=generation_config)
        except Exception as e:
            logger.error(f"Gemini API error in generate(): {e}")
            raise GenerationServiceError(str(e)) from e

        # `response.text` raises ValueError when there is no valid Part
        # (SAFETY / RECITATION blocks, empty candidates)
        try:
            text = response.text
        except ValueError as e:
            logger.warning(f"Gemini returned no text. Reason: {self._finish_reason(response)}. {e}")
            return ""

        if self._finish_reason(response) == "MAX_TOKENS":
            logger.warning(f"MAX_TOKENS reached, partial content (length: {len(text or '')})")

        return text or ""

    @staticmethod
    def _finish_reason(response) -> str:
        try:
            return response.candidates[0].finish_reason.name
        except (IndexError, AttributeError, TypeError):
            return "UNKNOWN"
