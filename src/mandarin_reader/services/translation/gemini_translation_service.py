"""Gemini Translation Service - Implements translation via Google Gemini API."""

import logging
import time

import google.genai as genai
from google.genai import types

from mandarin_reader.services.translation.translation_service import TranslationResult, TranslationService

logger = logging.getLogger(__name__)


class GeminiTranslationService(TranslationService):
    """
    Translation service using Google Gemini API.

    Low temperature keeps translations of the same selection consistent.
    """

    MODEL_NAME = "gemini-2.0-flash"
    TIMEOUT_MS = 15000
    MAX_RETRIES = 3

    TRANSLATION_PROMPT = """Translate the following Chinese text to natural, idiomatic English.
Preserve the tone and nuance of the original.
Only output the translation, nothing else.

Chinese text:
{text}"""

    def __init__(self, client_factory=None, sleep=time.sleep):
        self._client_factory = client_factory or self._default_client
        self._sleep = sleep

    def _default_client(self, api_key: str) -> genai.Client:
        return genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=self.TIMEOUT_MS),
        )

    def translate(self, text: str, api_key: str) -> TranslationResult:
        """
        Translate Chinese text to English using Gemini API.

        Rate-limit errors are retried with exponential backoff; every other
        failure is returned as TranslationResult.error.
        """
        retry_delay = 2
        attempt = 0

        while attempt < self.MAX_RETRIES:
            attempt += 1
            try:
                client = self._client_factory(api_key)
                logger.debug(
                    "Translation request attempt %d/%d for %r",
                    attempt,
                    self.MAX_RETRIES,
                    text[:100],
                )
                response = client.models.generate_content(
                    model=self.MODEL_NAME,
                    contents=self.TRANSLATION_PROMPT.format(text=text),
                    config=types.GenerateContentConfig(
                        temperature=0.3,
                        top_p=0.95,
                        top_k=40,
                        max_output_tokens=1024,
                    ),
                )

                if not response.text:
                    return TranslationResult(
                        text="",
                        model=self.MODEL_NAME,
                        error="Empty response from API",
                    )

                return TranslationResult(
                    text=response.text.strip(),
                    model=self.MODEL_NAME,
                )

            except Exception as e:
                error_msg = str(e).lower()
                is_rate_limit = (
                    "429" in error_msg
                    or "resource_exhausted" in error_msg
                    or "quota" in error_msg
                    or "rate_limit" in error_msg
                )

                if is_rate_limit and attempt < self.MAX_RETRIES:
                    logger.debug("Rate limit hit, retrying in %d seconds", retry_delay)
                    self._sleep(retry_delay)
                    retry_delay *= 2
                    continue

                logger.warning("Translation failed (%s): %s", type(e).__name__, e)

                if "api_key" in error_msg or "authentication" in error_msg or "invalid" in error_msg:
                    error = f"Invalid API key or request: {e}"
                elif is_rate_limit:
                    error = "API quota exceeded. Please try again later."
                elif "deadline" in error_msg or "timeout" in error_msg:
                    error = "Request timed out. Please check your connection."
                else:
                    error = f"Translation failed: {e}"
                return TranslationResult(text="", model=self.MODEL_NAME, error=error)

        return TranslationResult(text="", model=self.MODEL_NAME, error="Translation failed")
