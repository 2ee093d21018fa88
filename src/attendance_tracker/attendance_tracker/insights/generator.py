from __future__ import annotations

from typing import Optional, Protocol

from google import genai
from google.genai import errors, types

from ..core.constants import DEFAULT_GEMINI_MODEL
from ..core.exceptions import InsightGenerationError


class InsightGenerator(Protocol):
    """Narrow seam to the hosted text model: prompt in, display text out."""

    def generate(self, prompt: str, *, temperature: float, top_p: Optional[float] = None) -> str:
        raise NotImplementedError


class GeminiInsightGenerator:
    """InsightGenerator backed by the Google Gen AI SDK."""

    def __init__(self, *, api_key: str, model: str = DEFAULT_GEMINI_MODEL, timeout_seconds: float = 30.0):
        self._api_key = (api_key or "").strip()
        self._model = model
        self._timeout_ms = int(timeout_seconds * 1000)
        self._client: Optional[genai.Client] = None

    def _get_client(self) -> genai.Client:
        if not self._api_key:
            raise InsightGenerationError("GEMINI_API_KEY is not configured")
        if self._client is None:
            self._client = genai.Client(
                api_key=self._api_key,
                http_options=types.HttpOptions(timeout=self._timeout_ms),
            )
        return self._client

    def generate(self, prompt: str, *, temperature: float, top_p: Optional[float] = None) -> str:
        client = self._get_client()
        config = types.GenerateContentConfig(temperature=temperature, top_p=top_p)
        try:
            response = client.models.generate_content(model=self._model, contents=prompt, config=config)
        except errors.APIError as e:
            raise InsightGenerationError(f"Gemini request failed ({e.code}): {e.message}") from e
        return response.text or ""
