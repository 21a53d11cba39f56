import logging
from typing import List

import requests

from src.application.ports import LLMPort
from src.infrastructure.config import Settings


logger = logging.getLogger(__name__)


class OllamaLLMAdapter(LLMPort):
    """Local self-hosted backend speaking the OpenAI-compatible chat API."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self.url = f"{self.settings.ollama_base_url}/v1/chat/completions"
        self.model = self.settings.ollama_model
        self.timeout = self.settings.ai_timeout_seconds

    def complete(self, messages: List[dict], temperature: float = 0.7, max_tokens: int = 400) -> str:
        body = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        logger.debug("Using Ollama at %s with model %s", self.url, self.model)
        try:
            resp = requests.post(self.url, json=body, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
            return data["choices"][0]["message"]["content"]
        except Exception as e:
            logger.exception("Ollama chat call failed: %s", e)
            raise
