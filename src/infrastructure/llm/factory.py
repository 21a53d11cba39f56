import logging

from src.application.ports import LLMPort
from src.infrastructure.config import Settings
from src.infrastructure.llm.mistral_client import MistralLLMAdapter
from src.infrastructure.llm.ollama_client import OllamaLLMAdapter


logger = logging.getLogger(__name__)


def build_llm(settings: Settings | None = None) -> LLMPort:
    """Exactly one backend is used: the local Ollama endpoint or hosted Mistral."""
    settings = settings or Settings()
    backend = settings.ai_backend
    if backend == "mistral":
        return MistralLLMAdapter(settings=settings)
    if backend != "ollama":
        logger.warning("Unknown AI_BACKEND %r; using local Ollama", backend)
    return OllamaLLMAdapter(settings=settings)
