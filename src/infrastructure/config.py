import math
import os
import logging

try:
    import streamlit as st  # type: ignore
    _HAS_STREAMLIT = True
except Exception:
    _HAS_STREAMLIT = False

logger = logging.getLogger(__name__)


def get_secret(name: str, default: str | None = None) -> str | None:
    # Prefer Streamlit secrets if available
    if _HAS_STREAMLIT:
        try:
            if name in st.secrets:
                return str(st.secrets.get(name))
        except Exception:
            pass
    # Fallback to environment variables
    return os.environ.get(name, default)


def _get_float(name: str, default: float) -> float:
    raw = get_secret(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r; using %s", name, raw, default)
        return default
    return value if math.isfinite(value) and value > 0 else default


class Settings:
    @property
    def ai_backend(self) -> str:
        return (get_secret("AI_BACKEND", "ollama") or "ollama").strip().lower()

    @property
    def ollama_base_url(self) -> str:
        url = get_secret("OLLAMA_BASE_URL", "http://localhost:11434") or "http://localhost:11434"
        return url.rstrip("/")

    @property
    def ollama_model(self) -> str:
        return get_secret("OLLAMA_MODEL", "llama3:latest") or "llama3:latest"

    @property
    def mistral_api_key(self) -> str | None:
        return get_secret("MISTRAL_API_KEY")

    @property
    def mistral_model(self) -> str:
        return get_secret("MISTRAL_MODEL", "mistral-large-latest") or "mistral-large-latest"

    @property
    def overpass_url(self) -> str:
        default = "https://overpass-api.de/api/interpreter"
        return get_secret("OVERPASS_URL", default) or default

    @property
    def ai_timeout_seconds(self) -> float:
        return _get_float("AI_TIMEOUT_SECONDS", 20.0)

    @property
    def facility_timeout_seconds(self) -> float:
        return _get_float("FACILITY_TIMEOUT_SECONDS", 15.0)

    @property
    def branch_timeout_seconds(self) -> float:
        return _get_float("BRANCH_TIMEOUT_SECONDS", 30.0)

    @property
    def worker_pool_size(self) -> int:
        return max(1, int(_get_float("WORKER_POOL_SIZE", 8)))

    @property
    def practitioners_path(self) -> str | None:
        return get_secret("PRACTITIONERS_PATH") or None
