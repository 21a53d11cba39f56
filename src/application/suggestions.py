import json
import logging
import re
from typing import List, Optional

from pydantic import BaseModel, field_validator

from src.application.ports import LLMPort
from src.domain.models import BilingualSuggestion


logger = logging.getLogger(__name__)


TEMPERATURE = 0.7
MAX_TOKENS = 400

_FENCE_RE = re.compile(r"```[a-zA-Z]*\n?")


class _SuggestionPayload(BaseModel):
    aiSuggestionEnglish: str
    aiSuggestionTelugu: str

    @field_validator("aiSuggestionEnglish", "aiSuggestionTelugu")
    @classmethod
    def validate_text(cls, v: str):
        v = v.strip()
        if len(v) == 0:
            raise ValueError("empty suggestion")
        return v


def build_suggestion_prompt(message: str, specialization: str) -> str:
    return (
        f"You are a medical assistant. User symptoms: \"{message}\"\n"
        f"Recommended specialist: {specialization}\n\n"
        "Reply ONLY as JSON (no code fences, no extra text):\n"
        "{\"aiSuggestionEnglish\":\"brief English advice max 60 words\","
        "\"aiSuggestionTelugu\":\"same advice in Telugu\"}"
    )


def build_messages(message: str, specialization: str) -> List[dict]:
    return [{"role": "user", "content": build_suggestion_prompt(message, specialization)}]


def fallback_suggestion(specialization: str) -> BilingualSuggestion:
    return BilingualSuggestion(
        english=(
            f"Based on your symptoms, I recommend consulting a {specialization}. "
            "Please seek professional medical advice for an accurate diagnosis."
        ),
        telugu=(
            f"మీ లక్షణాల ఆధారంగా, {specialization}ని సంప్రదించమని సిఫారసు చేస్తున్నాను. "
            "సరైన నిర్ధారణ కోసం వైద్య సహాయం తీసుకోండి."
        ),
        from_fallback=True,
    )


def extract_json_block(raw: Optional[str]) -> str:
    """Strip code fences and cut the span from the first '{' to the last '}'."""
    if raw is None:
        return "{}"
    cleaned = _FENCE_RE.sub("", raw).replace("```", "").strip()
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start >= 0 and end > start:
        return cleaned[start:end + 1]
    return cleaned


def parse_bilingual_suggestion(raw: Optional[str]) -> Optional[BilingualSuggestion]:
    """Returns the parsed pair, or None when the model output is unusable."""
    try:
        data = json.loads(extract_json_block(raw))
        payload = _SuggestionPayload(**data)
    except (ValueError, TypeError, RecursionError) as e:
        logger.warning("Suggestion JSON invalid: %s. Raw: %s", e, (raw or "")[:200])
        return None
    return BilingualSuggestion(
        english=payload.aiSuggestionEnglish,
        telugu=payload.aiSuggestionTelugu,
    )


class SuggestionGenerator:
    def __init__(self, llm: LLMPort):
        self.llm = llm

    def suggest(self, message: str, specialization: str) -> BilingualSuggestion:
        try:
            raw = self.llm.complete(
                build_messages(message, specialization),
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
            )
        except Exception as e:
            logger.warning("AI bilingual suggestion failed, using fallback. Reason: %s", e)
            return fallback_suggestion(specialization)

        parsed = parse_bilingual_suggestion(raw)
        if parsed is None:
            return fallback_suggestion(specialization)
        return parsed
