from typing import Optional, Sequence, Tuple
from .models import SpecializationRule


DEFAULT_SPECIALIZATION = "General Physician"


def _rules(*pairs: Tuple[str, str]) -> Tuple[SpecializationRule, ...]:
    return tuple(SpecializationRule(keyword=k, specialization=s) for k, s in pairs)


# First match wins: specific/urgent keywords precede the generic ones.
SPECIALIZATION_RULES: Tuple[SpecializationRule, ...] = _rules(
    ("chest pain", "Cardiologist"),
    ("heart", "Cardiologist"),
    ("palpitation", "Cardiologist"),
    ("skin rash", "Dermatologist"),
    ("rash", "Dermatologist"),
    ("acne", "Dermatologist"),
    ("eye pain", "Ophthalmologist"),
    ("blurry vision", "Ophthalmologist"),
    ("red eye", "Ophthalmologist"),
    ("tooth", "Dentist"),
    ("dental", "Dentist"),
    ("bone", "Orthopedist"),
    ("joint pain", "Orthopedist"),
    ("fracture", "Orthopedist"),
    ("child", "Pediatrician"),
    ("baby", "Pediatrician"),
    ("mental", "Psychiatrist"),
    ("anxiety", "Psychiatrist"),
    ("depression", "Psychiatrist"),
    ("stomach", "Gastroenterologist"),
    ("diarrhea", "Gastroenterologist"),
    ("vomit", "Gastroenterologist"),
    ("fever", DEFAULT_SPECIALIZATION),
    ("body pain", DEFAULT_SPECIALIZATION),
    ("headache", DEFAULT_SPECIALIZATION),
    ("cold", DEFAULT_SPECIALIZATION),
    ("cough", DEFAULT_SPECIALIZATION),
    ("fatigue", DEFAULT_SPECIALIZATION),
)


EMERGENCY_KEYWORDS = (
    "chest pain",
    "heart attack",
    "can't breathe",
    "difficulty breathing",
    "severe bleeding",
    "suicide",
    "suicidal",
    "stroke",
    "unconscious",
    "severe headache",
    "can't move",
    "paralysis",
    "seizure",
)


def detect_specialization(
    message: Optional[str],
    rules: Sequence[SpecializationRule] = SPECIALIZATION_RULES,
) -> str:
    lower = (message or "").lower()
    for rule in rules:
        if rule.keyword in lower:
            return rule.specialization
    return DEFAULT_SPECIALIZATION


def is_emergency(message: Optional[str]) -> bool:
    lower = (message or "").lower()
    return any(keyword in lower for keyword in EMERGENCY_KEYWORDS)
