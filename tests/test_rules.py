"""Unit tests for specialization detection and emergency keywords."""
import pytest
from pydantic import ValidationError

from src.domain.models import SpecializationRule
from src.domain.rules import (
    DEFAULT_SPECIALIZATION,
    SPECIALIZATION_RULES,
    detect_specialization,
    is_emergency,
)


class TestDetectSpecialization:
    """Test keyword based specialization detection."""

    @pytest.mark.parametrize("message,expected", [
        ("I have chest pain", "Cardiologist"),
        ("My HEART is racing", "Cardiologist"),
        ("Itchy skin rash on my arm", "Dermatologist"),
        ("blurry vision since morning", "Ophthalmologist"),
        ("my tooth hurts", "Dentist"),
        ("possible fracture in my wrist", "Orthopedist"),
        ("my baby won't stop crying", "Pediatrician"),
        ("constant anxiety", "Psychiatrist"),
        ("stomach ache and diarrhea", "Gastroenterologist"),
        ("high fever and cough", "General Physician"),
    ])
    def test_keywords(self, message, expected):
        assert detect_specialization(message) == expected

    def test_unmatched_returns_default(self):
        assert detect_specialization("just tired") == DEFAULT_SPECIALIZATION
        assert detect_specialization("") == DEFAULT_SPECIALIZATION
        assert detect_specialization(None) == DEFAULT_SPECIALIZATION

    def test_first_rule_wins_when_keywords_co_occur(self):
        assert detect_specialization("fever with chest pain") == "Cardiologist"
        assert detect_specialization("child with a rash") == "Dermatologist"

    def test_custom_rule_order_is_respected(self):
        rules = (
            SpecializationRule(keyword="Fever", specialization="General Physician"),
            SpecializationRule(keyword="chest pain", specialization="Cardiologist"),
        )
        assert detect_specialization("fever with chest pain", rules) == "General Physician"

    def test_deterministic(self):
        message = "headache and palpitation"
        results = {detect_specialization(message) for _ in range(20)}
        assert results == {"Cardiologist"}


class TestRuleTable:
    """Test the canonical rule table."""

    def test_is_immutable(self):
        assert isinstance(SPECIALIZATION_RULES, tuple)
        with pytest.raises(ValidationError):
            SPECIALIZATION_RULES[0].keyword = "other"

    def test_specific_rules_precede_generic_ones(self):
        keywords = [r.keyword for r in SPECIALIZATION_RULES]
        assert keywords.index("chest pain") < keywords.index("fever")
        assert SPECIALIZATION_RULES[-1].specialization == DEFAULT_SPECIALIZATION


class TestIsEmergency:
    """Test emergency keyword detection."""

    def test_emergency_messages(self):
        assert is_emergency("Severe chest pain and sweating")
        assert is_emergency("I think I'm having a STROKE")
        assert is_emergency("I can't breathe")

    def test_non_emergency_messages(self):
        assert not is_emergency("mild cough for two days")
        assert not is_emergency(None)
