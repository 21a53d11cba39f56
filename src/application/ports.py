from typing import List, Protocol
from src.domain.models import Coordinate, Facility, Practitioner


class PractitionerStorePort(Protocol):
    def find_by_specialization_and_available(self, specialization: str) -> List[Practitioner]:
        ...

    def find_all_available(self) -> List[Practitioner]:
        ...


class FacilitySearchPort(Protocol):
    def find_nearby_hospitals(self, coordinate: Coordinate) -> List[Facility]:
        """
        Returns hospitals near the coordinate; an empty list on any failure.
        """
        ...


class LLMPort(Protocol):
    def complete(self, messages: List[dict], temperature: float = 0.7, max_tokens: int = 400) -> str:
        """
        Accepts chat-style messages and returns the first completion's text.
        """
        ...
