from typing import Iterable, List

from src.application.ports import PractitionerStorePort
from src.domain.models import Coordinate, Practitioner


def _p(id: int, name: str, specialization: str, lat: float, lon: float, available: bool = True) -> Practitioner:
    return Practitioner(
        id=id,
        name=name,
        specialization=specialization,
        coordinate=Coordinate(latitude=lat, longitude=lon),
        available=available,
    )


# Demo roster around Hyderabad
SAMPLE_PRACTITIONERS: List[Practitioner] = [
    _p(1, "Dr. Ravi Kumar", "Cardiologist", 17.4239, 78.4483),
    _p(2, "Dr. Anitha Reddy", "Dermatologist", 17.4126, 78.4071),
    _p(3, "Dr. Suresh Rao", "General Physician", 17.3850, 78.4867),
    _p(4, "Dr. Priya Sharma", "Pediatrician", 17.4435, 78.3772),
    _p(5, "Dr. Kiran Varma", "Orthopedist", 17.4401, 78.4983),
    _p(6, "Dr. Lakshmi Devi", "Gastroenterologist", 17.4062, 78.4691),
    _p(7, "Dr. Mahesh Babu", "Psychiatrist", 17.3616, 78.4747),
    _p(8, "Dr. Swathi Naidu", "Ophthalmologist", 17.4948, 78.3996),
    _p(9, "Dr. Arjun Patel", "Dentist", 17.4300, 78.4100),
    _p(10, "Dr. Meena Iyer", "Cardiologist", 17.3457, 78.5522, available=False),
]


class InMemoryPractitionerStore(PractitionerStorePort):
    """List-backed store; queries keep insertion order."""

    def __init__(self, practitioners: Iterable[Practitioner] = ()):
        self._practitioners = list(practitioners)

    def find_by_specialization_and_available(self, specialization: str) -> List[Practitioner]:
        return [
            p for p in self._practitioners
            if p.available and p.specialization == specialization
        ]

    def find_all_available(self) -> List[Practitioner]:
        return [p for p in self._practitioners if p.available]
