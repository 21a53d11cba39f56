"""Unit tests for proximity doctor search."""
import math

import pytest

from src.application.doctor_search import find_nearby_doctors
from src.domain.geo import EARTH_RADIUS_KM, distance_km
from src.domain.models import Coordinate, Practitioner
from src.infrastructure.practitioners.memory_store import InMemoryPractitionerStore


ORIGIN = Coordinate(latitude=17.4, longitude=78.4)


def north_of(origin: Coordinate, km: float) -> Coordinate:
    return Coordinate(
        latitude=origin.latitude + math.degrees(km / EARTH_RADIUS_KM),
        longitude=origin.longitude,
    )


def doctor(id, km, specialization="Cardiologist", available=True, name=None):
    return Practitioner(
        id=id,
        name=name or f"Dr. {id}",
        specialization=specialization,
        coordinate=north_of(ORIGIN, km),
        available=available,
    )


class RecordingStore(InMemoryPractitionerStore):
    def __init__(self, practitioners):
        super().__init__(practitioners)
        self.calls = []

    def find_by_specialization_and_available(self, specialization):
        self.calls.append(("by_specialization", specialization))
        return super().find_by_specialization_and_available(specialization)

    def find_all_available(self):
        self.calls.append(("all_available",))
        return super().find_all_available()


def test_radius_filter_and_ordering():
    store = InMemoryPractitionerStore([doctor(1, 8), doctor(2, 15), doctor(3, 2)])
    matches = find_nearby_doctors(store, ORIGIN, "Cardiologist")
    assert [m.practitioner_id for m in matches] == [3, 1]
    assert [m.distance_label for m in matches] == ["2.0 km", "8.0 km"]
    assert matches[0].distance_km == pytest.approx(2.0)


def test_falls_back_to_all_available_when_no_specialist():
    store = RecordingStore([
        doctor(1, 4, specialization="Dermatologist"),
        doctor(2, 12, specialization="Dentist"),
        doctor(3, 1, specialization="Cardiologist", available=False),
    ])
    matches = find_nearby_doctors(store, ORIGIN, "Cardiologist")
    assert [m.practitioner_id for m in matches] == [1]
    assert matches[0].specialization == "Dermatologist"
    assert store.calls == [("by_specialization", "Cardiologist"), ("all_available",)]


def test_no_fallback_query_when_specialists_exist():
    store = RecordingStore([doctor(1, 20), doctor(2, 3, specialization="Dentist")])
    matches = find_nearby_doctors(store, ORIGIN, "Cardiologist")
    # The only cardiologist is out of range; the nearby dentist is not used
    assert matches == []
    assert store.calls == [("by_specialization", "Cardiologist")]


def test_caps_at_five_nearest():
    store = InMemoryPractitionerStore([doctor(i, km) for i, km in enumerate([9, 1, 7, 3, 5, 2, 8, 4])])
    matches = find_nearby_doctors(store, ORIGIN, "Cardiologist")
    assert [m.distance_label for m in matches] == ["1.0 km", "2.0 km", "3.0 km", "4.0 km", "5.0 km"]


def test_ties_keep_store_order():
    store = InMemoryPractitionerStore([doctor(7, 3, name="First"), doctor(4, 3, name="Second")])
    matches = find_nearby_doctors(store, ORIGIN, "Cardiologist")
    assert [m.name for m in matches] == ["First", "Second"]


def test_absent_coordinate_returns_empty_without_querying():
    store = RecordingStore([doctor(1, 1)])
    assert find_nearby_doctors(store, None, "Cardiologist") == []
    assert store.calls == []


def test_empty_store_returns_empty():
    assert find_nearby_doctors(InMemoryPractitionerStore(), ORIGIN, "Cardiologist") == []


def test_candidate_exactly_at_radius_is_kept():
    at_edge = doctor(1, 6)
    beyond = doctor(2, 6.001)
    store = InMemoryPractitionerStore([beyond, at_edge])
    radius = distance_km(ORIGIN, at_edge.coordinate)
    matches = find_nearby_doctors(store, ORIGIN, "Cardiologist", radius_km=radius)
    assert [m.practitioner_id for m in matches] == [1]
