"""Unit tests for the distance calculator."""
import math

import pytest

from src.domain.geo import EARTH_RADIUS_KM, distance_km, format_distance
from src.domain.models import Coordinate


HYDERABAD = Coordinate(latitude=17.385, longitude=78.4867)
LONDON = Coordinate(latitude=51.5074, longitude=-0.1278)
PARIS = Coordinate(latitude=48.8566, longitude=2.3522)


class TestDistanceKm:
    """Test haversine distance."""

    @pytest.mark.parametrize("point", [HYDERABAD, LONDON, Coordinate(latitude=-90.0, longitude=180.0)])
    def test_identical_points_are_zero(self, point):
        assert distance_km(point, point) == pytest.approx(0.0, abs=1e-9)

    def test_symmetry(self):
        pairs = [(HYDERABAD, LONDON), (LONDON, PARIS), (PARIS, HYDERABAD)]
        for a, b in pairs:
            assert distance_km(a, b) == pytest.approx(distance_km(b, a))

    def test_one_degree_of_latitude(self):
        """Along a meridian the distance is the arc length."""
        a = Coordinate(latitude=0.0, longitude=0.0)
        b = Coordinate(latitude=1.0, longitude=0.0)
        expected = EARTH_RADIUS_KM * math.pi / 180
        assert distance_km(a, b) == pytest.approx(expected, rel=1e-9)

    def test_london_paris_reference(self):
        assert distance_km(LONDON, PARIS) == pytest.approx(343.5, abs=1.0)

    def test_antipodes(self):
        a = Coordinate(latitude=0.0, longitude=0.0)
        b = Coordinate(latitude=0.0, longitude=180.0)
        assert distance_km(a, b) == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-9)


class TestFormatDistance:
    """Test distance label formatting."""

    @pytest.mark.parametrize("km,label", [
        (2.4, "2.4 km"),
        (2.0, "2.0 km"),
        (0.0, "0.0 km"),
        (9.96, "10.0 km"),
        (3.04, "3.0 km"),
    ])
    def test_one_decimal_with_suffix(self, km, label):
        assert format_distance(km) == label
