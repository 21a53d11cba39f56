import logging
from typing import List

import requests

from src.application.ports import FacilitySearchPort
from src.domain.models import Coordinate, Facility
from src.infrastructure.config import Settings


logger = logging.getLogger(__name__)


HOSPITAL_RADIUS_KM = 5.0
MAX_HOSPITALS = 5
UNNAMED_HOSPITAL = "Unnamed Hospital"


def build_hospital_query(coordinate: Coordinate, radius_km: float = HOSPITAL_RADIUS_KM) -> str:
    radius_m = int(radius_km * 1000)
    around = f"(around:{radius_m},{coordinate.latitude:f},{coordinate.longitude:f})"
    return (
        "[out:json][timeout:10];("
        f"node[\"amenity\"=\"hospital\"]{around};"
        f"way[\"amenity\"=\"hospital\"]{around};"
        ");out center;"
    )


def parse_hospitals(data: dict, origin: Coordinate, limit: int = MAX_HOSPITALS) -> List[Facility]:
    """
    Turns an Overpass response into facilities.

    Ways are located by their "center"; nodes by their own lat/lon. An element
    with no position at all is placed at the query origin, so such entries
    report the caller's own coordinate rather than the hospital's.
    """
    elements = data.get("elements") if isinstance(data, dict) else None
    if not isinstance(elements, list):
        return []

    facilities: List[Facility] = []
    try:
        for el in elements:
            name = (el.get("tags") or {}).get("name")
            if not isinstance(name, str) or not name.strip():
                name = UNNAMED_HOSPITAL

            center = el.get("center")
            if center:
                lat, lon = center["lat"], center["lon"]
            else:
                lat = el.get("lat", origin.latitude)
                lon = el.get("lon", origin.longitude)

            facilities.append(
                Facility(name=name, coordinate=Coordinate(latitude=lat, longitude=lon))
            )
            if len(facilities) >= limit:
                break
    except Exception as e:
        logger.warning("Hospital JSON parse error: %s", e)
    return facilities


class OverpassFacilitySearch(FacilitySearchPort):
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self.url = self.settings.overpass_url
        self.timeout = self.settings.facility_timeout_seconds

    def find_nearby_hospitals(self, coordinate: Coordinate) -> List[Facility]:
        query = build_hospital_query(coordinate)
        try:
            resp = requests.post(self.url, data={"data": query}, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except Exception as e:
            logger.warning("Overpass API call failed: %s", e)
            return []

        return parse_hospitals(data, coordinate)
