import logging
from typing import List, Optional

from src.application.ports import PractitionerStorePort
from src.domain.geo import distance_km, format_distance
from src.domain.models import Coordinate, DoctorMatch


logger = logging.getLogger(__name__)


DOCTOR_RADIUS_KM = 10.0
MAX_DOCTORS = 5


def find_nearby_doctors(
    store: PractitionerStorePort,
    coordinate: Optional[Coordinate],
    specialization: str,
    radius_km: float = DOCTOR_RADIUS_KM,
    limit: int = MAX_DOCTORS,
) -> List[DoctorMatch]:
    if coordinate is None:
        return []

    candidates = store.find_by_specialization_and_available(specialization)
    if not candidates:
        logger.info("No available %s; widening search to all available practitioners", specialization)
        candidates = store.find_all_available()

    ranked = []
    for p in candidates:
        dist = distance_km(coordinate, p.coordinate)
        if dist <= radius_km:
            ranked.append((dist, p))
    # sort() is stable, so the store's order breaks ties
    ranked.sort(key=lambda pair: pair[0])

    return [
        DoctorMatch(
            practitioner_id=p.id,
            name=p.name,
            specialization=p.specialization,
            distance_km=dist,
            distance_label=format_distance(dist),
        )
        for dist, p in ranked[:limit]
    ]
