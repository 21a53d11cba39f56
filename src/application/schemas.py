from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from src.domain.models import Coordinate, DoctorMatch, Facility


class LocationChatRequest(BaseModel):
    message: str
    latitude: Optional[float] = Field(None, ge=-90.0, le=90.0)
    longitude: Optional[float] = Field(None, ge=-180.0, le=180.0)

    @property
    def coordinate(self) -> Optional[Coordinate]:
        # A coordinate needs both axes
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class AggregateResult(BaseModel):
    suggestion_primary: str
    suggestion_secondary: str
    specialization: str
    matched_doctors: List[DoctorMatch] = []
    nearby_facilities: List[Facility] = []


class DoctorDTO(BaseModel):
    id: int
    name: str
    specialization: str
    distance: str


class HospitalDTO(BaseModel):
    name: str
    latitude: float
    longitude: float


class LocationChatResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ai_suggestion_english: str = Field(..., alias="aiSuggestionEnglish")
    ai_suggestion_telugu: str = Field(..., alias="aiSuggestionTelugu")
    recommended_doctors: List[DoctorDTO] = Field(default_factory=list, alias="recommendedDoctors")
    nearby_hospitals: List[HospitalDTO] = Field(default_factory=list, alias="nearbyHospitals")

    @classmethod
    def from_result(cls, result: AggregateResult) -> "LocationChatResponse":
        return cls(
            ai_suggestion_english=result.suggestion_primary,
            ai_suggestion_telugu=result.suggestion_secondary,
            recommended_doctors=[
                DoctorDTO(
                    id=d.practitioner_id,
                    name=d.name,
                    specialization=d.specialization,
                    distance=d.distance_label,
                )
                for d in result.matched_doctors
            ],
            nearby_hospitals=[
                HospitalDTO(
                    name=f.name,
                    latitude=f.coordinate.latitude,
                    longitude=f.coordinate.longitude,
                )
                for f in result.nearby_facilities
            ],
        )
