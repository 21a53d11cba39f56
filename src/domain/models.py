from pydantic import BaseModel, ConfigDict, Field, field_validator


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class Practitioner(BaseModel):
    id: int
    name: str
    specialization: str
    coordinate: Coordinate
    available: bool = True

    @field_validator("name", "specialization")
    @classmethod
    def validate_text(cls, v: str):
        v = v.strip()
        if len(v) == 0:
            raise ValueError("must not be blank")
        return v


class DoctorMatch(BaseModel):
    practitioner_id: int
    name: str
    specialization: str
    distance_km: float
    distance_label: str


class Facility(BaseModel):
    name: str
    coordinate: Coordinate


class SpecializationRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword: str
    specialization: str

    @field_validator("keyword")
    @classmethod
    def validate_keyword(cls, v: str):
        return v.strip().lower()


class BilingualSuggestion(BaseModel):
    english: str
    telugu: str
    from_fallback: bool = False
