from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from scheduling.schemas.calendar import normalize_availability
from scheduling.schemas.course import normalize_tags


class FacultyMember(BaseModel):
    id: str = Field(min_length=1, max_length=36)
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    department: str = Field(min_length=1, max_length=200)
    specializations: list[str] = Field(default_factory=list)
    max_hours_per_week: int = Field(ge=0, le=200, alias="maxHoursPerWeek")
    availability: dict[str, list[str]] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("specializations")
    @classmethod
    def normalize_specializations(cls, value: list[str]) -> list[str]:
        return normalize_tags(value)

    @field_validator("availability")
    @classmethod
    def validate_availability(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        return normalize_availability(value)

    def slots_on(self, day: str) -> list[str]:
        return self.availability.get(day, [])
