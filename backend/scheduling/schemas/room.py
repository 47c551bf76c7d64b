from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from scheduling.schemas.calendar import normalize_availability
from scheduling.schemas.course import normalize_tags


class RoomType(str, Enum):
    lecture_hall = "Lecture Hall"
    lab = "Lab"
    seminar_room = "Seminar Room"
    auditorium = "Auditorium"
    studio = "Studio"


class Classroom(BaseModel):
    id: str = Field(min_length=1, max_length=36)
    name: str = Field(min_length=1, max_length=100)
    building: str = Field(min_length=1, max_length=200)
    capacity: int = Field(ge=1, le=5000)
    room_type: RoomType = Field(default=RoomType.lecture_hall, alias="type")
    resources: list[str] = Field(default_factory=list)
    availability: dict[str, list[str]] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("resources")
    @classmethod
    def normalize_resources(cls, value: list[str]) -> list[str]:
        return normalize_tags(value)

    @field_validator("availability")
    @classmethod
    def validate_availability(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        return normalize_availability(value)

    def slots_on(self, day: str) -> list[str]:
        return self.availability.get(day, [])
