from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Cohort(str, Enum):
    first_year = "FY"
    second_year = "SY"
    third_year = "TY"


COHORT_LABELS = {
    Cohort.first_year: "First Year",
    Cohort.second_year: "Second Year",
    Cohort.third_year: "Third Year",
}


def normalize_tags(value: list[str]) -> list[str]:
    seen: set[str] = set()
    normalized: list[str] = []
    for item in value:
        tag = item.strip()
        if not tag or tag in seen:
            continue
        seen.add(tag)
        normalized.append(tag)
    return normalized


class Course(BaseModel):
    id: str = Field(min_length=1, max_length=36)
    code: str = Field(min_length=1, max_length=50)
    name: str = Field(default="", max_length=200)
    credits: int = Field(default=3, ge=0, le=40)
    cohort: Cohort = Field(alias="year")
    assigned_faculty_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("assigned_faculty_id", "assignedFacultyId", "assignedTeacherId"),
    )
    prerequisites: list[str] = Field(default_factory=list)
    required_resources: list[str] = Field(default_factory=list, alias="requiredResources")
    enrollment_limit: int = Field(ge=1, le=5000, alias="enrollmentLimit")
    duration_hours: int = Field(default=1, ge=1, le=40, alias="duration")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("code")
    @classmethod
    def strip_code(cls, value: str) -> str:
        code = value.strip()
        if not code:
            raise ValueError("Course code cannot be blank")
        return code

    @field_validator("assigned_faculty_id")
    @classmethod
    def blank_faculty_is_unassigned(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("prerequisites", "required_resources")
    @classmethod
    def normalize_lists(cls, value: list[str]) -> list[str]:
        return normalize_tags(value)
