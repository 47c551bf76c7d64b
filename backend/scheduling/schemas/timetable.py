from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from scheduling.schemas.course import Cohort
from scheduling.schemas.diagnostic import Diagnostic, is_blocked

FACULTY_DOUBLE_BOOKED = "Faculty double-booked"
CLASSROOM_DOUBLE_BOOKED = "Classroom double-booked"


def cohort_conflict_label(cohort: Cohort) -> str:
    return f"{cohort.value} students have another class"


class ScheduleAssignment(BaseModel):
    id: str = Field(min_length=1)
    course_id: str = Field(alias="courseId")
    faculty_id: str = Field(alias="facultyId")
    classroom_id: str = Field(alias="classroomId")
    day: str
    time_slot: str = Field(alias="timeSlot")
    cohort: Cohort = Field(alias="year")
    conflicts: tuple[str, ...] = ()

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def slot_key(self) -> tuple[str, str]:
        return self.day, self.time_slot

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)


class ScheduleResult(BaseModel):
    assignments: list[ScheduleAssignment] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def blocked(self) -> bool:
        return is_blocked(self.diagnostics)

    def unscheduled_course_ids(self, course_ids: list[str]) -> list[str]:
        scheduled = {item.course_id for item in self.assignments}
        return [course_id for course_id in course_ids if course_id not in scheduled]
