from __future__ import annotations

from collections import Counter

from pydantic import BaseModel, ConfigDict, Field, model_validator

from scheduling.core.exceptions import ResourceNotFoundError
from scheduling.schemas.course import Course
from scheduling.schemas.faculty import FacultyMember
from scheduling.schemas.room import Classroom


def _duplicate_ids(ids: list[str]) -> list[str]:
    return sorted(item_id for item_id, count in Counter(ids).items() if count > 1)


class Catalog(BaseModel):
    """Courses, faculty and classrooms supplied by the caller for one run.

    Ids are unique within each entity kind.
    """

    courses: list[Course] = Field(default_factory=list, alias="courseData")
    faculty: list[FacultyMember] = Field(default_factory=list, alias="facultyData")
    classrooms: list[Classroom] = Field(default_factory=list, alias="classroomData")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "Catalog":
        problems = []
        for label, items in (
            ("course", self.courses),
            ("faculty", self.faculty),
            ("classroom", self.classrooms),
        ):
            duplicates = _duplicate_ids([item.id for item in items])
            if duplicates:
                problems.append(f"Duplicate {label} id(s): {', '.join(duplicates)}")
        if problems:
            raise ValueError("; ".join(problems))
        return self

    def course_index(self) -> dict[str, Course]:
        return {course.id: course for course in self.courses}

    def faculty_index(self) -> dict[str, FacultyMember]:
        return {member.id: member for member in self.faculty}

    def classroom_index(self) -> dict[str, Classroom]:
        return {room.id: room for room in self.classrooms}

    def course_codes(self) -> set[str]:
        return {course.code for course in self.courses}

    def get_faculty(self, faculty_id: str | None) -> FacultyMember | None:
        if faculty_id is None:
            return None
        return next((member for member in self.faculty if member.id == faculty_id), None)

    def get_classroom(self, classroom_id: str) -> Classroom | None:
        return next((room for room in self.classrooms if room.id == classroom_id), None)

    def get_course(self, course_id: str) -> Course | None:
        return next((course for course in self.courses if course.id == course_id), None)

    def require_faculty(self, faculty_id: str) -> FacultyMember:
        member = self.get_faculty(faculty_id)
        if member is None:
            raise ResourceNotFoundError("Faculty member", faculty_id)
        return member

    def require_classroom(self, classroom_id: str) -> Classroom:
        room = self.get_classroom(classroom_id)
        if room is None:
            raise ResourceNotFoundError("Classroom", classroom_id)
        return room

    def require_course(self, course_id: str) -> Course:
        course = self.get_course(course_id)
        if course is None:
            raise ResourceNotFoundError("Course", course_id)
        return course
