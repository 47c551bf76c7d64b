from __future__ import annotations

from scheduling.schemas.calendar import Calendar
from scheduling.schemas.course import Course
from scheduling.schemas.faculty import FacultyMember
from scheduling.schemas.room import Classroom


def classroom_is_eligible(course: Course, room: Classroom) -> bool:
    if room.capacity < course.enrollment_limit:
        return False
    return set(course.required_resources).issubset(room.resources)


def eligible_classrooms(course: Course, classrooms: list[Classroom]) -> list[Classroom]:
    """Rooms that satisfy the course's seat and resource needs, in catalog order."""
    return [room for room in classrooms if classroom_is_eligible(course, room)]


def common_slots(faculty: FacultyMember, room: Classroom, day: str, calendar: Calendar) -> list[str]:
    """Slots on `day` open to both the faculty member and the room, in calendar order."""
    if day not in calendar.days:
        return []
    faculty_slots = set(faculty.slots_on(day))
    room_slots = set(room.slots_on(day))
    return [slot for slot in calendar.time_slots if slot in faculty_slots and slot in room_slots]
