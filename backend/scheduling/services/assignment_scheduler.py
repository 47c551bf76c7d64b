from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence, TypeVar

from scheduling.core.exceptions import SchedulerError
from scheduling.schemas.calendar import Calendar
from scheduling.schemas.catalog import Catalog
from scheduling.schemas.course import Cohort, Course
from scheduling.schemas.faculty import FacultyMember
from scheduling.schemas.room import Classroom
from scheduling.schemas.timetable import ScheduleAssignment
from scheduling.services.conflict_service import ConflictMode, detect_conflicts
from scheduling.services.eligibility import common_slots, eligible_classrooms
from scheduling.services.selection import Selector

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 10

T = TypeVar("T")


@dataclass(frozen=True)
class Placement:
    course_id: str
    faculty_id: str
    classroom_id: str
    cohort: Cohort
    day: str
    time_slot: str


class AssignmentScheduler:
    """Places each course into one (classroom, day, slot) in catalog order.

    Every course gets at most `max_attempts` (classroom, day) picks. A pick
    succeeds when the assigned faculty member and the classroom share at
    least one open slot that day. Double-bookings are labelled on the
    resulting assignments rather than avoided; a course that runs out of
    attempts is left out of the result.
    """

    def __init__(
        self,
        *,
        calendar: Calendar,
        selector: Selector,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        conflict_mode: ConflictMode = "symmetric",
    ) -> None:
        if max_attempts < 1:
            raise SchedulerError(
                message="max_attempts must be at least 1",
                details={"max_attempts": max_attempts},
            )
        self.calendar = calendar
        self.selector = selector
        self.max_attempts = max_attempts
        self.conflict_mode = conflict_mode

    def _select(self, candidates: Sequence[T]) -> T:
        choice = self.selector(candidates)
        if choice not in candidates:
            raise SchedulerError(
                message="Selector returned a value outside the candidate set",
                details={"choice": repr(choice)},
            )
        return choice

    def _place_course(
        self,
        course: Course,
        faculty: FacultyMember,
        rooms: list[Classroom],
    ) -> Placement | None:
        # A (room, day) pair that yielded no common slot is not retried.
        candidates = [(room, day) for room in rooms for day in self.calendar.days]
        attempts = 0
        while candidates and attempts < self.max_attempts:
            attempts += 1
            room, day = self._select(candidates)
            candidates.remove((room, day))

            slots = common_slots(faculty, room, day, self.calendar)
            if not slots:
                logger.debug(
                    "Attempt %d for %s: no common slot for %s in %s on %s",
                    attempts,
                    course.code,
                    faculty.name,
                    room.name,
                    day,
                )
                continue

            return Placement(
                course_id=course.id,
                faculty_id=faculty.id,
                classroom_id=room.id,
                cohort=course.cohort,
                day=day,
                time_slot=self._select(slots),
            )

        logger.warning("Could not place course %s after %d attempt(s)", course.code, attempts)
        return None

    def run(self, catalog: Catalog) -> list[ScheduleAssignment]:
        placements: list[Placement] = []

        for course in catalog.courses:
            faculty = catalog.get_faculty(course.assigned_faculty_id)
            if faculty is None:
                logger.warning("Skipping course %s: assigned faculty not found", course.code)
                continue

            rooms = eligible_classrooms(course, catalog.classrooms)
            if not rooms:
                logger.warning("Skipping course %s: no eligible classroom", course.code)
                continue

            placement = self._place_course(course, faculty, rooms)
            if placement is not None:
                placements.append(placement)

        labels = detect_conflicts(placements, self.conflict_mode)
        assignments = [
            ScheduleAssignment(
                id=f"{placement.course_id}-{ordinal}",
                course_id=placement.course_id,
                faculty_id=placement.faculty_id,
                classroom_id=placement.classroom_id,
                day=placement.day,
                time_slot=placement.time_slot,
                cohort=placement.cohort,
                conflicts=placement_labels,
            )
            for ordinal, (placement, placement_labels) in enumerate(zip(placements, labels), start=1)
        ]

        logger.info(
            "Placed %d of %d course(s); %d assignment(s) carry conflicts",
            len(assignments),
            len(catalog.courses),
            sum(1 for item in assignments if item.conflicts),
        )
        return assignments
