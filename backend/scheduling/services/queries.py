"""Read-only views over a generated assignment set for the display layer."""
from __future__ import annotations

from scheduling.schemas.calendar import Calendar
from scheduling.schemas.course import Cohort
from scheduling.schemas.timetable import ScheduleAssignment


def filter_assignments(
    assignments: list[ScheduleAssignment],
    *,
    faculty_id: str | None = None,
    classroom_id: str | None = None,
    cohort: Cohort | None = None,
) -> list[ScheduleAssignment]:
    result = []
    for item in assignments:
        if faculty_id is not None and item.faculty_id != faculty_id:
            continue
        if classroom_id is not None and item.classroom_id != classroom_id:
            continue
        if cohort is not None and item.cohort != cohort:
            continue
        result.append(item)
    return result


def assignments_at(assignments: list[ScheduleAssignment], day: str, time_slot: str) -> list[ScheduleAssignment]:
    return [item for item in assignments if item.day == day and item.time_slot == time_slot]


def conflicted_assignments(assignments: list[ScheduleAssignment]) -> list[ScheduleAssignment]:
    return [item for item in assignments if item.conflicts]


def schedule_grid(
    assignments: list[ScheduleAssignment],
    calendar: Calendar,
) -> dict[str, dict[str, list[ScheduleAssignment]]]:
    """Day -> slot -> assignments, with every calendar cell present.

    Assignments on a day or slot outside the calendar are left out.
    """
    grid: dict[str, dict[str, list[ScheduleAssignment]]] = {
        day: {slot: [] for slot in calendar.time_slots} for day in calendar.days
    }
    for item in assignments:
        if not calendar.has_slot(item.day, item.time_slot):
            continue
        grid[item.day][item.time_slot].append(item)
    return grid
