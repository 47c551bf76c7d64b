from __future__ import annotations

import logging

from scheduling.schemas.calendar import Calendar
from scheduling.schemas.catalog import Catalog
from scheduling.schemas.diagnostic import Diagnostic
from scheduling.services.eligibility import eligible_classrooms

logger = logging.getLogger(__name__)

EMPTY_CATALOG_SEVERITY = 10
UNASSIGNED_TEACHER_SEVERITY = 9
NO_SUITABLE_ROOM_SEVERITY = 8
MISSING_PREREQUISITE_SEVERITY = 5
FACULTY_AVAILABILITY_SEVERITY = 3


def _error(message: str, severity: int) -> Diagnostic:
    return Diagnostic(kind="error", message=message, severity=severity)


def _warning(message: str, severity: int) -> Diagnostic:
    return Diagnostic(kind="warning", message=message, severity=severity)


def available_slot_count(availability: dict[str, list[str]], calendar: Calendar) -> int:
    known_slots = set(calendar.time_slots)
    return sum(
        sum(1 for slot in availability.get(day, []) if slot in known_slots)
        for day in calendar.days
    )


def _log_unknown_availability(owner: str, availability: dict[str, list[str]], calendar: Calendar) -> None:
    for day, slots in availability.items():
        if day not in calendar.days:
            logger.warning("Ignoring availability for %s on unknown day %s", owner, day)
            continue
        unknown = [slot for slot in slots if not calendar.has_slot(day, slot)]
        if unknown:
            logger.warning(
                "Ignoring unknown time slot(s) for %s on %s: %s",
                owner,
                day,
                ", ".join(unknown),
            )


def validate_catalog(
    catalog: Catalog,
    calendar: Calendar,
    *,
    resource_vocabulary: list[str] | None = None,
) -> list[Diagnostic]:
    """Pre-flight checks over the whole catalog.

    Returns diagnostics ordered by descending severity. Any `error` entry
    means the catalog is not schedulable and the search must not run.
    Inputs are never modified.
    """
    diagnostics: list[Diagnostic] = []

    if not catalog.courses:
        diagnostics.append(_error("No courses defined", EMPTY_CATALOG_SEVERITY))
    if not catalog.faculty:
        diagnostics.append(_error("No faculty members defined", EMPTY_CATALOG_SEVERITY))
    if not catalog.classrooms:
        diagnostics.append(_error("No classrooms defined", EMPTY_CATALOG_SEVERITY))

    known_codes = catalog.course_codes()
    for course in catalog.courses:
        for prereq in course.prerequisites:
            if prereq not in known_codes:
                diagnostics.append(
                    _warning(
                        f"Course {course.code} references non-existent prerequisite: {prereq}",
                        MISSING_PREREQUISITE_SEVERITY,
                    )
                )

    faculty_by_id = catalog.faculty_index()
    for course in catalog.courses:
        if course.assigned_faculty_id not in faculty_by_id:
            diagnostics.append(
                _error(f"Course {course.code} has no assigned teacher", UNASSIGNED_TEACHER_SEVERITY)
            )

    for course in catalog.courses:
        if not eligible_classrooms(course, catalog.classrooms):
            resources = ", ".join(course.required_resources)
            diagnostics.append(
                _error(
                    f"No suitable classroom for {course.code} "
                    f"(needs {course.enrollment_limit} seats and resources: {resources})",
                    NO_SUITABLE_ROOM_SEVERITY,
                )
            )

    for member in catalog.faculty:
        _log_unknown_availability(member.name, member.availability, calendar)
        total_available = available_slot_count(member.availability, calendar)
        if total_available < member.max_hours_per_week:
            diagnostics.append(
                _warning(
                    f"{member.name} has only {total_available} available time slots "
                    f"but can teach {member.max_hours_per_week} hours per week",
                    FACULTY_AVAILABILITY_SEVERITY,
                )
            )

    for room in catalog.classrooms:
        _log_unknown_availability(room.name, room.availability, calendar)

    if resource_vocabulary:
        vocabulary = set(resource_vocabulary)
        requested = {tag for course in catalog.courses for tag in course.required_resources}
        offered = {tag for room in catalog.classrooms for tag in room.resources}
        unknown = sorted((requested | offered) - vocabulary)
        if unknown:
            logger.debug("Resource tags outside the configured vocabulary: %s", ", ".join(unknown))

    # sorted() is stable, so equal severities keep discovery order.
    return sorted(diagnostics, key=lambda item: item.severity, reverse=True)
