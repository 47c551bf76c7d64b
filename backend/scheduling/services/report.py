from __future__ import annotations

from scheduling.schemas.catalog import Catalog
from scheduling.schemas.course import Cohort
from scheduling.schemas.report import CohortBreakdown, ScheduleStats
from scheduling.schemas.timetable import ScheduleAssignment


def summarize_schedule(catalog: Catalog, assignments: list[ScheduleAssignment]) -> ScheduleStats:
    courses = catalog.course_index()
    scheduled_ids = {item.course_id for item in assignments if item.course_id in courses}

    total = len(catalog.courses)
    scheduled = len(scheduled_ids)
    conflicts = sum(len(item.conflicts) for item in assignments)
    efficiency = scheduled / total if total > 0 else 0.0

    by_cohort: dict[Cohort, CohortBreakdown] = {}
    for cohort in Cohort:
        cohort_total = sum(1 for course in catalog.courses if course.cohort == cohort)
        cohort_scheduled = sum(1 for course_id in scheduled_ids if courses[course_id].cohort == cohort)
        by_cohort[cohort] = CohortBreakdown(scheduled=cohort_scheduled, total=cohort_total)

    return ScheduleStats(
        total_courses=total,
        scheduled=scheduled,
        unscheduled=total - scheduled,
        conflicts=conflicts,
        efficiency=efficiency,
        by_cohort=by_cohort,
    )
