from __future__ import annotations

import logging
from time import perf_counter

from scheduling.core.config import Settings, get_settings
from scheduling.schemas.calendar import Calendar
from scheduling.schemas.catalog import Catalog
from scheduling.schemas.diagnostic import Diagnostic, is_blocked
from scheduling.schemas.report import ScheduleStats
from scheduling.schemas.timetable import ScheduleAssignment, ScheduleResult
from scheduling.services.assignment_scheduler import AssignmentScheduler
from scheduling.services.report import summarize_schedule
from scheduling.services.selection import Selector, build_selector
from scheduling.services.validation import validate_catalog

logger = logging.getLogger(__name__)


class SchedulingEngine:
    """Validate, generate and summarize against one fixed calendar.

    The engine holds configuration only: the calendar, the settings and the
    candidate selector. Catalogs are passed in on every call and never
    modified, so separate engines can run side by side.
    """

    def __init__(
        self,
        *,
        calendar: Calendar | None = None,
        selector: Selector | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.calendar = calendar or Calendar.from_settings(self.settings)
        self.selector = selector or build_selector(
            self.settings.selection_strategy,
            self.settings.random_seed,
        )

    def validate(self, catalog: Catalog) -> list[Diagnostic]:
        return validate_catalog(
            catalog,
            self.calendar,
            resource_vocabulary=self.settings.resource_vocabulary,
        )

    def generate_schedule(self, catalog: Catalog) -> ScheduleResult:
        started_at = perf_counter()
        diagnostics = self.validate(catalog)
        if is_blocked(diagnostics):
            logger.info(
                "Schedule generation blocked by %d error diagnostic(s)",
                sum(1 for item in diagnostics if item.is_error),
            )
            return ScheduleResult(assignments=[], diagnostics=diagnostics)

        scheduler = AssignmentScheduler(
            calendar=self.calendar,
            selector=self.selector,
            max_attempts=self.settings.max_attempts_per_course,
            conflict_mode=self.settings.conflict_mode,
        )
        assignments = scheduler.run(catalog)
        logger.info(
            "Generated %d assignment(s) for %d course(s) in %.3fs",
            len(assignments),
            len(catalog.courses),
            perf_counter() - started_at,
        )
        return ScheduleResult(assignments=assignments, diagnostics=diagnostics)

    def summarize(self, catalog: Catalog, assignments: list[ScheduleAssignment]) -> ScheduleStats:
        return summarize_schedule(catalog, assignments)


def validate(catalog: Catalog) -> list[Diagnostic]:
    return SchedulingEngine().validate(catalog)


def generate_schedule(catalog: Catalog) -> ScheduleResult:
    return SchedulingEngine().generate_schedule(catalog)


def summarize(catalog: Catalog, assignments: list[ScheduleAssignment]) -> ScheduleStats:
    return summarize_schedule(catalog, assignments)
