import pytest

from scheduling.core.config import DEFAULT_DAYS, Settings
from scheduling.core.exceptions import ConfigurationError
from scheduling.schemas.catalog import Catalog
from scheduling.services import engine as engine_module
from scheduling.services.engine import SchedulingEngine
from scheduling.services.selection import FirstCandidateSelector, RandomSelector


def test_lab_course_scenario(engine, lab_scenario):
    result = engine.generate_schedule(lab_scenario)

    assert result.diagnostics == []
    assert not result.blocked
    assert len(result.assignments) == 1
    placed = result.assignments[0]
    assert (placed.day, placed.time_slot) == ("Monday", "9:00-10:00")
    assert placed.conflicts == ()

    stats = engine.summarize(lab_scenario, result.assignments)
    assert (stats.scheduled, stats.total_courses) == (1, 1)
    assert stats.efficiency == 1.0
    assert stats.efficiency_percent == 100


@pytest.mark.parametrize("missing", ["courses", "faculty", "classrooms"])
def test_any_empty_entity_list_blocks_generation(engine, lab_scenario, missing):
    catalog = lab_scenario.model_copy(update={missing: []})

    result = engine.generate_schedule(catalog)

    assert result.blocked
    assert result.assignments == []
    assert any(item.kind == "error" for item in engine.validate(catalog))


def test_one_blocking_error_stops_the_whole_run(engine, make_course, make_faculty, make_classroom):
    catalog = Catalog(
        courses=[make_course("c1"), make_course("c2", assigned_faculty_id="ghost")],
        faculty=[make_faculty("f1")],
        classrooms=[make_classroom("r1")],
    )

    result = engine.generate_schedule(catalog)

    assert result.assignments == []
    assert [item.message for item in result.diagnostics] == ["Course C2 has no assigned teacher"]
    assert result.unscheduled_course_ids(["c1", "c2"]) == ["c1", "c2"]


def test_warnings_are_returned_alongside_the_schedule(engine, make_course, make_faculty, make_classroom):
    catalog = Catalog(
        courses=[make_course("c1", prerequisites=["CS000"])],
        faculty=[make_faculty("f1", max_hours_per_week=6)],
        classrooms=[make_classroom("r1")],
    )

    result = engine.generate_schedule(catalog)

    assert not result.blocked
    assert len(result.assignments) == 1
    assert [item.severity for item in result.diagnostics] == [5, 3]


def test_unplaceable_course_is_simply_absent(engine, make_course, make_faculty, make_classroom):
    catalog = Catalog(
        courses=[make_course("c1"), make_course("c2", assigned_faculty_id="f2")],
        faculty=[
            make_faculty("f1"),
            make_faculty("f2", availability={"Tuesday": ["9:00-10:00"]}),
        ],
        classrooms=[make_classroom("r1")],
    )

    result = engine.generate_schedule(catalog)
    stats = engine.summarize(catalog, result.assignments)

    assert not result.blocked
    assert result.unscheduled_course_ids([course.id for course in catalog.courses]) == ["c2"]
    assert (stats.scheduled, stats.unscheduled) == (1, 1)


def test_engine_builds_calendar_and_selector_from_settings():
    engine = SchedulingEngine(settings=Settings(_env_file=None, selection_strategy="first"))

    assert engine.calendar.days == tuple(DEFAULT_DAYS)
    assert engine.calendar.slot_count == 50
    assert isinstance(engine.selector, FirstCandidateSelector)

    seeded = SchedulingEngine(settings=Settings(_env_file=None, random_seed=11))
    assert isinstance(seeded.selector, RandomSelector)


def test_invalid_calendar_settings_raise_configuration_error():
    with pytest.raises(ConfigurationError):
        SchedulingEngine(settings=Settings(_env_file=None, days=["Monday", "Monday"]))


def test_sequential_conflict_mode_from_settings(calendar, make_course, make_faculty, make_classroom):
    settings = Settings(_env_file=None, conflict_mode="sequential")
    engine = SchedulingEngine(calendar=calendar, selector=FirstCandidateSelector(), settings=settings)
    catalog = Catalog(
        courses=[make_course("c1"), make_course("c2", cohort="SY")],
        faculty=[make_faculty("f1")],
        classrooms=[make_classroom("r1"), make_classroom("r2")],
    )

    assignments = engine.generate_schedule(catalog).assignments

    assert [item.conflicts for item in assignments] == [
        (),
        ("Faculty double-booked", "Classroom double-booked"),
    ]


def test_engines_with_different_calendars_do_not_interfere(settings, lab_scenario):
    from scheduling.schemas.calendar import Calendar

    weekday = SchedulingEngine(
        calendar=Calendar.build(["Monday"], ["9:00-10:00"]),
        selector=FirstCandidateSelector(),
        settings=settings,
    )
    weekend = SchedulingEngine(
        calendar=Calendar.build(["Saturday"], ["9:00-10:00"]),
        selector=FirstCandidateSelector(),
        settings=settings,
    )

    assert len(weekday.generate_schedule(lab_scenario).assignments) == 1
    assert weekend.generate_schedule(lab_scenario).assignments == []
    assert len(weekday.generate_schedule(lab_scenario).assignments) == 1


def test_module_level_operations(lab_scenario):
    assert engine_module.validate(lab_scenario) == []

    result = engine_module.generate_schedule(lab_scenario)
    stats = engine_module.summarize(lab_scenario, result.assignments)

    assert len(result.assignments) == 1
    assert stats.scheduled == 1
