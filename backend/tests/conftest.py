import pytest

from scheduling.core.config import DEFAULT_DAYS, DEFAULT_TIME_SLOTS, Settings
from scheduling.schemas.calendar import Calendar
from scheduling.schemas.catalog import Catalog
from scheduling.schemas.course import Course
from scheduling.schemas.faculty import FacultyMember
from scheduling.schemas.room import Classroom
from scheduling.services.engine import SchedulingEngine
from scheduling.services.selection import FirstCandidateSelector


@pytest.fixture
def calendar():
    return Calendar.build(DEFAULT_DAYS, DEFAULT_TIME_SLOTS)


@pytest.fixture
def settings():
    # Ignore any backend/.env on the developer machine.
    return Settings(_env_file=None)


@pytest.fixture
def make_course():
    def _make(course_id="c1", **overrides):
        data = {
            "id": course_id,
            "code": course_id.upper(),
            "name": f"Course {course_id}",
            "credits": 3,
            "cohort": "FY",
            "assigned_faculty_id": "f1",
            "prerequisites": [],
            "required_resources": [],
            "enrollment_limit": 30,
            "duration_hours": 3,
        }
        data.update(overrides)
        return Course(**data)

    return _make


@pytest.fixture
def make_faculty():
    def _make(faculty_id="f1", availability=None, **overrides):
        data = {
            "id": faculty_id,
            "name": f"Prof {faculty_id}",
            "email": f"{faculty_id}@university.edu",
            "department": "Computer Science",
            "specializations": [],
            "max_hours_per_week": 1,
            "availability": availability if availability is not None else {"Monday": ["9:00-10:00"]},
        }
        data.update(overrides)
        return FacultyMember(**data)

    return _make


@pytest.fixture
def make_classroom():
    def _make(room_id="r1", availability=None, **overrides):
        data = {
            "id": room_id,
            "name": f"Room {room_id}",
            "building": "Main Building",
            "capacity": 40,
            "room_type": "Lecture Hall",
            "resources": [],
            "availability": availability if availability is not None else {"Monday": ["9:00-10:00"]},
        }
        data.update(overrides)
        return Classroom(**data)

    return _make


@pytest.fixture
def lab_scenario(make_course, make_faculty, make_classroom):
    """One 30-seat lab course that fits exactly one Monday 9:00 slot."""
    return Catalog(
        courses=[make_course("c1", required_resources=["Computer Lab"], enrollment_limit=30)],
        faculty=[make_faculty("f1")],
        classrooms=[make_classroom("r1", capacity=35, resources=["Computer Lab"])],
    )


@pytest.fixture
def engine(calendar, settings):
    return SchedulingEngine(calendar=calendar, selector=FirstCandidateSelector(), settings=settings)
