"""Generate a schedule for the demo catalog and print what the engine reports.

Run:
  PYTHONPATH=backend python scripts/run_sample_schedule.py
"""

from __future__ import annotations

import logging
import os

from scheduling.schemas.catalog import Catalog
from scheduling.schemas.course import COHORT_LABELS
from scheduling.services.engine import SchedulingEngine
from scheduling.services.queries import conflicted_assignments
from scheduling.services.selection import build_selector

SAMPLE_SEED = int(os.getenv("SAMPLE_RANDOM_SEED", "7"))
LOG_LEVEL = os.getenv("SAMPLE_LOG_LEVEL", "INFO").strip().upper() or "INFO"

SAMPLE_COURSES = [
    {
        "id": "1",
        "name": "Introduction to Computer Science",
        "code": "CS101",
        "credits": 3,
        "year": "FY",
        "assignedTeacherId": "1",
        "prerequisites": [],
        "requiredResources": ["Computer Lab", "Projector"],
        "enrollmentLimit": 30,
        "duration": 3,
    },
    {
        "id": "2",
        "name": "Data Structures and Algorithms",
        "code": "CS201",
        "credits": 4,
        "year": "SY",
        "assignedTeacherId": "1",
        "prerequisites": ["CS101"],
        "requiredResources": ["Computer Lab", "Whiteboard"],
        "enrollmentLimit": 25,
        "duration": 3,
    },
    {
        "id": "3",
        "name": "Calculus I",
        "code": "MATH101",
        "credits": 4,
        "year": "FY",
        "assignedTeacherId": "2",
        "prerequisites": [],
        "requiredResources": ["Whiteboard"],
        "enrollmentLimit": 40,
        "duration": 3,
    },
    {
        "id": "4",
        "name": "Physics I",
        "code": "PHY101",
        "credits": 3,
        "year": "FY",
        "assignedTeacherId": "2",
        "prerequisites": [],
        "requiredResources": ["Science Lab", "Projector"],
        "enrollmentLimit": 35,
        "duration": 3,
    },
    {
        "id": "5",
        "name": "Advanced Programming",
        "code": "CS301",
        "credits": 4,
        "year": "TY",
        "assignedTeacherId": "1",
        "prerequisites": ["CS201"],
        "requiredResources": ["Computer Lab"],
        "enrollmentLimit": 20,
        "duration": 3,
    },
    {
        "id": "6",
        "name": "Statistics",
        "code": "MATH201",
        "credits": 3,
        "year": "SY",
        "assignedTeacherId": "2",
        "prerequisites": ["MATH101"],
        "requiredResources": ["Whiteboard"],
        "enrollmentLimit": 30,
        "duration": 3,
    },
]

SAMPLE_FACULTY = [
    {
        "id": "1",
        "name": "Dr. Sarah Johnson",
        "email": "sarah.johnson@university.edu",
        "department": "Computer Science",
        "specializations": ["Computer Science", "Programming", "Algorithms"],
        "maxHoursPerWeek": 12,
        "availability": {
            "Monday": ["9:00-10:00", "10:00-11:00", "11:00-12:00", "14:00-15:00"],
            "Tuesday": ["9:00-10:00", "10:00-11:00", "13:00-14:00", "14:00-15:00"],
            "Wednesday": ["9:00-10:00", "10:00-11:00", "11:00-12:00"],
            "Thursday": ["10:00-11:00", "11:00-12:00", "14:00-15:00", "15:00-16:00"],
            "Friday": ["9:00-10:00", "10:00-11:00", "11:00-12:00"],
        },
    },
    {
        "id": "2",
        "name": "Prof. Michael Chen",
        "email": "michael.chen@university.edu",
        "department": "Mathematics",
        "specializations": ["Mathematics", "Calculus", "Statistics"],
        "maxHoursPerWeek": 15,
        "availability": {
            "Monday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "13:00-14:00", "14:00-15:00"],
            "Tuesday": ["8:00-9:00", "9:00-10:00", "15:00-16:00", "16:00-17:00"],
            "Wednesday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "13:00-14:00"],
            "Thursday": ["8:00-9:00", "9:00-10:00", "13:00-14:00", "14:00-15:00"],
            "Friday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "11:00-12:00"],
        },
    },
]

SAMPLE_CLASSROOMS = [
    {
        "id": "1",
        "name": "Room 101",
        "building": "Computer Science Building",
        "capacity": 35,
        "type": "Lab",
        "resources": ["Computer Lab", "Projector", "Whiteboard", "Air Conditioning"],
        "availability": {
            "Monday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "11:00-12:00", "13:00-14:00", "14:00-15:00", "15:00-16:00"],
            "Tuesday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "11:00-12:00", "13:00-14:00", "14:00-15:00", "15:00-16:00"],
            "Wednesday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "11:00-12:00", "13:00-14:00", "14:00-15:00"],
            "Thursday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "13:00-14:00", "14:00-15:00", "15:00-16:00"],
            "Friday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "11:00-12:00", "13:00-14:00"],
        },
    },
    {
        "id": "2",
        "name": "Lecture Hall A",
        "building": "Main Academic Building",
        "capacity": 50,
        "type": "Lecture Hall",
        "resources": ["Projector", "Audio System", "Whiteboard", "Microphone"],
        "availability": {
            "Monday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "11:00-12:00", "14:00-15:00", "15:00-16:00"],
            "Tuesday": ["8:00-9:00", "9:00-10:00", "11:00-12:00", "13:00-14:00", "14:00-15:00", "15:00-16:00"],
            "Wednesday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "11:00-12:00", "13:00-14:00", "14:00-15:00"],
            "Thursday": ["8:00-9:00", "10:00-11:00", "11:00-12:00", "13:00-14:00", "14:00-15:00"],
            "Friday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "11:00-12:00", "14:00-15:00", "15:00-16:00"],
        },
    },
    {
        "id": "3",
        "name": "Science Lab 1",
        "building": "Science Building",
        "capacity": 40,
        "type": "Lab",
        "resources": ["Science Lab", "Projector", "Whiteboard", "Safety Equipment"],
        "availability": {
            "Monday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "11:00-12:00", "13:00-14:00", "14:00-15:00"],
            "Tuesday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "13:00-14:00", "14:00-15:00", "15:00-16:00"],
            "Wednesday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "11:00-12:00", "13:00-14:00"],
            "Thursday": ["8:00-9:00", "9:00-10:00", "11:00-12:00", "13:00-14:00", "14:00-15:00", "15:00-16:00"],
            "Friday": ["8:00-9:00", "9:00-10:00", "10:00-11:00", "11:00-12:00", "13:00-14:00", "14:00-15:00"],
        },
    },
]


def build_sample_catalog() -> Catalog:
    return Catalog(
        courses=SAMPLE_COURSES,
        faculty=SAMPLE_FACULTY,
        classrooms=SAMPLE_CLASSROOMS,
    )


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    catalog = build_sample_catalog()
    engine = SchedulingEngine(selector=build_selector("random", SAMPLE_SEED))
    print(engine.settings.project_name)
    result = engine.generate_schedule(catalog)

    for diagnostic in result.diagnostics:
        print(f"[{diagnostic.kind}] {diagnostic.message}")
    if result.blocked:
        print("Scheduling blocked; fix the errors above and run again.")
        return

    print("")
    for item in result.assignments:
        course = catalog.require_course(item.course_id)
        room = catalog.require_classroom(item.classroom_id)
        line = (
            f"{item.day:<9} {item.time_slot:<11} {course.code:<8} {course.name} | "
            f"{catalog.require_faculty(item.faculty_id).name} | {room.name} ({room.building})"
        )
        if item.conflicts:
            line += f" | {'; '.join(item.conflicts)}"
        print(line)

    stats = engine.summarize(catalog, result.assignments)
    print("")
    print(f"Scheduled: {stats.scheduled}/{stats.total_courses} ({stats.efficiency_percent}%)")
    print(f"Unscheduled: {stats.unscheduled}")
    print(f"Conflicts: {stats.conflicts} across {len(conflicted_assignments(result.assignments))} assignment(s)")
    for cohort, breakdown in stats.by_cohort.items():
        print(f"{COHORT_LABELS[cohort]} ({cohort.value}): {breakdown.scheduled}/{breakdown.total}")


if __name__ == "__main__":
    main()
