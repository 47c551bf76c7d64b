from __future__ import annotations

from collections import defaultdict
from typing import Literal, Protocol, Sequence

from scheduling.schemas.course import Cohort
from scheduling.schemas.timetable import (
    CLASSROOM_DOUBLE_BOOKED,
    FACULTY_DOUBLE_BOOKED,
    ScheduleAssignment,
    cohort_conflict_label,
)

ConflictMode = Literal["symmetric", "sequential"]


class Booking(Protocol):
    faculty_id: str
    classroom_id: str
    cohort: Cohort
    day: str
    time_slot: str


def conflict_labels(candidate: Booking, others: Sequence[Booking]) -> tuple[str, ...]:
    """Labels for every kind of collision between `candidate` and `others`.

    Only bookings in the same (day, slot) count. Each collision kind is
    reported once no matter how many bookings trigger it.
    """
    faculty_clash = classroom_clash = cohort_clash = False
    for other in others:
        if other.day != candidate.day or other.time_slot != candidate.time_slot:
            continue
        faculty_clash = faculty_clash or other.faculty_id == candidate.faculty_id
        classroom_clash = classroom_clash or other.classroom_id == candidate.classroom_id
        cohort_clash = cohort_clash or other.cohort == candidate.cohort

    labels: list[str] = []
    if faculty_clash:
        labels.append(FACULTY_DOUBLE_BOOKED)
    if classroom_clash:
        labels.append(CLASSROOM_DOUBLE_BOOKED)
    if cohort_clash:
        labels.append(cohort_conflict_label(candidate.cohort))
    return tuple(labels)


def detect_conflicts(bookings: Sequence[Booking], mode: ConflictMode = "symmetric") -> list[tuple[str, ...]]:
    """Conflict labels for each booking, index-aligned with `bookings`.

    `symmetric` compares each booking with every other one in its slot.
    `sequential` compares only with bookings that come earlier in the
    sequence, which is what a commit-time check during placement sees.
    """
    by_slot: dict[tuple[str, str], list[int]] = defaultdict(list)
    for index, booking in enumerate(bookings):
        by_slot[(booking.day, booking.time_slot)].append(index)

    labels: list[tuple[str, ...]] = [() for _ in bookings]
    for indices in by_slot.values():
        if len(indices) < 2:
            continue
        for position, index in enumerate(indices):
            if mode == "sequential":
                others = [bookings[i] for i in indices[:position]]
            else:
                others = [bookings[i] for i in indices if i != index]
            labels[index] = conflict_labels(bookings[index], others)
    return labels


def relabel_conflicts(
    assignments: Sequence[ScheduleAssignment],
    mode: ConflictMode = "symmetric",
) -> list[ScheduleAssignment]:
    """Fresh copies of `assignments` with conflict labels recomputed.

    Used to re-check a schedule after the caller has moved or dropped
    entries. The input assignments are left untouched.
    """
    labels = detect_conflicts(assignments, mode)
    return [
        item.model_copy(update={"conflicts": item_labels})
        for item, item_labels in zip(assignments, labels)
    ]
