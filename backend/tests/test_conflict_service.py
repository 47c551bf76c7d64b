import pytest

from scheduling.schemas.timetable import ScheduleAssignment
from scheduling.services.conflict_service import conflict_labels, detect_conflicts, relabel_conflicts


def booking(item_id, *, faculty="f1", room="r1", cohort="FY", day="Monday", slot="9:00-10:00"):
    return ScheduleAssignment(
        id=item_id,
        course_id=f"c-{item_id}",
        faculty_id=faculty,
        classroom_id=room,
        day=day,
        time_slot=slot,
        cohort=cohort,
    )


@pytest.fixture
def faculty_clash():
    return [
        booking("a1", faculty="f1", room="r1", cohort="FY"),
        booking("a2", faculty="f1", room="r2", cohort="SY"),
    ]


def test_faculty_double_booking_is_mutual(faculty_clash):
    labels = detect_conflicts(faculty_clash)

    assert labels == [("Faculty double-booked",), ("Faculty double-booked",)]


def test_sequential_mode_only_flags_the_later_booking(faculty_clash):
    labels = detect_conflicts(faculty_clash, "sequential")

    assert labels == [(), ("Faculty double-booked",)]


def test_all_collision_kinds_are_reported_in_order():
    first = booking("a1", faculty="f1", room="r1", cohort="TY")
    second = booking("a2", faculty="f1", room="r1", cohort="TY")

    assert conflict_labels(second, [first]) == (
        "Faculty double-booked",
        "Classroom double-booked",
        "TY students have another class",
    )


def test_each_collision_kind_is_reported_once():
    bookings = [
        booking("a1", faculty="f1", room="r1", cohort="FY"),
        booking("a2", faculty="f2", room="r1", cohort="SY"),
        booking("a3", faculty="f3", room="r1", cohort="TY"),
    ]

    labels = detect_conflicts(bookings)

    assert labels == [("Classroom double-booked",)] * 3


def test_labels_combine_across_different_bookings():
    bookings = [
        booking("a1", faculty="f1", room="r1", cohort="FY"),
        booking("a2", faculty="f1", room="r2", cohort="SY"),
        booking("a3", faculty="f2", room="r3", cohort="FY"),
    ]

    labels = detect_conflicts(bookings)

    assert labels[0] == ("Faculty double-booked", "FY students have another class")
    assert labels[1] == ("Faculty double-booked",)
    assert labels[2] == ("FY students have another class",)


def test_different_slots_never_conflict():
    bookings = [
        booking("a1", day="Monday", slot="9:00-10:00"),
        booking("a2", day="Monday", slot="10:00-11:00"),
        booking("a3", day="Tuesday", slot="9:00-10:00"),
    ]

    assert detect_conflicts(bookings) == [(), (), ()]


def test_relabel_returns_new_assignments(faculty_clash):
    relabelled = relabel_conflicts(faculty_clash)

    assert [item.conflicts for item in relabelled] == [("Faculty double-booked",)] * 2
    assert [item.conflicts for item in faculty_clash] == [(), ()]
    assert [item.id for item in relabelled] == ["a1", "a2"]


def test_relabel_clears_stale_labels():
    stale = booking("a1").model_copy(update={"conflicts": ("Faculty double-booked",)})

    assert relabel_conflicts([stale])[0].conflicts == ()
