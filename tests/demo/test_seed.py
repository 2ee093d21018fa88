from datetime import date, timedelta

from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus
from src.attendance_tracker.attendance_tracker.demo.seed import DemoDataGenerator


def test_same_seed_same_history():
    end = date(2024, 1, 31)
    a = DemoDataGenerator(seed=42)
    b = DemoDataGenerator(seed=42)

    assert a.history(a.roster(), end=end) == b.history(b.roster(), end=end)


def test_history_covers_every_student_every_day():
    gen = DemoDataGenerator(seed=1)
    roster = gen.roster()
    end = date(2024, 1, 31)

    records = gen.history(roster, days=30, end=end)

    assert len(records) == 30 * len(roster)
    pairs = {(r.student_id, r.date) for r in records}
    assert len(pairs) == len(records)
    assert min(r.date for r in records) == end - timedelta(days=29)
    assert max(r.date for r in records) == end


def test_present_probability_extremes():
    roster = DemoDataGenerator().roster()

    always = DemoDataGenerator(seed=3, present_probability=1.0).history(roster, days=5, end=date(2024, 1, 5))
    never = DemoDataGenerator(seed=3, present_probability=0.0).history(roster, days=5, end=date(2024, 1, 5))

    assert {r.status for r in always} == {AttendanceStatus.PRESENT}
    assert AttendanceStatus.PRESENT not in {r.status for r in never}


def test_default_roster():
    names = [s.name for s in DemoDataGenerator().roster()]

    assert names == ["John Doe", "Jane Smith", "Mike Johnson", "Sarah Wilson"]
