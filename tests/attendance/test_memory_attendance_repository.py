from src.attendance_tracker.attendance_tracker.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus

from tests.helpers import rec


def test_replace_all_bumps_version_and_keeps_old_snapshot_intact():
    repo = InMemoryAttendanceRepository()
    before = repo.list_all()

    version = repo.replace_all([rec("1", "2024-01-01", AttendanceStatus.PRESENT)])

    assert version == 1
    assert before == ()
    assert isinstance(repo.list_all(), tuple)


def test_undo_depth_is_bounded():
    repo = InMemoryAttendanceRepository(undo_depth=2)
    for i in range(1, 5):
        repo.replace_all([rec("1", f"2024-01-0{i}", AttendanceStatus.PRESENT)])

    assert repo.revert()
    assert repo.revert()
    assert not repo.revert()
    assert repo.list_all()[0].date.day == 2
