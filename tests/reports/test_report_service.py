from __future__ import annotations

import csv
import io

import pytest
from openpyxl import load_workbook

from src.attendance_tracker.attendance_tracker.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.attendance_tracker.attendance_tracker.core.enums import AttendanceStatus
from src.attendance_tracker.attendance_tracker.core.exceptions import ValidationError
from src.attendance_tracker.attendance_tracker.reports.exporter import ReportExporter
from src.attendance_tracker.attendance_tracker.reports.service import ReportService
from src.attendance_tracker.attendance_tracker.students.memory_student_repository import InMemoryStudentRepository

from tests.helpers import make_student, rec


@pytest.fixture
def report_service():
    students = InMemoryStudentRepository([make_student("1", "John Doe"), make_student("2", "Smith, Jane")])
    attendance = InMemoryAttendanceRepository(
        [
            rec("1", "2024-01-01", AttendanceStatus.PRESENT),
            rec("1", "2024-01-02", AttendanceStatus.PRESENT),
            rec("1", "2024-01-03", AttendanceStatus.ABSENT),
            rec("2", "2024-01-01", AttendanceStatus.LATE),
        ]
    )
    return ReportService(attendance, students)


def test_build_report_defaults_to_all_columns(report_service):
    data = report_service.build_report()

    assert data.labels == [
        "Student ID",
        "Full Name",
        "Email Address",
        "Grade",
        "Enrollment Date",
        "Present Days",
        "Absent Days",
        "Late Days",
        "Attendance %",
    ]
    assert data.rows[0]["Attendance %"] == "67%"
    assert data.rows[1]["Late Days"] == 1


def test_build_report_orders_selected_columns_canonically(report_service):
    data = report_service.build_report(["rate", "name"])

    assert data.labels == ["Full Name", "Attendance %"]
    assert data.rows[0] == {"Full Name": "John Doe", "Attendance %": "67%"}


@pytest.mark.parametrize("columns", [["name", "bogus"], [], ["  "]])
def test_build_report_rejects_bad_column_selection(report_service, columns):
    with pytest.raises(ValidationError):
        report_service.build_report(columns)


def test_csv_quotes_values_containing_delimiter(report_service):
    data = report_service.build_report(["id", "name"])

    payload = ReportExporter().to_csv(data.rows, data.labels)

    assert payload.startswith(b"\xef\xbb\xbf")
    text = payload.decode("utf-8-sig")
    assert text.splitlines() == ["Student ID,Full Name", "1,John Doe", '2,"Smith, Jane"']
    assert list(csv.DictReader(io.StringIO(text)))[1]["Full Name"] == "Smith, Jane"


def test_csv_for_empty_roster_is_header_only():
    data = ReportService(InMemoryAttendanceRepository(), InMemoryStudentRepository()).build_report(["name"])

    assert ReportExporter().to_csv(data.rows, data.labels).decode("utf-8-sig") == "Full Name\n"


def test_xlsx_has_named_sheet_with_header_and_rows(report_service):
    data = report_service.build_report(["name", "presentCount", "rate"])

    payload = ReportExporter().to_xlsx(data.rows, data.labels)

    wb = load_workbook(io.BytesIO(payload))
    ws = wb["Attendance Report"]
    values = list(ws.iter_rows(values_only=True))
    assert values[0] == ("Full Name", "Present Days", "Attendance %")
    assert values[1] == ("John Doe", 2, "67%")
    assert ws["A1"].font.bold


def test_filename_uses_iso_date():
    from datetime import date

    assert ReportExporter.filename("csv", today=date(2024, 5, 6)) == "attendance_summary_2024-05-06.csv"
