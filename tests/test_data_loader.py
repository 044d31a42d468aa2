from datetime import date

import pytest
from ask_charlie.data_loader import (
    CsvRecordSupplier,
    DEFAULT_LEAVE_RECORDS,
    InMemoryRecordSupplier,
)
from ask_charlie.models import HolidayRecord, LeaveRecord, QnARecord


def write_csv(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


@pytest.fixture
def qna_csv(tmp_path):
    return write_csv(
        tmp_path / "qna.csv",
        "Question,Response,Synonyms\n"
        "What is the leave policy,See HR portal.,\"leave rules,vacation policy\"\n"
        ",Orphan response,\n"
        "How do I reset my password,Use the reset page.,\n",
    )


@pytest.fixture
def holidays_csv(tmp_path):
    return write_csv(
        tmp_path / "holidays.csv",
        "date,NAME\n"
        "2025-12-25,Christmas\n"
        "01/26/2025,Republic Day\n"
        "not a date,Broken\n"
        "2025-08-15,\n",
    )


@pytest.fixture
def leave_csv(tmp_path):
    return write_csv(
        tmp_path / "leave.csv",
        "Employee Name,Leave Type,Leave Balance,Leave Taken,Leave Accruals,Adjustments\n"
        "Priya,Vacation Leave,12 days,3,1,0\n"
        "Ravi,Sick Leave,n/a,0,0,0\n",
    )


def test_qna_rows_parsed(qna_csv):
    records = CsvRecordSupplier(qna_path=qna_csv).qna_records()

    assert records == [
        QnARecord("What is the leave policy", "See HR portal.", "leave rules,vacation policy"),
        QnARecord("How do I reset my password", "Use the reset page.", None),
    ]


def test_holiday_rows_parsed_with_flexible_dates(holidays_csv):
    records = CsvRecordSupplier(holidays_path=holidays_csv).holiday_records()

    assert records == [
        HolidayRecord(date(2025, 12, 25), "Christmas"),
        HolidayRecord(date(2025, 1, 26), "Republic Day"),
    ]


def test_leave_rows_parsed(leave_csv):
    records = CsvRecordSupplier(leave_path=leave_csv).leave_records()

    assert records == [LeaveRecord("Priya", "Vacation Leave", 12, 3, 1, 0)]


def test_byte_order_mark_is_ignored(tmp_path):
    path = tmp_path / "bom.csv"
    path.write_text("Date,Name\n2025-12-25,Christmas\n", encoding="utf-8-sig")

    records = CsvRecordSupplier(holidays_path=str(path)).holiday_records()

    assert records == [HolidayRecord(date(2025, 12, 25), "Christmas")]


def test_unset_paths():
    supplier = CsvRecordSupplier()

    assert supplier.qna_records() == []
    assert supplier.holiday_records() == []
    assert supplier.leave_records() == list(DEFAULT_LEAVE_RECORDS)


def test_missing_file_raises(tmp_path):
    supplier = CsvRecordSupplier(qna_path=str(tmp_path / "missing.csv"))

    with pytest.raises(FileNotFoundError):
        supplier.qna_records()


def test_in_memory_supplier():
    qna = [QnARecord("q", "r")]
    supplier = InMemoryRecordSupplier(qna=qna)

    assert supplier.qna_records() == qna
    assert supplier.holiday_records() == []
    assert supplier.leave_records() == []
