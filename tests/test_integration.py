"""
End-to-end tests over the sample CSV exports in data/.
"""
from datetime import date
from pathlib import Path

import pytest
from ask_charlie.app import AskCharlieApp
from ask_charlie.config import AskCharlieConfig

DATA_DIR = Path(__file__).parent.parent / "data"
TODAY = date(2026, 10, 19)


@pytest.fixture(scope="module")
def charlie():
    app = AskCharlieApp(AskCharlieConfig(
        qna_csv_path=str(DATA_DIR / "qna.csv"),
        holidays_csv_path=str(DATA_DIR / "holidays.csv"),
        leave_csv_path=str(DATA_DIR / "leave.csv"),
    ))
    app.initialize()
    return app


class TestSampleData:
    """Tests against the bundled sample sheets."""

    def test_next_holiday(self, charlie):
        """Test the next holiday after a fixed date."""
        assert charlie.chat("when is the next holiday", today=TODAY).answer == "Next holiday: Diwali on 2026-11-08"

    def test_leave_balance(self, charlie):
        """Test a leave lookup from the leave sheet."""
        answer = charlie.chat("leave balance for Vinod Sai", today=TODAY).answer

        assert answer.startswith("Leave details for Vinod Sai:")
        assert "Leave Balance: 15" in answer

    def test_exact_question(self, charlie):
        """Test a question typed exactly as stored."""
        response = charlie.chat("How do I apply for leave", today=TODAY)

        assert response.answer.startswith("Submit a leave request")
        assert response.score == 100

    def test_synonym(self, charlie):
        """Test a question answered through a synonym key."""
        response = charlie.chat("forgot password", today=TODAY)

        assert response.matched_question == "forgot password"
        assert "password reset" in response.answer

    def test_unknown(self, charlie):
        """Test an unrelated question."""
        assert charlie.chat("xyzzy qwfp jkjk", today=TODAY).answer == "Sorry, I don't know the answer to that."
