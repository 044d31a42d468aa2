"""
Tests for the leave registry.
"""
import pytest
from ask_charlie.data_loader import DEFAULT_LEAVE_RECORDS
from ask_charlie.knowledge import LeaveRegistry
from ask_charlie.models import LeaveRecord


@pytest.fixture
def registry():
    return LeaveRegistry.build(DEFAULT_LEAVE_RECORDS)


class TestLeaveRegistryLookup:
    """Tests for LeaveRegistry.lookup()."""

    def test_lookup_is_case_insensitive(self, registry):
        """Test that names match regardless of case."""
        assert registry.lookup("vinod sai").leave_type == "Vacation Leave"
        assert registry.lookup("AKHIL").leave_type == "Sick Leave"

    def test_lookup_ignores_surrounding_whitespace(self, registry):
        """Test that the name is normalized before comparison."""
        assert registry.lookup("  Yogesh ").employee_name == "Yogesh"

    def test_lookup_is_exact_not_partial(self, registry):
        """Test that partial or fuzzy names do not match."""
        assert registry.lookup("akh") is None
        assert registry.lookup("vinod") is None
        assert registry.lookup("akhill") is None

    def test_first_record_wins_on_duplicates(self):
        """Test that duplicate names resolve to the first loaded record."""
        registry = LeaveRegistry.build([
            LeaveRecord("Akhil", "Sick Leave", 10, 2, 1, 0),
            LeaveRecord("akhil", "Vacation Leave", 5, 0, 0, 0),
        ])

        assert registry.lookup("Akhil").leave_type == "Sick Leave"

    def test_non_text_name_is_skipped(self):
        """Test that a numeric employee name is dropped instead of failing the build."""
        registry = LeaveRegistry.build([
            LeaveRecord(42, "Sick Leave", 1, 1, 1, 1),
            LeaveRecord("Akhil", "Sick Leave", 10, 2, 1, 0),
        ])

        assert len(registry) == 1
        assert registry.lookup("akhil").balance == 10

    def test_records_without_name_are_skipped(self):
        """Test that nameless records are dropped at build time."""
        registry = LeaveRegistry.build([LeaveRecord("  ", "Sick Leave", 1, 1, 1, 1)])

        assert len(registry) == 0


class TestLeaveRegistryFormat:
    """Tests for LeaveRegistry.format()."""

    def test_format_layout(self, registry):
        """Test the fixed multi-line layout."""
        text = LeaveRegistry.format(registry.lookup("akhil"))

        assert text == (
            "Leave details for Akhil:\n\n"
            "Leave Type: Sick Leave\n"
            "Leave Balance: 10\n"
            "Leave Taken: 2\n"
            "Leave Accruals: 1\n"
            "Adjustments: 0"
        )

    def test_format_does_not_assume_non_negative_counts(self):
        """Test that counts are rendered as given."""
        record = LeaveRecord("Priya", "Comp Off", balance=-2, taken=4, accrued=0, adjustments=-1)

        text = LeaveRegistry.format(record)

        assert "Leave Balance: -2" in text
        assert "Adjustments: -1" in text
