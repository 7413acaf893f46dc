"""Unit tests for label and text helpers."""

import pytest

from agentloop.board import Priority, normalize_labels, parse_priority, trim_description


@pytest.mark.unit
class TestNormalizeLabels:
    """Tests for normalize_labels."""

    def test_appends_priority_label(self) -> None:
        assert normalize_labels(["bug"], Priority.HIGH) == ["bug", "p1"]

    def test_trims_and_drops_blanks(self) -> None:
        assert normalize_labels(["  ui ", "", "   "], Priority.LOW) == ["ui", "p3"]

    def test_existing_priority_label_not_duplicated(self) -> None:
        assert normalize_labels(["p2", "docs"], Priority.MEDIUM) == ["p2", "docs"]

    def test_dedup_is_case_sensitive(self) -> None:
        """Only exact duplicates are removed."""
        result = normalize_labels(["Feat", "feat", "Feat"], Priority.MEDIUM)

        assert result == ["Feat", "feat", "p2"]

    def test_capped_at_ten(self) -> None:
        labels = [f"label-{i}" for i in range(15)]

        result = normalize_labels(labels, Priority.HIGH)

        assert len(result) == 10
        assert "p1" not in result
        assert result[0] == "label-0"

    def test_none_labels(self) -> None:
        assert normalize_labels(None, Priority.MEDIUM) == ["p2"]


@pytest.mark.unit
class TestParsePriority:
    """Tests for parse_priority."""

    @pytest.mark.parametrize("value", ["HIGH", "MEDIUM", "LOW"])
    def test_known_values(self, value: str) -> None:
        assert parse_priority(value) == Priority(value)

    @pytest.mark.parametrize("value", [None, "", "high", "URGENT"])
    def test_unknown_values_default_to_medium(self, value: str | None) -> None:
        assert parse_priority(value) == Priority.MEDIUM


@pytest.mark.unit
class TestTrimDescription:
    """Tests for trim_description."""

    def test_first_non_blank_line(self) -> None:
        assert trim_description("\n   \n  Hello world  \nsecond") == "Hello world"

    @pytest.mark.parametrize("body", [None, "", "  \n\t\n"])
    def test_missing_body(self, body: str | None) -> None:
        assert trim_description(body) == "No description provided."

    def test_long_line_truncated(self) -> None:
        """A 150 character line becomes exactly 120 characters."""
        result = trim_description("x" * 150)

        assert len(result) == 120
        assert result.endswith("...")
        assert result[:117] == "x" * 117

    def test_line_at_limit_untouched(self) -> None:
        line = "y" * 120

        assert trim_description(line) == line
