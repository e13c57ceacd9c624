"""Tests for domain entities."""

import pytest
from datetime import datetime

from ledgerview.domain.entities import ALL, DerivedView, FacetSelection, Record, RecordType


class TestRecord:
    """Tests for Record entity."""

    def test_record_immutability(self):
        """Test that Record entities are immutable."""
        record = Record(
            id=1,
            account_id=1,
            record_type=RecordType.PRIMARY,
            timestamp=datetime(2024, 3, 9),
            category_name="Mail",
            amount=60,
        )
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            record.amount = 0

    def test_record_year_and_month(self):
        record = Record(
            id=1,
            account_id=1,
            record_type=RecordType.PRIMARY,
            timestamp=datetime(2024, 3, 9),
            category_name="",
            amount=1,
        )
        assert record.year == "2024"
        assert record.month == "03"


class TestRecordType:
    """Tests for RecordType parsing."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (RecordType.PASS, RecordType.PASS),
            (1, RecordType.PRIMARY),
            ("2", RecordType.PASS),
            ("primary", RecordType.PRIMARY),
            (" Pass ", RecordType.PASS),
        ],
    )
    def test_parse(self, value, expected):
        assert RecordType.parse(value) is expected

    @pytest.mark.parametrize("value", ["gold", 0, 3, None, False, 1.0])
    def test_parse_rejects(self, value):
        with pytest.raises(ValueError):
            RecordType.parse(value)

    def test_label(self):
        assert RecordType.PASS.label == "pass"


class TestFacetSelection:
    """Tests for FacetSelection state."""

    def test_defaults(self):
        selection = FacetSelection()
        assert selection.selected_type == RecordType.PRIMARY
        assert selection.selected_year == ALL
        assert selection.selected_month == ALL
        assert selection.selected_category == ALL

    def test_copy_is_independent(self):
        selection = FacetSelection(selected_year="2024")
        clone = selection.copy()
        clone.selected_year = None

        assert selection.selected_year == "2024"


class TestDerivedView:
    """Tests for DerivedView."""

    def test_equality_is_structural(self):
        first = DerivedView(RecordType.PRIMARY, ALL, ALL, ALL)
        second = DerivedView(RecordType.PRIMARY, ALL, ALL, ALL)
        assert first == second
        assert first.is_empty
