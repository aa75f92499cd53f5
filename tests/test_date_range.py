"""Tests for analysis window derivation."""

from datetime import date

import pytest

from jobtrack.core.exceptions import EmptyInputError
from jobtrack.services.analytics import resolve_date_range


class TestResolveDateRange:
    """Tests for resolve_date_range."""

    def test_range_spans_history_to_reference_date(self, scenario_records):
        """Test window runs from the earliest application to today."""
        window = resolve_date_range(scenario_records, date(2024, 2, 1))
        assert window.start == date(2024, 1, 1)
        assert window.end == date(2024, 2, 1)

    def test_range_contains_every_application(self, application_factory):
        """Test start <= every application date <= end."""
        records = [
            application_factory(application_date=date(2023, 11, 20)),
            application_factory(application_date=date(2024, 3, 2)),
            application_factory(application_date=date(2024, 1, 15)),
        ]
        window = resolve_date_range(records, date(2024, 2, 1))
        for record in records:
            assert window.start <= record.application_date <= window.end

    def test_future_application_extends_end(self, application_factory):
        """Test an application dated after today moves the end forward."""
        records = [application_factory(application_date=date(2024, 6, 1))]
        window = resolve_date_range(records, date(2024, 5, 1))
        assert window.start == date(2024, 6, 1)
        assert window.end == date(2024, 6, 1)

    def test_end_never_before_reference_date(self, application_factory):
        """Test end >= reference date."""
        records = [application_factory(application_date=date(2020, 1, 1))]
        window = resolve_date_range(records, date(2024, 5, 1))
        assert window.end >= date(2024, 5, 1)

    def test_empty_input_raises(self):
        """Test that zero records signal EmptyInputError."""
        with pytest.raises(EmptyInputError):
            resolve_date_range([], date(2024, 1, 1))
