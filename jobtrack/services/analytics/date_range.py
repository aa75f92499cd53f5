"""Analysis window derivation."""

from collections.abc import Sequence
from datetime import date

from jobtrack.core.exceptions import EmptyInputError
from jobtrack.schemas.analytics import DateRange
from jobtrack.schemas.application import JobApplication


def resolve_date_range(
    records: Sequence[JobApplication], reference_date: date
) -> DateRange:
    """Span the whole application history up to ``reference_date``.

    The window starts at the earliest application date and ends at the later
    of ``reference_date`` and the latest application date, so in-progress
    applications show up as trailing zero-filled days.

    Raises:
        EmptyInputError: if ``records`` is empty.
    """
    if not records:
        raise EmptyInputError()

    dates = [record.application_date for record in records]
    return DateRange(start=min(dates), end=max(max(dates), reference_date))
