"""Balance computation and the entry view pipeline.

All functions here are pure: they never mutate entries and never read the
clock. Callers pass ``now`` explicitly so month boundaries are deterministic.
"""

from datetime import date
from typing import Iterable

from parchi.domain.entities import (
    AggregateView,
    Entry,
    EntryStatus,
    MonthFilter,
    SearchType,
    StatFilter,
    View,
)


def total_paid(entry: Entry) -> float:
    """Sum of all recorded payment amounts."""
    return sum(p.amount for p in entry.payments)


def compute_balance(entry: Entry) -> float:
    """Outstanding balance: total amount minus payments. May be negative."""
    return entry.total_amount - total_paid(entry)


def previous_month(now: date) -> tuple[int, int]:
    """Return (year, month) of the calendar month before ``now``."""
    if now.month == 1:
        return now.year - 1, 12
    return now.year, now.month - 1


def in_month(entry: Entry, month_filter: MonthFilter, now: date) -> bool:
    """Check whether the entry date falls in the selected month."""
    if month_filter == MonthFilter.ALL:
        return True
    if month_filter == MonthFilter.CURRENT:
        return (entry.date.year, entry.date.month) == (now.year, now.month)
    return (entry.date.year, entry.date.month) == previous_month(now)


def matches_search(entry: Entry, query: str, search_type: SearchType) -> bool:
    """Case-insensitive substring match on one searchable field."""
    if not query:
        return True
    q = query.lower()
    if search_type == SearchType.PARTY:
        return q in entry.party_name.lower()
    if search_type == SearchType.DATE:
        return q in entry.date.isoformat()
    if search_type == SearchType.BANK:
        return entry.bank_name is not None and q in entry.bank_name.lower()
    return False


def matches_stat_filter(entry: Entry, stat_filter: StatFilter) -> bool:
    """Partition by computed balance and status flag.

    ``pending`` and ``overdue`` overlap for Active entries with a positive
    balance; each mode is evaluated on its own.
    """
    if stat_filter == StatFilter.ALL:
        return True
    balance = compute_balance(entry)
    if stat_filter == StatFilter.PAID:
        return balance <= 0
    if stat_filter == StatFilter.PENDING:
        return balance > 0 and entry.status != EntryStatus.OVERDUE
    if stat_filter == StatFilter.OVERDUE:
        return balance > 0 and entry.status in (EntryStatus.OVERDUE, EntryStatus.ACTIVE)
    return True


def filter_view(
    entries: Iterable[Entry],
    active_view: View,
    month_filter: MonthFilter,
    search: str,
    stat_filter: StatFilter,
    *,
    now: date,
    search_type: SearchType = SearchType.PARTY,
) -> list[Entry]:
    """Narrow entries by category, month, search and status, in that order.

    Args:
        entries: Entries in display order
        active_view: Category to keep, or an aggregate view to skip the category stage
        month_filter: all, current or last calendar month relative to ``now``
        search: Search text; empty matches everything
        stat_filter: all, paid, pending or overdue
        now: Reference date for the month filter
        search_type: Field the search text is matched against

    Returns:
        Matching entries in their original order
    """
    result = list(entries)

    if not isinstance(active_view, AggregateView):
        result = [e for e in result if e.category == active_view]

    if month_filter != MonthFilter.ALL:
        result = [e for e in result if in_month(e, month_filter, now)]

    if search:
        result = [e for e in result if matches_search(e, search, search_type)]

    if stat_filter != StatFilter.ALL:
        result = [e for e in result if matches_stat_filter(e, stat_filter)]

    return result
