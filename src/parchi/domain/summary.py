"""Dashboard summary domain service."""

from typing import Iterable

from parchi.domain.entities import CATEGORIES, Entry, EntryCategory, StatFilter, StatSummary
from parchi.domain.ledger import compute_balance, matches_stat_filter, total_paid


class SummaryService:
    """Service for building dashboard aggregates.

    Aggregates always consume the collection they are given unchanged; the
    view pipeline is not applied here.
    """

    def summarize(self, entries: Iterable[Entry]) -> StatSummary:
        """Aggregate totals for a group of entries.

        ``pending`` and ``overdue`` sum the outstanding balances of entries
        matching the corresponding stat filter, so an Active entry with a
        positive balance counts towards both.

        Args:
            entries: Entries to aggregate

        Returns:
            StatSummary for the group
        """
        total = paid = pending = overdue = 0.0
        count = 0
        for entry in entries:
            count += 1
            total += entry.total_amount
            paid += total_paid(entry)
            balance = compute_balance(entry)
            if matches_stat_filter(entry, StatFilter.PENDING):
                pending += balance
            if matches_stat_filter(entry, StatFilter.OVERDUE):
                overdue += balance
        return StatSummary(total=total, paid=paid, pending=pending, overdue=overdue, count=count)

    def by_category(self, entries: Iterable[Entry]) -> dict[EntryCategory, StatSummary]:
        """Aggregate per category.

        Every category is present, in declaration order, even without entries.
        """
        grouped: dict[EntryCategory, list[Entry]] = {c: [] for c in CATEGORIES}
        for entry in entries:
            grouped[entry.category].append(entry)
        return {category: self.summarize(items) for category, items in grouped.items()}
