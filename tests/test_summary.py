"""Tests for the dashboard summary service."""

import pytest

from parchi.domain.entities import CATEGORIES, EntryCategory, EntryStatus, StatSummary
from parchi.domain.summary import SummaryService


@pytest.fixture
def service():
    return SummaryService()


def test_summarize_empty(service):
    assert service.summarize([]) == StatSummary()


def test_summarize_amounts(service, make_entry, make_payment):
    entries = [
        make_entry(total_amount=1000.0, payments=[make_payment(400.0)]),
        make_entry(total_amount=500.0, status=EntryStatus.OVERDUE),
        make_entry(total_amount=200.0, payments=[make_payment(200.0)], status=EntryStatus.PAID),
    ]
    summary = service.summarize(entries)

    assert summary.count == 3
    assert summary.total == 1700.0
    assert summary.paid == 600.0
    assert summary.pending == 600.0
    assert summary.overdue == 500.0


def test_active_balance_counts_in_pending_and_overdue(service, make_entry):
    summary = service.summarize([make_entry(total_amount=300.0, status=EntryStatus.ACTIVE)])
    assert summary.pending == 300.0
    assert summary.overdue == 300.0


def test_by_category_zero_fills_in_order(service, make_entry):
    entries = [
        make_entry(category=EntryCategory.LONG_TERM_PAYABLES, total_amount=90.0),
        make_entry(category=EntryCategory.LONG_TERM_PAYABLES, total_amount=10.0),
    ]
    result = service.by_category(entries)

    assert list(result) == list(CATEGORIES)
    assert result[EntryCategory.LONG_TERM_PAYABLES].total == 100.0
    assert result[EntryCategory.LONG_TERM_PAYABLES].count == 2
    assert result[EntryCategory.CHAQUE_RECEIVABLES] == StatSummary()


def test_by_category_uses_store_collection(service, store, sample_entries):
    result = service.by_category(store.entries)
    assert sum(s.count for s in result.values()) == len(sample_entries)
    assert result[EntryCategory.CHAQUE_PAYABLES].overdue == 500.0
