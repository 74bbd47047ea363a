"""Tests for balance computation and the view pipeline."""

import pytest
from datetime import date

from parchi.domain.entities import (
    AggregateView,
    EntryCategory,
    EntryStatus,
    MonthFilter,
    SearchType,
    StatFilter,
)
from parchi.domain.ledger import (
    compute_balance,
    filter_view,
    in_month,
    matches_search,
    matches_stat_filter,
    previous_month,
    total_paid,
)

NOW = date(2024, 3, 18)


def run(entries, view=EntryCategory.CHAQUE_RECEIVABLES, month=MonthFilter.ALL, search="",
        stat=StatFilter.ALL, search_type=SearchType.PARTY, now=NOW):
    return filter_view(entries, view, month, search, stat, now=now, search_type=search_type)


class TestBalance:
    """Tests for compute_balance and total_paid."""

    def test_no_payments(self, make_entry):
        entry = make_entry(total_amount=1000.0)
        assert compute_balance(entry) == 1000.0
        assert total_paid(entry) == 0

    def test_partial_payments(self, make_entry, make_payment):
        entry = make_entry(total_amount=1000.0, payments=[make_payment(250.0), make_payment(100.0)])
        assert total_paid(entry) == 350.0
        assert compute_balance(entry) == 650.0

    def test_overpayment_goes_negative(self, make_entry, make_payment):
        entry = make_entry(total_amount=100.0, payments=[make_payment(150.0)])
        assert compute_balance(entry) == -50.0

    def test_idempotent(self, make_entry, make_payment):
        entry = make_entry(total_amount=1000.0, payments=[make_payment(0.1), make_payment(0.2)])
        assert compute_balance(entry) == compute_balance(entry)
        assert compute_balance(entry) == pytest.approx(999.7)


class TestCategoryStage:
    """Tests for the category stage."""

    def test_keeps_only_active_category(self, make_entry):
        entries = [
            make_entry(category=EntryCategory.CHAQUE_RECEIVABLES),
            make_entry(category=EntryCategory.CHAQUE_PAYABLES),
            make_entry(category=EntryCategory.CHAQUE_RECEIVABLES),
        ]
        result = run(entries, view=EntryCategory.CHAQUE_PAYABLES)
        assert [e.id for e in result] == [entries[1].id]
        assert all(e.category == EntryCategory.CHAQUE_PAYABLES for e in result)

    @pytest.mark.parametrize("view", list(AggregateView))
    def test_aggregate_views_skip_category_stage(self, make_entry, view):
        entries = [make_entry(category=c) for c in EntryCategory]
        assert run(entries, view=view) == entries


class TestAllFiltersOff:
    def test_returns_full_collection_in_order(self, make_entry):
        entries = [make_entry(party_name=name) for name in ("C", "A", "B")]
        result = run(entries)
        assert result == entries


class TestMonthStage:
    """Tests for the month stage with an explicit reference date."""

    def test_current_month(self, make_entry):
        entries = [
            make_entry(date=date(2024, 3, 1)),
            make_entry(date=date(2024, 2, 29)),
            make_entry(date=date(2023, 3, 18)),
        ]
        result = run(entries, month=MonthFilter.CURRENT)
        assert [e.date for e in result] == [date(2024, 3, 1)]

    def test_last_month(self, make_entry):
        entries = [
            make_entry(date=date(2024, 3, 1)),
            make_entry(date=date(2024, 2, 29)),
            make_entry(date=date(2023, 2, 10)),
        ]
        result = run(entries, month=MonthFilter.LAST)
        assert [e.date for e in result] == [date(2024, 2, 29)]

    def test_last_month_rolls_over_to_december(self, make_entry):
        entries = [
            make_entry(date=date(2023, 12, 31)),
            make_entry(date=date(2024, 12, 5)),
            make_entry(date=date(2025, 1, 2)),
        ]
        now = date(2025, 1, 10)
        assert [e.date for e in run(entries, month=MonthFilter.LAST, now=now)] == [date(2024, 12, 5)]
        assert [e.date for e in run(entries, month=MonthFilter.CURRENT, now=now)] == [date(2025, 1, 2)]

    def test_previous_month(self):
        assert previous_month(date(2025, 1, 31)) == (2024, 12)
        assert previous_month(date(2024, 7, 1)) == (2024, 6)

    def test_all_passes_everything(self, make_entry):
        entry = make_entry(date=date(1999, 1, 1))
        assert in_month(entry, MonthFilter.ALL, NOW)


class TestSearchStage:
    """Tests for the search stage."""

    def test_party_search_is_case_insensitive_substring(self, make_entry):
        entries = [
            make_entry(party_name="ACME Traders"),
            make_entry(party_name="The Acme Group"),
            make_entry(party_name="Beta Corp"),
            make_entry(party_name="Acm"),
        ]
        result = run(entries, search="acme")
        assert [e.party_name for e in result] == ["ACME Traders", "The Acme Group"]

    def test_date_search_matches_iso_string(self, make_entry):
        entries = [make_entry(date=date(2024, 3, 5)), make_entry(date=date(2024, 4, 5))]
        result = run(entries, search="2024-03", search_type=SearchType.DATE)
        assert [e.date for e in result] == [date(2024, 3, 5)]

    def test_bank_search(self, make_entry):
        entries = [
            make_entry(bank_name="Meezan Bank"),
            make_entry(bank_name="HBL"),
            make_entry(bank_name=None),
        ]
        result = run(entries, search="meezan", search_type=SearchType.BANK)
        assert [e.bank_name for e in result] == ["Meezan Bank"]

    def test_missing_bank_never_matches(self, make_entry):
        entry = make_entry(bank_name=None, party_name="bank")
        assert not matches_search(entry, "b", SearchType.BANK)

    def test_search_uses_only_selected_field(self, make_entry):
        entry = make_entry(party_name="HBL Customer", bank_name="Meezan Bank")
        assert matches_search(entry, "hbl", SearchType.PARTY)
        assert not matches_search(entry, "hbl", SearchType.BANK)

    def test_empty_query_matches(self, make_entry):
        assert matches_search(make_entry(), "", SearchType.BANK)


class TestStatStage:
    """Tests for the paid/pending/overdue partition."""

    def test_unpaid_pending_entry(self, make_entry):
        entry = make_entry(total_amount=1000.0)
        assert compute_balance(entry) == 1000.0
        assert matches_stat_filter(entry, StatFilter.PENDING)
        assert not matches_stat_filter(entry, StatFilter.PAID)
        assert not matches_stat_filter(entry, StatFilter.OVERDUE)

    def test_fully_paid_entry(self, make_entry, make_payment):
        entry = make_entry(total_amount=1000.0, payments=[make_payment(1000.0)], status=EntryStatus.PAID)
        assert matches_stat_filter(entry, StatFilter.PAID)
        assert not matches_stat_filter(entry, StatFilter.PENDING)
        assert not matches_stat_filter(entry, StatFilter.OVERDUE)

    def test_paid_uses_balance_not_status(self, make_entry, make_payment):
        entry = make_entry(total_amount=100.0, payments=[make_payment(120.0)], status=EntryStatus.PENDING)
        assert matches_stat_filter(entry, StatFilter.PAID)

    def test_overdue_entry(self, make_entry):
        entry = make_entry(status=EntryStatus.OVERDUE)
        assert matches_stat_filter(entry, StatFilter.OVERDUE)
        assert not matches_stat_filter(entry, StatFilter.PENDING)

    def test_active_entry_is_both_pending_and_overdue(self, make_entry):
        entry = make_entry(status=EntryStatus.ACTIVE, total_amount=500.0)
        assert matches_stat_filter(entry, StatFilter.PENDING)
        assert matches_stat_filter(entry, StatFilter.OVERDUE)

    def test_overdue_flag_with_zero_balance_is_paid(self, make_entry, make_payment):
        entry = make_entry(status=EntryStatus.OVERDUE, total_amount=10.0, payments=[make_payment(10.0)])
        assert matches_stat_filter(entry, StatFilter.PAID)
        assert not matches_stat_filter(entry, StatFilter.OVERDUE)


class TestComposition:
    def test_stages_narrow_sequentially(self, make_entry, make_payment):
        entries = [
            make_entry(party_name="Acme A", date=date(2024, 3, 2)),
            make_entry(party_name="Acme B", date=date(2024, 3, 3), payments=[make_payment(1000.0)]),
            make_entry(party_name="Acme C", date=date(2024, 2, 3)),
            make_entry(party_name="Beta", date=date(2024, 3, 4)),
            make_entry(party_name="Acme D", date=date(2024, 3, 5), category=EntryCategory.CHAQUE_PAYABLES),
        ]
        result = run(entries, month=MonthFilter.CURRENT, search="acme", stat=StatFilter.PENDING)
        assert [e.party_name for e in result] == ["Acme A"]

    def test_does_not_mutate_input(self, make_entry):
        entries = [make_entry(), make_entry(category=EntryCategory.CHAQUE_PAYABLES)]
        snapshot = list(entries)
        run(entries, view=EntryCategory.CHAQUE_PAYABLES)
        assert entries == snapshot
