"""Shared text formatting for CLI output."""

from typing import Optional

from parchi.domain.entities import Entry
from parchi.domain.ledger import compute_balance, total_paid


def format_amount(amount: float) -> str:
    return f"Rs. {amount:,.2f}"


def format_optional(value: Optional[object]) -> str:
    return "" if value is None else str(value)


def echo_entry_details(echo, entry: Entry) -> None:
    """Write the full field listing of an entry using echo."""
    echo(f"Entry ID: {entry.id}")
    echo(f"  Category: {entry.category.value}")
    echo(f"  Date: {entry.date}")
    if entry.transaction_date:
        echo(f"  Transaction date: {entry.transaction_date}")
    echo(f"  Party: {entry.party_name}")
    if entry.ref_no:
        echo(f"  Reference: {entry.ref_no}")
    if entry.bank_name:
        echo(f"  Bank: {entry.bank_name}")
    if entry.bank_account_num:
        echo(f"  Account number: {entry.bank_account_num}")
    if entry.desc:
        echo(f"  Description: {entry.desc}")
    echo(f"  Amount: {format_amount(entry.total_amount)}")
    echo(f"  Paid: {format_amount(total_paid(entry))}")
    echo(f"  Balance: {format_amount(compute_balance(entry))}")
    if entry.due_date:
        echo(f"  Due date: {entry.due_date}")
    echo(f"  Status: {entry.status.value}")
    if entry.confirmed_by:
        echo(f"  Confirmed by: {entry.confirmed_by}")
