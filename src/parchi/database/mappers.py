"""Mapper functions to convert between domain entities and the stored document.

The stored document is a JSON array of entry objects using camelCase field
names. Optional fields are omitted when unset. There is no version tag, so
any change here changes the on-disk format.
"""

import json
from datetime import date
from typing import Any, Iterable, Optional

from parchi.domain import entities as domain


def _parse_optional_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    return date.fromisoformat(value)


def payment_to_dict(payment: domain.Payment) -> dict[str, Any]:
    """Convert a domain Payment to its stored form."""
    return {
        "id": payment.id,
        "date": payment.date.isoformat(),
        "amount": payment.amount,
        "chaqueNo": payment.cheque_no,
        "voucherNo": payment.voucher_no,
    }


def payment_from_dict(data: dict[str, Any]) -> domain.Payment:
    """Convert a stored payment object to a domain Payment."""
    return domain.Payment(
        id=str(data["id"]),
        date=date.fromisoformat(data["date"]),
        amount=float(data["amount"]),
        cheque_no=data.get("chaqueNo", ""),
        voucher_no=data.get("voucherNo", ""),
    )


def entry_to_dict(entry: domain.Entry) -> dict[str, Any]:
    """Convert a domain Entry to its stored form."""
    data: dict[str, Any] = {
        "id": entry.id,
        "category": entry.category.value,
        "date": entry.date.isoformat(),
        "refNo": entry.ref_no,
        "partyName": entry.party_name,
        "desc": entry.desc,
        "totalAmount": entry.total_amount,
        "status": entry.status.value,
        "payments": [payment_to_dict(p) for p in entry.payments],
    }
    if entry.transaction_date is not None:
        data["transactionDate"] = entry.transaction_date.isoformat()
    if entry.bank_name is not None:
        data["bankName"] = entry.bank_name
    if entry.bank_account_num is not None:
        data["bankAccountNum"] = entry.bank_account_num
    if entry.due_date is not None:
        data["dueDate"] = entry.due_date.isoformat()
    if entry.confirmed_by is not None:
        data["confirmedBy"] = entry.confirmed_by
    return data


def entry_from_dict(data: dict[str, Any]) -> domain.Entry:
    """Convert a stored entry object to a domain Entry.

    Raises:
        KeyError: If a required field is missing
        ValueError: If a date, amount, category or status is malformed
    """
    return domain.Entry(
        id=str(data["id"]),
        category=domain.EntryCategory(data["category"]),
        date=date.fromisoformat(data["date"]),
        party_name=data.get("partyName", ""),
        total_amount=float(data["totalAmount"]),
        ref_no=data.get("refNo", ""),
        desc=data.get("desc", ""),
        transaction_date=_parse_optional_date(data.get("transactionDate")),
        bank_name=data.get("bankName"),
        bank_account_num=data.get("bankAccountNum"),
        due_date=_parse_optional_date(data.get("dueDate")),
        status=domain.EntryStatus(data.get("status", domain.EntryStatus.PENDING.value)),
        payments=tuple(payment_from_dict(p) for p in data.get("payments", [])),
        confirmed_by=data.get("confirmedBy"),
    )


def entries_to_json(entries: Iterable[domain.Entry]) -> str:
    """Serialize the whole collection."""
    return json.dumps([entry_to_dict(e) for e in entries])


def entries_from_json(document: str) -> tuple[domain.Entry, ...]:
    """Deserialize the whole collection.

    Raises:
        json.JSONDecodeError: If the document is not valid JSON
    """
    return tuple(entry_from_dict(item) for item in json.loads(document))
