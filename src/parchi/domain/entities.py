"""Domain model entities for parchi.

These are pure data classes representing ledger concepts, independent of the
storage format. Mapping to and from the persisted JSON document lives in
``parchi.database.mappers``.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Union


class EntryCategory(str, Enum):
    """Fixed classification of an entry. Values are the persisted strings."""

    CHAQUE_RECEIVABLES = "Chaque Receivables"
    CHAQUE_PAYABLES = "Chaque Payables"
    LONG_TERM_PAYABLES = "Long Term Payables"
    LONG_TERM_RECEIVABLES = "Long Term Receivables"
    UNKNOWN_ONLINE = "Unknown Online"


class EntryStatus(str, Enum):
    """Explicitly set status flag of an entry."""

    PENDING = "Pending"
    PAID = "Paid"
    OVERDUE = "Overdue"
    ACTIVE = "Active"
    CONFIRMED = "Confirmed"


class AggregateView(str, Enum):
    """Views that consume the whole collection instead of one category."""

    DASHBOARD = "dashboard"
    INSIGHTS = "insights"


View = Union[EntryCategory, AggregateView]


class MonthFilter(str, Enum):
    ALL = "all"
    CURRENT = "current"
    LAST = "last"


class SearchType(str, Enum):
    PARTY = "party"
    DATE = "date"
    BANK = "bank"


class StatFilter(str, Enum):
    ALL = "all"
    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"


@dataclass(frozen=True)
class Payment:
    """A single settlement applied to an entry."""

    id: str
    date: date
    amount: float
    cheque_no: str = ""
    voucher_no: str = ""


@dataclass(frozen=True)
class Entry:
    """Receivable/payable record."""

    id: str
    category: EntryCategory
    date: date
    party_name: str
    total_amount: float
    ref_no: str = ""
    desc: str = ""
    transaction_date: Optional[date] = None
    bank_name: Optional[str] = None
    bank_account_num: Optional[str] = None
    due_date: Optional[date] = None
    status: EntryStatus = EntryStatus.PENDING
    payments: tuple[Payment, ...] = ()
    confirmed_by: Optional[str] = None


@dataclass(frozen=True)
class StatSummary:
    """Aggregate amounts for a group of entries."""

    total: float = 0.0
    paid: float = 0.0
    pending: float = 0.0
    overdue: float = 0.0
    count: int = 0


@dataclass(frozen=True)
class ViewState:
    """Inputs of the view pipeline.

    Frozen and hashable so it can key the cached filter result.
    """

    active_view: View = EntryCategory.CHAQUE_RECEIVABLES
    month_filter: MonthFilter = MonthFilter.ALL
    search_query: str = ""
    search_type: SearchType = SearchType.PARTY
    stat_filter: StatFilter = StatFilter.ALL

    @property
    def is_aggregate(self) -> bool:
        return isinstance(self.active_view, AggregateView)


# Field names that edit_entry may merge onto an entry.
EDITABLE_FIELDS = frozenset(
    name for name in Entry.__dataclass_fields__ if name != "id"
)

BANK_LIST = (
    "HBL",
    "Meezan Bank",
    "UBL Bank",
    "Allied Bank",
    "Faysal Bank",
    "Alfalah Bank",
    "Other Bank",
)

CATEGORIES = tuple(EntryCategory)

STORAGE_KEY = "parchi_pro_v11"
