"""Entry store: owns the entry collection and mirrors it to storage."""

import dataclasses
import logging
from datetime import date
from typing import Callable, Optional

from parchi.database.base import Storage
from parchi.database.mappers import entries_from_json, entries_to_json
from parchi.domain.entities import (
    EDITABLE_FIELDS,
    STORAGE_KEY,
    Entry,
    EntryCategory,
    EntryStatus,
    Payment,
    ViewState,
)
from parchi.domain.errors import (
    ConflictError,
    ValidationError,
    duplicate_entry_id,
    unknown_entry_fields,
)
from parchi.domain.ledger import filter_view, total_paid
from parchi.utils.ids import new_id, unique_id

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this record?"


def _coerce(enum_type, value):
    """Accept an enum member or its stored string value."""
    try:
        return enum_type(value)
    except ValueError as e:
        raise ValidationError(str(e)) from e


class EntryStore:
    """Service owning the ordered entry collection.

    The collection is read once from storage on construction and written back
    in full after every mutation. Mutations replace the whole tuple; entries
    themselves are immutable.
    """

    def __init__(
        self,
        storage: Storage,
        confirm: Callable[[str], bool],
        key: str = STORAGE_KEY,
        id_factory: Callable[[], str] = new_id,
    ):
        """Initialize entry store.

        Args:
            storage: Durable key-value storage
            confirm: Blocking yes/no prompt gating deletion
            key: Storage key holding the serialized collection
            id_factory: Callable minting new entry and payment IDs

        Raises:
            json.JSONDecodeError: If the stored document is corrupted
        """
        self.storage = storage
        self.confirm = confirm
        self.key = key
        self.id_factory = id_factory
        self._revision = 0
        self._cache_key: Optional[tuple] = None
        self._cache: list[Entry] = []

        saved = storage.get(key)
        self._entries: tuple[Entry, ...] = entries_from_json(saved) if saved else ()
        logger.debug("Loaded %d entries from slot '%s'", len(self._entries), key)

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Current collection in insertion order."""
        return self._entries

    def _replace(self, entries: tuple[Entry, ...]) -> None:
        # A failed encode leaves the collection and revision untouched
        document = entries_to_json(entries)
        self._entries = entries
        self._revision += 1
        self.storage.set(self.key, document)

    def _map_entry(self, entry_id: str, update: Callable[[Entry], Entry]) -> Optional[Entry]:
        """Apply update to the entry with entry_id, returning the new entry.

        A missing id leaves the collection untouched and returns None.
        """
        updated = None
        result = []
        for entry in self._entries:
            if entry.id == entry_id:
                updated = update(entry)
                result.append(updated)
            else:
                result.append(entry)
        if updated is None:
            logger.debug("Entry %s not found; nothing changed", entry_id)
            return None
        self._replace(tuple(result))
        return updated

    def _taken_ids(self) -> set[str]:
        taken = {e.id for e in self._entries}
        taken.update(p.id for e in self._entries for p in e.payments)
        return taken

    def new_id(self) -> str:
        """Mint an ID not used by any entry or payment in the collection."""
        return unique_id(self._taken_ids(), self.id_factory)

    def get_entry(self, entry_id: str) -> Optional[Entry]:
        """Get entry by ID.

        Returns:
            Entry or None if not found
        """
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def add_entry(
        self,
        category: EntryCategory,
        date: date,
        party_name: str,
        total_amount: float,
        *,
        ref_no: str = "",
        desc: str = "",
        transaction_date: Optional[date] = None,
        bank_name: Optional[str] = None,
        bank_account_num: Optional[str] = None,
        due_date: Optional[date] = None,
        confirmed_by: Optional[str] = None,
        status: EntryStatus = EntryStatus.PENDING,
        payments: tuple[Payment, ...] = (),
        entry_id: Optional[str] = None,
    ) -> Entry:
        """Create an entry and append it to the collection.

        Amount sign and date plausibility are not checked.

        Raises:
            ConflictError: If entry_id is supplied and already names an entry
                or payment
            ValidationError: If category or status is not a known value
        """
        category = _coerce(EntryCategory, category)
        status = _coerce(EntryStatus, status)
        if entry_id is None:
            entry_id = self.new_id()
        elif entry_id in self._taken_ids():
            raise ConflictError(duplicate_entry_id(entry_id))

        entry = Entry(
            id=entry_id,
            category=category,
            date=date,
            party_name=party_name,
            total_amount=total_amount,
            ref_no=ref_no,
            desc=desc,
            transaction_date=transaction_date,
            bank_name=bank_name,
            bank_account_num=bank_account_num,
            due_date=due_date,
            status=status,
            payments=tuple(payments),
            confirmed_by=confirmed_by,
        )
        self._replace(self._entries + (entry,))
        logger.info("Added entry %s (%s, %s)", entry.id, category.value, party_name)
        return entry

    def edit_entry(self, entry_id: str, **fields) -> Optional[Entry]:
        """Shallow-merge fields onto an entry.

        Args:
            entry_id: Entry ID
            **fields: Entry field names and their new values

        Returns:
            The updated entry, or None if no entry has entry_id

        Raises:
            ValidationError: If a field name is not an editable entry field, or
                category or status is not a known value
        """
        unknown = [name for name in fields if name not in EDITABLE_FIELDS]
        if unknown:
            raise ValidationError(unknown_entry_fields(unknown))
        if "category" in fields:
            fields["category"] = _coerce(EntryCategory, fields["category"])
        if "status" in fields:
            fields["status"] = _coerce(EntryStatus, fields["status"])
        if "payments" in fields:
            fields["payments"] = tuple(fields["payments"])
        return self._map_entry(entry_id, lambda e: dataclasses.replace(e, **fields))

    def delete_entry(self, entry_id: str) -> bool:
        """Remove an entry after the user confirms.

        Returns:
            True if the user confirmed, False otherwise
        """
        if not self.confirm(DELETE_PROMPT):
            return False
        remaining = tuple(e for e in self._entries if e.id != entry_id)
        if len(remaining) != len(self._entries):
            self._replace(remaining)
            logger.info("Deleted entry %s", entry_id)
        return True

    def record_payment(self, entry_id: str, payment: Payment) -> Optional[Entry]:
        """Append a payment to an entry.

        The status becomes Paid once total payments reach the total amount;
        a partial payment leaves the status as it was.

        Returns:
            The updated entry, or None if no entry has entry_id
        """

        def apply(entry: Entry) -> Entry:
            updated = dataclasses.replace(entry, payments=entry.payments + (payment,))
            if total_paid(updated) >= entry.total_amount:
                updated = dataclasses.replace(updated, status=EntryStatus.PAID)
            return updated

        updated = self._map_entry(entry_id, apply)
        if updated is not None:
            logger.info("Recorded payment %s of %s on entry %s", payment.id, payment.amount, entry_id)
        return updated

    def confirm_unknown(
        self, entry_id: str, customer_name: str, confirmed_by: str
    ) -> Optional[Entry]:
        """Attach the customer to an unknown online entry and mark it Confirmed.

        The entry category is not checked.

        Returns:
            The updated entry, or None if no entry has entry_id
        """
        return self._map_entry(
            entry_id,
            lambda e: dataclasses.replace(
                e,
                party_name=customer_name,
                confirmed_by=confirmed_by,
                status=EntryStatus.CONFIRMED,
            ),
        )

    def filtered(self, state: ViewState, now: date) -> list[Entry]:
        """Run the view pipeline over the collection.

        The result is cached until the collection, the view state or ``now``
        changes.
        """
        cache_key = (self._revision, state, now)
        if cache_key != self._cache_key:
            self._cache = filter_view(
                self._entries,
                state.active_view,
                state.month_filter,
                state.search_query,
                state.stat_filter,
                now=now,
                search_type=state.search_type,
            )
            self._cache_key = cache_key
        return list(self._cache)
