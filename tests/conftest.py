"""Shared pytest fixtures for parchi tests."""

import tempfile
import os
from datetime import date
import pytest

from parchi.database.factories import create_sqlite_storage
from parchi.domain.entities import Entry, EntryCategory, EntryStatus, Payment
from parchi.domain.store import EntryStore


class ScriptedConfirm:
    """Confirmation prompt that answers with a preset value and records prompts."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.prompts: list[str] = []

    def __call__(self, message: str) -> bool:
        self.prompts.append(message)
        return self.answer


@pytest.fixture
def temp_storage():
    """Create a temporary SQLite storage for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    storage = create_sqlite_storage(database_path=db_path)
    # Store the path for tests that need it
    storage.database_path = db_path
    storage.connect()
    storage.initialize_schema()

    yield storage

    storage.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def confirm():
    """Confirmation prompt that accepts."""
    return ScriptedConfirm(answer=True)


@pytest.fixture
def store(temp_storage, confirm):
    """Create an EntryStore over temporary storage."""
    return EntryStore(temp_storage, confirm=confirm)


@pytest.fixture
def make_entry():
    """Build entries with sensible defaults for pipeline tests."""
    counter = {"n": 0}

    def _make(**overrides) -> Entry:
        counter["n"] += 1
        fields = dict(
            id=f"e{counter['n']}",
            category=EntryCategory.CHAQUE_RECEIVABLES,
            date=date(2024, 3, 10),
            party_name="Acme Traders",
            total_amount=1000.0,
        )
        fields.update(overrides)
        if "payments" in fields:
            fields["payments"] = tuple(fields["payments"])
        return Entry(**fields)

    return _make


@pytest.fixture
def make_payment():
    """Build payments with sensible defaults."""
    counter = {"n": 0}

    def _make(amount: float, **overrides) -> Payment:
        counter["n"] += 1
        fields = dict(id=f"p{counter['n']}", date=date(2024, 3, 15), amount=amount)
        fields.update(overrides)
        return Payment(**fields)

    return _make


@pytest.fixture
def sample_entries(store):
    """Populate the store with one entry per category."""
    created = [
        store.add_entry(
            EntryCategory.CHAQUE_RECEIVABLES, date(2024, 3, 5), "Acme Traders", 1000.0,
            bank_name="HBL", due_date=date(2024, 4, 5),
        ),
        store.add_entry(
            EntryCategory.CHAQUE_PAYABLES, date(2024, 2, 20), "Zed Supplies", 500.0,
            bank_name="Meezan Bank", status=EntryStatus.OVERDUE,
        ),
        store.add_entry(
            EntryCategory.LONG_TERM_PAYABLES, date(2024, 1, 2), "Landlord", 90000.0,
            status=EntryStatus.ACTIVE,
        ),
        store.add_entry(
            EntryCategory.LONG_TERM_RECEIVABLES, date(2023, 12, 28), "Beta Corp", 2500.0,
        ),
        store.add_entry(
            EntryCategory.UNKNOWN_ONLINE, date(2024, 3, 1), "Unknown", 750.0,
        ),
    ]
    return created


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def make_confirm():
    """Factory for scripted confirmation prompts."""
    return ScriptedConfirm
