"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class ConflictError(DomainError):
    """Domain conflict, such as a reused entry ID."""


def entry_not_found(entry_id: str) -> str:
    """Return message for missing entry."""
    return f"Entry {entry_id} not found"


def duplicate_entry_id(entry_id: str) -> str:
    """Return message for an entry ID that is already in use."""
    return f"Entry with id '{entry_id}' already exists"


def unknown_entry_fields(names: list[str]) -> str:
    """Return message for edit fields that are not part of an entry."""
    return f"Unknown entry field{'s' if len(names) != 1 else ''}: {', '.join(sorted(names))}"


def unknown_view(name: str) -> str:
    """Return message for a view or category name that cannot be resolved."""
    return f"Unknown view '{name}'"
