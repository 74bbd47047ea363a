"""Utility for resolving view and category names."""

from parchi.domain.entities import AggregateView, EntryCategory, View
from parchi.domain.errors import ValidationError, unknown_view

CATEGORY_ALIASES = {
    "cr": EntryCategory.CHAQUE_RECEIVABLES,
    "cp": EntryCategory.CHAQUE_PAYABLES,
    "ltp": EntryCategory.LONG_TERM_PAYABLES,
    "ltr": EntryCategory.LONG_TERM_RECEIVABLES,
    "unknown": EntryCategory.UNKNOWN_ONLINE,
}


def _normalize(name: str) -> str:
    return " ".join(name.replace("_", " ").replace("-", " ").split()).lower()


def resolve_category(name: str) -> EntryCategory:
    """Resolve a category from its value, enum name or short alias.

    Matching ignores case and treats spaces, dashes and underscores alike, so
    "Chaque Receivables", "chaque-receivables", "CHAQUE_RECEIVABLES" and "cr"
    all resolve to the same category.

    Raises:
        ValidationError: If the name matches no category
    """
    key = _normalize(name)
    if key in CATEGORY_ALIASES:
        return CATEGORY_ALIASES[key]
    for category in EntryCategory:
        if key in (_normalize(category.value), _normalize(category.name)):
            return category
    raise ValidationError(unknown_view(name))


def resolve_view(name: str) -> View:
    """Resolve an aggregate view name or a category.

    Raises:
        ValidationError: If the name matches no view
    """
    key = _normalize(name)
    for view in AggregateView:
        if key == view.value:
            return view
    return resolve_category(name)
