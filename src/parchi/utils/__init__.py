"""Utility functions for parchi."""

from parchi.utils.date_parser import parse_date
from parchi.utils.amount_parser import parse_amount
from parchi.utils.ids import new_id
from parchi.utils.view_resolver import resolve_category, resolve_view

__all__ = ["parse_date", "parse_amount", "new_id", "resolve_category", "resolve_view"]
