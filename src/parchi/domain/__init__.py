"""Domain layer for parchi application."""

from parchi.domain.store import EntryStore
from parchi.domain.summary import SummaryService
from parchi.domain.insights import InsightsService

__all__ = [
    "EntryStore",
    "SummaryService",
    "InsightsService",
]
