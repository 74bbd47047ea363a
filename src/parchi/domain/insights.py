"""AI insights over the entry collection."""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

import requests

from parchi.domain.entities import Entry
from parchi.domain.errors import ValidationError
from parchi.domain.ledger import compute_balance

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "You are a financial assistant for a small business that tracks cheque and "
    "long-term payables and receivables. Review the records below and give a short "
    "list of insights: upcoming due dates, largest outstanding balances, parties "
    "with repeated overdue amounts, and any cash-flow risks.\n\n"
    "Records (JSON):\n{records}"
)


class InsightsClient(ABC):
    """Text generation backend for insights."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Return free text generated for prompt."""
        pass


class GeminiInsightsClient(InsightsClient):
    """Client for the Gemini generateContent REST endpoint."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: str,
        timeout: float = 60.0,
    ):
        if not api_key:
            raise ValidationError("GEMINI_API_KEY is not set")
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def generate(self, prompt: str) -> str:
        """Send prompt and return the text of the first candidate.

        Raises:
            requests.RequestException: On transport errors or a non-2xx status
        """
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        logger.debug("Sending insights request to %s: %d characters", self.model, len(prompt))
        response = requests.post(
            f"{self.base_url}/models/{self.model}:generateContent",
            json=payload,
            headers={"x-goog-api-key": self.api_key},
            timeout=self.timeout,
        )
        response.raise_for_status()
        data = response.json()
        candidates = data.get("candidates") or []
        if not candidates:
            return ""
        parts = candidates[0].get("content", {}).get("parts", [])
        return "".join(part.get("text", "") for part in parts)


def entry_digest(entry: Entry) -> dict[str, Any]:
    """Compact view of an entry for the prompt."""
    return {
        "category": entry.category.value,
        "party": entry.party_name,
        "amount": entry.total_amount,
        "balance": compute_balance(entry),
        "status": entry.status.value,
        "date": entry.date.isoformat(),
        "dueDate": entry.due_date.isoformat() if entry.due_date else None,
        "bank": entry.bank_name,
    }


class InsightsService:
    """Service turning the entry collection into free-text insights."""

    def __init__(self, client: InsightsClient):
        """Initialize insights service.

        Args:
            client: Text generation backend
        """
        self.client = client

    def build_prompt(self, entries: Iterable[Entry]) -> str:
        records = json.dumps([entry_digest(e) for e in entries], indent=1)
        return PROMPT_TEMPLATE.format(records=records)

    def get_insights(self, entries: Iterable[Entry]) -> str:
        """Generate insights for the whole collection.

        Errors from the client propagate unchanged.
        """
        return self.client.generate(self.build_prompt(entries))
