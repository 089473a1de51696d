from dataclasses import dataclass
from decimal import Decimal

from wedexpense.categorization.taxonomy import DEFAULT_CATEGORY


@dataclass(frozen=True)
class IngestionResult:
    """Structured outcome of one receipt upload."""

    vendor_name: str = ""
    amount: Decimal | None = None
    date: str | None = None
    category: str = DEFAULT_CATEGORY
    receipt_url: str = ""
    confidence: float = 0.0
    raw_text: str = ""

    def to_response(self) -> dict[str, object]:
        """Return the JSON-ready payload sent back to the client."""
        return {
            "vendor_name": self.vendor_name,
            "amount": str(self.amount) if self.amount is not None else None,
            "date": self.date,
            "category": self.category,
            "receipt_url": self.receipt_url,
            "confidence": self.confidence,
            "raw_text": self.raw_text,
        }
