from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ExtractionResult:
    """Best-guess fields recovered from recognized receipt text.

    Any field that could not be found is left empty (vendor) or None.
    """

    vendor_name: str = ""
    amount: Decimal | None = None
    date: str | None = None  # ISO "YYYY-MM-DD"
