from wedexpense.extraction.amounts import AMOUNT_STRATEGIES, AmountStrategy, extract_amount
from wedexpense.extraction.dates import extract_date
from wedexpense.extraction.models import ExtractionResult


def extract_vendor(text: str) -> str:
    """Receipts and quotes put the issuing business on the first line."""
    for line in text.split("\n"):
        stripped = line.strip()
        if stripped:
            return stripped
    return ""


class FieldExtractor:
    """Derives vendor, amount and date from recognized receipt text."""

    def __init__(self, amount_strategies: tuple[AmountStrategy, ...] = AMOUNT_STRATEGIES) -> None:
        self._amount_strategies = amount_strategies

    def extract(self, text: str) -> ExtractionResult:
        if not text:
            return ExtractionResult()
        return ExtractionResult(
            vendor_name=extract_vendor(text),
            amount=extract_amount(text, self._amount_strategies),
            date=extract_date(text),
        )
