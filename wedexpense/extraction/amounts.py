"""Amount extraction strategies.

Strategies run in the order of ``AMOUNT_STRATEGIES``; the first one that
returns a value wins:

1. ``total_line_amount``   - number following a total-like keyword on its line.
2. ``largest_marked_amount`` - largest rupee-marked amount anywhere.
3. ``largest_grouped_amount`` - largest bare digit-grouped number above 100.
"""

import re
from collections.abc import Callable
from decimal import ROUND_DOWN, Decimal, InvalidOperation

AmountStrategy = Callable[[str], Decimal | None]

_CURRENCY = r"(?:₹|(?<![A-Za-z])(?:Rs\.?|INR))"
_NUMBER = r"\d[\d,]*(?:\.\d{1,2})?"

_TOTAL_LINE_RE = re.compile(
    rf"(?:total|grand\s*total|net\s*amount|payable)[^\n]*?{_CURRENCY}?[^\S\n]*({_NUMBER})",
    re.IGNORECASE | re.ASCII,
)
_MARKED_AMOUNT_RE = re.compile(rf"{_CURRENCY}\s*({_NUMBER})", re.IGNORECASE | re.ASCII)
_GROUPED_NUMBER_RE = re.compile(r"\b(\d{1,3}(?:,\d{2,3})*(?:\.\d{1,2})?)\b", re.ASCII)

PLAUSIBLE_AMOUNT_FLOOR = Decimal("100")
_TWO_PLACES = Decimal("0.01")


def parse_amount(token: str) -> Decimal | None:
    """Strip grouping separators and parse ``token`` as a non-negative Decimal."""
    cleaned = token.replace(",", "").strip()
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite() or value < 0:
        return None
    if value.as_tuple().exponent < -2:  # type: ignore[operator]
        value = value.quantize(_TWO_PLACES, rounding=ROUND_DOWN)
    return value


def total_line_amount(text: str) -> Decimal | None:
    match = _TOTAL_LINE_RE.search(text)
    if match is None:
        return None
    return parse_amount(match.group(1))


def largest_marked_amount(text: str) -> Decimal | None:
    values = [parse_amount(m.group(1)) for m in _MARKED_AMOUNT_RE.finditer(text)]
    return max((v for v in values if v is not None), default=None)


def largest_grouped_amount(text: str) -> Decimal | None:
    values = [parse_amount(m.group(1)) for m in _GROUPED_NUMBER_RE.finditer(text)]
    plausible = [v for v in values if v is not None and v > PLAUSIBLE_AMOUNT_FLOOR]
    return max(plausible, default=None)


AMOUNT_STRATEGIES: tuple[AmountStrategy, ...] = (
    total_line_amount,
    largest_marked_amount,
    largest_grouped_amount,
)


def extract_amount(
    text: str,
    strategies: tuple[AmountStrategy, ...] = AMOUNT_STRATEGIES,
) -> Decimal | None:
    """Run ``strategies`` in order and return the first amount found."""
    for strategy in strategies:
        amount = strategy(text)
        if amount is not None:
            return amount
    return None
