from decimal import Decimal

from wedexpense.extraction.amounts import (
    AMOUNT_STRATEGIES,
    extract_amount,
    largest_grouped_amount,
    largest_marked_amount,
    parse_amount,
    total_line_amount,
)


class TestParseAmount:
    def test_strips_grouping_separators(self) -> None:
        assert parse_amount("8,50,000") == Decimal("850000")

    def test_keeps_two_fraction_digits(self) -> None:
        assert parse_amount("1,200.50") == Decimal("1200.50")

    def test_truncates_extra_fraction_digits(self) -> None:
        assert parse_amount("10.999") == Decimal("10.99")

    def test_rejects_garbage(self) -> None:
        assert parse_amount("") is None
        assert parse_amount(",") is None
        assert parse_amount("abc") is None


class TestTotalLineAmount:
    def test_grand_total_with_rs_marker(self) -> None:
        assert total_line_amount("Grand Total: Rs. 45,000") == Decimal("45000")

    def test_total_without_marker(self) -> None:
        assert total_line_amount("TOTAL 12,345.60") == Decimal("12345.60")

    def test_rupee_sign(self) -> None:
        assert total_line_amount("Net Amount ₹ 9,999") == Decimal("9999")

    def test_payable_with_inr(self) -> None:
        assert total_line_amount("Amount payable: INR 75,000") == Decimal("75000")

    def test_keyword_without_number_on_same_line(self) -> None:
        assert total_line_amount("Total\n5,000") is None

    def test_no_keyword(self) -> None:
        assert total_line_amount("Rs 5,000") is None


class TestLargestMarkedAmount:
    def test_picks_largest(self) -> None:
        text = "Advance ₹1,200\nBalance ₹15,000\nDelivery Rs. 500"
        assert largest_marked_amount(text) == Decimal("15000")

    def test_none_without_markers(self) -> None:
        assert largest_marked_amount("Qty 2 Rate 1,500") is None


class TestLargestGroupedAmount:
    def test_ignores_small_numbers(self) -> None:
        assert largest_grouped_amount("Page 1 of 2\nQty 12") is None

    def test_picks_largest_above_floor(self) -> None:
        assert largest_grouped_amount("Items 3\nRate 1,500\nAmount 4,500") == Decimal("4500")

    def test_floor_is_exclusive(self) -> None:
        assert largest_grouped_amount("100 chairs") is None
        assert largest_grouped_amount("101 chairs") == Decimal("101")


class TestExtractAmountOrder:
    def test_strategy_order_is_fixed(self) -> None:
        assert AMOUNT_STRATEGIES == (
            total_line_amount,
            largest_marked_amount,
            largest_grouped_amount,
        )

    def test_total_line_beats_larger_unmarked_number(self) -> None:
        text = "Ref 9,99,999\nGrand Total: Rs. 45,000"
        assert extract_amount(text) == Decimal("45000")

    def test_total_line_beats_larger_marked_amount(self) -> None:
        text = "Package value Rs 2,00,000\nTotal: Rs 1,50,000"
        assert extract_amount(text) == Decimal("150000")

    def test_marked_amount_fallback(self) -> None:
        assert extract_amount("Advance ₹1,200\nBalance ₹15,000") == Decimal("15000")

    def test_marked_amount_beats_larger_bare_number(self) -> None:
        assert extract_amount("Invoice 5,00,000\nPaid Rs 2,500") == Decimal("2500")

    def test_bare_number_fallback(self) -> None:
        assert extract_amount("Decoration\n25,000\n3 stages") == Decimal("25000")

    def test_nothing_found(self) -> None:
        assert extract_amount("Thank you for your business") is None

    def test_custom_strategy_chain(self) -> None:
        text = "Grand Total: Rs. 45,000\nRs 90,000"
        assert extract_amount(text, (largest_marked_amount,)) == Decimal("90000")

    def test_non_ascii_digits_are_not_amounts(self) -> None:
        assert extract_amount("कुल योग: ₹ ८५,०००\nधन्यवाद १२३४") is None
