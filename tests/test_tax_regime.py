"""Tests for GST regime determination and item tax split."""

from decimal import Decimal

import pytest

from billing_core.models import ItemTax, Regime, TaxPreference, TaxRegime
from billing_core.tax import (
    DEFAULT_SELLER_STATE_CODE,
    GST_STATE_CODES,
    calculate_item_tax,
    calculate_line_items_tax,
    determine_tax_regime,
    extract_state_code_from_gstin,
    format_place_of_supply,
    resolve_customer_state_code,
    state_code_from_place_of_supply,
    state_name,
)

INTRA = TaxRegime(Regime.INTRA, Decimal("9"), Decimal("9"), Decimal("0"))
INTER = TaxRegime(Regime.INTER, Decimal("0"), Decimal("0"), Decimal("18"))
EXEMPT = TaxRegime(Regime.EXEMPT, Decimal("0"), Decimal("0"), Decimal("0"))


class TestStateCodeHelpers:
    """Tests for state code extraction."""

    def test_gstin_prefix(self) -> None:
        assert extract_state_code_from_gstin("27AAGCA4900Q1ZE") == "27"

    def test_gstin_too_short(self) -> None:
        assert extract_state_code_from_gstin("2") == ""
        assert extract_state_code_from_gstin("") == ""

    def test_place_of_supply_with_name(self) -> None:
        assert state_code_from_place_of_supply("29 - Karnataka") == "29"

    def test_place_of_supply_bare_code(self) -> None:
        assert state_code_from_place_of_supply("07") == "07"

    def test_place_of_supply_without_code(self) -> None:
        assert state_code_from_place_of_supply("Karnataka") == ""
        assert state_code_from_place_of_supply("") == ""

    def test_place_of_supply_wins_over_gstin(self, make_snapshot) -> None:
        snapshot = make_snapshot(place_of_supply="29 - Karnataka", gstin="27AAGCA4900Q1ZE")
        assert resolve_customer_state_code(snapshot) == "29"

    def test_gstin_used_when_place_of_supply_has_no_code(self, make_snapshot) -> None:
        snapshot = make_snapshot(place_of_supply="Karnataka", gstin="33AAGCA4900Q1ZE")
        assert resolve_customer_state_code(snapshot) == "33"


class TestStateTable:
    """Tests for the GST state table."""

    def test_default_seller_is_maharashtra(self) -> None:
        assert DEFAULT_SELLER_STATE_CODE == "27"
        assert state_name("27") == "Maharashtra"

    def test_format_place_of_supply(self) -> None:
        assert format_place_of_supply("29") == "29 - Karnataka"

    def test_format_unknown_code(self) -> None:
        assert format_place_of_supply("99") == "99"
        assert state_name("99") == ""

    def test_codes_are_two_digits(self) -> None:
        assert all(len(code) == 2 and code.isdigit() for code in GST_STATE_CODES)


class TestDetermineTaxRegime:
    """Tests for determine_tax_regime decision list."""

    def test_no_customer(self) -> None:
        regime = determine_tax_regime(None)

        assert regime.regime == Regime.INTRA
        assert (regime.cgst_rate, regime.sgst_rate, regime.igst_rate) == (9, 9, 0)
        assert regime.reason == "No customer selected"

    def test_exempt_uses_exemption_reason(self, make_snapshot) -> None:
        snapshot = make_snapshot(
            tax_preference=TaxPreference.TAX_EXEMPT,
            exemption_reason="SEZ unit",
            gstin="29AAGCA4900Q1ZE",
        )
        regime = determine_tax_regime(snapshot, "27")

        assert regime.regime == Regime.EXEMPT
        assert (regime.cgst_rate, regime.sgst_rate, regime.igst_rate) == (0, 0, 0)
        assert regime.reason == "SEZ unit"

    def test_exempt_default_reason(self, make_snapshot) -> None:
        snapshot = make_snapshot(tax_preference=TaxPreference.TAX_EXEMPT)
        assert determine_tax_regime(snapshot).reason == "Customer is tax exempt"

    @pytest.mark.parametrize("state_code", ["27", "29", "07", ""])
    def test_exempt_wins_over_state(self, make_snapshot, state_code: str) -> None:
        snapshot = make_snapshot(
            tax_preference=TaxPreference.TAX_EXEMPT,
            place_of_supply=state_code,
        )
        regime = determine_tax_regime(snapshot, "27")
        assert regime.regime == Regime.EXEMPT
        assert regime.cgst_rate == regime.sgst_rate == regime.igst_rate == 0

    def test_no_state_code_defaults_to_intra(self, make_snapshot) -> None:
        regime = determine_tax_regime(make_snapshot(gstin="", place_of_supply=""))

        assert regime.regime == Regime.INTRA
        assert (regime.cgst_rate, regime.sgst_rate) == (9, 9)
        assert regime.reason == "Same state transaction (default)"

    def test_malformed_gstin_defaults_to_intra(self, make_snapshot) -> None:
        regime = determine_tax_regime(make_snapshot(gstin="X"))
        assert regime.reason == "Same state transaction (default)"

    def test_same_state_from_gstin(self, make_snapshot) -> None:
        regime = determine_tax_regime(make_snapshot(gstin="27AAGCA4900Q1ZE"), "27")

        assert regime.regime == Regime.INTRA
        assert regime.cgst_rate == 9
        assert regime.sgst_rate == 9
        assert regime.igst_rate == 0
        assert regime.reason == "Same state transaction"

    def test_inter_state_from_place_of_supply(self, make_snapshot) -> None:
        regime = determine_tax_regime(make_snapshot(place_of_supply="29 - Karnataka"), "27")

        assert regime.regime == Regime.INTER
        assert (regime.cgst_rate, regime.sgst_rate) == (0, 0)
        assert regime.igst_rate == 18
        assert regime.reason == "Inter-state transaction"

    @pytest.mark.parametrize("code", sorted(GST_STATE_CODES))
    def test_gstin_state_against_default_seller(self, make_snapshot, code: str) -> None:
        regime = determine_tax_regime(make_snapshot(gstin=f"{code}AAGCA4900Q1ZE"))
        if code == DEFAULT_SELLER_STATE_CODE:
            assert regime.regime == Regime.INTRA
        else:
            assert regime.regime == Regime.INTER
            assert regime.igst_rate == 18

    def test_seller_state_is_a_parameter(self, make_snapshot) -> None:
        snapshot = make_snapshot(place_of_supply="29 - Karnataka")
        assert determine_tax_regime(snapshot, "29").regime == Regime.INTRA

    def test_idempotent(self, make_snapshot) -> None:
        snapshot = make_snapshot(gstin="29AAGCA4900Q1ZE")
        assert determine_tax_regime(snapshot) == determine_tax_regime(snapshot)


class TestCalculateItemTax:
    """Tests for calculate_item_tax."""

    def test_intra_split(self) -> None:
        tax = calculate_item_tax(1000, 18, INTRA)
        assert tax == ItemTax(
            cgst=Decimal("90"), sgst=Decimal("90"), igst=Decimal("0"), total=Decimal("180")
        )

    def test_inter_all_igst(self) -> None:
        tax = calculate_item_tax(Decimal("1000"), Decimal("18"), INTER)
        assert tax.igst == Decimal("180")
        assert tax.cgst == tax.sgst == 0
        assert tax.total == Decimal("180")

    def test_exempt_is_zero(self) -> None:
        tax = calculate_item_tax(1000, 18, EXEMPT)
        assert tax.total == tax.cgst == tax.sgst == tax.igst == 0

    @pytest.mark.parametrize("rate", [0, -5])
    def test_non_positive_rate_is_zero(self, rate: int) -> None:
        assert calculate_item_tax(1000, rate, INTRA).total == 0

    def test_item_rate_is_used_not_regime_rate(self) -> None:
        tax = calculate_item_tax(200, 5, INTRA)
        assert tax.cgst == Decimal("5")
        assert tax.sgst == Decimal("5")

    @pytest.mark.parametrize(
        "amount,rate",
        [("1234.56", "12"), ("0.01", "28"), ("999999.99", "5"), ("10", "0.25")],
    )
    def test_intra_halves_sum_to_total(self, amount: str, rate: str) -> None:
        tax = calculate_item_tax(amount, rate, INTRA)
        expected = Decimal(amount) * Decimal(rate) / 100
        assert tax.cgst == tax.sgst
        assert tax.cgst + tax.sgst == expected
        assert tax.igst == 0

    def test_nan_rate_is_zero(self) -> None:
        assert calculate_item_tax(1000, float("nan"), INTRA).total == 0

    def test_line_items_summed(self) -> None:
        tax = calculate_line_items_tax([(1000, 18), (500, 5), (300, 0)], INTRA)
        assert tax.cgst == Decimal("102.5")
        assert tax.sgst == Decimal("102.5")
        assert tax.igst == 0
        assert tax.total == Decimal("205")

    def test_line_items_empty(self) -> None:
        assert calculate_line_items_tax([], INTER).total == 0
