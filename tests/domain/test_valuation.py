"""Tests for holding valuation services."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from src.domain.constants import CASH, CRYPTO, DEBT, INVESTMENT, PROPERTY
from src.domain.models import Holding, HoldingDraft
from src.domain.services.valuation import (
    apply_price,
    build_holding,
    compute_current_value,
    compute_initial_value,
    describe_valuation,
    is_unit_denominated,
)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _holding(**overrides) -> Holding:
    fields = {
        "id": "h1",
        "kind": CRYPTO,
        "name": "Bitcoin",
        "value": Decimal("0"),
        "unit_denominated": True,
    }
    fields.update(overrides)
    return Holding(**fields)


def test_describe_valuation_reports_profit_for_crypto() -> None:
    """0.5 BTC bought at 500M and now at 600M gains 50M."""
    holding = _holding(
        quantity=Decimal("0.5"),
        buy_price=Decimal("500000000"),
        current_price=Decimal("600000000"),
        value=Decimal("300000000"),
    )

    snapshot = describe_valuation(holding)

    assert snapshot.initial_value == Decimal("250000000")
    assert snapshot.current_value == Decimal("300000000")
    assert snapshot.profit_loss == Decimal("50000000")


def test_describe_valuation_uses_stored_value_for_manual_holdings() -> None:
    """Manual holdings have no profit or loss."""
    holding = _holding(kind=PROPERTY, value=Decimal("750000000"),
                       unit_denominated=False)

    snapshot = describe_valuation(holding)

    assert snapshot.initial_value == Decimal("750000000")
    assert snapshot.current_value == Decimal("750000000")
    assert snapshot.profit_loss == Decimal("0")


def test_describe_valuation_falls_back_to_stored_value_without_price() -> None:
    """Missing current price keeps the stored value as current value."""
    holding = _holding(quantity=Decimal("2"), value=Decimal("1000"))

    snapshot = describe_valuation(holding)

    assert snapshot.initial_value == Decimal("0")
    assert snapshot.current_value == Decimal("1000")


@pytest.mark.parametrize(
    ("quantity", "price", "expected"),
    [
        (Decimal("0.5"), Decimal("600000000"), Decimal("300000000")),
        (Decimal("1.5"), Decimal("333"), Decimal("500")),
        (Decimal("0"), Decimal("100"), None),
        (Decimal("1"), Decimal("0"), None),
        (None, Decimal("100"), None),
        (Decimal("1"), None, None),
    ],
)
def test_compute_current_value(quantity, price, expected) -> None:
    """Current value is rounded and only derived from positive inputs."""
    assert compute_current_value(quantity, price) == expected


def test_compute_initial_value_defaults_to_zero() -> None:
    """Missing buy price or quantity yields zero initial value."""
    assert compute_initial_value(Decimal("1"), None) == Decimal("0")
    assert compute_initial_value(None, Decimal("5")) == Decimal("0")
    assert compute_initial_value(Decimal("2"), Decimal("2.5")) == Decimal("5")


def test_is_unit_denominated_follows_kind_and_flag() -> None:
    """Investments always, debts only when flagged, cash never."""
    assert is_unit_denominated(_holding(kind=INVESTMENT,
                                        unit_denominated=False))
    assert is_unit_denominated(_holding(kind=DEBT, unit_denominated=True))
    assert not is_unit_denominated(_holding(kind=DEBT,
                                            unit_denominated=False))
    assert not is_unit_denominated(_holding(kind=CASH,
                                            unit_denominated=True))


def test_build_holding_clears_unit_fields_for_manual_kinds() -> None:
    """Cash drafts drop quantity, prices and coin reference."""
    draft = HoldingDraft(
        kind=CASH,
        name=" Savings ",
        manual_value=Decimal("2500000"),
        quantity=Decimal("3"),
        buy_price=Decimal("10"),
        current_price=Decimal("12"),
        coin_ref="bitcoin",
        unit_denominated=True,
    )

    holding = build_holding(draft, holding_id="h9", currency="IDR",
                            updated_at=NOW)

    assert holding.name == "Savings"
    assert holding.value == Decimal("2500000")
    assert holding.quantity is None
    assert holding.buy_price is None
    assert holding.current_price is None
    assert holding.coin_ref is None
    assert holding.unit_denominated is False


def test_build_holding_stores_debt_as_positive_magnitude() -> None:
    """A negative manual value for a debt is stored as its magnitude."""
    draft = HoldingDraft(kind=DEBT, name="Car loan",
                         manual_value=Decimal("-1000000"))

    holding = build_holding(draft, holding_id="d1", currency="IDR",
                            updated_at=NOW)

    assert holding.value == Decimal("1000000")
    assert holding.unit_denominated is False


def test_build_holding_derives_value_for_unit_denominated_debt() -> None:
    """A coin-denominated loan takes its value from quantity x price."""
    draft = HoldingDraft(
        kind=DEBT,
        name="Loan Ethereum (ETH)",
        quantity=Decimal("2"),
        current_price=Decimal("30000000"),
        coin_ref=" Ethereum ",
        unit_denominated=True,
    )

    holding = build_holding(draft, holding_id="d2", currency="IDR",
                            updated_at=NOW)

    assert holding.unit_denominated is True
    assert holding.value == Decimal("60000000")
    assert holding.coin_ref == "ethereum"
    assert holding.updated_at == NOW


def test_build_holding_rejects_unknown_kind() -> None:
    """Unknown kinds are rejected."""
    with pytest.raises(ValueError):
        build_holding(HoldingDraft(kind="yacht", name="Boat"),
                      holding_id="x", currency="IDR", updated_at=NOW)


def test_apply_price_revalues_holding() -> None:
    """Refreshing the price recomputes the value."""
    holding = _holding(quantity=Decimal("0.5"), value=Decimal("250000000"))

    priced = apply_price(holding, Decimal("600000000"), updated_at=NOW)

    assert priced.current_price == Decimal("600000000")
    assert priced.value == Decimal("300000000")
    assert priced.updated_at == NOW
    assert holding.value == Decimal("250000000")


def test_apply_price_rejects_manual_holdings_and_bad_prices() -> None:
    """Manual holdings and non-positive prices cannot be priced."""
    with pytest.raises(ValueError):
        apply_price(_holding(kind=CASH, unit_denominated=False),
                    Decimal("1"), updated_at=NOW)
    with pytest.raises(ValueError):
        apply_price(_holding(quantity=Decimal("1")), Decimal("0"),
                    updated_at=NOW)
