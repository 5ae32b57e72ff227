"""Tests for the cashflow chart presentation module."""

from decimal import Decimal

from src.adapters.interface.streamlit.cashflow_charts import (
    DEFICIT_LABEL,
    MIDDLE_LABEL,
    SAVINGS_LABEL,
    SankeyLink,
    build_category_flow_model,
    build_monthly_cashflow_figure,
    build_sankey_figure,
)
from src.domain.models.finance import (
    CategoryAmount,
    CategoryBreakdown,
    MonthlyCashflow,
)


def _breakdown(direction: str, amounts: dict[str, str]) -> CategoryBreakdown:
    categories = [
        CategoryAmount(
            category_ref=name.lower(),
            name=name,
            amount=Decimal(amount),
            percentage=Decimal("0"),
        )
        for name, amount in amounts.items()
    ]
    return CategoryBreakdown(
        direction=direction,
        currency_code="IDR",
        total=sum((item.amount for item in categories), start=Decimal("0")),
        categories=categories,
    )


def test_surplus_adds_savings_node_on_the_right():
    income = _breakdown("income", {"Salary": "1000"})
    expense = _breakdown("expense", {"Food": "300", "Rent": "500"})

    model = build_category_flow_model(income, expense)

    assert model.node_labels == [
        MIDDLE_LABEL, "Salary", "Food", "Rent", SAVINGS_LABEL
    ]
    assert model.node_x == [0.5, 0.01, 0.99, 0.99, 0.99]
    assert model.links[0] == SankeyLink(1, 0, Decimal("1000"))
    assert model.links[-1] == SankeyLink(0, 4, Decimal("200"))


def test_deficit_adds_node_on_the_left():
    income = _breakdown("income", {"Salary": "100"})
    expense = _breakdown("expense", {"Rent": "250"})

    model = build_category_flow_model(income, expense)

    assert model.node_labels[-1] == DEFICIT_LABEL
    assert model.node_x[-1] == 0.01
    assert model.links[-1] == SankeyLink(3, 0, Decimal("150"))


def test_balanced_flow_has_no_difference_node_and_skips_zero_amounts():
    income = _breakdown("income", {"Salary": "100", "Gift": "0"})
    expense = _breakdown("expense", {"Rent": "100"})

    model = build_category_flow_model(income, expense)

    assert SAVINGS_LABEL not in model.node_labels
    assert DEFICIT_LABEL not in model.node_labels
    assert "Gift" not in model.node_labels
    assert len(model.links) == 2


def test_build_sankey_figure_keeps_link_values():
    model = build_category_flow_model(
        _breakdown("income", {"Salary": "10"}),
        _breakdown("expense", {"Rent": "4"}),
    )

    fig = build_sankey_figure(model)

    sankey = fig.data[0]
    assert list(sankey.node.label) == list(model.node_labels)
    assert list(sankey.link.value) == [10.0, 4.0, 6.0]


def test_build_monthly_cashflow_figure_has_bars_and_balance_line():
    months = [
        MonthlyCashflow(
            month="2024-01", income=Decimal("10"), expense=Decimal("4")
        ),
        MonthlyCashflow(
            month="2024-02", income=Decimal("5"), expense=Decimal("8")
        ),
    ]

    fig = build_monthly_cashflow_figure(months, "IDR")

    assert [trace.name for trace in fig.data] == [
        "Income",
        "Expense",
        "Balance",
    ]
    assert list(fig.data[2].y) == [6.0, -3.0]
    assert fig.layout.barmode == "group"
