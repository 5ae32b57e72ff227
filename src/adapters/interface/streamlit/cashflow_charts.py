"""Cashflow chart presentation logic for the Streamlit UI.

This module contains pure, testable transformations from cashflow
aggregates to chart models and Plotly figures. The UI is responsible for
loading the aggregates (no IO here).

The category flow Sankey is fixed to three columns:
    Income categories -> Cashflow -> Expense categories
with one optional node for the difference:
    - ``Savings`` when income exceeds expenses,
    - ``Deficit`` when expenses exceed income.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from src.domain.models.finance import CategoryBreakdown, MonthlyCashflow

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


MIDDLE_LABEL = "Cashflow"
SAVINGS_LABEL = "Savings"
DEFICIT_LABEL = "Deficit"

INCOME_COLOR = "#2e7d32"
EXPENSE_COLOR = "#e76f51"
BALANCE_COLOR = "#1b9aaa"


@dataclass(frozen=True)
class SankeyLink:
    """Sankey link edge."""

    source: int
    target: int
    value: Decimal


@dataclass(frozen=True)
class SankeyModel:
    """Model used by the UI to render a Sankey with stable indices."""

    node_labels: list[str]
    node_x: list[float]
    links: list[SankeyLink]


def build_category_flow_model(
    income: CategoryBreakdown,
    expense: CategoryBreakdown,
) -> SankeyModel:
    """Build the income-to-expense Sankey model.

    Args:
        income: Income totals per category.
        expense: Expense totals per category.

    Returns:
        SankeyModel: Nodes and links; zero amounts are skipped.
    """
    labels: list[str] = []
    node_x: list[float] = []
    links: list[SankeyLink] = []

    def _add_node(label: str, x: float) -> int:
        labels.append(label)
        node_x.append(x)
        return len(labels) - 1

    middle = _add_node(MIDDLE_LABEL, 0.5)
    for item in income.categories:
        if item.amount <= 0:
            continue
        index = _add_node(item.name, 0.01)
        links.append(SankeyLink(index, middle, item.amount))
    for item in expense.categories:
        if item.amount <= 0:
            continue
        index = _add_node(item.name, 0.99)
        links.append(SankeyLink(middle, index, item.amount))

    difference = income.total - expense.total
    if difference > 0:
        index = _add_node(SAVINGS_LABEL, 0.99)
        links.append(SankeyLink(middle, index, difference))
    elif difference < 0:
        index = _add_node(DEFICIT_LABEL, 0.01)
        links.append(SankeyLink(index, middle, -difference))

    return SankeyModel(node_labels=labels, node_x=node_x, links=links)


def build_sankey_figure(model: SankeyModel) -> "go.Figure":
    """Render a Sankey model as a Plotly figure.

    Args:
        model: Model produced by :func:`build_category_flow_model`.

    Returns:
        Plotly figure ready for ``st.plotly_chart``.
    """
    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Sankey(
                arrangement="snap",
                node=dict(
                    pad=10,
                    thickness=12,
                    label=model.node_labels,
                    x=model.node_x,
                    line=dict(color="rgba(0,0,0,0.25)", width=0.5),
                ),
                link=dict(
                    source=[link.source for link in model.links],
                    target=[link.target for link in model.links],
                    value=[float(link.value) for link in model.links],
                ),
                textfont=dict(size=12),
            )
        ]
    )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=480,
    )
    return fig


def build_monthly_cashflow_figure(
    months: list[MonthlyCashflow],
    currency_code: str,
) -> "go.Figure":
    """Render monthly income and expense bars with a balance line.

    Args:
        months: Monthly totals sorted by month.
        currency_code: Currency used for the axis title.

    Returns:
        Plotly figure ready for ``st.plotly_chart``.
    """
    import plotly.graph_objects as go

    labels = [item.month for item in months]
    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            name="Income",
            x=labels,
            y=[float(item.income) for item in months],
            marker_color=INCOME_COLOR,
        )
    )
    fig.add_trace(
        go.Bar(
            name="Expense",
            x=labels,
            y=[float(item.expense) for item in months],
            marker_color=EXPENSE_COLOR,
        )
    )
    fig.add_trace(
        go.Scatter(
            name="Balance",
            x=labels,
            y=[float(item.balance) for item in months],
            mode="lines+markers",
            line=dict(color=BALANCE_COLOR, width=2),
        )
    )
    fig.update_layout(
        barmode="group",
        margin=dict(l=8, r=8, t=8, b=8),
        height=380,
        yaxis_title=currency_code,
        legend=dict(orientation="h", y=-0.15),
    )
    return fig


__all__ = [
    "MIDDLE_LABEL",
    "SAVINGS_LABEL",
    "DEFICIT_LABEL",
    "SankeyLink",
    "SankeyModel",
    "build_category_flow_model",
    "build_sankey_figure",
    "build_monthly_cashflow_figure",
]
