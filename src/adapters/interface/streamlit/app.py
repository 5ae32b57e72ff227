"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from dataclasses import replace
from datetime import date
from decimal import Decimal
import importlib

import streamlit as st
import altair as alt

from src.adapters.interface.streamlit.cashflow_charts import (
    build_category_flow_model,
    build_monthly_cashflow_figure,
    build_sankey_figure,
)
from src.application.use_cases.delete_holding import DeleteHoldingUseCase
from src.application.use_cases.get_budget_overview import (
    GetBudgetOverviewUseCase,
)
from src.application.use_cases.get_cashflow import (
    GetCashflowSummaryUseCase,
    GetMonthlyCashflowUseCase,
)
from src.application.use_cases.get_category_breakdown import (
    GetCategoryBreakdownUseCase,
)
from src.application.use_cases.get_holding_breakdown import (
    GetHoldingBreakdownUseCase,
)
from src.application.use_cases.get_holdings import (
    GetHoldingsUseCase,
    HoldingView,
)
from src.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from src.application.use_cases.manage_ledger_entries import (
    DeleteLedgerEntryUseCase,
    GetRecentEntriesUseCase,
    RecordLedgerEntryUseCase,
)
from src.application.use_cases.periods import (
    month_bounds,
    trailing_months_start,
)
from src.application.use_cases.refresh_holding_price import (
    PriceRefreshResult,
    RefreshHoldingPriceUseCase,
)
from src.application.use_cases.save_holding import SaveHoldingUseCase
from src.application.use_cases.settle_holding import SettleHoldingUseCase
from src.domain.coins import POPULAR_COINS, find_coin, suggest_holding_name
from src.domain.constants import (
    DEBT,
    EXPENSE,
    HOLDING_KIND_LABELS,
    HOLDING_KINDS,
    INCOME,
    LEDGER_DIRECTIONS,
    SETTLEABLE_KINDS,
    UNCATEGORIZED_LABEL,
)
from src.domain.errors import HoldingNotFoundError, StoreWriteError
from src.domain.models import (
    BudgetOverview,
    CashflowSummary,
    CategoryBreakdown,
    Holding,
    HoldingBreakdown,
    HoldingDraft,
    LedgerEntry,
    MonthlyCashflow,
    NetWorthSummary,
    SettlementRequest,
)
from src.domain.models.settlement import (
    CURRENCY_INPUT,
    FULL,
    PARTIAL,
    UNITS_INPUT,
)
from src.domain.policies.unit_fields import exposes_unit_fields
from src.domain.services.settlement import validate_settlement_request
from src.infrastructure.container import (
    build_budgets_repository,
    build_categories_repository,
    build_holdings_repository,
    build_identity_provider,
    build_ledger_repository,
    build_price_feed,
    build_settings,
)
from src.infrastructure.logging.logger import get_usage_logger

PALETTE = [
    "#1b9aaa",
    "#2e7d32",
    "#f4a261",
    "#e76f51",
    "#457b9d",
    "#f6c453",
    "#6c8ead",
    "#a0c4ff",
]


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Verify that the numpy/pandas modules Altair relies on are usable.

    Returns:
        Tuple of (ok, message). ``message`` explains what is broken.
    """
    try:
        numpy = importlib.import_module("numpy")
    except ImportError as exc:
        return False, f"numpy could not be imported: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy is incomplete (missing ndarray); reinstall it."
    try:
        pandas = importlib.import_module("pandas")
    except ImportError as exc:
        return False, f"pandas could not be imported: {exc}"
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is incomplete (missing Timestamp); reinstall it."
    return True, None


def _current_user_id() -> str:
    """Return the identity of the current user."""
    return build_identity_provider().current_user_id()


def _fetch_net_worth_summary(user_id: str) -> NetWorthSummary:
    """Fetch the net worth summary of the user's holdings."""
    settings = build_settings()
    use_case = GetNetWorthSummaryUseCase(
        holdings_repository=build_holdings_repository(),
        currency_code=settings.currency_code,
    )
    return use_case.execute(user_id)


@st.cache_data(show_spinner=False)
def _load_net_worth_summary(
    user_id: str,
    schema_version: int = 1,
) -> NetWorthSummary:
    """Cached wrapper around _fetch_net_worth_summary."""
    _ = schema_version
    return _fetch_net_worth_summary(user_id)


def _fetch_holding_breakdown(user_id: str) -> HoldingBreakdown:
    """Fetch per-kind holding subtotals."""
    settings = build_settings()
    use_case = GetHoldingBreakdownUseCase(
        holdings_repository=build_holdings_repository(),
        currency_code=settings.currency_code,
    )
    return use_case.execute(user_id)


@st.cache_data(show_spinner=False)
def _load_holding_breakdown(
    user_id: str,
    schema_version: int = 1,
) -> HoldingBreakdown:
    """Cached wrapper around _fetch_holding_breakdown."""
    _ = schema_version
    return _fetch_holding_breakdown(user_id)


def _fetch_holdings(user_id: str) -> list[HoldingView]:
    """Fetch holdings with their valuation."""
    use_case = GetHoldingsUseCase(
        holdings_repository=build_holdings_repository()
    )
    return use_case.execute(user_id)


def _fetch_cashflow_summary(
    user_id: str,
    start_date: date | None,
    end_date: date | None,
) -> CashflowSummary:
    """Fetch total income and expense for the window."""
    settings = build_settings()
    use_case = GetCashflowSummaryUseCase(
        ledger_repository=build_ledger_repository(),
        currency_code=settings.currency_code,
    )
    return use_case.execute(user_id, start_date=start_date, end_date=end_date)


@st.cache_data(show_spinner=False)
def _load_cashflow_summary(
    user_id: str,
    start_date: date | None,
    end_date: date | None,
) -> CashflowSummary:
    """Cached wrapper around _fetch_cashflow_summary."""
    return _fetch_cashflow_summary(user_id, start_date, end_date)


def _fetch_monthly_cashflow(
    user_id: str,
    start_date: date | None,
    end_date: date | None,
) -> list[MonthlyCashflow]:
    """Fetch income and expense per month."""
    use_case = GetMonthlyCashflowUseCase(
        ledger_repository=build_ledger_repository()
    )
    return use_case.execute(user_id, start_date=start_date, end_date=end_date)


def _fetch_category_breakdown(
    user_id: str,
    direction: str,
    start_date: date | None,
    end_date: date | None,
) -> CategoryBreakdown:
    """Fetch per-category totals for one direction."""
    settings = build_settings()
    use_case = GetCategoryBreakdownUseCase(
        ledger_repository=build_ledger_repository(),
        categories_repository=build_categories_repository(),
        currency_code=settings.currency_code,
    )
    return use_case.execute(
        user_id,
        direction,
        start_date=start_date,
        end_date=end_date,
    )


def _fetch_budget_overview(user_id: str, today: date) -> BudgetOverview:
    """Fetch budget progress for the month containing ``today``."""
    settings = build_settings()
    use_case = GetBudgetOverviewUseCase(
        budgets_repository=build_budgets_repository(),
        ledger_repository=build_ledger_repository(),
        currency_code=settings.currency_code,
    )
    return use_case.execute(user_id, today)


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    if currency_code == "IDR":
        return f"Rp {value:,.0f}"
    symbol = "€" if currency_code == "EUR" else currency_code
    return f"{value:,.2f} {symbol}"


def _format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.0f}"


def _format_delta_with_percent(
    delta: Decimal,
    baseline: Decimal,
) -> str:
    """Format delta value with percentage change."""
    if baseline == 0:
        return _format_delta(delta)
    percent = (delta / baseline) * Decimal("100")
    sign = "+" if percent >= 0 else ""
    return f"{_format_delta(delta)} ({sign}{percent:.2f}%)"


def _optional_decimal(value: float | None) -> Decimal | None:
    """Convert a number input to Decimal, treating 0 as missing."""
    if not value:
        return None
    return Decimal(str(value))


def _clear_caches() -> None:
    """Drop cached reads after a write."""
    st.cache_data.clear()


def _prepare_donut_chart_data(
    breakdown: HoldingBreakdown,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        breakdown: Holding subtotals by kind.
        max_categories: Maximum kinds to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    items = [
        (HOLDING_KIND_LABELS.get(item.kind, item.kind), item.amount)
        for item in breakdown.kinds
        if item.amount > 0
    ]
    sorted_items = sorted(items, key=lambda item: item[1], reverse=True)
    top_items = sorted_items[:max_categories]
    other_amount = sum(
        (amount for _, amount in sorted_items[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items = [*top_items, ("Other", other_amount)]
    total_amount = sum(
        (amount for _, amount in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for label, amount in top_items:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": label,
                "amount": float(amount),
                "amount_label": _format_currency(
                    amount,
                    breakdown.currency_code,
                ),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _render_donut_chart(
    data: list[dict[str, str | float]],
    title: str,
    chart_size: int = 320,
    legend_columns: int = 2,
    palette: Sequence[str] | None = None,
) -> None:
    """Render a donut chart from prepared data.

    Args:
        data: Rows with category, amount, amount_label and share_label.
        title: Chart title to display above the donut.
        chart_size: Width/height for the chart canvas.
        legend_columns: Column count of the legend.
        palette: Optional color palette override.
    """
    if not data:
        st.info("No amounts available for the chart.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.error(message)
        return

    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
        stroke="#0f1115",
        strokeWidth=2,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=list(palette or PALETTE)),
            legend=alt.Legend(
                orient="bottom",
                title=None,
                direction="horizontal",
                columns=legend_columns,
                labelLimit=180,
            ),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.25)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
        color="#f5f7ff",
    ).encode(
        text="amount_label:N"
    )
    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(
        stroke=None
    )
    st.subheader(title)
    st.altair_chart(chart, width="stretch")


def _category_chart_data(
    breakdown: CategoryBreakdown,
    max_categories: int = 6,
) -> list[dict[str, str | float]]:
    """Prepare category totals for the donut chart."""
    items = [item for item in breakdown.categories if item.amount > 0]
    top_items = items[:max_categories]
    other_amount = sum(
        (item.amount for item in items[max_categories:]),
        start=Decimal("0"),
    )
    rows = [(item.name, item.amount) for item in top_items]
    if other_amount:
        rows.append(("Other", other_amount))
    data: list[dict[str, str | float]] = []
    for name, amount in rows:
        share = (
            amount / breakdown.total * Decimal("100")
            if breakdown.total
            else Decimal("0")
        )
        data.append(
            {
                "category": name,
                "amount": float(amount),
                "amount_label": _format_currency(
                    amount, breakdown.currency_code
                ),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_net_worth(summary: NetWorthSummary) -> None:
    """Render the net worth metrics."""
    currency_code = summary.currency_code
    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric(
        "Assets",
        _format_currency(summary.asset_total, currency_code),
    )
    liabilities_col.metric(
        "Liabilities",
        _format_currency(summary.liability_total, currency_code),
    )
    net_worth_col.metric(
        "Net Worth",
        _format_currency(summary.net_worth, currency_code),
    )


def _render_cashflow_metrics(summary: CashflowSummary, label: str) -> None:
    """Render income, expense and difference metrics."""
    income_col, expense_col, diff_col = st.columns(3)
    income_col.metric(
        f"Income ({label})",
        _format_currency(summary.total_in, summary.currency_code),
    )
    expense_col.metric(
        f"Expense ({label})",
        _format_currency(summary.total_out, summary.currency_code),
    )
    diff_col.metric(
        "Difference",
        _format_currency(summary.difference, summary.currency_code),
        _format_delta_with_percent(summary.difference, summary.total_in),
    )


def _render_holdings_table(
    views: Sequence[HoldingView],
    currency_code: str,
) -> None:
    """Render the holdings table."""
    data = [
        {
            "Name": view.holding.name,
            "Kind": HOLDING_KIND_LABELS.get(
                view.holding.kind, view.holding.kind
            ),
            "Quantity": (
                f"{view.holding.quantity:,.8f}".rstrip("0").rstrip(".")
                if view.holding.quantity is not None
                else "—"
            ),
            "Value": _format_currency(view.holding.value, currency_code),
            "P/L": _format_delta_with_percent(
                view.valuation.profit_loss,
                view.valuation.initial_value,
            ),
        }
        for view in views
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _coin_label(coin_ref: str) -> str:
    coin = find_coin(coin_ref)
    if coin is None:
        return coin_ref or "—"
    return f"{coin.name} ({coin.symbol})"


def _coin_options(stored_ref: str | None) -> list[str]:
    """Return the coin choices, keeping a stored identifier selectable."""
    options = [""] + [item.coin_ref for item in POPULAR_COINS]
    if stored_ref and stored_ref not in options:
        options.append(stored_ref)
    return options


def _number_default(value: Decimal | None) -> float:
    return float(value) if value is not None else 0.0


def _quote_holding_price(
    holding: Holding,
    currency_code: str,
) -> PriceRefreshResult:
    """Price a holding being edited, without saving it."""
    settings = build_settings()
    use_case = RefreshHoldingPriceUseCase(
        holdings_repository=build_holdings_repository(),
        price_feed=build_price_feed(settings),
        currency_code=currency_code,
    )
    return use_case.quote(holding)


def _render_holding_form(
    user_id: str,
    currency_code: str,
    holding: Holding | None = None,
) -> None:
    """Render the add-holding form, or the edit form of ``holding``.

    When editing, the unit mode is rebuilt from the stored
    ``unit_denominated`` flag and the current price can be fetched from the
    price feed before saving.

    Args:
        user_id: Identity of the current user.
        currency_code: Currency of the system.
        holding: Stored holding to edit, or None to add a new one.
    """
    editing = holding is not None
    key = f"holding_{holding.id}" if editing else "holding_new"
    st.subheader(f"Edit {holding.name}" if editing else "Add holding")
    kinds = list(HOLDING_KINDS)
    kind = st.selectbox(
        "Kind",
        options=kinds,
        index=kinds.index(holding.kind) if editing else 0,
        format_func=lambda value: HOLDING_KIND_LABELS.get(value, value),
        key=f"{key}_kind",
    )
    unit_denominated = False
    if kind in SETTLEABLE_KINDS:
        unit_denominated = st.checkbox(
            "Denominated in coins",
            value=editing and holding.unit_denominated,
            key=f"{key}_units",
        )
    show_units = exposes_unit_fields(kind, unit_denominated)

    coin_ref = None
    if show_units:
        stored_ref = getattr(holding, "coin_ref", None)
        options = _coin_options(stored_ref)
        coin_ref = st.selectbox(
            "Coin",
            options=options,
            index=options.index(stored_ref) if stored_ref else 0,
            format_func=_coin_label,
            key=f"{key}_coin",
        ) or None
    coin = find_coin(coin_ref)

    quote_key = f"{key}_quoted_price"
    if editing and show_units and coin_ref:
        if st.button("Fetch current price", key=f"{key}_quote"):
            result = _quote_holding_price(
                replace(
                    holding,
                    kind=kind,
                    coin_ref=coin_ref,
                    unit_denominated=unit_denominated,
                ),
                currency_code,
            )
            if result.refreshed:
                price = result.holding.current_price
                st.session_state[quote_key] = price
                st.caption(
                    f"Latest price: {_format_currency(price, currency_code)}"
                )
            else:
                st.warning(result.warning)
    quoted_price = st.session_state.get(quote_key)
    if quoted_price is None:
        quoted_price = getattr(holding, "current_price", None)

    with st.form(f"{key}_form", clear_on_submit=not editing):
        if editing:
            default_name = holding.name
        else:
            default_name = suggest_holding_name(kind, coin) if coin else ""
        name = st.text_input("Name", value=default_name)
        manual_value = st.number_input(
            "Value",
            min_value=0.0,
            step=1000.0,
            value=_number_default(getattr(holding, "value", None)),
        )
        quantity = buy_price = current_price = None
        if show_units:
            quantity = st.number_input(
                "Quantity",
                min_value=0.0,
                format="%.8f",
                value=_number_default(getattr(holding, "quantity", None)),
            )
            buy_price = st.number_input(
                "Buy price",
                min_value=0.0,
                value=_number_default(getattr(holding, "buy_price", None)),
            )
            current_price = st.number_input(
                "Current price",
                min_value=0.0,
                value=_number_default(quoted_price),
            )
        description = st.text_input(
            "Description",
            value=getattr(holding, "description", None) or "",
        )
        submitted = st.form_submit_button("Save")

    if not submitted:
        return
    draft = HoldingDraft(
        kind=kind,
        name=name,
        manual_value=_optional_decimal(manual_value),
        quantity=_optional_decimal(quantity),
        buy_price=_optional_decimal(buy_price),
        current_price=_optional_decimal(current_price),
        coin_ref=coin_ref,
        description=description or None,
        unit_denominated=unit_denominated,
        id=holding.id if editing else None,
    )
    use_case = SaveHoldingUseCase(
        holdings_repository=build_holdings_repository(),
        currency_code=currency_code,
    )
    try:
        saved = use_case.execute(user_id, draft)
    except (ValueError, StoreWriteError) as exc:
        st.error(str(exc))
        return
    st.session_state.pop(quote_key, None)
    action = "holding_updated" if editing else "holding_saved"
    get_usage_logger().info(f"{action} kind={saved.kind}")
    _clear_caches()
    st.success(f"Saved {saved.name}.")


def _render_holding_delete(user_id: str, holding: Holding) -> None:
    """Render the delete control of a holding."""
    if not st.button("Delete holding", key=f"holding_{holding.id}_delete"):
        return
    use_case = DeleteHoldingUseCase(
        holdings_repository=build_holdings_repository()
    )
    try:
        use_case.execute(user_id, holding.id)
    except (HoldingNotFoundError, StoreWriteError) as exc:
        st.error(str(exc))
        return
    get_usage_logger().info(f"holding_deleted kind={holding.kind}")
    _clear_caches()
    st.success(f"Deleted {holding.name}.")


def _render_holding_editor(
    user_id: str,
    holdings: Sequence[Holding],
    currency_code: str,
) -> None:
    """Let the user pick a stored holding to edit or delete."""
    if not holdings:
        return
    by_id = {item.id: item for item in holdings}
    selected = st.selectbox(
        "Edit holding",
        options=[None, *by_id],
        format_func=lambda value: by_id[value].name if value else "—",
        key="holding_edit_select",
    )
    if selected is None:
        return
    holding = by_id[selected]
    _render_holding_form(user_id, currency_code, holding)
    _render_holding_delete(user_id, holding)


def _render_price_refresh(user_id: str, currency_code: str) -> None:
    """Render the bulk price refresh control."""
    if not st.button("Refresh prices"):
        return
    settings = build_settings()
    use_case = RefreshHoldingPriceUseCase(
        holdings_repository=build_holdings_repository(),
        price_feed=build_price_feed(settings),
        currency_code=currency_code,
    )
    results = use_case.execute_all(user_id)
    refreshed = sum(1 for result in results if result.refreshed)
    for result in results:
        if result.error:
            st.error(f"{result.holding.name}: {result.error}")
        elif result.warning:
            st.warning(f"{result.holding.name}: {result.warning}")
    _clear_caches()
    st.success(f"Refreshed {refreshed} of {len(results)} priced holdings.")


def _fetch_recent_entries(user_id: str, limit: int = 10) -> list[LedgerEntry]:
    """Fetch the latest ledger entries, newest first."""
    use_case = GetRecentEntriesUseCase(
        ledger_repository=build_ledger_repository()
    )
    return use_case.execute(user_id, limit=limit)


def _recent_entries_rows(
    entries: Sequence[LedgerEntry],
    category_names: dict[str, str],
    currency_code: str,
) -> list[dict[str, str]]:
    """Build table rows for recent entries, with signed amounts."""
    rows = []
    for entry in entries:
        sign = "+" if entry.direction == INCOME else "-"
        rows.append(
            {
                "Date": entry.entry_date.isoformat(),
                "Type": entry.direction.title(),
                "Category": category_names.get(
                    entry.category_ref, UNCATEGORIZED_LABEL
                ),
                "Description": entry.description or "",
                "Amount": (
                    f"{sign}{_format_currency(entry.amount, currency_code)}"
                ),
            }
        )
    return rows


def _render_recent_entries(user_id: str, currency_code: str) -> None:
    """Render the recent transactions table with a delete control."""
    st.subheader("Recent transactions")
    entries = _fetch_recent_entries(user_id)
    if not entries:
        st.info("No transactions yet.")
        return
    category_names = {
        item.id: item.name
        for item in build_categories_repository().fetch_categories(user_id)
    }
    st.dataframe(
        _recent_entries_rows(entries, category_names, currency_code),
        width="stretch",
        hide_index=True,
    )
    by_id = {entry.id: entry for entry in entries}
    selected = st.selectbox(
        "Transaction",
        options=list(by_id),
        format_func=lambda value: (
            f"{by_id[value].entry_date.isoformat()} "
            f"{by_id[value].description or by_id[value].direction.title()}"
        ),
        key="entry_delete_select",
    )
    if not st.button("Delete transaction", key="entry_delete"):
        return
    use_case = DeleteLedgerEntryUseCase(
        ledger_repository=build_ledger_repository()
    )
    try:
        use_case.execute(user_id, selected)
    except (ValueError, StoreWriteError) as exc:
        st.error(str(exc))
        return
    get_usage_logger().info("entry_deleted")
    _clear_caches()
    st.success("Transaction deleted.")


def _render_entry_form(user_id: str, today: date) -> None:
    """Render the manual income/expense form."""
    st.subheader("Add transaction")
    direction = st.radio(
        "Type",
        options=list(LEDGER_DIRECTIONS),
        format_func=str.title,
        horizontal=True,
        key="entry_direction",
    )
    options = {
        item.id: item.name
        for item in build_categories_repository().fetch_categories(
            user_id, direction
        )
    }
    with st.form("entry_form", clear_on_submit=True):
        amount = st.number_input("Amount", min_value=0.0, step=1000.0)
        category_ref = st.selectbox(
            "Category",
            options=[None, *options],
            format_func=lambda value: options.get(value, UNCATEGORIZED_LABEL),
        )
        entry_date = st.date_input("Date", value=today)
        description = st.text_input("Description")
        submitted = st.form_submit_button("Add")

    if not submitted:
        return
    entry = LedgerEntry(
        direction=direction,
        amount=_optional_decimal(amount),
        entry_date=entry_date,
        category_ref=category_ref,
        description=description or None,
    )
    use_case = RecordLedgerEntryUseCase(
        ledger_repository=build_ledger_repository()
    )
    try:
        stored = use_case.execute(user_id, entry)
    except (ValueError, StoreWriteError) as exc:
        st.error(str(exc))
        return
    get_usage_logger().info(f"entry_recorded direction={stored.direction}")
    _clear_caches()
    st.success("Transaction added.")


def _render_settlement_form(
    user_id: str,
    holdings: Sequence[Holding],
    currency_code: str,
) -> None:
    """Render the debt/receivable settlement form."""
    settleable = [item for item in holdings if item.kind in SETTLEABLE_KINDS]
    st.subheader("Settle debt or receivable")
    if not settleable:
        st.info("No debts or receivables to settle.")
        return
    by_id = {item.id: item for item in settleable}
    holding = by_id[
        st.selectbox(
            "Holding",
            options=list(by_id),
            format_func=lambda value: by_id[value].name,
        )
    ]
    mode = st.radio("Mode", options=[FULL, PARTIAL], horizontal=True)
    unit = CURRENCY_INPUT
    amount = None
    if mode == PARTIAL:
        if holding.unit_denominated:
            unit = st.radio(
                "Pay in",
                options=[CURRENCY_INPUT, UNITS_INPUT],
                horizontal=True,
            )
        amount = _optional_decimal(
            st.number_input("Amount", min_value=0.0, format="%.8f")
        )
    record = st.checkbox("Record transaction", value=True)
    category_ref = None
    if record:
        direction = EXPENSE if holding.kind == DEBT else INCOME
        categories = build_categories_repository().fetch_categories(
            user_id, direction
        )
        options = {item.id: item.name for item in categories}
        category_ref = st.selectbox(
            "Category",
            options=[None, *options],
            format_func=lambda value: options.get(value, "—"),
        )

    request = SettlementRequest(
        mode=mode,
        amount=amount,
        unit=unit,
        record_transaction=record,
        category_ref=category_ref,
    )
    use_case = SettleHoldingUseCase(
        holdings_repository=build_holdings_repository()
    )
    plan = use_case.preview(holding, request)
    if plan is not None:
        st.caption(
            f"{plan.description}: "
            f"{_format_currency(plan.pay_amount, currency_code)}"
            f" -> remaining {_format_currency(plan.new_value, currency_code)}"
        )
    errors = validate_settlement_request(holding, request)
    for message in errors:
        st.caption(message)
    if not st.button("Submit settlement", disabled=bool(errors)):
        return

    result = use_case.execute(user_id, holding.id, request)
    if result.ok:
        get_usage_logger().info(f"settlement_applied mode={mode}")
        _clear_caches()
        st.success(
            f"Settled {result.holding.name}; remaining "
            f"{_format_currency(result.holding.value, currency_code)}."
        )
    else:
        st.error("; ".join(result.errors))


def _render_dashboard(user_id: str, today: date, currency_code: str) -> None:
    summary = _load_net_worth_summary(user_id, schema_version=1)
    _render_net_worth(summary)
    month_start, month_end = month_bounds(today)
    cashflow = _load_cashflow_summary(user_id, month_start, month_end)
    _render_cashflow_metrics(cashflow, "this month")
    breakdown = _load_holding_breakdown(user_id, schema_version=1)
    data, _ = _prepare_donut_chart_data(breakdown, max_categories=5)
    _render_donut_chart(data, "Holdings by Kind")
    _render_recent_entries(user_id, currency_code)
    _render_entry_form(user_id, today)


def _render_holdings_page(user_id: str, currency_code: str) -> None:
    views = _fetch_holdings(user_id)
    st.caption(f"{len(views)} holdings")
    if views:
        _render_holdings_table(views, currency_code)
    else:
        st.warning("No holdings yet. Add one below.")
    _render_price_refresh(user_id, currency_code)
    _render_holding_form(user_id, currency_code)
    _render_holding_editor(
        user_id,
        [view.holding for view in views],
        currency_code,
    )
    _render_settlement_form(
        user_id,
        [view.holding for view in views],
        currency_code,
    )


def _render_reports(user_id: str, today: date, currency_code: str) -> None:
    start_date = trailing_months_start(today, months=6)
    summary = _load_cashflow_summary(user_id, start_date, today)
    _render_cashflow_metrics(summary, "6 months")
    months = _fetch_monthly_cashflow(user_id, start_date, today)
    if months:
        st.subheader("Monthly cashflow")
        st.plotly_chart(
            build_monthly_cashflow_figure(months, currency_code),
            use_container_width=True,
        )
    income = _fetch_category_breakdown(user_id, INCOME, start_date, today)
    expense = _fetch_category_breakdown(user_id, EXPENSE, start_date, today)
    left, right = st.columns(2)
    with left:
        _render_donut_chart(_category_chart_data(income), "Income by Category")
    with right:
        _render_donut_chart(
            _category_chart_data(expense), "Expense by Category"
        )
    if income.total or expense.total:
        st.subheader("Category flow")
        model = build_category_flow_model(income, expense)
        st.plotly_chart(build_sankey_figure(model), use_container_width=True)


def _render_budget(user_id: str, today: date) -> None:
    overview = _fetch_budget_overview(user_id, today)
    if not overview.items:
        st.info("No budgets configured.")
        return
    currency_code = overview.currency_code
    st.metric(
        "Spent this month",
        _format_currency(overview.total_spent, currency_code),
        f"{overview.overall_percentage:.1f}% of "
        f"{_format_currency(overview.total_limit, currency_code)}",
        delta_color="inverse",
    )
    for item in overview.items:
        label = (
            f"{item.category_name}: "
            f"{_format_currency(item.spent, currency_code)} / "
            f"{_format_currency(item.limit, currency_code)}"
        )
        st.progress(min(float(item.percentage) / 100, 1.0), text=label)
        if item.is_over_budget:
            st.warning(
                f"{item.category_name} is over budget by "
                f"{_format_currency(-item.remaining, currency_code)}."
            )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Dashboard", layout="wide")
    st.title("Finance Dashboard")

    try:
        user_id = _current_user_id()
    except RuntimeError as exc:
        st.error(str(exc))
        return

    settings = build_settings()
    today = date.today()
    page = st.sidebar.selectbox(
        "Page",
        ["Dashboard", "Holdings", "Reports", "Budget"],
    )
    get_usage_logger().info(f"page_view page={page}")

    if page == "Dashboard":
        _render_dashboard(user_id, today, settings.currency_code)
    elif page == "Holdings":
        _render_holdings_page(user_id, settings.currency_code)
    elif page == "Reports":
        _render_reports(user_id, today, settings.currency_code)
    else:
        _render_budget(user_id, today)


if __name__ == "__main__":  # pragma: no cover
    main()
