"""Ensure interface adapter packages expose the expected metadata."""

from importlib import import_module


def test_interface_package_exports_are_empty() -> None:
    module = import_module("src.adapters.interface")
    assert module.__all__ == []


def test_streamlit_package_exports_are_empty() -> None:
    module = import_module("src.adapters.interface.streamlit")
    assert module.__all__ == []


def test_cashflow_charts_exports_chart_builders() -> None:
    module = import_module("src.adapters.interface.streamlit.cashflow_charts")
    assert "build_category_flow_model" in module.__all__
    assert "build_monthly_cashflow_figure" in module.__all__
