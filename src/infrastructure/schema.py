"""DDL for the finance data store tables."""

from sqlalchemy.engine import Engine

CREATE_HOLDINGS_SQL = """
CREATE TABLE IF NOT EXISTS holdings (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    kind TEXT NOT NULL,
    name TEXT NOT NULL,
    value NUMERIC NOT NULL DEFAULT 0,
    quantity NUMERIC,
    buy_price NUMERIC,
    current_price NUMERIC,
    coin_ref TEXT,
    currency TEXT NOT NULL,
    description TEXT,
    unit_denominated BOOLEAN,
    updated_at TIMESTAMP
)
"""

CREATE_LEDGER_ENTRIES_SQL = """
CREATE TABLE IF NOT EXISTS ledger_entries (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    direction TEXT NOT NULL,
    amount NUMERIC NOT NULL,
    category_ref TEXT,
    holding_ref TEXT,
    description TEXT,
    entry_date DATE NOT NULL,
    created_at TIMESTAMP
)
"""

CREATE_CATEGORIES_SQL = """
CREATE TABLE IF NOT EXISTS categories (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name TEXT NOT NULL,
    direction TEXT NOT NULL
)
"""

CREATE_BUDGETS_SQL = """
CREATE TABLE IF NOT EXISTS budgets (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    category_ref TEXT NOT NULL,
    amount NUMERIC NOT NULL
)
"""

TABLES_DDL = (
    ("holdings", CREATE_HOLDINGS_SQL),
    ("ledger_entries", CREATE_LEDGER_ENTRIES_SQL),
    ("categories", CREATE_CATEGORIES_SQL),
    ("budgets", CREATE_BUDGETS_SQL),
)


def ensure_schema(engine: Engine) -> list[str]:
    """Create the finance tables if they do not exist.

    Args:
        engine: SQLAlchemy engine for the finance database.

    Returns:
        list[str]: Names of the tables ensured.
    """
    with engine.begin() as conn:
        for _, ddl in TABLES_DDL:
            conn.exec_driver_sql(ddl)
    return [name for name, _ in TABLES_DDL]


__all__ = [
    "CREATE_HOLDINGS_SQL",
    "CREATE_LEDGER_ENTRIES_SQL",
    "CREATE_CATEGORIES_SQL",
    "CREATE_BUDGETS_SQL",
    "TABLES_DDL",
    "ensure_schema",
]
