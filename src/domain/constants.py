"""Domain constants for holdings and the ledger."""

SPENDING_ACCOUNT = "spending_account"
CASH = "cash"
INVESTMENT = "investment"
CRYPTO = "crypto"
PROPERTY = "property"
RECEIVABLE = "receivable"
DEBT = "debt"
OTHER = "other"

HOLDING_KINDS = (
    SPENDING_ACCOUNT,
    CASH,
    INVESTMENT,
    CRYPTO,
    PROPERTY,
    RECEIVABLE,
    DEBT,
    OTHER,
)

# Kinds whose value always comes from quantity x price.
UNIT_PRICED_KINDS = (CRYPTO, INVESTMENT)

# Kinds that can be settled, and optionally flagged as unit-denominated.
SETTLEABLE_KINDS = (DEBT, RECEIVABLE)

# Kinds subtracted from net worth.
LIABILITY_KINDS = (DEBT,)

INCOME = "income"
EXPENSE = "expense"
LEDGER_DIRECTIONS = (INCOME, EXPENSE)

DEFAULT_CURRENCY = "IDR"

UNCATEGORIZED_LABEL = "Uncategorized"

HOLDING_KIND_LABELS = {
    SPENDING_ACCOUNT: "Spending Account",
    CASH: "Cash & Savings",
    INVESTMENT: "Investment",
    CRYPTO: "Crypto",
    PROPERTY: "Property",
    RECEIVABLE: "Receivable",
    DEBT: "Debt",
    OTHER: "Other",
}


__all__ = [
    "SPENDING_ACCOUNT",
    "CASH",
    "INVESTMENT",
    "CRYPTO",
    "PROPERTY",
    "RECEIVABLE",
    "DEBT",
    "OTHER",
    "HOLDING_KINDS",
    "UNIT_PRICED_KINDS",
    "SETTLEABLE_KINDS",
    "LIABILITY_KINDS",
    "INCOME",
    "EXPENSE",
    "LEDGER_DIRECTIONS",
    "DEFAULT_CURRENCY",
    "UNCATEGORIZED_LABEL",
    "HOLDING_KIND_LABELS",
]
