"""CLI adapter to create the finance tables.

The statements are idempotent, so the command can run on every deploy.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import ensure_schema


def main() -> None:
    """Create missing tables in the finance database."""
    logger = get_app_logger()
    engine = build_database_adapter().get_finance_engine()

    tables = ensure_schema(engine)

    logger.info(f"Schema ensured on {engine.url}: {', '.join(tables)}")
    print(f"Ensured {len(tables)} tables: {', '.join(tables)}")


if __name__ == "__main__":  # pragma: no cover
    main()
