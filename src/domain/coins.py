"""Catalog of popular price-feed coins and holding name suggestions."""

from dataclasses import dataclass

from src.domain.constants import DEBT, RECEIVABLE


@dataclass(frozen=True)
class Coin:
    """A coin known to the price feed."""

    coin_ref: str
    name: str
    symbol: str


POPULAR_COINS = (
    Coin("bitcoin", "Bitcoin", "BTC"),
    Coin("ethereum", "Ethereum", "ETH"),
    Coin("binancecoin", "BNB", "BNB"),
    Coin("solana", "Solana", "SOL"),
    Coin("ripple", "XRP", "XRP"),
    Coin("polygon-ecosystem-token", "Polygon", "POL"),
    Coin("chainlink", "Chainlink", "LINK"),
    Coin("tether", "USDT", "USDT"),
    Coin("usd-coin", "USDC", "USDC"),
    Coin("aave", "Aave", "AAVE"),
    Coin("dai", "DAI", "DAI"),
    Coin("pax-gold", "PAX Gold", "PAXG"),
    Coin("tether-gold", "Tether Gold", "XAUT"),
)

_NAME_PREFIXES = {
    DEBT: "Loan",
    RECEIVABLE: "Receivable",
}


def find_coin(coin_ref: str | None) -> Coin | None:
    """Return the catalog entry for a price-feed identifier."""
    if not coin_ref:
        return None
    for coin in POPULAR_COINS:
        if coin.coin_ref == coin_ref:
            return coin
    return None


def suggest_holding_name(kind: str, coin: Coin) -> str:
    """Suggest a display name such as ``Loan Ethereum (ETH)``."""
    prefix = _NAME_PREFIXES.get(kind, "")
    return f"{prefix} {coin.name} ({coin.symbol})".strip()


__all__ = ["Coin", "POPULAR_COINS", "find_coin", "suggest_holding_name"]
