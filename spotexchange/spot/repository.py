"""Storage of markets: the repository contract and an in-memory store."""

from __future__ import annotations

import dataclasses
import threading
from datetime import datetime, timezone
from decimal import Decimal
from typing import Protocol

from spotexchange.spot.domain import Market


class MarketNotFoundError(LookupError):
    """Raised when no market has the requested id."""

    def __init__(self, message: str = "market not found") -> None:
        super().__init__(message)


class MarketRepository(Protocol):
    """Read access to markets."""

    def get_all(self) -> list[Market]:
        ...

    def get_by_id(self, market_id: str) -> Market:
        ...


def _copy(market: Market) -> Market:
    return dataclasses.replace(market, allowed_roles=list(market.allowed_roles))


def _one_year_before(moment: datetime) -> datetime:
    try:
        return moment.replace(year=moment.year - 1)
    except ValueError:
        # February 29th rolls over to March 1st.
        return moment.replace(year=moment.year - 1, month=3, day=1)


class InMemoryMarketRepository:
    """Thread-safe market store seeded with a few sample markets."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._markets: dict[str, Market] = {}
        self._seed()

    def _seed(self) -> None:
        now = datetime.now(timezone.utc)
        seed = [
            Market(
                id="btc_usd",
                symbol="BTC_USD",
                base_currency="BTC",
                quote_currency="USD",
                enabled=True,
                min_order_size=Decimal("0.0001"),
                max_order_size=Decimal("100.0"),
                price_increment=Decimal("0.01"),
                size_increment=Decimal("0.0001"),
            ),
            Market(
                id="eth_usd",
                symbol="ETH_USD",
                base_currency="ETH",
                quote_currency="USD",
                enabled=True,
                min_order_size=Decimal("0.0001"),
                max_order_size=Decimal("100.0"),
                price_increment=Decimal("0.01"),
                size_increment=Decimal("0.0001"),
            ),
            Market(
                id="old_token",
                symbol="OLD_USD",
                base_currency="OLD",
                quote_currency="USD",
                enabled=False,
                deleted_at=_one_year_before(now),
                min_order_size=Decimal("1.0"),
                max_order_size=Decimal("10.0"),
                price_increment=Decimal("0.01"),
                size_increment=Decimal("1.0"),
            ),
        ]
        with self._lock:
            self._markets.update((m.id, m) for m in seed)

    def get_all(self) -> list[Market]:
        """Return copies of every stored market."""
        with self._lock:
            return [_copy(m) for m in self._markets.values()]

    def get_by_id(self, market_id: str) -> Market:
        """Return a copy of the market, or raise MarketNotFoundError."""
        with self._lock:
            try:
                market = self._markets[market_id]
            except KeyError:
                raise MarketNotFoundError() from None
            return _copy(market)