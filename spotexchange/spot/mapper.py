"""Conversion of markets to their wire representation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from spotexchange.spot.domain import Market, format_decimal


@dataclass
class MarketMessage:
    """Wire form of a market: decimals travel as strings."""

    id: str = ""
    symbol: str = ""
    base_currency: str = ""
    quote_currency: str = ""
    enabled: bool = False
    deleted_at: datetime | None = None
    min_order_size: str = ""
    max_order_size: str = ""
    price_increment: str = ""
    size_increment: str = ""
    allowed_roles: list[str] = field(default_factory=list)


def to_proto_market(market: Market) -> MarketMessage:
    """Build the wire message for a market."""
    return MarketMessage(
        id=market.id,
        symbol=market.symbol,
        base_currency=market.base_currency,
        quote_currency=market.quote_currency,
        enabled=market.enabled,
        deleted_at=market.deleted_at,
        min_order_size=format_decimal(market.min_order_size),
        max_order_size=format_decimal(market.max_order_size),
        price_increment=format_decimal(market.price_increment),
        size_increment=format_decimal(market.size_increment),
        allowed_roles=list(market.allowed_roles),
    )


def to_proto_market_list(markets: Iterable[Market]) -> list[MarketMessage]:
    """Build wire messages for markets, keeping their order."""
    return [to_proto_market(m) for m in markets]