"""Conversion between orders and markets and their wire representation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from spotexchange.order.domain import Market, Order, OrderStatus, OrderType
from spotexchange.spot.domain import format_decimal
from spotexchange.spot.mapper import MarketMessage

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass
class OrderMessage:
    """Wire form of an order: decimals travel as strings, enums by name."""

    id: str = ""
    user_id: str = ""
    market_id: str = ""
    type: str = ""
    price: str = ""
    quantity: str = ""
    filled_quantity: str = ""
    status: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


def _parse_decimal(text: str) -> Decimal:
    """Parse a decimal string; malformed or non-finite input yields zero."""
    try:
        value = Decimal(text)
    except (InvalidOperation, TypeError, ValueError):
        return Decimal(0)
    return value if value.is_finite() else Decimal(0)


def _as_time(moment: datetime | None) -> datetime:
    return _EPOCH if moment is None else moment


def to_proto_order(order: Order | None) -> OrderMessage | None:
    """Build the wire message for an order."""
    if order is None:
        return None
    return OrderMessage(
        id=order.id,
        user_id=order.user_id,
        market_id=order.market_id,
        type=order.type.value,
        price=format_decimal(order.price),
        quantity=format_decimal(order.quantity),
        filled_quantity=format_decimal(order.filled_quantity),
        status=order.status.value,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def to_domain_order(message: OrderMessage | None) -> Order | None:
    """Build an order from its wire message.

    Malformed decimals become zero, missing timestamps the Unix epoch;
    an unknown type or status name raises ValueError.
    """
    if message is None:
        return None
    return Order(
        id=message.id,
        user_id=message.user_id,
        market_id=message.market_id,
        type=OrderType(message.type),
        price=_parse_decimal(message.price),
        quantity=_parse_decimal(message.quantity),
        filled_quantity=_parse_decimal(message.filled_quantity),
        status=OrderStatus(message.status),
        created_at=_as_time(message.created_at),
        updated_at=_as_time(message.updated_at),
    )


def to_domain_market(message: MarketMessage | None) -> Market | None:
    """Build the order service's market from a spot wire message."""
    if message is None:
        return None
    return Market(
        id=message.id,
        symbol=message.symbol,
        base_currency=message.base_currency,
        quote_currency=message.quote_currency,
        enabled=message.enabled,
        deleted_at=None,
        min_order_size=_parse_decimal(message.min_order_size),
        max_order_size=_parse_decimal(message.max_order_size),
        price_increment=_parse_decimal(message.price_increment),
        size_increment=_parse_decimal(message.size_increment),
        allowed_roles=list(message.allowed_roles),
    )