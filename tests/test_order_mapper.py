from datetime import datetime, timezone
from decimal import Decimal

import pytest

from spotexchange.order.domain import Order, OrderStatus, OrderType
from spotexchange.order.mapper import (
    OrderMessage,
    to_domain_market,
    to_domain_order,
    to_proto_order,
)
from spotexchange.spot.domain import Market as SpotMarket
from spotexchange.spot.mapper import MarketMessage, to_proto_market

CREATED = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
UPDATED = datetime(2024, 5, 2, 12, 0, tzinfo=timezone.utc)


def _order():
    return Order(
        id="o1",
        user_id="u1",
        market_id="btc_usd",
        type=OrderType.SELL,
        price=Decimal("100.50"),
        quantity=Decimal("2"),
        filled_quantity=Decimal("0.5"),
        status=OrderStatus.PARTIALLY_FILLED,
        created_at=CREATED,
        updated_at=UPDATED,
    )


def test_to_proto_order_fields():
    message = to_proto_order(_order())
    assert message.id == "o1"
    assert message.type == "SELL"
    assert message.status == "PARTIALLY_FILLED"
    assert message.price == "100.5"
    assert message.quantity == "2"
    assert message.created_at == CREATED


def test_order_round_trip():
    order = _order()
    assert to_domain_order(to_proto_order(order)) == order


def test_none_passes_through():
    assert to_proto_order(None) is None
    assert to_domain_order(None) is None
    assert to_domain_market(None) is None


def test_malformed_decimals_become_zero():
    message = OrderMessage(
        id="o2", type="BUY", status="CREATED", price="abc", quantity="", filled_quantity="NaN"
    )
    order = to_domain_order(message)
    assert order.price == Decimal(0)
    assert order.quantity == Decimal(0)
    assert order.filled_quantity == Decimal(0)


def test_missing_timestamps_become_epoch():
    order = to_domain_order(OrderMessage(type="BUY", status="FILLED", price="1", quantity="1"))
    assert order.created_at == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert order.updated_at == order.created_at


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        to_domain_order(OrderMessage(type="HOLD", status="CREATED"))


def test_to_domain_market_from_spot_message():
    spot = SpotMarket(
        id="btc_usd",
        symbol="BTC_USD",
        base_currency="BTC",
        quote_currency="USD",
        enabled=True,
        min_order_size=Decimal("0.0001"),
        max_order_size=Decimal("100.0"),
        price_increment=Decimal("0.01"),
        size_increment=Decimal("0.0001"),
        allowed_roles=["trader"],
    )
    market = to_domain_market(to_proto_market(spot))
    assert market.id == spot.id
    assert market.symbol == spot.symbol
    assert market.min_order_size == spot.min_order_size
    assert market.max_order_size == spot.max_order_size
    assert market.allowed_roles == ["trader"]
    assert market.is_active()


def test_to_domain_market_drops_deletion_time():
    message = MarketMessage(
        id="old_token",
        enabled=False,
        deleted_at=datetime(2020, 1, 1, tzinfo=timezone.utc),
        min_order_size="bad",
    )
    market = to_domain_market(message)
    assert market.deleted_at is None
    assert market.min_order_size == Decimal(0)
    assert market.is_active() is False