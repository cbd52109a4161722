"""Order and market models of the order service."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal


class OrderType(str, enum.Enum):
    """Side of an order."""

    BUY = "BUY"
    SELL = "SELL"


class OrderStatus(str, enum.Enum):
    """Lifecycle state of an order."""

    CREATED = "CREATED"
    PENDING = "PENDING"
    FILLED = "FILLED"
    PARTIALLY_FILLED = "PARTIALLY_FILLED"
    CANCELLED = "CANCELLED"
    REJECTED = "REJECTED"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Order:
    """A user's order on a market."""

    id: str
    user_id: str
    market_id: str
    type: OrderType
    price: Decimal
    quantity: Decimal
    filled_quantity: Decimal = Decimal(0)
    status: OrderStatus = OrderStatus.CREATED
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)


@dataclass
class Market:
    """The order service's view of a trading pair."""

    id: str
    symbol: str
    base_currency: str
    quote_currency: str
    enabled: bool = False
    deleted_at: datetime | None = None
    min_order_size: Decimal = Decimal(0)
    max_order_size: Decimal = Decimal(0)
    price_increment: Decimal = Decimal(0)
    size_increment: Decimal = Decimal(0)
    allowed_roles: list[str] = field(default_factory=list)

    def is_active(self) -> bool:
        """A market is active when it is enabled and not deleted."""
        return self.enabled and self.deleted_at is None