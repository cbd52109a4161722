"""Trading pair model of the spot service."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass
class Market:
    """A trading pair such as BTC_USD."""

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


def format_decimal(value: Decimal) -> str:
    """Render a decimal in plain notation without trailing zeros."""
    if value.is_zero():
        return "0"
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text