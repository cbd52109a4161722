"""Storage of orders: the repository contract and an in-memory store."""

from __future__ import annotations

import dataclasses
import threading
from datetime import datetime, timezone
from typing import Protocol

from spotexchange.order.domain import Order


class OrderNotFoundError(LookupError):
    """Raised when no order has the requested id."""

    def __init__(self, message: str = "order not found") -> None:
        super().__init__(message)


class OrderRepository(Protocol):
    """Read and write access to orders."""

    def save(self, order: Order) -> None:
        ...

    def get_by_id(self, order_id: str) -> Order:
        ...


class InMemoryOrderRepository:
    """Thread-safe order store kept in a dictionary."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._orders: dict[str, Order] = {}

    def save(self, order: Order) -> None:
        """Stamp the order's update time and store it under its id."""
        if order is None:
            raise ValueError("order cannot be None")
        with self._lock:
            order.updated_at = datetime.now(timezone.utc)
            self._orders[order.id] = order

    def get_by_id(self, order_id: str) -> Order:
        """Return a copy of the order, or raise OrderNotFoundError."""
        with self._lock:
            try:
                order = self._orders[order_id]
            except KeyError:
                raise OrderNotFoundError() from None
            return dataclasses.replace(order)