"""Market lookups from the order service against the spot service."""

from __future__ import annotations

from typing import Protocol

from spotexchange.order.domain import Market
from spotexchange.order.mapper import to_domain_market
from spotexchange.spot.handler import GetMarketRequest, GetMarketResponse


class MarketClient(Protocol):
    """Answers whether a market accepts orders."""

    def check_market_active(self, market_id: str) -> bool:
        ...


class _SpotInstrumentClient(Protocol):
    def get_market(self, request: GetMarketRequest) -> GetMarketResponse:
        ...


class MarketCheckerClient:
    """Fetches markets through a spot instrument service client."""

    def __init__(self, client: _SpotInstrumentClient) -> None:
        self._client = client

    def get_market(self, market_id: str) -> Market:
        """Return the market; errors from the client propagate unchanged."""
        response = self._client.get_market(GetMarketRequest(market_id=market_id))
        if response.market is None:
            raise LookupError("market not found in response")
        return to_domain_market(response.market)