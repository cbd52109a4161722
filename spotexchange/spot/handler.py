"""Request handling for the spot instrument service."""

from __future__ import annotations

from dataclasses import dataclass, field

from spotexchange.spot.mapper import MarketMessage, to_proto_market, to_proto_market_list
from spotexchange.spot.repository import MarketNotFoundError
from spotexchange.spot.service import SpotService
from spotexchange.status import RpcError, StatusCode


@dataclass
class PageInfo:
    total_count: int = 0


@dataclass
class ViewMarketsRequest:
    user_roles: list[str] = field(default_factory=list)


@dataclass
class ViewMarketsResponse:
    markets: list[MarketMessage] = field(default_factory=list)
    page_info: PageInfo = field(default_factory=PageInfo)


@dataclass
class GetMarketRequest:
    market_id: str = ""


@dataclass
class GetMarketResponse:
    market: MarketMessage | None = None


class SpotHandler:
    """Turns requests into service calls and failures into RpcError."""

    def __init__(self, service: SpotService) -> None:
        self._service = service

    def view_markets(self, request: ViewMarketsRequest) -> ViewMarketsResponse:
        """List the markets visible to the request's roles."""
        try:
            markets = self._service.view_markets(request.user_roles)
        except Exception as exc:
            raise RpcError(StatusCode.INTERNAL, f"failde to get markets: {exc}") from exc
        return ViewMarketsResponse(
            markets=to_proto_market_list(markets),
            page_info=PageInfo(total_count=len(markets)),
        )

    def get_market(self, request: GetMarketRequest) -> GetMarketResponse:
        """Return one market by id."""
        if not request.market_id:
            raise RpcError(StatusCode.INVALID_ARGUMENT, "market_id is required")
        try:
            market = self._service.get_market_by_id(request.market_id)
        except Exception as exc:
            if isinstance(exc, MarketNotFoundError) or str(exc) == "market not found":
                raise RpcError(StatusCode.NOT_FOUND, "market not found") from exc
            raise RpcError(StatusCode.INTERNAL, f"failed to get market: {exc}") from exc
        return GetMarketResponse(market=to_proto_market(market))