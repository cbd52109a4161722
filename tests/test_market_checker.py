from decimal import Decimal

import pytest

from spotexchange.order.market_checker import MarketCheckerClient
from spotexchange.spot.handler import GetMarketResponse, SpotHandler
from spotexchange.spot.repository import InMemoryMarketRepository
from spotexchange.spot.service import SpotService
from spotexchange.status import RpcError, StatusCode


@pytest.fixture
def checker():
    handler = SpotHandler(SpotService(InMemoryMarketRepository()))
    return MarketCheckerClient(handler)


class _EmptyClient:
    def __init__(self):
        self.requests = []

    def get_market(self, request):
        self.requests.append(request)
        return GetMarketResponse(market=None)


def test_get_active_market(checker):
    market = checker.get_market("btc_usd")
    assert market.symbol == "BTC_USD"
    assert market.base_currency == "BTC"
    assert market.min_order_size == Decimal("0.0001")
    assert market.max_order_size == Decimal("100.0")
    assert market.is_active()


def test_deleted_market_is_inactive(checker):
    market = checker.get_market("old_token")
    assert market.symbol == "OLD_USD"
    assert market.is_active() is False


def test_missing_market_propagates_not_found(checker):
    with pytest.raises(RpcError) as info:
        checker.get_market("nope")
    assert info.value.code is StatusCode.NOT_FOUND


def test_empty_id_propagates_invalid_argument(checker):
    with pytest.raises(RpcError) as info:
        checker.get_market("")
    assert info.value.code is StatusCode.INVALID_ARGUMENT


def test_empty_response_raises():
    client = _EmptyClient()
    checker = MarketCheckerClient(client)
    with pytest.raises(LookupError, match="market not found in response"):
        checker.get_market("btc_usd")
    assert client.requests[0].market_id == "btc_usd"