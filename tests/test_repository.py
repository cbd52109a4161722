from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from spotexchange.spot.repository import InMemoryMarketRepository, MarketNotFoundError


@pytest.fixture
def repo():
    return InMemoryMarketRepository()


def test_seeded_ids(repo):
    assert sorted(m.id for m in repo.get_all()) == ["btc_usd", "eth_usd", "old_token"]


def test_get_by_id_returns_seeded_market(repo):
    market = repo.get_by_id("btc_usd")
    assert market.symbol == "BTC_USD"
    assert market.min_order_size == Decimal("0.0001")
    assert market.is_active()


def test_old_token_is_deleted_about_a_year_ago(repo):
    market = repo.get_by_id("old_token")
    assert not market.is_active()
    age = datetime.now(timezone.utc) - market.deleted_at
    assert timedelta(days=364) <= age <= timedelta(days=367)


def test_missing_market_raises(repo):
    with pytest.raises(MarketNotFoundError) as info:
        repo.get_by_id("nope")
    assert str(info.value) == "market not found"


def test_returned_market_is_a_copy(repo):
    market = repo.get_by_id("eth_usd")
    market.enabled = False
    market.allowed_roles.append("admin")
    again = repo.get_by_id("eth_usd")
    assert again.enabled is True
    assert again.allowed_roles == []


def test_get_all_returns_copies(repo):
    for market in repo.get_all():
        market.symbol = "CHANGED"
    assert sorted(m.symbol for m in repo.get_all()) == ["BTC_USD", "ETH_USD", "OLD_USD"]