"""Business rules for listing and looking up markets."""

from __future__ import annotations

from collections.abc import Iterable

from spotexchange.spot.domain import Market
from spotexchange.spot.repository import MarketRepository


def _has_access(market: Market, roles: set[str]) -> bool:
    return not market.allowed_roles or any(r in roles for r in market.allowed_roles)


class SpotService:
    """Market queries on top of a repository."""

    def __init__(self, repo: MarketRepository) -> None:
        self._repo = repo

    def view_markets(self, user_roles: Iterable[str]) -> list[Market]:
        """Return active markets the given roles may see."""
        roles = set(user_roles or ())
        return [
            m for m in self._repo.get_all() if m.is_active() and _has_access(m, roles)
        ]

    def get_market_by_id(self, market_id: str) -> Market:
        """Return the market with this id; the repository raises if absent."""
        return self._repo.get_by_id(market_id)