"""
Public entry point for the nba-stats client.

Usage:
    async with NBAStats() as nba:
        lebron = await nba.find_player("James, LeBron")
        stats = await nba.get_stats(lebron, basic=["PTS"], advanced=True)

    # Or through the process-wide client
    from nba_stats import find_player
    player = await find_player("Hakeem Olajuwon", include_inactive=True)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

from .config import Settings, get_settings
from .endpoints import FetchJSON
from .http import HTTPClient
from .models import PlayerLike, PlayerRecord, StatsResult
from .resolver import PlayerResolver
from .roster import RosterCache
from .stats import StatOption, StatsFetcher


class NBAStats:
    """
    Player listing, lookup and stats over the stats.nba.com API.

    Args:
        fetch_json: Async callable performing upstream requests. Defaults
            to an HTTPClient built from settings, owned by this instance.
        settings: Client settings; defaults to get_settings()
    """

    def __init__(
        self,
        fetch_json: FetchJSON | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self._http: HTTPClient | None = None
        if fetch_json is None:
            self._http = HTTPClient(self.settings)
            fetch_json = self._http.fetch_json

        self.roster = RosterCache(fetch_json, league_id=self.settings.league_id)
        self.resolver = PlayerResolver(self.roster)
        self.stats = StatsFetcher(fetch_json, self.resolver, self.settings)

    async def __aenter__(self) -> "NBAStats":
        if self._http is not None:
            await self._http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._http is not None:
            await self._http.aclose()

    async def list_players(self, only_active: bool = False) -> list[PlayerRecord]:
        """All players in roster order, optionally only those currently active."""
        return await self.roster.players(only_active=only_active)

    async def find_player(
        self,
        query: PlayerLike,
        include_inactive: bool = False,
    ) -> PlayerRecord | None:
        """Resolve a name, "Last, First" name or id; None when nobody matches."""
        return await self.resolver.resolve(query, include_inactive=include_inactive)

    async def get_stats(
        self,
        player: PlayerLike,
        basic: StatOption = True,
        advanced: StatOption = False,
        params: Mapping[str, Any] | None = None,
    ) -> StatsResult | None:
        """Profile plus selected stat lines for the current season."""
        return await self.stats.get_stats(player, basic=basic, advanced=advanced, params=params)


@lru_cache
def get_client() -> NBAStats:
    """
    Get the process-wide client.

    Uses lru_cache so the roster is fetched at most once per process.
    """
    return NBAStats()


async def list_players(only_active: bool = False) -> list[PlayerRecord]:
    return await get_client().list_players(only_active)


async def find_player(query: PlayerLike, include_inactive: bool = False) -> PlayerRecord | None:
    return await get_client().find_player(query, include_inactive)


async def get_stats(
    player: PlayerLike,
    basic: StatOption = True,
    advanced: StatOption = False,
    params: Mapping[str, Any] | None = None,
) -> StatsResult | None:
    return await get_client().get_stats(player, basic=basic, advanced=advanced, params=params)
