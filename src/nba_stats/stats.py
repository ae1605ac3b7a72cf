"""
Per-player stats retrieval.

A stats request always fetches the player's profile and, depending on
the selection, the Base and/or Advanced general-splits dashboards. The
requests run concurrently and the call fails as a whole if any of them
fails.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Iterable, Mapping, Union

from .config import Settings, get_settings
from .endpoints import (
    MEASURE_ADVANCED,
    MEASURE_BASE,
    Endpoint,
    FetchJSON,
    dashboard_endpoint,
    profile_endpoint,
)
from .models import PlayerLike, StatSelection, StatsResult
from .normalize import merge_stats
from .resolver import PlayerResolver
from .season import current_season

logger = logging.getLogger(__name__)

StatOption = Union[bool, Iterable[str], StatSelection]


class StatsFetcher:
    """Fetches and merges profile and dashboard data for one player."""

    def __init__(
        self,
        fetch_json: FetchJSON,
        resolver: PlayerResolver,
        settings: Settings | None = None,
        season: Callable[[], str] = current_season,
    ):
        self._fetch_json = fetch_json
        self.resolver = resolver
        self.settings = settings or get_settings()
        self._season = season

    def build_endpoints(
        self,
        player_id: int,
        basic: StatSelection,
        advanced: StatSelection,
        params: Mapping[str, Any] | None = None,
    ) -> list[Endpoint]:
        """Profile endpoint first, then one dashboard per included measure type."""
        season = self._season()
        endpoints = [profile_endpoint(player_id, self.settings.league_id)]
        for selection, measure_type in ((basic, MEASURE_BASE), (advanced, MEASURE_ADVANCED)):
            if selection.include:
                endpoints.append(
                    dashboard_endpoint(player_id, season, measure_type, self.settings, params)
                )
        return endpoints

    async def get_stats(
        self,
        player: PlayerLike,
        basic: StatOption = True,
        advanced: StatOption = False,
        params: Mapping[str, Any] | None = None,
    ) -> StatsResult | None:
        """
        Fetch a player's profile and season stats.

        Args:
            player: Name, "Last, First" name, player id or PlayerRecord.
                Retired players are included in the lookup.
            basic: True for every basic metric, False to skip them, or
                a list of metric codes to keep
            advanced: Same as basic, for the advanced metrics
            params: Overrides for the dashboard query parameters

        Returns:
            StatsResult, or None if the player could not be resolved

        Raises:
            FetchError: If any upstream request fails or is malformed
        """
        # The roster is loaded even when a record is passed in
        await self.resolver.roster.players()
        record = await self.resolver.resolve(player, include_inactive=True)
        if record is None:
            logger.info(f"No player found for {player!r}")
            return None

        basic_selection = StatSelection.from_option(basic)
        advanced_selection = StatSelection.from_option(advanced)
        endpoints = self.build_endpoints(
            record.player_id, basic_selection, advanced_selection, params
        )

        logger.debug(f"Fetching {len(endpoints)} resources for player {record.player_id}")
        payloads = await asyncio.gather(*(self._fetch_json(endpoint) for endpoint in endpoints))

        return merge_stats(payloads, basic_selection, advanced_selection)
