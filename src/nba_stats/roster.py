"""
In-memory roster of every player known to the stats API.

The roster is fetched once, on first use, and kept for the lifetime of
the cache. Callers that arrive while the first fetch is in flight all
wait on that same fetch.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from .endpoints import FetchJSON, roster_endpoint
from .models import PlayerRecord
from .normalize import normalize_roster
from .season import current_season

logger = logging.getLogger(__name__)


class RosterCache:
    """
    Lazily loaded, write-once player roster.

    Args:
        fetch_json: Async callable performing the upstream request
        season: Returns the season label to request the roster for
        league_id: League to list players for ("00" is the NBA)
    """

    def __init__(
        self,
        fetch_json: FetchJSON,
        season: Callable[[], str] = current_season,
        league_id: str = "00",
    ):
        self._fetch_json = fetch_json
        self._season = season
        self._league_id = league_id
        self._players: tuple[PlayerRecord, ...] | None = None
        self._pending: asyncio.Task | None = None

    @property
    def loaded(self) -> bool:
        return self._players is not None

    async def players(self, only_active: bool = False) -> list[PlayerRecord]:
        """
        Return the roster, fetching it first if needed.

        Args:
            only_active: Keep only players with a current roster status

        Raises:
            FetchError: If the roster fetch fails. Nothing is cached on
                failure, so the next call fetches again.
        """
        if self._players is None:
            await self._load()
        return self.snapshot(only_active)

    def snapshot(self, only_active: bool = False) -> list[PlayerRecord]:
        """Synchronous view of a loaded roster, in upstream order."""
        if self._players is None:
            raise RuntimeError("Roster not loaded. Await players() first.")
        if only_active:
            return [player for player in self._players if player.active]
        return list(self._players)

    async def _load(self) -> None:
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._fetch())
            self._pending.add_done_callback(self._fetch_done)
        # One waiter being cancelled must not cancel the shared fetch
        await asyncio.shield(self._pending)

    def _fetch_done(self, task: asyncio.Task) -> None:
        # Cleared here rather than by a waiter, since every waiter may be gone
        if self._pending is task:
            self._pending = None
        if not task.cancelled() and task.exception() is not None:
            logger.warning(f"Roster fetch failed: {task.exception()}")

    async def _fetch(self) -> None:
        season = self._season()
        logger.info(f"Fetching roster for season {season}")
        payload = await self._fetch_json(roster_endpoint(season, self._league_id))
        players = normalize_roster(payload)
        self._players = tuple(players)
        logger.info(f"Loaded {len(players)} players ({sum(p.active for p in players)} active)")
