"""Player lookup by name, id or record."""

from __future__ import annotations

import logging

from .models import ById, ByName, ByRecord, PlayerLike, PlayerRecord, as_query
from .roster import RosterCache

logger = logging.getLogger(__name__)


def fuzzy_match(pattern: str, target: str) -> bool:
    """
    Case-insensitive subsequence test.

    True when every character of pattern appears in target in the same
    order, not necessarily next to each other ("lbj" matches "lebron james").
    """
    remaining = iter(target.lower())
    return all(char in remaining for char in pattern.lower())


def normalize_query(name: str) -> str:
    """Lower-case a name query and turn "Last, First" into "first last"."""
    query = name.strip().lower()
    parts = query.split(",")
    if len(parts) > 1:
        query = " ".join(reversed(parts)).strip()
    return query


class PlayerResolver:
    """Resolves player queries against a RosterCache."""

    def __init__(self, roster: RosterCache):
        self.roster = roster

    async def resolve(
        self,
        query: PlayerLike,
        include_inactive: bool = False,
    ) -> PlayerRecord | None:
        """
        Find the player a query refers to.

        Args:
            query: Full name, "Last, First" name, player id, PlayerRecord,
                or one of the ByName / ById / ByRecord variants
            include_inactive: Also search retired players

        Returns:
            The matching PlayerRecord, or None if nobody matches. When
            several players fuzzy-match a name, the last one in roster
            order wins.
        """
        query = as_query(query)

        if isinstance(query, ByRecord):
            return query.record

        players = await self.roster.players(only_active=not include_inactive)

        if isinstance(query, ById):
            match = next((p for p in players if p.player_id == query.player_id), None)
        else:
            match = self._match_name(query, players)

        if match is None:
            logger.debug(f"No player found for {query}")
        return match

    def _match_name(self, query: ByName, players: list[PlayerRecord]) -> PlayerRecord | None:
        pattern = normalize_query(query.name)
        match = None
        for player in players:
            if fuzzy_match(pattern, player.full_name):
                match = player
        return match
