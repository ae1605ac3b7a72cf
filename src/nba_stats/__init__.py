"""nba-stats - async player lookup and stats over the stats.nba.com API."""

from .client import NBAStats, find_player, get_client, get_stats, list_players
from .config import Settings, get_settings
from .errors import FetchError, MalformedResponseError, NBAStatsError
from .http import HTTPClient
from .models import (
    ADVANCED_CODES,
    BASIC_CODES,
    ById,
    ByName,
    ByRecord,
    PlayerProfile,
    PlayerRecord,
    StatSelection,
    StatsResult,
    Team,
)
from .season import current_season

__all__ = [
    "NBAStats",
    "get_client",
    "list_players",
    "find_player",
    "get_stats",
    "Settings",
    "get_settings",
    "NBAStatsError",
    "FetchError",
    "MalformedResponseError",
    "HTTPClient",
    "PlayerRecord",
    "PlayerProfile",
    "Team",
    "StatsResult",
    "StatSelection",
    "ByName",
    "ById",
    "ByRecord",
    "BASIC_CODES",
    "ADVANCED_CODES",
    "current_season",
]
