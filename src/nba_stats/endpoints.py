"""
Endpoint descriptors for the stats.nba.com resources the client reads.

An Endpoint only describes a request (path, query parameters, extra
headers). Turning it into a response is the job of a FetchJSON
callable, normally HTTPClient.fetch_json.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping

from .config import Settings

ROSTER_RESOURCE = "commonallplayers"
PROFILE_RESOURCE = "commonplayerinfo"
DASHBOARD_RESOURCE = "playerdashboardbygeneralsplits"

MEASURE_BASE = "Base"
MEASURE_ADVANCED = "Advanced"


@dataclass(frozen=True)
class Endpoint:
    """A GET request against the stats API, relative to the base URL."""

    path: str
    params: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)


# Async callable that performs the request and returns the decoded JSON body
FetchJSON = Callable[[Endpoint], Awaitable[dict[str, Any]]]


def roster_endpoint(season: str, league_id: str = "00") -> Endpoint:
    """All players, current and historical, as listed for a season."""
    return Endpoint(
        path=f"/{ROSTER_RESOURCE}",
        params={
            "LeagueID": league_id,
            "Season": season,
            "IsOnlyCurrentSeason": "0",
        },
    )


def profile_endpoint(player_id: int, league_id: str = "00") -> Endpoint:
    return Endpoint(
        path=f"/{PROFILE_RESOURCE}",
        params={"PlayerID": player_id, "LeagueID": league_id},
    )


def dashboard_params(
    player_id: int,
    season: str,
    measure_type: str,
    settings: Settings,
) -> dict[str, Any]:
    """Default query parameters for a general-splits dashboard request."""
    return {
        "Season": season,
        "SeasonType": settings.season_type,
        "LeagueID": settings.league_id,
        "PlayerID": player_id,
        "MeasureType": measure_type,
        "PerMode": settings.per_mode,
        "PlusMinus": "N",
        "PaceAdjust": "N",
        "Rank": "N",
        "Outcome": "",
        "Location": "",
        "Month": "0",
        "SeasonSegment": "",
        "DateFrom": "",
        "DateTo": "",
        "OpponentTeamID": "0",
        "VsConference": "",
        "VsDivision": "",
        "GameSegment": "",
        "Period": "0",
        "LastNGames": "0",
    }


def dashboard_endpoint(
    player_id: int,
    season: str,
    measure_type: str,
    settings: Settings,
    overrides: Mapping[str, Any] | None = None,
) -> Endpoint:
    """
    Dashboard request for one measure type.

    Args:
        player_id: Player to fetch
        season: Season label, e.g. "2024-25"
        measure_type: MEASURE_BASE or MEASURE_ADVANCED
        settings: Source of SeasonType, LeagueID and PerMode defaults
        overrides: Per-call parameter overrides; PlayerID and MeasureType
            always come from the arguments
    """
    params = dashboard_params(player_id, season, measure_type, settings)
    if overrides:
        params.update(overrides)
        params["PlayerID"] = player_id
        params["MeasureType"] = measure_type
    return Endpoint(path=f"/{DASHBOARD_RESOURCE}", params=params)
