"""
Normalizers for stats.nba.com payloads.

Upstream responses are tabular: each result set carries a ``headers`` list
and a ``rowSet`` of positional rows. These helpers turn rows into mappings,
map upstream headers onto our field and metric names, and merge the
profile and dashboard payloads of a stats request into one StatsResult.

Canonical output shapes:
    Roster:    PlayerRecord per row, full_name in "First Last" order
    Profile:   PlayerProfile with nested Team
    Dashboard: {"season", <metric code>: value, ...} for the overall split only
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Iterable, Sequence

from .endpoints import DASHBOARD_RESOURCE, MEASURE_ADVANCED, MEASURE_BASE, PROFILE_RESOURCE
from .errors import MalformedResponseError
from .models import (
    SEASON_KEY,
    PlayerProfile,
    PlayerRecord,
    StatLine,
    StatSelection,
    StatsResult,
    Team,
)

logger = logging.getLogger(__name__)

# Fixed positions of the commonallplayers row; trailing columns are ignored
ROSTER_HEADERS = ["playerId", "displayName", "rosterStatus", "fromSeason", "toSeason", "playerCode"]

OVERALL_DASHBOARD = "OverallPlayerDashboard"

# Upstream dashboard header -> metric code, per measure type
BASIC_FIELDS: dict[str, str] = {
    "GP": "GP",
    "W": "W",
    "L": "L",
    "MIN": "MIN",
    "FGM": "FGM",
    "FGA": "FGA",
    "FG3M": "FG3M",
    "FG3A": "FG3A",
    "FTM": "FTM",
    "FTA": "FTA",
    "OREB": "OREB",
    "DREB": "DREB",
    "REB": "REB",
    "AST": "AST",
    "TOV": "TOV",
    "STL": "STL",
    "BLK": "BLK",
    "PF": "PF",
    "PTS": "PTS",
    "PLUS_MINUS": "PM",
}

ADVANCED_FIELDS: dict[str, str] = {
    "GP": "GP",
    "W": "W",
    "L": "L",
    "MIN": "MIN",
    "OFF_RATING": "ORtg",
    "DEF_RATING": "DRtg",
    "EFG_PCT": "eFG",
    "TS_PCT": "TS",
    "USG_PCT": "USG",
    "AST_TO": "AstTO",
    "AST_PCT": "AstPct",
    "OREB_PCT": "ORebPct",
    "DREB_PCT": "DRebPct",
    "REB_PCT": "RebPct",
}

MEASURE_FIELDS: dict[str, dict[str, str]] = {
    MEASURE_BASE: BASIC_FIELDS,
    MEASURE_ADVANCED: ADVANCED_FIELDS,
}


# ============================================================================
# Generic helpers
# ============================================================================


def zip_headers(fields: Sequence[str | None], values: Sequence[Any]) -> dict[str, Any]:
    """
    Pair field names with row values by position.

    Positions whose field name is None (or empty) are dropped. If values
    is shorter than fields, the missing trailing fields are left out.
    """
    return {name: value for name, value in zip(fields, values) if name}


def filter_subset(
    stat_line: StatLine,
    allowed: bool | Iterable[str] | StatSelection,
) -> StatLine | None:
    """
    Restrict a stat line to the requested metric codes.

    Returns a full copy for True, None (omit the line) for False, and for
    a list of codes a new mapping holding only those codes plus "season".
    """
    return StatSelection.from_option(allowed).apply(stat_line)


def _result_sets(payload: dict[str, Any]) -> list[dict[str, Any]]:
    result_sets = payload.get("resultSets")
    if not isinstance(result_sets, list) or not result_sets:
        raise MalformedResponseError(f"Payload for {payload.get('resource')} has no resultSets")
    return result_sets


def _rows(result_set: dict[str, Any]) -> tuple[list[str | None], list[list[Any]]]:
    headers = result_set.get("headers")
    rows = result_set.get("rowSet")
    if not isinstance(headers, list) or not isinstance(rows, list):
        raise MalformedResponseError(
            f"Result set {result_set.get('name')!r} is missing headers or rowSet"
        )
    return headers, rows


def _is_active(value: Any) -> bool:
    """Roster status is 1/0 in the roster feed and "Active"/"Inactive" in profiles."""
    # Any present status counts as active, except the profile's "Inactive" label
    if isinstance(value, str) and value.strip().lower() == "inactive":
        return False
    return bool(value)


def _to_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    return int(text) if text.isdigit() else None


def _parse_birthdate(value: Any) -> date | None:
    """Upstream sends "1984-12-30T00:00:00"; the time of day is dropped."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value)).date()
    except ValueError as e:
        raise MalformedResponseError(f"Unparseable birthdate {value!r}") from e


# ============================================================================
# Roster
# ============================================================================


def normalize_player(row: Sequence[Any]) -> PlayerRecord:
    """Build a PlayerRecord from one commonallplayers row."""
    raw = zip_headers(ROSTER_HEADERS, row)
    display_name = raw.get("displayName")
    if raw.get("playerId") is None or not display_name:
        raise MalformedResponseError(f"Roster row is missing id or name: {row!r}")

    # "Last, First" -> "First Last"
    full_name = " ".join(reversed(str(display_name).split(", ")))

    return PlayerRecord(
        player_id=int(raw["playerId"]),
        full_name=full_name,
        player_code=raw.get("playerCode") or "",
        from_season=_to_int(raw.get("fromSeason")) or 0,
        to_season=_to_int(raw.get("toSeason")) or 0,
        active=_is_active(raw.get("rosterStatus")),
    )


def normalize_roster(payload: dict[str, Any]) -> list[PlayerRecord]:
    """Turn a commonallplayers payload into PlayerRecords in upstream order."""
    _, rows = _rows(_result_sets(payload)[0])

    players: list[PlayerRecord] = []
    seen: set[int] = set()
    for row in rows:
        player = normalize_player(row)
        if player.player_id in seen:
            logger.warning(f"Duplicate player id {player.player_id} in roster, keeping first")
            continue
        seen.add(player.player_id)
        players.append(player)
    return players


# ============================================================================
# Profile
# ============================================================================


def normalize_profile(payload: dict[str, Any]) -> PlayerProfile:
    """Build a PlayerProfile from the first row of a commonplayerinfo payload."""
    headers, rows = _rows(_result_sets(payload)[0])
    if not rows:
        raise MalformedResponseError("commonplayerinfo returned no rows")
    raw = zip_headers(headers, rows[0])

    if raw.get("PERSON_ID") is None:
        raise MalformedResponseError("commonplayerinfo row has no PERSON_ID")

    return PlayerProfile(
        player_id=int(raw["PERSON_ID"]),
        full_name=raw.get("DISPLAY_FIRST_LAST") or "",
        abbreviated_name=raw.get("DISPLAY_FI_LAST"),
        birthdate=_parse_birthdate(raw.get("BIRTHDATE")),
        school=raw.get("SCHOOL"),
        country=raw.get("COUNTRY"),
        jersey_number=_to_int(raw.get("JERSEY")),
        active=_is_active(raw.get("ROSTERSTATUS")),
        position=raw.get("POSITION"),
        team=Team(
            team_id=_to_int(raw.get("TEAM_ID")),
            name=raw.get("TEAM_NAME"),
            abbreviation=raw.get("TEAM_ABBREVIATION"),
            city=raw.get("TEAM_CITY"),
        ),
    )


# ============================================================================
# Dashboards
# ============================================================================


def normalize_dashboard(payload: dict[str, Any]) -> tuple[str, StatLine]:
    """
    Extract the overall-split stat line from a general-splits dashboard.

    Returns:
        (measure type, stat line). Only the last row of the
        OverallPlayerDashboard set is used; other split sets are ignored.
    """
    parameters = payload.get("parameters") or {}
    measure_type = parameters.get("MeasureType")
    field_map = MEASURE_FIELDS.get(measure_type)
    if field_map is None:
        raise MalformedResponseError(f"Unsupported dashboard MeasureType {measure_type!r}")

    overall = next(
        (rs for rs in _result_sets(payload) if rs.get("name") == OVERALL_DASHBOARD),
        None,
    )
    if overall is None:
        raise MalformedResponseError(f"Dashboard payload has no {OVERALL_DASHBOARD} result set")

    headers, rows = _rows(overall)
    season = parameters.get("Season")
    if not rows:
        logger.warning(f"No {measure_type} dashboard rows for season {season}")
        return measure_type, {SEASON_KEY: season}

    # Unmapped headers become None and are dropped by zip_headers
    fields = [field_map.get(header) for header in headers]
    line: StatLine = {SEASON_KEY: season}
    line.update(zip_headers(fields, rows[-1]))
    return measure_type, line


def merge_stats(
    payloads: Iterable[dict[str, Any]],
    basic: bool | Iterable[str] | StatSelection = True,
    advanced: bool | Iterable[str] | StatSelection = False,
) -> StatsResult:
    """
    Merge profile and dashboard payloads into one StatsResult.

    Each payload is dispatched on its ``resource`` tag. Dashboards are
    keyed by measure type, and each requested line is filtered to its
    selection; lines that were not requested are left as None.
    """
    basic_selection = StatSelection.from_option(basic)
    advanced_selection = StatSelection.from_option(advanced)

    profile: PlayerProfile | None = None
    lines: dict[str, StatLine] = {}

    for payload in payloads:
        resource = payload.get("resource")
        if resource == PROFILE_RESOURCE:
            profile = normalize_profile(payload)
        elif resource == DASHBOARD_RESOURCE:
            measure_type, line = normalize_dashboard(payload)
            lines[measure_type] = line
        else:
            raise MalformedResponseError(f"Unexpected resource {resource!r} in stats response")

    if profile is None:
        raise MalformedResponseError("Stats response has no player profile")

    return StatsResult(
        profile=profile,
        basic_stats=_select(lines, MEASURE_BASE, basic_selection),
        advanced_stats=_select(lines, MEASURE_ADVANCED, advanced_selection),
    )


def _select(lines: dict[str, StatLine], measure_type: str, selection: StatSelection) -> StatLine | None:
    if not selection.include:
        return None
    if measure_type not in lines:
        raise MalformedResponseError(f"Requested {measure_type} stats but no dashboard was returned")
    return selection.apply(lines[measure_type])
