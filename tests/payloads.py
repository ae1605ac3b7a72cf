"""
stats.nba.com-shaped payloads and a fake fetcher shared by the tests.

Payloads carry a ``resource`` tag, the request ``parameters`` and
tabular ``resultSets``, like the real API.
"""

import asyncio
import copy
from typing import Any

from nba_stats.endpoints import Endpoint

SEASON = "2013-14"

ROSTER_ROWS = [
    [2544, "James, LeBron", 1, "2003", "2013", "lebron_james"],
    [201149, "Noah, Joakim", 1, "2007", "2013", "joakim_noah"],
    [201609, "Dragic, Goran", 1, "2008", "2013", "goran_dragic"],
    [203076, "Davis, Anthony", 1, "2012", "2013", "anthony_davis"],
    [165, "Olajuwon, Hakeem", 0, "1984", "2002", "HISTADD_hakeem_olajuwon"],
    [787, "Barkley, Charles", 0, "1984", "1999", "HISTADD_charles_barkley"],
    [893, "Jordan, Michael", 0, "1984", "2002", "HISTADD_michael_jordan"],
    [1139, "Davis, Antonio", 0, "1993", "2005", "antonio_davis"],
]

PROFILE_HEADERS = [
    "PERSON_ID", "FIRST_NAME", "LAST_NAME", "DISPLAY_FIRST_LAST", "DISPLAY_LAST_COMMA_FIRST",
    "DISPLAY_FI_LAST", "BIRTHDATE", "SCHOOL", "COUNTRY", "LAST_AFFILIATION", "HEIGHT",
    "WEIGHT", "SEASON_EXP", "JERSEY", "POSITION", "ROSTERSTATUS", "TEAM_ID", "TEAM_NAME",
    "TEAM_ABBREVIATION", "TEAM_CODE", "TEAM_CITY", "PLAYERCODE", "FROM_YEAR", "TO_YEAR",
]

PROFILE_ROW = [
    2544, "LeBron", "James", "LeBron James", "James, LeBron",
    "L. James", "1984-12-30T00:00:00", "St. Vincent-St. Mary HS (OH)", "USA", "St. Vincent-St. Mary HS (OH)/USA", "6-8",
    "250", 10, "6", "Forward", "Active", 1610612748, "Heat",
    "MIA", "heat", "Miami", "lebron_james", 2003, 2013,
]

BASE_HEADERS = [
    "GROUP_SET", "GROUP_VALUE", "GP", "W", "L", "W_PCT", "MIN", "FGM", "FGA", "FG_PCT",
    "FG3M", "FG3A", "FG3_PCT", "FTM", "FTA", "FT_PCT", "OREB", "DREB", "REB", "AST",
    "TOV", "STL", "BLK", "BLKA", "PF", "PFD", "PTS", "PLUS_MINUS",
]

ADVANCED_HEADERS = [
    "GROUP_SET", "GROUP_VALUE", "GP", "W", "L", "W_PCT", "MIN", "OFF_RATING", "DEF_RATING",
    "NET_RATING", "AST_PCT", "AST_TO", "AST_RATIO", "OREB_PCT", "DREB_PCT", "REB_PCT",
    "TM_TOV_PCT", "EFG_PCT", "TS_PCT", "USG_PCT", "PACE", "PIE",
]

BASE_OVERALL = [
    "Overall", SEASON, 77, 54, 23, 0.701, 37.7, 10.0, 17.6, 0.567,
    1.5, 4.0, 0.379, 5.7, 7.6, 0.75, 1.1, 5.9, 6.9, 6.3,
    3.5, 1.6, 0.3, 0.5, 1.6, 5.6, 27.1, 6.5,
]

ADVANCED_OVERALL = [
    "Overall", SEASON, 77, 54, 23, 0.701, 37.7, 113.8, 104.6,
    9.2, 0.321, 1.82, 21.9, 0.034, 0.18, 0.108,
    12.0, 0.61, 0.649, 0.312, 93.3, 0.187,
]


def table(name: str, headers: list[str], rows: list[list[Any]]) -> dict[str, Any]:
    return {"name": name, "headers": headers, "rowSet": rows}


def roster_payload(rows=None) -> dict[str, Any]:
    return {
        "resource": "commonallplayers",
        "parameters": {"LeagueID": "00", "Season": SEASON, "IsOnlyCurrentSeason": 0},
        "resultSets": [
            table(
                "CommonAllPlayers",
                ["PERSON_ID", "DISPLAY_LAST_COMMA_FIRST", "ROSTERSTATUS", "FROM_YEAR", "TO_YEAR", "PLAYERCODE"],
                [list(row) for row in (ROSTER_ROWS if rows is None else rows)],
            )
        ],
    }


def profile_payload() -> dict[str, Any]:
    return {
        "resource": "commonplayerinfo",
        "parameters": [{"PlayerID": 2544}, {"LeagueID": "00"}],
        "resultSets": [
            table("CommonPlayerInfo", PROFILE_HEADERS, [list(PROFILE_ROW)]),
            table("PlayerHeadlineStats", ["PLAYER_ID", "PTS"], [[2544, 27.1]]),
        ],
    }


def dashboard_payload(measure_type: str, season: str = SEASON) -> dict[str, Any]:
    """General-splits dashboard; the overall set carries a decoy row before the real one."""
    if measure_type == "Advanced":
        headers, overall = ADVANCED_HEADERS, ADVANCED_OVERALL
    else:
        headers, overall = BASE_HEADERS, BASE_OVERALL
    decoy = [0 if isinstance(v, (int, float)) else v for v in overall]
    home = ["Location", "Home"] + overall[2:]
    return {
        "resource": "playerdashboardbygeneralsplits",
        "parameters": {"MeasureType": measure_type, "Season": season, "PlayerID": 2544},
        "resultSets": [
            table("LocationPlayerDashboard", headers, [home]),
            table("OverallPlayerDashboard", headers, [decoy, list(overall)]),
            table("MonthPlayerDashboard", headers, []),
        ],
    }


class FakeFetcher:
    """
    Stand-in for HTTPClient.fetch_json.

    ``responses`` maps an endpoint path to a payload, an exception, or a
    callable taking the Endpoint and returning either.
    """

    def __init__(self, responses: dict[str, Any], delay: float = 0.0):
        self.responses = responses
        self.delay = delay
        self.calls: list[Endpoint] = []

    async def __call__(self, endpoint: Endpoint) -> dict[str, Any]:
        self.calls.append(endpoint)
        if self.delay:
            await asyncio.sleep(self.delay)
        response = self.responses[endpoint.path]
        if callable(response):
            response = response(endpoint)
        if isinstance(response, Exception):
            raise response
        return copy.deepcopy(response)

    def count(self, path: str) -> int:
        return sum(1 for call in self.calls if call.path == path)


def default_responses() -> dict[str, Any]:
    return {
        "/commonallplayers": roster_payload(),
        "/commonplayerinfo": profile_payload(),
        "/playerdashboardbygeneralsplits": lambda e: dashboard_payload(
            e.params["MeasureType"], e.params["Season"]
        ),
    }


