"""
Data types shared across the client.

Records are frozen dataclasses so the roster snapshot can be handed
out to callers without copying each entry.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, ClassVar, Iterable, Union

# Metric code -> value for one season aggregate; always carries "season"
StatLine = dict[str, Any]

SEASON_KEY = "season"

BASIC_CODES: tuple[str, ...] = (
    "GP", "W", "L", "MIN",
    "FGM", "FGA", "FG3M", "FG3A", "FTM", "FTA",
    "OREB", "DREB", "REB",
    "AST", "TOV", "STL", "BLK", "PF", "PTS", "PM",
)

ADVANCED_CODES: tuple[str, ...] = (
    "GP", "W", "L", "MIN",
    "ORtg", "DRtg", "eFG", "TS", "USG",
    "AstTO", "AstPct", "ORebPct", "DRebPct", "RebPct",
)


# ============================================================================
# Records
# ============================================================================


@dataclass(frozen=True)
class PlayerRecord:
    """One roster entry. full_name is always in "First Last" order."""

    player_id: int
    full_name: str
    player_code: str
    from_season: int
    to_season: int
    active: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Team:
    team_id: int | None
    name: str | None
    abbreviation: str | None
    city: str | None


@dataclass(frozen=True)
class PlayerProfile:
    """
    Extended player identity from the commonplayerinfo endpoint.

    Fetched fresh for every stats request.
    """

    player_id: int
    full_name: str
    abbreviated_name: str | None
    birthdate: date | None
    school: str | None
    country: str | None
    jersey_number: int | None
    active: bool
    position: str | None
    team: Team

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["birthdate"] = self.birthdate.isoformat() if self.birthdate else None
        return data


@dataclass(frozen=True)
class StatsResult:
    """Profile plus whichever stat lines were requested (None when not requested)."""

    profile: PlayerProfile
    basic_stats: StatLine | None = None
    advanced_stats: StatLine | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"profile": self.profile.to_dict()}
        if self.basic_stats is not None:
            data["basicStats"] = dict(self.basic_stats)
        if self.advanced_stats is not None:
            data["advancedStats"] = dict(self.advanced_stats)
        return data


# ============================================================================
# Player queries
# ============================================================================


@dataclass(frozen=True)
class ByName:
    name: str


@dataclass(frozen=True)
class ById:
    player_id: int


@dataclass(frozen=True)
class ByRecord:
    record: PlayerRecord


Query = Union[ByName, ById, ByRecord]

# What callers may pass wherever a player is expected
PlayerLike = Union[str, int, PlayerRecord, ByName, ById, ByRecord]


def as_query(value: PlayerLike) -> Query:
    """
    Wrap a caller-supplied player reference in its query variant.

    Raises:
        TypeError: for anything that is not a name, id or record
    """
    if isinstance(value, (ByName, ById, ByRecord)):
        return value
    if isinstance(value, PlayerRecord):
        return ByRecord(value)
    # bool is an int subclass but never a player id
    if isinstance(value, bool):
        raise TypeError("player query must be a name, id or PlayerRecord, not bool")
    if isinstance(value, int):
        return ById(value)
    if isinstance(value, str):
        return ByName(value)
    raise TypeError(f"player query must be a name, id or PlayerRecord, not {type(value).__name__}")


# ============================================================================
# Stat selection
# ============================================================================


@dataclass(frozen=True)
class StatSelection:
    """
    Which metrics of a stat line to return.

    Use StatSelection.ALL, StatSelection.NONE or StatSelection.subset(codes).
    A subset always keeps the season code.
    """

    include: bool = True
    codes: frozenset[str] | None = None

    ALL: ClassVar["StatSelection"]
    NONE: ClassVar["StatSelection"]

    @classmethod
    def subset(cls, codes: Iterable[str]) -> "StatSelection":
        return cls(include=True, codes=frozenset(codes))

    @classmethod
    def from_option(cls, value: "bool | Iterable[str] | StatSelection") -> "StatSelection":
        """Coerce the true / false / list-of-codes option form."""
        if isinstance(value, StatSelection):
            return value
        if value is True:
            return cls.ALL
        if value is False or value is None:
            return cls.NONE
        if isinstance(value, str):
            # A lone code, not an iterable of characters
            return cls.subset([value])
        return cls.subset(value)

    def apply(self, stat_line: StatLine) -> StatLine | None:
        """Return a new, filtered stat line, or None when the line is omitted."""
        if not self.include:
            return None
        if self.codes is None:
            return dict(stat_line)
        return {
            code: value
            for code, value in stat_line.items()
            if code == SEASON_KEY or code in self.codes
        }


StatSelection.ALL = StatSelection(include=True)
StatSelection.NONE = StatSelection(include=False)
