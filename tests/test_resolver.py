"""Tests for player resolution and the fuzzy match."""

import asyncio

import pytest

from nba_stats.models import ById, ByName, ByRecord, PlayerRecord
from nba_stats.resolver import PlayerResolver, fuzzy_match, normalize_query
from nba_stats.roster import RosterCache

from .payloads import ROSTER_ROWS

LEBRON = PlayerRecord(
    player_id=2544,
    full_name="LeBron James",
    player_code="lebron_james",
    from_season=2003,
    to_season=2013,
    active=True,
)

HAKEEM = PlayerRecord(
    player_id=165,
    full_name="Hakeem Olajuwon",
    player_code="HISTADD_hakeem_olajuwon",
    from_season=1984,
    to_season=2002,
    active=False,
)


@pytest.fixture
def resolver(fetcher):
    return PlayerResolver(RosterCache(fetcher))


# =========================================================================
# Pure helpers
# =========================================================================


class TestFuzzyMatch:
    @pytest.mark.parametrize(
        "pattern, target",
        [
            ("lebron james", "LeBron James"),
            ("lbj", "LeBron James"),
            ("LEBRON", "lebron james"),
            ("", "anyone"),
        ],
    )
    def test_matches(self, pattern, target):
        assert fuzzy_match(pattern, target)

    @pytest.mark.parametrize(
        "pattern, target",
        [
            ("james lebron", "LeBron James"),
            ("lebronn", "LeBron James"),
            ("kobe", "LeBron James"),
        ],
    )
    def test_non_matches(self, pattern, target):
        assert not fuzzy_match(pattern, target)


class TestNormalizeQuery:
    def test_trims_and_lowercases(self):
        assert normalize_query("  LeBron James ") == "lebron james"

    def test_last_comma_first(self):
        assert normalize_query("James, LeBron") == "lebron james"

    def test_every_comma_segment_is_reversed(self):
        assert normalize_query("c, b, a") == "a  b c"


# =========================================================================
# resolve()
# =========================================================================


class TestResolve:
    async def test_full_name(self, resolver):
        assert await resolver.resolve("LeBron James") == LEBRON

    async def test_last_comma_first(self, resolver):
        assert await resolver.resolve("James, LeBron") == LEBRON

    @pytest.mark.parametrize(
        "natural, comma",
        [
            ("Joakim Noah", "Noah, Joakim"),
            ("Goran Dragic", "Dragic, Goran"),
            ("Michael Jordan", "Jordan, Michael"),
        ],
    )
    async def test_comma_form_is_equivalent(self, resolver, natural, comma):
        assert await resolver.resolve(natural, True) == await resolver.resolve(comma, True)

    async def test_by_id(self, resolver):
        assert await resolver.resolve(2544) == LEBRON
        assert await resolver.resolve(ById(2544)) == LEBRON

    async def test_every_id_resolves(self, resolver):
        for row in ROSTER_ROWS:
            record = await resolver.resolve(row[0], include_inactive=True)
            assert record.player_id == row[0]

    async def test_every_name_resolves_to_a_match(self, resolver):
        players = await resolver.roster.players()
        for player in players:
            record = await resolver.resolve(player.full_name, include_inactive=not player.active)
            assert record is not None
            assert fuzzy_match(player.full_name.lower(), record.full_name)

    async def test_retired_player_needs_include_inactive(self, resolver):
        assert await resolver.resolve("Olajuwon, Hakeem", include_inactive=True) == HAKEEM
        assert await resolver.resolve("Olajuwon, Hakeem") is None
        assert await resolver.resolve(165) is None

    async def test_last_match_wins(self, resolver):
        # Both Anthony and Antonio Davis match; Antonio comes later and is retired
        active = await resolver.resolve("davis")
        everyone = await resolver.resolve("davis", include_inactive=True)
        assert active.full_name == "Anthony Davis"
        assert everyone.full_name == "Antonio Davis"

    async def test_no_match(self, resolver):
        assert await resolver.resolve("Wilt Chamberlain", include_inactive=True) is None
        assert await resolver.resolve(999999) is None

    async def test_record_skips_roster(self, resolver, fetcher):
        assert await resolver.resolve(LEBRON) is LEBRON
        assert await resolver.resolve(ByRecord(HAKEEM)) is HAKEEM
        assert fetcher.calls == []

    async def test_explicit_name_variant(self, resolver):
        assert await resolver.resolve(ByName("lebron")) == LEBRON

    async def test_bool_is_rejected(self, resolver):
        with pytest.raises(TypeError):
            await resolver.resolve(True)

    async def test_concurrent_first_lookups_fetch_once(self, slow_fetcher):
        resolver = PlayerResolver(RosterCache(slow_fetcher))
        results = await asyncio.gather(
            resolver.resolve("LeBron James"),
            resolver.resolve(2544),
            resolver.resolve("James, LeBron"),
        )
        assert results == [LEBRON, LEBRON, LEBRON]
        assert slow_fetcher.count("/commonallplayers") == 1
