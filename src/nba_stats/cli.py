"""Command line interface for player lookup and stats."""

import asyncio
import json
import sys

import click

from .client import NBAStats
from .config import Settings, get_settings
from .errors import FetchError
from .models import ById, ByName, Query
from .season import current_season


def _make_client(settings: Settings) -> NBAStats:
    return NBAStats(settings=settings)


def _parse_player(value: str) -> Query:
    """Numeric arguments are player ids, anything else a name."""
    value = value.strip()
    if value.isdigit():
        return ById(int(value))
    return ByName(value)


def _parse_codes(value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [code.strip() for code in value.split(",") if code.strip()]


def _run(coro):
    try:
        return asyncio.run(coro)
    except FetchError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("--log-level", default=None, help="Override NBA_STATS_LOG_LEVEL")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """NBA player lookup and stats."""
    settings = get_settings()
    if log_level:
        settings = settings.model_copy(update={"log_level": log_level})
    settings.setup_logging()
    ctx.obj = settings


@cli.command()
def season():
    """Print the current season label."""
    click.echo(current_season())


@cli.command()
@click.option("--active", is_flag=True, help="Only players on a current roster")
@click.pass_obj
def players(settings: Settings, active: bool):
    """List players as id<TAB>name."""
    records = _run(_list_players(settings, active))
    for record in records:
        click.echo(f"{record.player_id}\t{record.full_name}")


async def _list_players(settings: Settings, active: bool):
    async with _make_client(settings) as nba:
        return await nba.list_players(only_active=active)


@cli.command()
@click.argument("query")
@click.option("--include-inactive", is_flag=True, help="Also search retired players")
@click.pass_obj
def find(settings: Settings, query: str, include_inactive: bool):
    """Find a player by name, "Last, First" or id."""
    record = _run(_find(settings, _parse_player(query), include_inactive))
    if record is None:
        click.echo(f"No player found for {query!r}", err=True)
        sys.exit(1)
    click.echo(json.dumps(record.to_dict(), indent=2))


async def _find(settings: Settings, query: Query, include_inactive: bool):
    async with _make_client(settings) as nba:
        return await nba.find_player(query, include_inactive=include_inactive)


@cli.command()
@click.argument("player")
@click.option("--basic/--no-basic", default=True, help="Include basic stats (default: on)")
@click.option("--basic-codes", default=None, help="Comma-separated basic metric codes, e.g. PTS,AST")
@click.option("--advanced", is_flag=True, help="Include advanced stats")
@click.option("--advanced-codes", default=None, help="Comma-separated advanced metric codes, e.g. eFG,TS")
@click.option("--season-type", default=None, help="Dashboard SeasonType override, e.g. Playoffs")
@click.pass_obj
def stats(
    settings: Settings,
    player: str,
    basic: bool,
    basic_codes: str | None,
    advanced: bool,
    advanced_codes: str | None,
    season_type: str | None,
):
    """Print a player's profile and current-season stats as JSON."""
    basic_option = (_parse_codes(basic_codes) or True) if basic else False
    advanced_codes_list = _parse_codes(advanced_codes)
    advanced_option = advanced_codes_list or advanced
    params = {"SeasonType": season_type} if season_type else None

    result = _run(_stats(settings, _parse_player(player), basic_option, advanced_option, params))
    if result is None:
        click.echo(f"No player found for {player!r}", err=True)
        sys.exit(1)
    click.echo(json.dumps(result.to_dict(), indent=2))


async def _stats(settings: Settings, query: Query, basic, advanced, params):
    async with _make_client(settings) as nba:
        return await nba.get_stats(query, basic=basic, advanced=advanced, params=params)


def main():
    cli()


if __name__ == "__main__":
    main()
