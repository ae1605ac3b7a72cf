"""Current-season label derived from the calendar."""

from __future__ import annotations

from datetime import date

# The regular season tips off in October
SEASON_START_MONTH = 10


def current_season(today: date | None = None) -> str:
    """
    Return the season label for a date, e.g. "2024-25".

    From October on the label names the season starting this year,
    before October it names the one that started last year.
    """
    today = today or date.today()
    end_year = today.year + (1 if today.month >= SEASON_START_MONTH else 0)
    return f"{end_year - 1}-{end_year % 100:02d}"
