"""
Configuration management for the nba-stats client.

Uses Pydantic settings for type-safe configuration with environment variable support.
Every setting can be overridden with an NBA_STATS_-prefixed environment variable,
e.g. NBA_STATS_TIMEOUT=10.
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="NBA_STATS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # Upstream API
    # ==========================================================================
    base_url: str = Field(
        default="https://stats.nba.com/stats",
        description="Root URL of the stats API",
    )
    user_agent: str = Field(
        default="Python NBA API",
        description="User-Agent header sent with every request",
    )
    referer: str = "https://www.nba.com/"
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    # ==========================================================================
    # Dashboard defaults
    # ==========================================================================
    league_id: str = "00"
    season_type: str = Field(
        default="Regular Season",
        description="Regular Season, Playoffs, Pre Season or All Star",
    )
    per_mode: str = Field(default="PerGame", description="PerGame, Totals, Per36, ...")

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = "INFO"

    def setup_logging(self) -> None:
        """Configure logging based on settings."""
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper(), logging.INFO),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
