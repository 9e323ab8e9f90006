"""
Application settings with environment variable support.

Configuration is loaded from environment variables with optional .env file.
Sheet URLs point at published Google Sheets CSV exports; the lobby layout
constants describe where player names sit in the lobby grid and are the only
thing to touch when the tournament format changes.
"""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


_SHEET_BASE = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vT2toeLa-uxkhYyHjI4vb4qdhN2EdGHAJAmdvdpCxpRvYQXuzxRgS7Fpm9nMqdNBvFL5ksm71-fmbz0"
    "/pub?output=csv&gid="
)


class LobbyLayout(BaseModel):
    """Positional layout of the lobby grid."""

    model_config = ConfigDict(frozen=True)

    player_start_row: int = Field(default=4, ge=0, description="Row of the first member cell")
    lobby_row_step: int = Field(default=9, ge=1, description="Rows per lobby block (title + members)")
    round_col_step: int = Field(default=5, ge=1, description="Columns between consecutive rounds")
    day1_start_col: int = Field(default=0, ge=0, description="Round-0 column for day 1")
    day2_start_col: int = Field(default=30, ge=0, description="Round-0 column for day 2")
    rounds_per_day: int = Field(default=6, ge=1)
    lobbies_per_round: int = Field(default=8, ge=1)
    members_per_lobby: int = Field(default=8, ge=1)

    def day_start_col(self, day: int) -> int:
        """Round-0 column offset for a tournament day (1 or 2)."""
        if day == 1:
            return self.day1_start_col
        if day == 2:
            return self.day2_start_col
        raise ValueError(f"Unknown tournament day: {day}")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Upstream sheets
    players_sheet_url: str = Field(
        default=_SHEET_BASE + "1551656749", alias="PLAYERS_SHEET_URL"
    )
    leaderboard_sheet_url: str = Field(
        default=_SHEET_BASE + "1043616930", alias="LEADERBOARD_SHEET_URL"
    )
    leaderboard2_sheet_url: Optional[str] = Field(
        default=None, alias="LEADERBOARD2_SHEET_URL"
    )
    lobbies_sheet_url: str = Field(
        default=_SHEET_BASE + "791702275", alias="LOBBIES_SHEET_URL"
    )

    # Refresh / fetch behavior
    refresh_interval_seconds: float = Field(
        default=30.0, gt=0.0, alias="REFRESH_INTERVAL_SECONDS"
    )
    fetch_timeout_seconds: float = Field(
        default=10.0, gt=0.0, alias="FETCH_TIMEOUT_SECONDS"
    )
    fetch_max_attempts: int = Field(default=3, ge=1, alias="FETCH_MAX_ATTEMPTS")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, ge=1, le=65535, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")

    # Query defaults
    default_sort_by: str = Field(default="totalPoint", alias="DEFAULT_SORT_BY")
    max_page_size: int = Field(default=100, ge=1, alias="MAX_PAGE_SIZE")

    # Lobby grid layout
    lobby_player_start_row: int = Field(default=4, ge=0, alias="LOBBY_PLAYER_START_ROW")
    lobby_row_step: int = Field(default=9, ge=1, alias="LOBBY_ROW_STEP")
    lobby_round_col_step: int = Field(default=5, ge=1, alias="LOBBY_ROUND_COL_STEP")
    lobby_day2_start_col: int = Field(default=30, ge=0, alias="LOBBY_DAY2_START_COL")

    def resolved_leaderboard2_url(self) -> str:
        """Second leaderboard URL, falling back to the first sheet."""
        return self.leaderboard2_sheet_url or self.leaderboard_sheet_url

    def lobby_layout(self) -> LobbyLayout:
        """Build the lobby grid layout from the configured constants."""
        return LobbyLayout(
            player_start_row=self.lobby_player_start_row,
            lobby_row_step=self.lobby_row_step,
            round_col_step=self.lobby_round_col_step,
            day2_start_col=self.lobby_day2_start_col,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
