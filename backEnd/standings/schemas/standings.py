"""Player and leaderboard schemas."""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# Rounds per leaderboard row (M1..M6)
PLACEMENT_SLOTS = 6

Number = Union[int, float]


class Player(BaseModel):
    """Registered player from the players sheet."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    summoner_name: str = Field(..., description="Unique summoner identifier")
    rank_points: Number = Field(default=0)
    email: str = Field(default="")


class LeaderboardEntry(BaseModel):
    """One leaderboard row with its per-round placements."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    position: str = Field(default="", description="Rank label assigned by the ranking engine")
    prize: str = Field(default="")
    name: str
    matches: tuple[int, ...] = Field(
        default=(0,) * PLACEMENT_SLOTS,
        description="Placement per round, 0 when not played",
    )
    total: Number = Field(default=0)
    total_point: Number = Field(default=0)

    @field_validator("matches", mode="before")
    @classmethod
    def fixed_slot_count(cls, v) -> tuple:
        """Pad or truncate placements to exactly PLACEMENT_SLOTS values."""
        values = list(v or ())[:PLACEMENT_SLOTS]
        values.extend([0] * (PLACEMENT_SLOTS - len(values)))
        return tuple(values)

    def metric(self, key: str) -> Number:
        """Aggregate value by wire name ("total" or "totalPoint")."""
        return self.total_point if key == "totalPoint" else self.total
