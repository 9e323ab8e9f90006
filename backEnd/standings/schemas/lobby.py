"""Lobby assignment schemas (day -> rounds -> lobbies -> members)."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class LobbyMember(BaseModel):
    """A seat in a lobby. An empty name means no player is assigned."""

    model_config = _CONFIG

    name: str = ""


class Lobby(BaseModel):
    """Members seated together in one round."""

    model_config = _CONFIG

    lobby_name: str
    members: tuple[LobbyMember, ...] = Field(default_factory=tuple)


class Round(BaseModel):
    """All lobbies of one round (1-based)."""

    model_config = _CONFIG

    round_number: int = Field(..., ge=1)
    lobbies: tuple[Lobby, ...] = Field(default_factory=tuple)


class DayLobbies(BaseModel):
    """Every round of one tournament day."""

    model_config = _CONFIG

    day: int = Field(..., ge=1, le=2)
    rounds: tuple[Round, ...] = Field(default_factory=tuple)


class LobbySlot(BaseModel):
    """Flattened lobby seat returned by lobby search."""

    model_config = _CONFIG

    day: int
    round: int
    lobby: str
    player: str
