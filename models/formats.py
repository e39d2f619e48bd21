"""Closed set of game formats, each carrying its own configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Annotated, Dict, List, Literal, Optional, Union

MatchType = Literal["front9", "back9"]


class Press(BaseModel):
    """An extra Nassau sub-match started by the team that is down."""
    model_config = ConfigDict(frozen=True)

    match_type: MatchType
    starting_hole: int = Field(..., ge=1, le=18)
    initiating_team: str


class _FormatBase(BaseModel):
    model_config = ConfigDict(validate_assignment=True)


class _TeamFormat(_FormatBase):
    # team name -> ordered player ids
    teams: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator('teams')
    @classmethod
    def validate_disjoint_teams(cls, v):
        seen = set()
        for team_name, player_ids in v.items():
            for player_id in player_ids:
                if player_id in seen:
                    raise ValueError(f"Player {player_id} assigned to more than one team ('{team_name}')")
                seen.add(player_id)
        return v


class StrokePlay(_FormatBase):
    kind: Literal["stroke"] = "stroke"


class Stableford(_FormatBase):
    kind: Literal["stableford"] = "stableford"


class TeamStableford(_TeamFormat):
    kind: Literal["team_stableford"] = "team_stableford"


class BestBall(_TeamFormat):
    """Best ball stroke play: team total of best nets."""
    kind: Literal["bestball"] = "bestball"


class BestBallMatchPlay(_TeamFormat):
    kind: Literal["bestball_matchplay"] = "bestball_matchplay"


class Nassau(_TeamFormat):
    kind: Literal["nassau"] = "nassau"
    presses: List[Press] = Field(default_factory=list)


class Skins(_FormatBase):
    """Pot-based payout when pot_per_player is set, else legacy value_per_skin."""
    kind: Literal["skins"] = "skins"
    pot_per_player: Optional[float] = Field(None, ge=0)
    value_per_skin: Optional[float] = Field(None, ge=0)
    carryover: bool = True


class Scramble(_TeamFormat):
    kind: Literal["scramble"] = "scramble"


GameFormat = Annotated[
    Union[
        StrokePlay,
        Stableford,
        TeamStableford,
        BestBall,
        BestBallMatchPlay,
        Nassau,
        Skins,
        Scramble,
    ],
    Field(discriminator="kind"),
]

TEAM_FORMATS = (TeamStableford, BestBall, BestBallMatchPlay, Nassau, Scramble)
