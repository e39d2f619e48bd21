"""API-specific response models for scorecards and format results."""

from datetime import datetime
from pydantic import BaseModel
from typing import Dict, List, Optional

from scoring.match_play import MatchStatus


class RoundSummaryResponse(BaseModel):
    """Lightweight round for list views."""
    id: str
    format: str
    course_id: Optional[str] = None
    course_name: Optional[str] = None
    date: Optional[datetime] = None
    player_names: List[str] = []
    holes_played: int = 0
    is_completed: bool = False


class PlayerTotalResponse(BaseModel):
    player_id: str
    name: str
    gross: int
    net: int
    holes_played: int


class ScorecardResponse(BaseModel):
    """Stroke play totals for the three segments."""
    front_nine: List[PlayerTotalResponse]
    back_nine: List[PlayerTotalResponse]
    total: List[PlayerTotalResponse]


class PlayerPointsResponse(BaseModel):
    player_id: str
    name: str
    points: int


class TeamPointsResponse(BaseModel):
    team_name: str
    points: int


class StablefordResponse(BaseModel):
    standings: List[PlayerPointsResponse]
    team_standings: List[TeamPointsResponse] = []


class TeamTotalResponse(BaseModel):
    team_name: str
    gross: int
    net: int
    handicap: Optional[float] = None


class MatchResponse(BaseModel):
    status: MatchStatus
    hole_winners: Dict[int, Optional[str]]


class NassauMatchResponse(BaseModel):
    match_type: str
    starting_hole: int
    initiating_team: Optional[str] = None
    status: MatchStatus
    points: Dict[str, float]


class PressOfferResponse(BaseModel):
    match_type: str
    match_name: str
    losing_team: str
    holes_down: int
    next_hole: int


class NassauResponse(BaseModel):
    matches: List[NassauMatchResponse]
    points: Dict[str, float]
    available_presses: List[PressOfferResponse]


class SkinsHoleResponse(BaseModel):
    hole_number: int
    winner_id: Optional[str] = None
    skins: int
    carried: int


class SkinsResponse(BaseModel):
    holes: List[SkinsHoleResponse]
    skins: Dict[str, int]
    payouts: Dict[str, float]
    total_pot: Optional[float] = None
    value_per_skin: Optional[float] = None
