"""Format scoring endpoints. Every response is recomputed from the ledger."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from typing import List, Optional

from api.dependencies import get_ledger
from api.schemas import (
    MatchResponse,
    NassauResponse,
    ScorecardResponse,
    SkinsResponse,
    StablefordResponse,
    TeamTotalResponse,
)
from models import Press
from scoring import match_play, nassau, scramble, skins, stableford, stroke_play
from scoring.ledger import ALL_HOLES, ScoreLedger

router = APIRouter()


class AddPressRequest(BaseModel):
    match_type: str
    starting_hole: Optional[int] = Field(None, ge=1, le=18)
    initiating_team: Optional[str] = None


@router.get("/{round_id}/scorecard", response_model=ScorecardResponse)
async def get_scorecard(ledger: ScoreLedger = Depends(get_ledger)):
    return ScorecardResponse(
        front_nine=stroke_play.front_nine(ledger),
        back_nine=stroke_play.back_nine(ledger),
        total=stroke_play.totals(ledger),
    )


@router.get("/{round_id}/stableford", response_model=StablefordResponse)
async def get_stableford(ledger: ScoreLedger = Depends(get_ledger)):
    return StablefordResponse(
        standings=stableford.standings(ledger),
        team_standings=stableford.team_standings(ledger),
    )


@router.get("/{round_id}/bestball", response_model=List[TeamTotalResponse])
async def get_bestball(ledger: ScoreLedger = Depends(get_ledger)):
    return match_play.standings(ledger)


@router.get("/{round_id}/match", response_model=MatchResponse)
async def get_match(ledger: ScoreLedger = Depends(get_ledger)):
    return MatchResponse(
        status=match_play.matchplay_status(ledger),
        hole_winners={n: match_play.matchplay_hole_winner(ledger, n) for n in ALL_HOLES},
    )


@router.get("/{round_id}/nassau", response_model=NassauResponse)
async def get_nassau(ledger: ScoreLedger = Depends(get_ledger)):
    return NassauResponse(
        matches=nassau.match_results(ledger),
        points={name: nassau.points_for_team(ledger, name) for name in ledger.team_names},
        available_presses=nassau.available_presses(ledger),
    )


@router.post("/{round_id}/presses", response_model=Press, status_code=201)
async def add_press(req: AddPressRequest, ledger: ScoreLedger = Depends(get_ledger)):
    press = nassau.add_press(ledger, req.match_type, req.starting_hole, req.initiating_team)
    if press is None:
        raise HTTPException(409, "No press available for that match")
    return press


@router.get("/{round_id}/skins", response_model=SkinsResponse)
async def get_skins(ledger: ScoreLedger = Depends(get_ledger)):
    return SkinsResponse(
        holes=skins.skins_by_hole(ledger),
        skins=skins.skins_per_player(ledger),
        payouts=skins.payouts(ledger),
        total_pot=skins.total_pot(ledger),
        value_per_skin=skins.value_per_skin(ledger),
    )


@router.get("/{round_id}/scramble", response_model=List[TeamTotalResponse])
async def get_scramble(ledger: ScoreLedger = Depends(get_ledger)):
    return scramble.standings(ledger)
