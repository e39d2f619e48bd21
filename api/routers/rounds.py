"""Round API endpoints: setup, score entry and completion."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field, ValidationError
from typing import List, Optional, Set
from database.db_manager import DatabaseManager
from database.exceptions import DuplicateError, IntegrityError, NotFoundError
from api.dependencies import get_db
from api.schemas import RoundSummaryResponse
from models import GameFormat, Round, StrokePlay

logger = logging.getLogger(__name__)

router = APIRouter()


class CreateRoundRequest(BaseModel):
    course_id: Optional[str] = None
    player_ids: List[str]
    format: GameFormat = Field(default_factory=StrokePlay)
    tee_color: Optional[str] = None
    tracking_player_ids: Set[str] = set()


class ScoreEntry(BaseModel):
    hole_number: int
    player_id: str
    strokes: int


class UpdateScoresRequest(BaseModel):
    scores: List[ScoreEntry]


def summarize_round(db: DatabaseManager, r: Round) -> RoundSummaryResponse:
    """Project a full Round model into a lightweight summary."""
    course = db.courses.get_course(r.course_id) if r.course_id else None
    return RoundSummaryResponse(
        id=r.id,
        format=r.format_tag,
        course_id=r.course_id,
        course_name=course.name if course else None,
        date=r.date,
        player_names=[p.name for p in db.players.get_players(r.player_ids)],
        holes_played=r.holes_played(),
        is_completed=r.is_completed,
    )


@router.get("", response_model=List[RoundSummaryResponse])
async def list_rounds(
    completed: Optional[bool] = Query(None),
    limit: int = Query(20, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: DatabaseManager = Depends(get_db),
):
    rounds = db.rounds.list_rounds(completed=completed, limit=limit, offset=offset)
    return [summarize_round(db, r) for r in rounds]


@router.post("", response_model=Round, status_code=201)
async def create_round(req: CreateRoundRequest, db: DatabaseManager = Depends(get_db)):
    try:
        round_ = Round(**req.model_dump(exclude={"format"}), format=req.format)
    except ValidationError as e:
        raise HTTPException(422, e.errors()[0]['msg'])
    try:
        return db.rounds.create_round(round_)
    except DuplicateError as e:
        raise HTTPException(409, str(e))
    except IntegrityError as e:
        raise HTTPException(422, str(e))


@router.get("/{round_id}", response_model=Round)
async def get_round(round_id: str, db: DatabaseManager = Depends(get_db)):
    round_ = db.rounds.get_round(round_id)
    if not round_:
        raise HTTPException(404, "Round not found")
    return round_


@router.put("/{round_id}/scores", response_model=Round)
async def update_scores(round_id: str, req: UpdateScoresRequest, db: DatabaseManager = Depends(get_db)):
    """Record or overwrite gross scores; the whole batch is rejected if any entry is invalid."""
    try:
        db.upsert_scores(round_id, [(s.hole_number, s.player_id, s.strokes) for s in req.scores])
    except NotFoundError:
        raise HTTPException(404, "Round not found")
    except IntegrityError as e:
        logger.warning("score update rejected for round %s: %s", round_id, e)
        raise HTTPException(422, str(e))
    return db.rounds.get_round(round_id)


@router.delete("/{round_id}/scores/{hole_number}/{player_id}", status_code=204)
async def clear_score(round_id: str, hole_number: int, player_id: str, db: DatabaseManager = Depends(get_db)):
    try:
        cleared = db.ledger(round_id).clear(hole_number, player_id)
    except NotFoundError:
        raise HTTPException(404, "Round not found")
    if not cleared:
        raise HTTPException(404, "Score not found")


@router.post("/{round_id}/complete", response_model=Round)
async def complete_round(round_id: str, db: DatabaseManager = Depends(get_db)):
    try:
        return db.complete_round(round_id)
    except NotFoundError:
        raise HTTPException(404, "Round not found")
    except IntegrityError as e:
        raise HTTPException(409, str(e))


@router.delete("/{round_id}", status_code=204)
async def delete_round(round_id: str, db: DatabaseManager = Depends(get_db)):
    if not db.rounds.delete_round(round_id):
        raise HTTPException(404, "Round not found")
