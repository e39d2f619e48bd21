"""Player API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ValidationError
from typing import List, Optional
from database.db_manager import DatabaseManager
from database.exceptions import DuplicateError, IntegrityError, NotFoundError
from api.dependencies import get_db
from models import Player

router = APIRouter()


class CreatePlayerRequest(BaseModel):
    name: str
    handicap: float = 0.0
    is_current_user: bool = False
    preferred_tee_color: Optional[str] = "White"


class UpdatePlayerRequest(BaseModel):
    name: Optional[str] = None
    handicap: Optional[float] = None
    preferred_tee_color: Optional[str] = None


@router.get("", response_model=List[Player])
async def list_players(db: DatabaseManager = Depends(get_db)):
    return db.players.list_players()


@router.get("/{player_id}", response_model=Player)
async def get_player(player_id: str, db: DatabaseManager = Depends(get_db)):
    player = db.players.get_player(player_id)
    if not player:
        raise HTTPException(404, "Player not found")
    return player


@router.post("", response_model=Player, status_code=201)
async def create_player(req: CreatePlayerRequest, db: DatabaseManager = Depends(get_db)):
    try:
        player = Player(**req.model_dump())
    except ValidationError as e:
        raise HTTPException(422, e.errors()[0]['msg'])
    try:
        return db.players.create_player(player)
    except DuplicateError as e:
        raise HTTPException(409, str(e))


@router.put("/{player_id}", response_model=Player)
async def update_player(player_id: str, req: UpdatePlayerRequest, db: DatabaseManager = Depends(get_db)):
    """Edit a player; handicap changes apply to rounds scored afterwards."""
    try:
        return db.players.update_player(player_id, **req.model_dump(exclude_none=True))
    except NotFoundError:
        raise HTTPException(404, "Player not found")
    except ValidationError as e:
        raise HTTPException(422, e.errors()[0]['msg'])


@router.delete("/{player_id}", status_code=204)
async def delete_player(player_id: str, db: DatabaseManager = Depends(get_db)):
    try:
        deleted = db.delete_player(player_id)
    except IntegrityError as e:
        raise HTTPException(409, str(e))
    if not deleted:
        raise HTTPException(404, "Player not found")
