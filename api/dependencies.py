from fastapi import HTTPException, Request

from database.db_manager import DatabaseManager
from database.exceptions import NotFoundError
from scoring.ledger import ScoreLedger


def get_db(request: Request) -> DatabaseManager:
    """FastAPI dependency that provides the DatabaseManager."""
    return request.app.state.db_manager


def get_ledger(round_id: str, request: Request) -> ScoreLedger:
    """FastAPI dependency resolving a round id to its score ledger."""
    try:
        return get_db(request).ledger(round_id)
    except NotFoundError:
        raise HTTPException(404, "Round not found")
