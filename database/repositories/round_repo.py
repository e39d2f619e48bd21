"""Round table, keyed by round id. Courses and players are referenced by id."""

import logging
from typing import Dict, List, Optional

from models import Round
from database.exceptions import DuplicateError, IntegrityError, NotFoundError
from database.repositories.course_repo import CourseRepository
from database.repositories.player_repo import PlayerRepository

logger = logging.getLogger(__name__)


class RoundRepository:
    """In-memory CRUD for rounds; checks id references on create."""

    def __init__(self, course_repo: CourseRepository, player_repo: PlayerRepository):
        self._rounds: Dict[str, Round] = {}
        self._course_repo = course_repo
        self._player_repo = player_repo

    # ================================================================
    # Read
    # ================================================================

    def get_round(self, round_id: str) -> Optional[Round]:
        return self._rounds.get(round_id)

    def list_rounds(self, *, completed: Optional[bool] = None, limit: int = 20, offset: int = 0) -> List[Round]:
        """Rounds ordered by date, newest first."""
        rounds = [r for r in self._rounds.values() if completed is None or r.is_completed == completed]
        rounds.sort(key=lambda r: r.date, reverse=True)
        return rounds[offset:offset + limit]

    def get_rounds_for_player(self, player_id: str) -> List[Round]:
        return [r for r in self.list_rounds(limit=len(self._rounds)) if player_id in r.player_ids]

    # ================================================================
    # Create
    # ================================================================

    def create_round(self, round_: Round) -> Round:
        if round_.id in self._rounds:
            raise DuplicateError(f"Round {round_.id} already exists")
        if round_.course_id and self._course_repo.get_course(round_.course_id) is None:
            raise IntegrityError(f"Course {round_.course_id} does not exist")
        missing = [pid for pid in round_.player_ids if self._player_repo.get_player(pid) is None]
        if missing:
            raise IntegrityError(f"Unknown players: {missing}")
        self._rounds[round_.id] = round_
        logger.debug("created %s round %s with %d players", round_.format_tag, round_.id, len(round_.player_ids))
        return round_

    # ================================================================
    # Update
    # ================================================================

    def mark_completed(self, round_id: str) -> Round:
        round_ = self.get_round(round_id)
        if round_ is None:
            raise NotFoundError(f"Round {round_id} not found")
        round_.is_completed = True
        return round_

    # ================================================================
    # Delete
    # ================================================================

    def delete_round(self, round_id: str) -> bool:
        """Discard a whole round; rounds are never partially deleted."""
        return self._rounds.pop(round_id, None) is not None
