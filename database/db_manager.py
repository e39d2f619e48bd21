from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from models import Round
from database.exceptions import IntegrityError, NotFoundError
from database.repositories import CourseRepository, PlayerRepository, RoundRepository
from scoring.ledger import ScoreLedger

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    In-memory arena holding players, courses and rounds in flat id-keyed tables.

    Notes:
    - Relationships are ids resolved on lookup; nothing holds a back-pointer.
    - Writes are expected one at a time; there is no locking.
    """

    def __init__(self) -> None:
        self.courses = CourseRepository()
        self.players = PlayerRepository()
        self.rounds = RoundRepository(self.courses, self.players)

    def _require_round(self, round_id: str) -> Round:
        round_ = self.rounds.get_round(round_id)
        if round_ is None:
            raise NotFoundError(f"Round {round_id} not found")
        return round_

    def ledger(self, round_id: str) -> ScoreLedger:
        """Resolve a round's ids into the ledger every scoring engine reads."""
        round_ = self._require_round(round_id)
        players = self.players.get_players(round_.player_ids)
        course = self.courses.get_course(round_.course_id) if round_.course_id else None
        return ScoreLedger(round_, players, course)

    def upsert_score(self, round_id: str, hole_number: int, player_id: str, strokes: int) -> None:
        """Record gross strokes, rejecting players or holes outside the round."""
        ledger = self.ledger(round_id)
        try:
            ledger.upsert(hole_number, player_id, strokes)
        except ValueError as exc:
            logger.warning("rejected score for round %s: %s", round_id, exc)
            raise IntegrityError(str(exc)) from exc

    def upsert_scores(self, round_id: str, entries: Iterable[Tuple[int, str, int]]) -> int:
        """Batch of (hole_number, player_id, strokes); all-or-nothing. Returns count written."""
        ledger = self.ledger(round_id)
        entries = list(entries)
        for hole_number, player_id, strokes in entries:
            if not 1 <= hole_number <= 18 or player_id not in ledger.round.player_ids or strokes < 0:
                raise IntegrityError(f"Invalid score entry ({hole_number}, {player_id}, {strokes})")
        for hole_number, player_id, strokes in entries:
            ledger.upsert(hole_number, player_id, strokes)
        return len(entries)

    def lookup_score(self, round_id: str, hole_number: int, player_id: str) -> Optional[int]:
        return self.ledger(round_id).lookup(hole_number, player_id)

    def complete_round(self, round_id: str) -> Round:
        """Mark a round completed once every player has all 18 holes."""
        if not self.ledger(round_id).is_complete():
            raise IntegrityError(f"Round {round_id} still has holes without scores")
        return self.rounds.mark_completed(round_id)

    def summary(self) -> Dict[str, int]:
        return {
            "players": len(self.players.list_players()),
            "courses": len(self.courses.list_courses(limit=10_000)),
            "rounds": len(self.rounds.list_rounds(limit=10_000)),
        }

    def delete_player(self, player_id: str) -> bool:
        """Delete a player who is in no round. Returns False if the id is unknown."""
        in_rounds = [r.id for r in self.rounds.get_rounds_for_player(player_id)]
        if in_rounds:
            raise IntegrityError(f"Player {player_id} is still in rounds {in_rounds}")
        return self.players.delete_player(player_id)

    def rounds_for_player(self, player_id: str) -> List[Round]:
        if self.players.get_player(player_id) is None:
            raise NotFoundError(f"Player {player_id} not found")
        return self.rounds.get_rounds_for_player(player_id)
