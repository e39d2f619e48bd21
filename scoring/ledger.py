"""Gross-score ledger for a single round.

The ledger is a resolved view over the arena tables: the round itself plus
the Player and Course records its ids point at. Every scoring engine reads
through it, and it is the only place strokes are written.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from models import Course, Hole, HoleScore, Player, Round
from models.formats import TEAM_FORMATS
from scoring.handicap import net_score, strokes_for_hole

logger = logging.getLogger(__name__)

FRONT_NINE = range(1, 10)
BACK_NINE = range(10, 19)
ALL_HOLES = range(1, 19)

DEFAULT_TEE_PRIORITY = ("White", "Green")


class ScoreLedger:
    """Raw strokes per (hole, player) plus the lookups engines need."""

    def __init__(self, round_: Round, players: Sequence[Player], course: Optional[Course] = None):
        self.round = round_
        self.course = course
        self._players: Dict[str, Player] = {p.id: p for p in players}

    # ================================================================
    # Round members
    # ================================================================

    @property
    def format(self):
        return self.round.format

    @property
    def players(self) -> List[Player]:
        """Round players in entry order."""
        return [self._players[pid] for pid in self.round.player_ids if pid in self._players]

    @property
    def ordered_players(self) -> List[Player]:
        """Device owner first, everyone else in entry order."""
        players = self.players
        return [p for p in players if p.is_current_user] + [p for p in players if not p.is_current_user]

    def get_player(self, player_id: str) -> Optional[Player]:
        if player_id not in self.round.player_ids:
            return None
        return self._players.get(player_id)

    @property
    def tracking_players(self) -> List[Player]:
        return [p for p in self.players if p.id in self.round.tracking_player_ids]

    @property
    def teams(self) -> Dict[str, List[str]]:
        if isinstance(self.format, TEAM_FORMATS):
            return self.format.teams
        return {}

    @property
    def team_names(self) -> List[str]:
        return sorted(self.teams)

    def two_teams(self) -> Optional[Tuple[str, str]]:
        """The (first, second) team names, or None unless exactly two teams exist."""
        names = self.team_names
        if len(names) != 2:
            return None
        return names[0], names[1]

    def players_for_team(self, team_name: str) -> List[Player]:
        member_ids = self.teams.get(team_name)
        if not member_ids:
            return []
        return [p for p in self.players if p.id in member_ids]

    # ================================================================
    # Course
    # ================================================================

    def hole(self, number: int) -> Optional[Hole]:
        if self.course is None:
            return None
        return self.course.get_hole(number)

    @property
    def effective_tee_color(self) -> Optional[str]:
        """The round's tee override, else White, Green, or the first tee listed."""
        if self.round.tee_color:
            return self.round.tee_color
        if self.course is None:
            return None
        colors = self.course.tee_colors
        for preferred in DEFAULT_TEE_PRIORITY:
            if preferred in colors:
                return preferred
        return colors[0] if colors else None

    # ================================================================
    # Gross scores
    # ================================================================

    def lookup(self, hole_number: int, player_id: str) -> Optional[int]:
        """Recorded gross strokes, or None if nothing was entered."""
        hole_score = self.round.get_hole_score(hole_number)
        if hole_score is None:
            return None
        return hole_score.get_score(player_id)

    def upsert(self, hole_number: int, player_id: str, strokes: int) -> HoleScore:
        """Record gross strokes for a player, overwriting any previous entry."""
        if not 1 <= hole_number <= 18:
            raise ValueError(f"Hole number {hole_number} must be 1-18")
        if player_id not in self.round.player_ids:
            raise ValueError(f"Player {player_id} is not in round {self.round.id}")
        if strokes < 0:
            raise ValueError(f"Strokes cannot be negative (got {strokes})")

        hole_score = self.round.get_hole_score(hole_number)
        if hole_score is None:
            hole_score = HoleScore(hole_number=hole_number)
            self.round.hole_scores.append(hole_score)
            self.round.hole_scores.sort(key=lambda hs: hs.hole_number)
        hole_score.set_score(player_id, strokes)
        logger.debug("round %s hole %d: %s -> %d", self.round.id, hole_number, player_id, strokes)
        return hole_score

    def clear(self, hole_number: int, player_id: str) -> bool:
        """Remove a recorded score. Returns True if one existed."""
        hole_score = self.round.get_hole_score(hole_number)
        if hole_score is None:
            return False
        return hole_score.remove_score(player_id)

    def gross_for_holes(self, player_id: str, holes: Sequence[int]) -> List[int]:
        scores = [self.lookup(number, player_id) for number in holes]
        return [s for s in scores if s is not None]

    # ================================================================
    # Net scores
    # ================================================================

    def strokes_received(self, player_id: str, hole_number: int, half_handicap: bool = False) -> int:
        """Handicap strokes a player gets on a hole; 0 when the hole is unknown."""
        player = self.get_player(player_id)
        hole = self.hole(hole_number)
        if player is None or hole is None:
            return 0
        return strokes_for_hole(player.handicap, hole.handicap, half_handicap)

    def gets_stroke(self, player_id: str, hole_number: int) -> bool:
        return self.strokes_received(player_id, hole_number) > 0

    def net_for_hole(self, player_id: str, hole_number: int, half_handicap: bool = False) -> Optional[int]:
        """Net score on a hole, or None without a gross score or hole metadata."""
        player = self.get_player(player_id)
        hole = self.hole(hole_number)
        gross = self.lookup(hole_number, player_id)
        if player is None or hole is None or gross is None:
            return None
        return net_score(gross, strokes_for_hole(player.handicap, hole.handicap, half_handicap))

    # ================================================================
    # Completion
    # ================================================================

    def is_complete(self) -> bool:
        """True once every player has a gross score on all 18 holes."""
        players = self.players
        if not players:
            return False
        for number in ALL_HOLES:
            for player in players:
                if self.lookup(number, player.id) is None:
                    return False
        return True
