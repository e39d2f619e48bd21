"""Player table, keyed by player id."""

import logging
from typing import Dict, Iterable, List, Optional

from models import Player
from database.exceptions import DuplicateError, NotFoundError

logger = logging.getLogger(__name__)


class PlayerRepository:
    """In-memory CRUD for players."""

    def __init__(self):
        self._players: Dict[str, Player] = {}

    # ================================================================
    # Read
    # ================================================================

    def get_player(self, player_id: str) -> Optional[Player]:
        return self._players.get(player_id)

    def get_players(self, player_ids: Iterable[str]) -> List[Player]:
        """Players for the given ids, in the order asked; unknown ids are skipped."""
        return [self._players[pid] for pid in player_ids if pid in self._players]

    def list_players(self) -> List[Player]:
        return sorted(self._players.values(), key=lambda p: (not p.is_current_user, p.name.lower()))

    def get_current_user(self) -> Optional[Player]:
        for player in self._players.values():
            if player.is_current_user:
                return player
        return None

    # ================================================================
    # Create / Update
    # ================================================================

    def create_player(self, player: Player) -> Player:
        if player.id in self._players:
            raise DuplicateError(f"Player {player.id} already exists")
        if player.is_current_user and self.get_current_user() is not None:
            raise DuplicateError("Only one player can be marked as the device owner")
        self._players[player.id] = player
        logger.debug("created player %s (%s)", player.id, player.name)
        return player

    def update_player(self, player_id: str, **fields) -> Player:
        """Update name, handicap or preferred tee."""
        player = self.get_player(player_id)
        if player is None:
            raise NotFoundError(f"Player {player_id} not found")
        allowed = {"name", "handicap", "preferred_tee_color"}
        for field_name, value in fields.items():
            if field_name in allowed:
                setattr(player, field_name, value)
        return player

    # ================================================================
    # Delete
    # ================================================================

    def delete_player(self, player_id: str) -> bool:
        """Drop the row only; DatabaseManager.delete_player checks round references first."""
        return self._players.pop(player_id, None) is not None
