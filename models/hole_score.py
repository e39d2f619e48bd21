from pydantic import Field, field_validator
from typing import Dict, Optional

from .base import BaseGolfModel


class HoleScore(BaseGolfModel):
    """Gross strokes recorded on one hole of a round, keyed by player id."""
    hole_number: int = Field(..., ge=1, le=18)
    scores: Dict[str, int] = Field(default_factory=dict)

    @field_validator('scores')
    @classmethod
    def validate_strokes(cls, v):
        for player_id, strokes in v.items():
            if strokes < 0:
                raise ValueError(f"Strokes for player {player_id} cannot be negative")
        return v

    def get_score(self, player_id: str) -> Optional[int]:
        return self.scores.get(player_id)

    def set_score(self, player_id: str, strokes: int) -> None:
        """Create or overwrite a player's gross score on this hole."""
        self.scores = {**self.scores, player_id: strokes}

    def remove_score(self, player_id: str) -> bool:
        """Drop a player's score. Returns True if one was present."""
        if player_id not in self.scores:
            return False
        self.scores = {k: v for k, v in self.scores.items() if k != player_id}
        return True
