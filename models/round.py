from datetime import datetime
from pydantic import Field, model_validator
from typing import List, Optional, Set
from uuid import uuid4

from .base import BaseGolfModel
from .formats import GameFormat, StrokePlay, TEAM_FORMATS
from .hole_score import HoleScore


class Round(BaseGolfModel):
    """A round (game) played by a group. Course and players are id references."""
    id: str = Field(default_factory=lambda: str(uuid4()))
    course_id: Optional[str] = None
    player_ids: List[str] = Field(default_factory=list)
    format: GameFormat = Field(default_factory=StrokePlay)
    tee_color: Optional[str] = None  # overrides the course default tee
    tracking_player_ids: Set[str] = Field(default_factory=set)
    hole_scores: List[HoleScore] = Field(default_factory=list)
    date: datetime = Field(default_factory=datetime.now)
    is_completed: bool = False

    @model_validator(mode='after')
    def validate_membership(self):
        players = set(self.player_ids)
        if len(players) != len(self.player_ids):
            raise ValueError("A player can only appear once in a round")

        numbers = [hs.hole_number for hs in self.hole_scores]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Hole numbers must be unique within a round")

        for hs in self.hole_scores:
            strangers = set(hs.scores) - players
            if strangers:
                raise ValueError(f"Hole {hs.hole_number} has scores for players not in the round: {sorted(strangers)}")

        if isinstance(self.format, TEAM_FORMATS):
            for team_name, member_ids in self.format.teams.items():
                strangers = set(member_ids) - players
                if strangers:
                    raise ValueError(f"Team '{team_name}' lists players not in the round: {sorted(strangers)}")

        # tracking is opt-in for round players only
        strangers = self.tracking_player_ids - players
        if strangers:
            raise ValueError(f"Tracking players not in the round: {sorted(strangers)}")
        return self

    @property
    def format_tag(self) -> str:
        return self.format.kind

    def get_hole_score(self, hole_number: int) -> Optional[HoleScore]:
        """Get the recorded scores for a hole, if any were entered."""
        for hs in self.hole_scores:
            if hs.hole_number == hole_number:
                return hs
        return None

    def holes_played(self) -> int:
        """Number of holes with at least one recorded score."""
        return len([hs for hs in self.hole_scores if hs.scores])
