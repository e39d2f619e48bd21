from pydantic import Field
from typing import Optional
from uuid import uuid4

from .base import BaseGolfModel


class Player(BaseGolfModel):
    """A golfer taking part in rounds, identified by an opaque id."""
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str = ""
    handicap: float = Field(0.0, ge=-10, le=54)
    is_current_user: bool = False  # device owner, listed first on scorecards
    preferred_tee_color: Optional[str] = "White"

    def update_handicap(self, handicap: float) -> Optional[str]:
        """Change the handicap index between rounds."""
        return self.update_field('handicap', handicap)
