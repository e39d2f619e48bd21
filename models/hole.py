from pydantic import Field, field_validator
from typing import Dict, Optional

from .base import BaseGolfModel


class Hole(BaseGolfModel):
    """Represents a single hole on a golf course."""
    number: int = Field(..., ge=1, le=18)
    par: int = Field(4, ge=3, le=6)
    handicap: int = Field(..., ge=1, le=18)  # stroke index, 1 = hardest
    ladies_handicap: Optional[int] = Field(None, ge=1, le=18)
    tee_yardages: Dict[str, int] = Field(default_factory=dict)  # {"White": 385, ...}

    @field_validator('tee_yardages')
    @classmethod
    def validate_tee_yardages(cls, v):
        for color, yardage in v.items():
            if yardage < 0:
                raise ValueError(f"Yardage for '{color}' tee cannot be negative")
            if yardage > 700:
                raise ValueError(f"Yardage {yardage} for '{color}' tee seems too high. Please verify.")
        return v

    def get_yardage(self, tee_color: str) -> Optional[int]:
        """Get the distance for a tee color (case-insensitive)."""
        for color, yardage in self.tee_yardages.items():
            if color.lower() == tee_color.lower():
                return yardage
        return None
