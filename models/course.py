from pydantic import Field, field_validator
from typing import List, Optional
from uuid import uuid4

from .base import BaseGolfModel
from .hole import Hole


class Course(BaseGolfModel):
    """Golf course with its holes. Slope and rating are informational only."""
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str = ""
    location: Optional[str] = None
    slope: int = Field(113, ge=55, le=155)
    rating: float = Field(72.0, ge=55.0, le=85.0)
    holes: List[Hole] = Field(default_factory=list)

    @field_validator('holes')
    @classmethod
    def validate_unique_hole_numbers(cls, v):
        numbers = [h.number for h in v]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Hole numbers must be unique within a course")
        return sorted(v, key=lambda h: h.number)

    def get_hole(self, number: int) -> Optional[Hole]:
        """Get a hole by its number (1-18)."""
        for hole in self.holes:
            if hole.number == number:
                return hole
        return None

    def get_par(self) -> Optional[int]:
        """Total par, or None when the course has no holes."""
        if not self.holes:
            return None
        return sum(h.par for h in self.holes)

    @property
    def front_nine_par(self) -> Optional[int]:
        """Calculate par for holes 1-9."""
        front = [h for h in self.holes if h.number <= 9]
        return sum(h.par for h in front) if front else None

    @property
    def back_nine_par(self) -> Optional[int]:
        """Calculate par for holes 10-18."""
        back = [h for h in self.holes if h.number >= 10]
        return sum(h.par for h in back) if back else None

    @property
    def tee_colors(self) -> List[str]:
        """Tee colors with distances on the first hole, in listed order."""
        if not self.holes:
            return []
        return list(self.holes[0].tee_yardages.keys())
