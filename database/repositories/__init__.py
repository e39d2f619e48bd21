from .course_repo import CourseRepository
from .player_repo import PlayerRepository
from .round_repo import RoundRepository

__all__ = ["CourseRepository", "PlayerRepository", "RoundRepository"]
