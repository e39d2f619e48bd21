from .base import BaseGolfModel
from .course import Course
from .formats import (
    BestBall,
    BestBallMatchPlay,
    GameFormat,
    Nassau,
    Press,
    Scramble,
    Skins,
    Stableford,
    StrokePlay,
    TeamStableford,
)
from .hole import Hole
from .hole_score import HoleScore
from .player import Player
from .round import Round

__all__ = [
    "BaseGolfModel",
    "Course",
    "Hole",
    "HoleScore",
    "Player",
    "Round",
    "GameFormat",
    "Press",
    "StrokePlay",
    "Stableford",
    "TeamStableford",
    "BestBall",
    "BestBallMatchPlay",
    "Nassau",
    "Skins",
    "Scramble",
]
