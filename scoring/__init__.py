from . import match_play, nassau, scramble, skins, stableford, stroke_play
from .handicap import effective_handicap, net_score, round_handicap, strokes_for_hole
from .ledger import ALL_HOLES, BACK_NINE, FRONT_NINE, ScoreLedger
from .match_play import MatchStatus
from .settings import PointsProvider, StablefordSettings, stableford_settings

__all__ = [
    "strokes_for_hole",
    "effective_handicap",
    "round_handicap",
    "net_score",
    "ScoreLedger",
    "FRONT_NINE",
    "BACK_NINE",
    "ALL_HOLES",
    "MatchStatus",
    "PointsProvider",
    "StablefordSettings",
    "stableford_settings",
    "stroke_play",
    "stableford",
    "match_play",
    "nassau",
    "skins",
    "scramble",
]
