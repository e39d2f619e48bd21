"""Stableford points, individual and team."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from models import Stableford, TeamStableford
from scoring.ledger import ALL_HOLES, ScoreLedger
from scoring.settings import PointsProvider, stableford_settings

logger = logging.getLogger(__name__)


def _provider(settings: Optional[PointsProvider]) -> PointsProvider:
    return stableford_settings if settings is None else settings


def points_for_hole(
    ledger: ScoreLedger,
    player_id: str,
    hole_number: int,
    settings: Optional[PointsProvider] = None,
) -> Optional[int]:
    """Points for one hole, or None when the hole or score is missing."""
    hole = ledger.hole(hole_number)
    net = ledger.net_for_hole(player_id, hole_number)
    if hole is None or net is None:
        return None
    return _provider(settings).points_for_score(net - hole.par)


def total_points(
    ledger: ScoreLedger,
    player_id: str,
    holes: Sequence[int] = ALL_HOLES,
    settings: Optional[PointsProvider] = None,
) -> int:
    """Sum of points; unscored holes add nothing."""
    total = 0
    for number in holes:
        points = points_for_hole(ledger, player_id, number, settings)
        if points is not None:
            total += points
    return total


def standings(ledger: ScoreLedger, settings: Optional[PointsProvider] = None) -> List[Dict[str, Any]]:
    """Players by total points, highest first."""
    if not isinstance(ledger.format, (Stableford, TeamStableford)):
        logger.debug("round %s is not a Stableford game", ledger.round.id)
        return []
    rows = [
        {
            "player_id": player.id,
            "name": player.name,
            "points": total_points(ledger, player.id, settings=settings),
        }
        for player in ledger.ordered_players
    ]
    return sorted(rows, key=lambda row: row["points"], reverse=True)


def team_points(
    ledger: ScoreLedger,
    team_name: str,
    holes: Sequence[int] = ALL_HOLES,
    settings: Optional[PointsProvider] = None,
) -> int:
    """Team total: every member's points added together."""
    return sum(
        total_points(ledger, player.id, holes, settings)
        for player in ledger.players_for_team(team_name)
    )


def team_standings(ledger: ScoreLedger, settings: Optional[PointsProvider] = None) -> List[Dict[str, Any]]:
    """Teams by combined points, highest first."""
    if not isinstance(ledger.format, TeamStableford):
        logger.debug("round %s is not a team Stableford game", ledger.round.id)
        return []
    rows = [
        {"team_name": name, "points": team_points(ledger, name, settings=settings)}
        for name in ledger.team_names
    ]
    return sorted(rows, key=lambda row: row["points"], reverse=True)
