"""Scramble: one team score per hole, net of the team's average handicap.

The team score is stored in the ledger under the team's representative,
its first member in round order.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from models import HoleScore, Player, Scramble
from scoring.handicap import net_score, strokes_for_hole
from scoring.ledger import ALL_HOLES, BACK_NINE, FRONT_NINE, ScoreLedger

logger = logging.getLogger(__name__)


def _is_scramble(ledger: ScoreLedger) -> bool:
    return isinstance(ledger.format, Scramble)


def representative(ledger: ScoreLedger, team_name: str) -> Optional[Player]:
    players = ledger.players_for_team(team_name)
    return players[0] if players else None


def average_handicap(ledger: ScoreLedger, team_name: str) -> float:
    players = ledger.players_for_team(team_name)
    if not players:
        return 0.0
    return sum(p.handicap for p in players) / len(players)


def record_team_score(ledger: ScoreLedger, team_name: str, hole_number: int, strokes: int) -> Optional[HoleScore]:
    """Store a team score under its representative. None if the team is empty."""
    player = representative(ledger, team_name)
    if player is None:
        logger.warning("team '%s' has no players in round %s", team_name, ledger.round.id)
        return None
    return ledger.upsert(hole_number, player.id, strokes)


def team_gross(ledger: ScoreLedger, team_name: str, hole_number: int) -> Optional[int]:
    player = representative(ledger, team_name)
    if not _is_scramble(ledger) or player is None:
        return None
    return ledger.lookup(hole_number, player.id)


def team_net(ledger: ScoreLedger, team_name: str, hole_number: int) -> Optional[int]:
    gross = team_gross(ledger, team_name, hole_number)
    hole = ledger.hole(hole_number)
    if gross is None or hole is None:
        return None
    strokes = strokes_for_hole(average_handicap(ledger, team_name), hole.handicap)
    return net_score(gross, strokes)


def team_totals(ledger: ScoreLedger, team_name: str, holes: Sequence[int] = ALL_HOLES) -> Dict[str, int]:
    gross = [team_gross(ledger, team_name, n) for n in holes]
    net = [team_net(ledger, team_name, n) for n in holes]
    return {
        "gross": sum(s for s in gross if s is not None),
        "net": sum(s for s in net if s is not None),
    }


def scorecard(ledger: ScoreLedger) -> List[Dict[str, Any]]:
    """Front, back and total per team."""
    if not _is_scramble(ledger):
        return []
    rows = []
    for name in ledger.team_names:
        rows.append(
            {
                "team_name": name,
                "handicap": average_handicap(ledger, name),
                "front_nine": team_totals(ledger, name, FRONT_NINE),
                "back_nine": team_totals(ledger, name, BACK_NINE),
                "total": team_totals(ledger, name, ALL_HOLES),
            }
        )
    return rows


def standings(ledger: ScoreLedger) -> List[Dict[str, Any]]:
    """Teams by 18-hole net, lowest first."""
    if not _is_scramble(ledger):
        return []
    rows = []
    for name in ledger.team_names:
        row: Dict[str, Any] = {"team_name": name, "handicap": average_handicap(ledger, name)}
        row.update(team_totals(ledger, name))
        rows.append(row)
    return sorted(rows, key=lambda row: row["net"])
