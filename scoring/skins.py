"""Skins: one skin per hole to the sole lowest net score.

Tied holes either carry their skin onto the next hole that has a winner
or are simply lost, depending on the game's carryover setting.
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Dict, List, Optional

from models import Player, Skins
from scoring.ledger import ALL_HOLES, ScoreLedger

logger = logging.getLogger(__name__)


def _skins_format(ledger: ScoreLedger) -> Optional[Skins]:
    if isinstance(ledger.format, Skins):
        return ledger.format
    return None


def _net_scores(ledger: ScoreLedger, hole_number: int) -> Dict[str, int]:
    nets = {p.id: ledger.net_for_hole(p.id, hole_number) for p in ledger.players}
    return {pid: net for pid, net in nets.items() if net is not None}


def winner_for_hole(ledger: ScoreLedger, hole_number: int) -> Optional[Player]:
    """Player with the strictly lowest net on a hole, or None on a tie."""
    if _skins_format(ledger) is None:
        return None
    nets = _net_scores(ledger, hole_number)
    if not nets:
        return None
    lowest = min(nets.values())
    leaders = [pid for pid, net in nets.items() if net == lowest]
    if len(leaders) > 1:
        return None
    return ledger.get_player(leaders[0])


def skins_by_hole(ledger: ScoreLedger) -> List[Dict[str, object]]:
    """
    Walk holes 1-18 and award skins.

    Holes with no scores yet are skipped. Output rows:
    - hole_number
    - winner_id: None for a tied hole
    - skins: skins awarded on this hole (carried ties + 1)
    - carried: tied holes pending after this hole
    """
    config = _skins_format(ledger)
    if config is None:
        return []

    rows: List[Dict[str, object]] = []
    carried = 0
    for number in ALL_HOLES:
        if not _net_scores(ledger, number):
            continue
        winner = winner_for_hole(ledger, number)
        if winner is not None:
            awarded = carried + 1
            carried = 0
        else:
            awarded = 0
            carried = carried + 1 if config.carryover else 0
        rows.append(
            {
                "hole_number": number,
                "winner_id": winner.id if winner else None,
                "skins": awarded,
                "carried": carried,
            }
        )
    return rows


def skins_per_player(ledger: ScoreLedger) -> Dict[str, int]:
    """Skins won by each round player (zero for players without one)."""
    if _skins_format(ledger) is None:
        return {}
    totals = {p.id: 0 for p in ledger.players}
    for row in skins_by_hole(ledger):
        if row["winner_id"] is not None:
            totals[row["winner_id"]] += row["skins"]
    return totals


def total_pot(ledger: ScoreLedger) -> Optional[float]:
    """Players x contribution, when a pot is configured."""
    config = _skins_format(ledger)
    if config is None or not config.pot_per_player:
        return None
    return len(ledger.players) * config.pot_per_player


def value_per_skin(ledger: ScoreLedger) -> Optional[float]:
    """Pot divided by skins awarded so far, or the fixed legacy value."""
    config = _skins_format(ledger)
    if config is None:
        return None
    pot = total_pot(ledger)
    if pot is not None:
        awarded = sum(skins_per_player(ledger).values())
        return pot / awarded if awarded else None
    return config.value_per_skin or None


def payouts(ledger: ScoreLedger) -> Dict[str, float]:
    """Net money per player. Empty when no pot or skin value is configured."""
    config = _skins_format(ledger)
    if config is None:
        return {}
    if config.pot_per_player:
        return _pot_payouts(ledger, config.pot_per_player)
    if config.value_per_skin:
        return _pairwise_payouts(ledger, config.value_per_skin)
    return {}


def _pot_payouts(ledger: ScoreLedger, contribution: float) -> Dict[str, float]:
    skins = skins_per_player(ledger)
    awarded = sum(skins.values())
    if awarded == 0:
        return {pid: -contribution for pid in skins}
    per_skin = len(skins) * contribution / awarded
    return {pid: won * per_skin - contribution for pid, won in skins.items()}


def _pairwise_payouts(ledger: ScoreLedger, per_skin: float) -> Dict[str, float]:
    """Every pair settles the difference in their skin values."""
    skins = skins_per_player(ledger)
    result = {pid: 0.0 for pid in skins}
    for a, b in combinations(skins, 2):
        difference = skins[a] * per_skin - skins[b] * per_skin
        result[a] += difference
        result[b] -= difference
    return result
