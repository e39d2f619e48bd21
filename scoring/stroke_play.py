"""Stroke play totals: gross and net per player for front, back and 18."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from scoring.handicap import effective_handicap
from scoring.ledger import ALL_HOLES, BACK_NINE, FRONT_NINE, ScoreLedger


def calculate_scores(
    ledger: ScoreLedger,
    holes: Sequence[int] = ALL_HOLES,
    half_handicap: bool = False,
) -> List[Dict[str, Any]]:
    """
    Gross and net totals per player over a set of holes.

    Net is summed hole by hole so a partial round is still meaningful.
    Without course data the rounded handicap is taken once off the gross
    total instead. With course data, holes the course does not list are
    left out of both totals.

    Output rows (device owner first):
    - player_id, name
    - gross: sum of recorded strokes
    - net: sum of per-hole nets
    - holes_played: holes with a recorded score
    """
    results: List[Dict[str, Any]] = []
    for player in ledger.ordered_players:
        played = [
            n for n in holes
            if ledger.lookup(n, player.id) is not None
            and (ledger.course is None or ledger.hole(n) is not None)
        ]
        gross = sum(ledger.gross_for_holes(player.id, played))

        if ledger.course is None:
            net = max(0, gross - effective_handicap(player.handicap, half_handicap))
        else:
            nets = [ledger.net_for_hole(player.id, n, half_handicap) for n in played]
            net = sum(n for n in nets if n is not None)

        results.append(
            {
                "player_id": player.id,
                "name": player.name,
                "gross": gross,
                "net": net,
                "holes_played": len(played),
            }
        )
    return results


def front_nine(ledger: ScoreLedger) -> List[Dict[str, Any]]:
    return calculate_scores(ledger, FRONT_NINE)


def back_nine(ledger: ScoreLedger) -> List[Dict[str, Any]]:
    return calculate_scores(ledger, BACK_NINE)


def totals(ledger: ScoreLedger) -> List[Dict[str, Any]]:
    return calculate_scores(ledger, ALL_HOLES)


def standings(ledger: ScoreLedger) -> List[Dict[str, Any]]:
    """18-hole totals sorted by net, lowest first."""
    return sorted(totals(ledger), key=lambda row: row["net"])
