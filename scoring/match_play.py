"""Best ball team scores and match-play status.

match_status() is shared by the 18-hole Best-Ball match and by every
Nassau window and press.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel

from models import BestBall, BestBallMatchPlay
from scoring.ledger import ALL_HOLES, ScoreLedger

logger = logging.getLogger(__name__)

NOT_MATCH_PLAY = "Not a match play game"


class MatchStatus(BaseModel):
    """Holes-up standing of a two-team match over a window of holes."""
    team1_up: int = 0
    team2_up: int = 0
    holes_remaining: int = 18
    status: str = NOT_MATCH_PLAY

    @property
    def is_all_square(self) -> bool:
        return self.team1_up == 0 and self.team2_up == 0

    @property
    def is_finished(self) -> bool:
        """No holes left, or the leader is up by more than remain."""
        lead = max(self.team1_up, self.team2_up)
        return self.holes_remaining == 0 or lead > self.holes_remaining


# ================================================================
# Best ball per hole
# ================================================================

def best_ball_gross(ledger: ScoreLedger, team_name: str, hole_number: int) -> Optional[int]:
    """Lowest gross among the team's players on a hole."""
    scores = [ledger.lookup(hole_number, p.id) for p in ledger.players_for_team(team_name)]
    scores = [s for s in scores if s is not None]
    return min(scores) if scores else None


def best_ball_net(ledger: ScoreLedger, team_name: str, hole_number: int) -> Optional[int]:
    """Lowest net among the team's players on a hole."""
    scores = [ledger.net_for_hole(p.id, hole_number) for p in ledger.players_for_team(team_name)]
    scores = [s for s in scores if s is not None]
    return min(scores) if scores else None


def hole_winner(ledger: ScoreLedger, teams: Tuple[str, str], hole_number: int) -> Optional[str]:
    """Team with the strictly lower best-ball net; None if halved or unplayed."""
    team1, team2 = teams
    net1 = best_ball_net(ledger, team1, hole_number)
    net2 = best_ball_net(ledger, team2, hole_number)
    if net1 is None or net2 is None:
        return None
    if net1 < net2:
        return team1
    if net2 < net1:
        return team2
    return None


def match_status(ledger: ScoreLedger, teams: Tuple[str, str], holes: Sequence[int]) -> MatchStatus:
    """
    Status of a match over a window of holes.

    A hole counts as played only when both teams have a best-ball net.
    """
    team1, team2 = teams
    team1_wins = 0
    team2_wins = 0
    played = 0

    for number in holes:
        if best_ball_net(ledger, team1, number) is None or best_ball_net(ledger, team2, number) is None:
            continue
        played += 1
        winner = hole_winner(ledger, teams, number)
        if winner == team1:
            team1_wins += 1
        elif winner == team2:
            team2_wins += 1

    remaining = len(holes) - played
    team1_up = team1_wins - team2_wins
    team2_up = team2_wins - team1_wins

    if team1_up > 0:
        status = _leader_status(team1, team1_up, remaining)
    elif team2_up > 0:
        status = _leader_status(team2, team2_up, remaining)
    elif remaining > 0:
        status = f"All square with {remaining} to play"
    else:
        status = "Match halved"

    return MatchStatus(
        team1_up=team1_up,
        team2_up=team2_up,
        holes_remaining=remaining,
        status=status,
    )


def _leader_status(team_name: str, up: int, remaining: int) -> str:
    if remaining == 0 or up > remaining:
        return f"{team_name} wins {up} up"
    return f"{team_name} {up} up with {remaining} to play"


# ================================================================
# Best-Ball match play round
# ================================================================

def _matchplay_teams(ledger: ScoreLedger) -> Optional[Tuple[str, str]]:
    if not isinstance(ledger.format, BestBallMatchPlay):
        return None
    teams = ledger.two_teams()
    if teams is None:
        logger.debug("round %s needs exactly two teams for match play", ledger.round.id)
    return teams


def matchplay_hole_winner(ledger: ScoreLedger, hole_number: int) -> Optional[str]:
    teams = _matchplay_teams(ledger)
    if teams is None:
        return None
    return hole_winner(ledger, teams, hole_number)


def matchplay_status(ledger: ScoreLedger) -> MatchStatus:
    """18-hole status of a Best-Ball match play round."""
    teams = _matchplay_teams(ledger)
    if teams is None:
        return MatchStatus()
    return match_status(ledger, teams, ALL_HOLES)


# ================================================================
# Best-Ball stroke play
# ================================================================

def team_totals(ledger: ScoreLedger, team_name: str, holes: Sequence[int] = ALL_HOLES) -> Dict[str, int]:
    """Sum of best-ball gross and net over the holes that have one."""
    gross = [best_ball_gross(ledger, team_name, n) for n in holes]
    net = [best_ball_net(ledger, team_name, n) for n in holes]
    return {
        "gross": sum(s for s in gross if s is not None),
        "net": sum(s for s in net if s is not None),
    }


def standings(ledger: ScoreLedger) -> List[Dict[str, Any]]:
    """Teams by total best-ball net, lowest first."""
    if not isinstance(ledger.format, (BestBall, BestBallMatchPlay)):
        logger.debug("round %s is not a best ball game", ledger.round.id)
        return []
    rows = []
    for name in ledger.team_names:
        row: Dict[str, Any] = {"team_name": name}
        row.update(team_totals(ledger, name))
        rows.append(row)
    return sorted(rows, key=lambda row: row["net"])
