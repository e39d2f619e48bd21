"""Nassau: front nine, back nine and overall matches, plus presses.

Each match or press is worth one point to the team that wins it and half
a point to each team if it ends all square.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from models import Nassau, Press
from scoring.ledger import ALL_HOLES, BACK_NINE, FRONT_NINE, ScoreLedger
from scoring.match_play import MatchStatus, best_ball_net, match_status

logger = logging.getLogger(__name__)

MATCH_WINDOWS: Dict[str, range] = {
    "front9": FRONT_NINE,
    "back9": BACK_NINE,
    "overall": ALL_HOLES,
}

PRESSABLE_MATCHES = (("front9", "Front 9"), ("back9", "Back 9"))

EMPTY_PRESS = "Press covers no holes"


def _nassau_teams(ledger: ScoreLedger) -> Optional[Tuple[str, str]]:
    if not isinstance(ledger.format, Nassau):
        return None
    teams = ledger.two_teams()
    if teams is None:
        logger.debug("round %s needs exactly two teams for Nassau", ledger.round.id)
    return teams


def press_window(press: Press) -> range:
    """Holes a press covers: from its start to the end of its nine."""
    if press.match_type == "front9":
        return range(max(press.starting_hole, 1), 10)
    return range(max(press.starting_hole, 10), 19)


# ================================================================
# Match status
# ================================================================

def status_for_match(ledger: ScoreLedger, match_type: str) -> MatchStatus:
    """Status of the front9, back9 or overall match."""
    teams = _nassau_teams(ledger)
    window = MATCH_WINDOWS.get(match_type)
    if teams is None or window is None:
        return MatchStatus()
    return match_status(ledger, teams, window)


def front_status(ledger: ScoreLedger) -> MatchStatus:
    return status_for_match(ledger, "front9")


def back_status(ledger: ScoreLedger) -> MatchStatus:
    return status_for_match(ledger, "back9")


def overall_status(ledger: ScoreLedger) -> MatchStatus:
    return status_for_match(ledger, "overall")


def press_status(ledger: ScoreLedger, press: Press) -> MatchStatus:
    teams = _nassau_teams(ledger)
    if teams is None:
        return MatchStatus()
    return _window_status(ledger, teams, press_window(press))


def _window_status(ledger: ScoreLedger, teams: Tuple[str, str], window: range) -> MatchStatus:
    """A press started outside its own nine covers no holes and never finishes."""
    if not window:
        return MatchStatus(status=EMPTY_PRESS)
    return match_status(ledger, teams, window)


# ================================================================
# Points
# ================================================================

def _match_points(status: MatchStatus, teams: Tuple[str, str]) -> Dict[str, float]:
    """Points a settled match awards; a match still in play awards nothing."""
    team1, team2 = teams
    if not status.is_finished:
        return {team1: 0.0, team2: 0.0}
    if status.team1_up > 0:
        return {team1: 1.0, team2: 0.0}
    if status.team2_up > 0:
        return {team1: 0.0, team2: 1.0}
    return {team1: 0.5, team2: 0.5}


def match_results(ledger: ScoreLedger) -> List[Dict[str, Any]]:
    """One row per base match and press with its status and points."""
    teams = _nassau_teams(ledger)
    if teams is None:
        return []

    rows: List[Dict[str, Any]] = []
    for match_type, window in MATCH_WINDOWS.items():
        status = match_status(ledger, teams, window)
        rows.append(
            {
                "match_type": match_type,
                "starting_hole": window[0],
                "initiating_team": None,
                "status": status,
                "points": _match_points(status, teams),
            }
        )
    for press in ledger.format.presses:
        status = _window_status(ledger, teams, press_window(press))
        rows.append(
            {
                "match_type": press.match_type,
                "starting_hole": press.starting_hole,
                "initiating_team": press.initiating_team,
                "status": status,
                "points": _match_points(status, teams),
            }
        )
    return rows


def points_for_team(ledger: ScoreLedger, team_name: str) -> float:
    """Total points across the three matches and all presses."""
    return sum(row["points"].get(team_name, 0.0) for row in match_results(ledger))


# ================================================================
# Presses
# ================================================================

def next_hole_for_match(ledger: ScoreLedger, match_type: str) -> Optional[int]:
    """First hole in the window where either team has no best-ball net yet."""
    teams = _nassau_teams(ledger)
    window = MATCH_WINDOWS.get(match_type)
    if teams is None or window is None:
        return None
    for number in window:
        if any(best_ball_net(ledger, team, number) is None for team in teams):
            return number
    return None


def losing_team_for_match(ledger: ScoreLedger, match_type: str) -> Optional[Tuple[str, int]]:
    """(team, holes down) for the team strictly behind; None when all square."""
    teams = _nassau_teams(ledger)
    if teams is None or match_type not in MATCH_WINDOWS:
        return None
    status = status_for_match(ledger, match_type)
    if status.team1_up > 0:
        return teams[1], status.team1_up
    if status.team2_up > 0:
        return teams[0], status.team2_up
    return None


def available_presses(ledger: ScoreLedger) -> List[Dict[str, Any]]:
    """Presses the losing team may start now. The overall match cannot be pressed."""
    presses = []
    for match_type, match_name in PRESSABLE_MATCHES:
        losing = losing_team_for_match(ledger, match_type)
        next_hole = next_hole_for_match(ledger, match_type)
        if losing is None or next_hole is None:
            continue
        presses.append(
            {
                "match_type": match_type,
                "match_name": match_name,
                "losing_team": losing[0],
                "holes_down": losing[1],
                "next_hole": next_hole,
            }
        )
    return presses


def add_press(
    ledger: ScoreLedger,
    match_type: str,
    starting_hole: Optional[int] = None,
    initiating_team: Optional[str] = None,
) -> Optional[Press]:
    """
    Start a press for the team that is down in a front9 or back9 match.

    starting_hole defaults to the next unplayed hole and initiating_team to
    the losing team. A starting hole before the next unplayed hole or outside
    the match's nine is refused. Returns None when no press is on offer.
    """
    offers = {p["match_type"]: p for p in available_presses(ledger)}
    offer = offers.get(match_type)
    if offer is None:
        logger.debug("no press available for %s in round %s", match_type, ledger.round.id)
        return None
    if initiating_team is not None and initiating_team != offer["losing_team"]:
        logger.debug("%s cannot press %s; %s is down", initiating_team, match_type, offer["losing_team"])
        return None
    if starting_hole is None:
        starting_hole = offer["next_hole"]
    if starting_hole < offer["next_hole"] or starting_hole not in MATCH_WINDOWS[match_type]:
        logger.debug("press on %s cannot start at hole %s", match_type, starting_hole)
        return None

    press = Press(
        match_type=match_type,
        starting_hole=starting_hole,
        initiating_team=offer["losing_team"],
    )
    ledger.format.presses = [*ledger.format.presses, press]
    return press
