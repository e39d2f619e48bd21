"""Conversion between compact persistence strings/rows and the domain models.

Team assignments, press logs and tracking sets are stored as short strings
by the persistence layer; everything inside the engine works on the parsed
structures. Rows are plain dicts so any store can hold them.
"""

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Set, Tuple

from pydantic import TypeAdapter, ValidationError

from models import GameFormat, HoleScore, Press, Round, Skins
from models.formats import TEAM_FORMATS

logger = logging.getLogger(__name__)

TEAM_SEPARATOR = "|"
TEAM_NAME_SEPARATOR = ":"
ID_SEPARATOR = ","
PRESS_SEPARATOR = "|"
PRESS_FIELD_SEPARATOR = ":"

_format_adapter = TypeAdapter(GameFormat)


# ================================================================
# Team assignments: "team1:id1,id2|team2:id3,id4"
# ================================================================

def encode_team_assignments(teams: Dict[str, List[str]]) -> str:
    return TEAM_SEPARATOR.join(
        f"{name}{TEAM_NAME_SEPARATOR}{ID_SEPARATOR.join(ids)}"
        for name, ids in teams.items()
    )


def parse_team_assignments(value: Optional[str]) -> Dict[str, List[str]]:
    """Parse the compact form. Segments without a ':' are skipped."""
    if not value:
        return {}
    teams: Dict[str, List[str]] = {}
    for segment in value.split(TEAM_SEPARATOR):
        name, sep, ids = segment.partition(TEAM_NAME_SEPARATOR)
        if not sep:
            logger.warning("Skipping malformed team segment %r", segment)
            continue
        teams[name] = [pid for pid in ids.split(ID_SEPARATOR) if pid]
    return teams


# ================================================================
# Press log: "front9:4:Team 2|back9:12:Team 1"
# ================================================================

def encode_presses(presses: Iterable[Press]) -> str:
    return PRESS_SEPARATOR.join(
        PRESS_FIELD_SEPARATOR.join((p.match_type, str(p.starting_hole), p.initiating_team))
        for p in presses
    )


def parse_presses(value: Optional[str]) -> List[Press]:
    """Parse the compact press log, dropping entries that do not validate."""
    if not value:
        return []
    presses: List[Press] = []
    for segment in value.split(PRESS_SEPARATOR):
        parts = segment.split(PRESS_FIELD_SEPARATOR, 2)
        if len(parts) != 3:
            logger.warning("Skipping malformed press %r", segment)
            continue
        match_type, starting_hole, team = parts
        try:
            presses.append(Press(match_type=match_type, starting_hole=int(starting_hole), initiating_team=team))
        except (ValueError, ValidationError):
            logger.warning("Skipping invalid press %r", segment)
    return presses


# ================================================================
# Tracking players: "id1,id2"
# ================================================================

def encode_tracking_ids(player_ids: Iterable[str]) -> str:
    return ID_SEPARATOR.join(sorted(player_ids))


def parse_tracking_ids(value: Optional[str]) -> Set[str]:
    if not value:
        return set()
    return {pid for pid in value.split(ID_SEPARATOR) if pid}


# ================================================================
# Round <-> row
# ================================================================

def round_to_row(round_: Round) -> dict:
    """Round -> flat dict; hole scores go through hole_score_rows()."""
    fmt = round_.format
    teams = fmt.teams if isinstance(fmt, TEAM_FORMATS) else {}
    presses = getattr(fmt, "presses", [])
    return {
        "id": round_.id,
        "course_id": round_.course_id,
        "player_ids": ID_SEPARATOR.join(round_.player_ids),
        "format": fmt.kind,
        "tee_color": round_.tee_color,
        "team_assignments": encode_team_assignments(teams) or None,
        "presses": encode_presses(presses) or None,
        "tracking_player_ids": encode_tracking_ids(round_.tracking_player_ids) or None,
        "skins_pot_per_player": fmt.pot_per_player if isinstance(fmt, Skins) else None,
        "skins_value_per_skin": fmt.value_per_skin if isinstance(fmt, Skins) else None,
        "skins_carryover": fmt.carryover if isinstance(fmt, Skins) else None,
        "date": round_.date.isoformat(),
        "is_completed": round_.is_completed,
    }


def format_from_row(row: dict) -> GameFormat:
    """Rebuild the tagged format variant from its row columns."""
    kind = row.get("format") or "stroke"
    data: dict = {"kind": kind}
    if kind == "skins":
        data["pot_per_player"] = row.get("skins_pot_per_player")
        data["value_per_skin"] = row.get("skins_value_per_skin")
        if row.get("skins_carryover") is not None:
            data["carryover"] = row["skins_carryover"]
    elif kind != "stroke" and kind != "stableford":
        data["teams"] = parse_team_assignments(row.get("team_assignments"))
        if kind == "nassau":
            data["presses"] = parse_presses(row.get("presses"))
    return _format_adapter.validate_python(data)


def hole_score_rows(round_: Round) -> List[Tuple[str, int, str, int]]:
    """HoleScores -> (round_id, hole_number, player_id, strokes) tuples."""
    return [
        (round_.id, hs.hole_number, player_id, strokes)
        for hs in round_.hole_scores
        for player_id, strokes in sorted(hs.scores.items())
    ]


def hole_scores_from_rows(rows: Iterable[Tuple[str, int, str, int]]) -> List[HoleScore]:
    by_hole: Dict[int, Dict[str, int]] = {}
    for _, hole_number, player_id, strokes in rows:
        by_hole.setdefault(hole_number, {})[player_id] = strokes
    return [HoleScore(hole_number=n, scores=scores) for n, scores in sorted(by_hole.items())]


def round_from_row(row: dict, score_rows: Iterable[Tuple[str, int, str, int]] = ()) -> Round:
    """Assemble a Round from its row and hole-score tuples."""
    date = row.get("date")
    if isinstance(date, str):
        date = datetime.fromisoformat(date)
    data = {
        "id": row["id"],
        "course_id": row.get("course_id"),
        "player_ids": [pid for pid in (row.get("player_ids") or "").split(ID_SEPARATOR) if pid],
        "format": format_from_row(row),
        "tee_color": row.get("tee_color"),
        "tracking_player_ids": parse_tracking_ids(row.get("tracking_player_ids")),
        "hole_scores": hole_scores_from_rows(score_rows),
        "is_completed": bool(row.get("is_completed")),
    }
    if date is not None:
        data["date"] = date
    return Round(**data)
